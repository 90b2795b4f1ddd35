"""Markup tokenizer.

Turns raw OPML text into the generic element tree consumed by the importer. The shape
follows the common "compact" XML-to-object convention:

- attributes are collected under ``"$"``;
- an element with neither attributes nor child elements collapses to its text (``""``
  when empty);
- non-whitespace text of any other element is kept under ``"_"``;
- a child element name that occurs once maps to its value, and to a list of values
  when it occurs more than once.

The single-vs-list asymmetry of the last rule is what the importer normalizes away.
"""

from __future__ import annotations

from typing import Any

from lxml import etree

from opmltree.errors import MalformedInputError
from opmltree.logging import get_logger

logger = get_logger(__name__)

ATTRIBUTES_KEY = "$"
TEXT_KEY = "_"


def _local_name(name: str) -> str:
    return etree.QName(name).localname


def _make_parser(*, encoding: str | None = None) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        huge_tree=False,
    )


def element_to_generic(element: etree._Element) -> dict[str, Any] | str:
    """Convert one lxml element (recursively) into the generic shape."""

    attributes = {_local_name(k): v for k, v in element.attrib.items()}
    children = [child for child in element if isinstance(child.tag, str)]

    text = element.text or ""
    for child in children:
        text += child.tail or ""

    if not attributes and not children:
        return text

    node: dict[str, Any] = {}
    if attributes:
        node[ATTRIBUTES_KEY] = attributes
    if text.strip():
        node[TEXT_KEY] = text

    for child in children:
        name = _local_name(child.tag)
        value = element_to_generic(child)
        if name not in node:
            node[name] = value
        elif isinstance(node[name], list):
            node[name].append(value)
        else:
            node[name] = [node[name], value]
    return node


def tokenize(text: str | bytes) -> dict[str, Any]:
    """Parse markup text into ``{root_tag: generic_element}``.

    Args:
        text: OPML text. ``str`` input is parsed as UTF-8 regardless of the encoding named
            in its XML declaration.

    Raises:
        MalformedInputError: If the text is empty or is not well-formed XML.
    """

    if isinstance(text, str):
        data = text.encode("utf-8")
        parser = _make_parser(encoding="utf-8")
    else:
        data = text
        parser = _make_parser()

    if not data.strip():
        raise MalformedInputError("There was an error parsing the OPML text: empty input")

    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        raise MalformedInputError(f"There was an error parsing the OPML text: {e}") from e

    if root is None:
        raise MalformedInputError("There was an error parsing the OPML text: no root element")

    tag = _local_name(root.tag)
    logger.debug("Tokenized document with root element <%s>", tag)
    return {tag: element_to_generic(root)}
