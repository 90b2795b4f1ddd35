"""OPML importer.

Rewrites the tokenizer's generic element tree into a `Document`. Repeated ``<outline>``
elements are collapsed into ordered ``children`` lists, whether the tokenizer returned
them as a single value or as a list.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from opmltree.errors import MalformedInputError
from opmltree.logging import get_logger
from opmltree.models.document import GENERATOR_KEY, Document
from opmltree.models.outline import CHILDREN_KEY, RESERVED_KEYS, OutlineNode
from opmltree.normalize import as_list, is_scalar
from opmltree.tokenizer import ATTRIBUTES_KEY, TEXT_KEY, tokenize
from opmltree.version import PRODUCT_NAME, __version__

logger = get_logger(__name__)

OUTLINE_TAG = "outline"
ROOT_TAG = "opml"
GENERATOR = f"{PRODUCT_NAME} v{__version__}"


def convert(source: dict[str, Any] | str, dest: dict[str, Any]) -> None:
    """Recursively copy `source` into the plain mapping `dest`.

    Attributes become scalar fields (except the reserved names), the attribute map is
    removed from `source`, scalar child elements are copied verbatim, ``<outline>``
    elements are appended to ``dest["children"]`` and any other structural element
    becomes a nested mapping.

    Raises:
        MalformedInputError: If a non-outline element is repeated under one parent.
    """

    if is_scalar(source):
        # Element without attributes or child elements.
        if source and source.strip():
            dest[TEXT_KEY] = source
        return

    attributes = source.pop(ATTRIBUTES_KEY, None)
    if attributes is not None:
        for name, value in attributes.items():
            if name not in RESERVED_KEYS:
                dest[name] = value

    for name, value in source.items():
        if name == OUTLINE_TAG:
            children = dest.setdefault(CHILDREN_KEY, [])
            for item in as_list(value):
                child: dict[str, Any] = {}
                convert(item, child)
                children.append(child)
        elif is_scalar(value):
            dest[name] = value
        elif isinstance(value, list):
            raise MalformedInputError(f"element <{name}> may only occur once")
        else:
            dest[name] = {}
            convert(value, dest[name])


def _add_generator(outline: dict[str, Any]) -> None:
    try:
        outline["head"][GENERATOR_KEY] = GENERATOR
    except (KeyError, TypeError):
        logger.debug("No head mapping to stamp the generator into")


def _build_document(outline: dict[str, Any]) -> Document:
    head = outline["head"]
    for name, value in head.items():
        if not isinstance(value, str):
            raise MalformedInputError(f"head element <{name}> must contain only text")

    body_fields = outline["body"]
    body_mapping = {CHILDREN_KEY: body_fields[CHILDREN_KEY]} if CHILDREN_KEY in body_fields else {}
    try:
        body = OutlineNode.from_mapping(body_mapping)
    except ValueError as e:
        raise MalformedInputError(f"unsupported body structure: {e}") from e

    ignored = [k for k in outline if k not in ("head", "body")]
    if ignored:
        logger.debug("Ignoring top-level fields: %s", ignored)
    ignored = [k for k in body_fields if k != CHILDREN_KEY]
    if ignored:
        logger.debug("Ignoring body fields: %s", ignored)

    try:
        return Document(head=head, body=body)
    except ValidationError as e:
        raise MalformedInputError(f"unsupported head structure: {e}") from e


def import_document(generic_root: dict[str, Any] | None) -> Document:
    """Convert a tokenized document into a `Document`.

    Args:
        generic_root: Tokenizer output, ``{"opml": ...}``.

    Returns:
        Document: ``head`` always carries the generator stamp unless the source had no
        head element; ``head`` and ``body`` are always present.

    Raises:
        MalformedInputError: If the root is empty, is not ``<opml>``, or holds structure
            outside the outline convention.
    """

    if not generic_root:
        raise MalformedInputError("There was an error parsing the OPML text.")
    if ROOT_TAG not in generic_root:
        raise MalformedInputError(f"expected <{ROOT_TAG}> root element, got <{next(iter(generic_root))}>")

    outline: dict[str, Any] = {}
    convert(generic_root[ROOT_TAG], outline)
    _add_generator(outline)
    for section in ("head", "body"):
        if is_scalar(outline.get(section)):
            outline[section] = {}

    document = _build_document(outline)
    logger.debug("Imported document with %d root outline(s)", len(document.outlines))
    return document


def parse(text: str | bytes) -> Document:
    """Parse OPML text into a `Document`.

    Raises:
        MalformedInputError: If the text cannot be parsed or is not an OPML outline.
    """

    return import_document(tokenize(text))
