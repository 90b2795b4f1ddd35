"""OPML exporter.

Renders a `Document` as tab-indented OPML 2.0 text. Head values are written as raw text;
outline attribute values are escaped.
"""

from __future__ import annotations

from opmltree.logging import get_logger
from opmltree.models.document import GENERATOR_KEY, Document
from opmltree.models.outline import OutlineNode

logger = get_logger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
OPML_VERSION = "2.0"
INDENT = "\t"

_ATTRIBUTE_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    # Literal whitespace would be normalized to spaces by the parser.
    ("\t", "&#9;"),
    ("\n", "&#10;"),
    ("\r", "&#13;"),
)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted XML attribute."""

    for char, entity in _ATTRIBUTE_ENTITIES:
        value = value.replace(char, entity)
    return value


def _line(depth: int, s: str) -> str:
    return INDENT * depth + s


def _render_attributes(node: OutlineNode) -> str:
    return "".join(f' {name}="{escape_attribute(value)}"' for name, value in node.attributes.items())


def render_outlines(nodes: list[OutlineNode], depth: int) -> list[str]:
    """Render outline nodes, and their descendants, starting at `depth` tabs."""

    lines: list[str] = []
    for node in nodes:
        atts = _render_attributes(node)
        if node.children is None:
            lines.append(_line(depth, f"<outline{atts} />"))
        else:
            lines.append(_line(depth, f"<outline{atts}>"))
            lines.extend(render_outlines(node.children, depth + 1))
            lines.append(_line(depth, "</outline>"))
    return lines


def export(document: Document) -> str:
    """Serialize `document` as OPML text.

    The generator stamp added on import is not written out, and `document` itself is
    left unchanged.
    """

    lines = [XML_DECLARATION, f'<opml version="{OPML_VERSION}">']

    lines.append(_line(1, "<head>"))
    for name, value in document.head.items():
        if name == GENERATOR_KEY:
            continue
        lines.append(_line(2, f"<{name}>{value}</{name}>"))
    lines.append(_line(1, "</head>"))

    lines.append(_line(1, "<body>"))
    lines.extend(render_outlines(document.outlines, 2))
    lines.append(_line(1, "</body>"))

    lines.append("</opml>")
    logger.debug("Exported %d line(s)", len(lines))
    return "\n".join(lines) + "\n"

