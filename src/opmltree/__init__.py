"""OPML import/export between text and outline trees."""

from __future__ import annotations

from opmltree.errors import MalformedDocumentError, MalformedInputError, OpmlError
from opmltree.exporter import export
from opmltree.importer import import_document, parse
from opmltree.models import Document, OutlineNode
from opmltree.version import __version__
from opmltree.visitor import iter_nodes, visit

__all__ = [
    "Document",
    "MalformedDocumentError",
    "MalformedInputError",
    "OpmlError",
    "OutlineNode",
    "__version__",
    "export",
    "import_document",
    "iter_nodes",
    "parse",
    "visit",
]
