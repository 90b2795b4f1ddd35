"""Pydantic models used across the project."""

from __future__ import annotations

from opmltree.models.document import Document
from opmltree.models.outline import OutlineNode

__all__ = [
    "Document",
    "OutlineNode",
]
