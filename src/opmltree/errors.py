"""Exceptions raised by opmltree."""

from __future__ import annotations


class OpmlError(Exception):
    pass


class MalformedInputError(OpmlError):
    """Raised when OPML text cannot be tokenized or does not follow the outline convention."""


class MalformedDocumentError(OpmlError):
    """Raised when a mapping cannot be validated into a `Document`."""
