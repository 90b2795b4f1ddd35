"""OPML document model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from opmltree.errors import MalformedDocumentError
from opmltree.models.outline import OutlineNode, is_xml_name

GENERATOR_KEY = "generator"


class Document(BaseModel):
    """A parsed OPML document: head metadata plus the body outline tree."""

    model_config = ConfigDict(extra="forbid")

    head: dict[str, str] = Field(default_factory=dict)
    body: OutlineNode = Field(default_factory=OutlineNode)

    @field_validator("head")
    @classmethod
    def _check_head_names(cls, value: dict[str, str]) -> dict[str, str]:
        invalid = [name for name in value if not is_xml_name(name)]
        if invalid:
            raise ValueError(f"invalid head element name(s): {invalid}")
        return value

    @field_validator("body")
    @classmethod
    def _body_has_no_attributes(cls, value: OutlineNode) -> OutlineNode:
        # Only the outline list under <body> is exported.
        if value.attributes:
            raise ValueError(f"body cannot carry attributes: {list(value.attributes)}")
        return value

    @property
    def outlines(self) -> list[OutlineNode]:
        """Root-level outline entries."""

        return self.body.get_children()

    def to_mapping(self) -> dict[str, Any]:
        return {"opml": {"head": dict(self.head), "body": self.body.to_mapping()}}

    @classmethod
    def from_mapping(cls, mapping: dict[str, Any]) -> Document:
        """Validate a ``{"opml": {"head": ..., "body": ...}}`` mapping.

        The outer ``opml`` wrapper is optional.

        Raises:
            MalformedDocumentError: If the mapping does not describe a valid document.
        """

        if not isinstance(mapping, dict):
            raise MalformedDocumentError(f"expected a mapping, got {type(mapping).__name__}")
        opml = mapping.get("opml", mapping)
        if not isinstance(opml, dict):
            raise MalformedDocumentError("'opml' must be a mapping")

        head = opml.get("head")
        body = opml.get("body")
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise MalformedDocumentError("'body' must be a mapping")
        try:
            return cls(head={} if head is None else head, body=OutlineNode.from_mapping(body))
        except (ValidationError, ValueError) as e:
            raise MalformedDocumentError(str(e)) from e
