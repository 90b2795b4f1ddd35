"""Outline node model."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

CHILDREN_KEY = "children"
RESERVED_KEYS = frozenset({CHILDREN_KEY, "subs"})

# Unprefixed XML name: a letter or underscore, then letters, digits, "_", "-" or ".".
_XML_NAME_RE = re.compile(r"[^\W\d][\w.-]*\Z")


def is_xml_name(name: str) -> bool:
    return _XML_NAME_RE.match(name) is not None


class OutlineNode(BaseModel):
    """One `<outline>` entry.

    Attributes hold the scalar fields of the element in document order. ``children`` is
    ``None`` for a leaf; an empty list means the element had a children block with no
    entries, which is exported as an open/close pair rather than a self-closing tag.
    """

    model_config = ConfigDict(extra="forbid")

    attributes: dict[str, str] = Field(default_factory=dict)
    children: list["OutlineNode"] | None = None

    @field_validator("attributes")
    @classmethod
    def _check_names(cls, value: dict[str, str]) -> dict[str, str]:
        reserved = RESERVED_KEYS.intersection(value)
        if reserved:
            raise ValueError(f"reserved attribute name(s): {sorted(reserved)}")
        invalid = [name for name in value if not is_xml_name(name)]
        if invalid:
            raise ValueError(f"invalid attribute name(s): {invalid}")
        return value

    @property
    def has_children(self) -> bool:
        return self.children is not None

    def get_scalar(self, name: str, default: str | None = None) -> str | None:
        """Return the scalar field `name`, or `default` when it is absent."""

        return self.attributes.get(name, default)

    def get_children(self) -> list[OutlineNode]:
        """Return the child list, empty for a leaf."""

        return self.children if self.children is not None else []

    def add_child(self, node: OutlineNode) -> OutlineNode:
        if self.children is None:
            self.children = []
        self.children.append(node)
        return node

    def to_mapping(self) -> dict[str, Any]:
        """Plain mapping form: scalar fields plus an optional ``children`` list."""

        out: dict[str, Any] = dict(self.attributes)
        if self.children is not None:
            out[CHILDREN_KEY] = [child.to_mapping() for child in self.children]
        return out

    @classmethod
    def from_mapping(cls, mapping: dict[str, Any]) -> OutlineNode:
        """Build a node from the plain mapping form produced by the importer.

        Raises:
            ValueError: If a field other than ``children`` is not a string, or ``children``
                is not a list of mappings.
        """

        attributes: dict[str, str] = {}
        children: list[OutlineNode] | None = None
        for key, value in mapping.items():
            if key == CHILDREN_KEY:
                if not isinstance(value, list):
                    raise ValueError(f"'{CHILDREN_KEY}' must be a list, got {type(value).__name__}")
                children = []
                for item in value:
                    if not isinstance(item, dict):
                        raise ValueError(f"outline entries must be mappings, got {type(item).__name__}")
                    children.append(cls.from_mapping(item))
            elif isinstance(value, str):
                attributes[key] = value
            else:
                raise ValueError(f"field '{key}' is not a scalar")
        return cls(attributes=attributes, children=children)
