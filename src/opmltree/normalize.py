"""Shape predicates for tokenizer output."""

from __future__ import annotations

from typing import Any


def is_scalar(value: Any) -> bool:
    """Return True for values that are not structural (mappings or lists)."""

    return not isinstance(value, (dict, list))


def as_list(value: Any) -> list[Any]:
    """Normalize the tokenizer's single-or-list output for repeated elements.

    A repeated element is returned by the tokenizer as a bare value when it occurs once
    and as a list when it occurs more than once. ``None`` becomes an empty list.
    """

    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]
