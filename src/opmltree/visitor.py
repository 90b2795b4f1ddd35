"""Depth-first traversal over outline trees."""

from __future__ import annotations

from typing import Callable, Iterator

from opmltree.models.outline import OutlineNode

Visitor = Callable[[OutlineNode], bool]


def visit(nodes: list[OutlineNode] | None, visitor: Visitor) -> bool:
    """Call `visitor` on every node in pre-order.

    Each node's children are visited before its next sibling. Traversal stops as soon as
    `visitor` returns a falsy value.

    Returns:
        True if every call returned truthy, otherwise False.
    """

    for node, _depth in iter_nodes(nodes):
        if not visitor(node):
            return False
    return True


def iter_nodes(nodes: list[OutlineNode] | None) -> Iterator[tuple[OutlineNode, int]]:
    """Yield ``(node, depth)`` pairs in pre-order, root-level nodes at depth 0."""

    # Explicit stack of (siblings, next index) frames.
    stack: list[tuple[list[OutlineNode], int]] = [(nodes, 0)] if nodes else []
    while stack:
        siblings, index = stack.pop()
        if index >= len(siblings):
            continue
        node = siblings[index]
        stack.append((siblings, index + 1))
        yield node, len(stack) - 1
        if node.children:
            stack.append((node.children, 0))
