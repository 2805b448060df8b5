"""Unbalanced binary search tree: insertion, traversals, search and a small drawing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

SAMPLE_VALUES: tuple[int, ...] = (50, 30, 70, 20, 40, 60, 80)


@dataclass
class Node:
    """A binary tree node holding an integer value."""

    value: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` and return the (possibly new) root.

    Smaller values go left; equal or greater values go right.
    """
    new = Node(value)
    if root is None:
        return new
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = new
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = new
                return root
            current = current.right


def pre_order(root: Optional[Node]) -> Iterator[int]:
    """Yield values root first, then the left and right subtrees."""
    if root is not None:
        yield root.value
        yield from pre_order(root.left)
        yield from pre_order(root.right)


def in_order(root: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree first, then the root, then the right subtree."""
    if root is not None:
        yield from in_order(root.left)
        yield root.value
        yield from in_order(root.right)


def post_order(root: Optional[Node]) -> Iterator[int]:
    """Yield values of both subtrees before the root."""
    if root is not None:
        yield from post_order(root.left)
        yield from post_order(root.right)
        yield root.value


def search(root: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None if it is absent."""
    current = root
    while current is not None and current.value != value:
        current = current.left if value < current.value else current.right
    return current


def sample_tree() -> Node:
    """Build the seven-node tree used throughout the lessons."""
    root: Optional[Node] = None
    for value in SAMPLE_VALUES:
        root = insert(root, value)
    assert root is not None
    return root


def _pre_order_text(root: Optional[Node]) -> str:
    return "".join(f"{value} \t" for value in pre_order(root))


def render_tree(root: Optional[Node]) -> str:
    """Draw the first three levels of a tree as text, each level in pre-order.

    The root and both of its children must be present.
    """
    if root is None or root.left is None or root.right is None:
        raise ValueError("render_tree needs a root with two children")
    left, right = root.left, root.right
    return "".join(
        [
            "\n",
            "         ",
            _pre_order_text(root),
            "\n",
            "       /    \\     \n",
            "     ",
            _pre_order_text(left),
            "    ",
            _pre_order_text(right),
            "\n",
            "    /  \\    /  \\  \n",
            "  ",
            _pre_order_text(left.left),
            "   ",
            _pre_order_text(left.right),
            "  ",
            _pre_order_text(right.left),
            "   ",
            _pre_order_text(right.right),
            "\n\n",
        ]
    )