"""AVL helpers: heights, balance factors, rotations and rebalancing insertion."""

from __future__ import annotations

from typing import Optional

from edaulas.bst import Node, insert


def height(node: Optional[Node]) -> int:
    """Number of levels in the subtree; an empty tree has height 0."""
    if node is None:
        return 0
    return max(height(node.left), height(node.right)) + 1


def balance_factor(node: Optional[Node]) -> int:
    """Left subtree height minus right subtree height."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rotate_right(node: Optional[Node]) -> Optional[Node]:
    """Single right rotation; returns the node unchanged if it has no left child."""
    if node is None or node.left is None:
        return node
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    return pivot


def rotate_left(node: Optional[Node]) -> Optional[Node]:
    """Single left rotation; returns the node unchanged if it has no right child."""
    if node is None or node.right is None:
        return node
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    return pivot


def rotate_left_right(node: Optional[Node]) -> Optional[Node]:
    """Left rotation on the left child followed by a right rotation."""
    if node is None or node.left is None:
        return node
    node.left = rotate_left(node.left)
    return rotate_right(node)


def rotate_right_left(node: Optional[Node]) -> Optional[Node]:
    """Right rotation on the right child followed by a left rotation."""
    if node is None or node.right is None:
        return node
    node.right = rotate_right(node.right)
    return rotate_left(node)


def rebalance(root: Optional[Node]) -> Optional[Node]:
    """Apply the rotation that the root's balance factor calls for."""
    factor = balance_factor(root)
    if root is None:
        return None
    if factor > 1 and balance_factor(root.left) >= 0:
        return rotate_right(root)
    if factor < -1 and balance_factor(root.right) <= 0:
        return rotate_left(root)
    if factor > 1 and balance_factor(root.left) < 0:
        return rotate_left_right(root)
    if factor < -1 and balance_factor(root.right) > 0:
        return rotate_right_left(root)
    return root


def insert_avl(root: Optional[Node], value: int) -> Node:
    """Insert as in a search tree, then rebalance at the root."""
    result = rebalance(insert(root, value))
    assert result is not None
    return result


def insert_left(root: Optional[Node], value: int) -> Node:
    """Append ``value`` at the end of the leftmost path, building a skewed tree."""
    new = Node(value)
    if root is None:
        return new
    current = root
    while current.left is not None:
        current = current.left
    current.left = new
    return root