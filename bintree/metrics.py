"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of the subtree rooted at ``tree``."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest path down from ``tree``.

    A single node and an empty tree both have height 0.
    """
    if tree is None:
        return 0
    levels = 0
    level = [tree]
    while True:
        level = [child for node in level for child in (node.left, node.right) if child is not None]
        if not level:
            return levels
        levels += 1


def _node_height(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest path down from ``tree``."""
    return 0 if tree is None else height(tree) + 1


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges between ``tree`` and the root."""
    count = 0
    node = tree
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right subtree.

    Subtree heights count nodes, so a missing child counts as 0 and a leaf as 1.
    """
    if tree is None:
        return 0
    return _node_height(tree.left) - _node_height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children.

    An empty tree is not full.
    """
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _nodes(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all its leaves share one level.

    An empty tree is not perfect.
    """
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is None or tree.right is None:
        return False
    if height(tree.left) != height(tree.right):
        return False
    return is_perfect(tree.left) and is_perfect(tree.right)