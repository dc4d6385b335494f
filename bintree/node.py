"""Binary tree nodes with parent links."""

from __future__ import annotations

from typing import Optional


class Node:
    """A binary tree node holding an integer, linked to its parent and children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves below it on the left."""
        if value == 0:
            raise ValueError("value must be non-zero")
        new_node = Node(value, self)
        if self.left is not None:
            new_node.left = self.left
            new_node.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves below it on the right."""
        if value == 0:
            raise ValueError("value must be non-zero")
        new_node = Node(value, self)
        if self.right is not None:
            new_node.right = self.right
            new_node.right.parent = new_node
        self.right = new_node
        return new_node

    def delete(self) -> None:
        """Detach this subtree from its parent and unlink every node in it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.left = None
            node.right = None
            node.parent = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        grandparent = parent.parent
        if grandparent is None:
            return None
        if grandparent.left is parent:
            return grandparent.right
        if grandparent.right is parent:
            return grandparent.left
        return None