"""Linked binary trees: nodes, traversals, shape metrics and ASCII rendering."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "metrics", "printing"]