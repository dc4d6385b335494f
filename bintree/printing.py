"""Text drawing of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.metrics import height
from bintree.node import Node


class _Canvas:
    """Rows of characters that grow to the right as they are written."""

    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, column: int, char: str) -> None:
        line = self._rows[row]
        if column >= len(line):
            line.extend(" " * (column + 1 - len(line)))
        line[column] = char

    def lines(self) -> list[str]:
        return ["".join(line).rstrip(" ") for line in self._rows]


def _draw(node: Optional[Node], offset: int, level: int, canvas: _Canvas) -> int:
    """Draw ``node`` and its subtrees; return the width the subtree takes."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, level + 1, canvas)
    right = _draw(node.right, offset + left + width, level + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(level, offset + left + i, char)
    if level:
        if is_left:
            start = offset + left + width // 2
            for i in range(width + right):
                canvas.put(level - 1, start + i, "-")
        else:
            start = offset - width // 2
            for i in range(left + width):
                canvas.put(level - 1, start + i, "-")
        canvas.put(level - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, each line ending with a newline.

    An empty tree renders as an empty string.
    """
    if tree is None:
        return ""
    canvas = _Canvas(height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))