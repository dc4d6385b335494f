# bintree

A small library for linked binary trees of integers. Each node knows its
parent and its left and right children. The library also has the three
depth-first traversals, functions that measure a tree's shape, and an ASCII
drawing of a tree.

It has no dependencies outside the standard library. It is a library only
and installs no command.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)   # 128 takes 402's place, and 402 becomes its right child
```

`Node(value, parent=None)` creates a node with the given value and parent
link. The constructor does not attach the node to the parent. To link it,
assign it yourself, for example `root.left = Node(12, root)`. Alternatively,
use the insert methods.

The attributes `value`, `parent`, `left` and `right` are plain attributes
that you can read and set.

Methods on `Node`:

- `insert_left(value)` and `insert_right(value)`: create a new child on that
  side and return it. If a child is already on that side, it moves down to
  the same side of the new node. A value of `0` raises `ValueError`.
- `is_leaf()`: returns `True` if the node has no children.
- `is_root()`: returns `True` if the node has no parent.
- `sibling()`: returns the other child of the node's parent. Returns `None`
  if there is no parent or no other child.
- `uncle()`: returns the sibling of the node's parent, or `None`.
- `delete()`: detaches the node from its parent. It then clears the
  `parent`, `left` and `right` links of every node in the subtree.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))    # node, left subtree, right subtree
list(inorder(root))     # left subtree, node, right subtree
list(postorder(root))   # left subtree, right subtree, node
```

Each function is a generator that yields node values. It iterates instead
of recursing, so deep trees do not reach Python's recursion limit. An empty
tree (`None`) yields nothing.

## Metrics

Every function in `bintree.metrics` takes a node, or `None` for an empty
tree:

| Function | Returns |
| --- | --- |
| `height(tree)` | Edges on the longest downward path. A single node and an empty tree both give 0. |
| `depth(tree)` | Edges between the node and the root. The root gives 0. |
| `size(tree)` | Number of nodes. |
| `leaves(tree)` | Number of nodes without children. |
| `internal_nodes(tree)` | Number of nodes with at least one child. |
| `balance(tree)` | Height of the left subtree minus height of the right subtree. Here a height counts nodes, so a missing child is 0 and a leaf is 1. |
| `is_full(tree)` | `True` if every node has either zero or two children. |
| `is_perfect(tree)` | `True` if every internal node has two children and all leaves are on the same level. |

`is_full(None)` and `is_perfect(None)` are both `False`.

## Printing

```python
import sys
from bintree.printing import render, print_tree

text = render(root)                 # the drawing as a string
print_tree(root)                    # written to standard output
print_tree(root, file=sys.stderr)   # or to any text stream
```

The drawing has one line per level, and each line ends with a newline.
Trailing spaces are removed. An empty tree renders as `""`. Each value is
drawn zero-padded to three digits inside parentheses, such as `(098)`.
Dashes and dots connect each parent to its children:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```