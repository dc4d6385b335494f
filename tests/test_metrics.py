import pytest

from bintree.metrics import (
    balance,
    depth,
    height,
    internal_nodes,
    is_full,
    is_perfect,
    leaves,
    size,
)
from bintree.node import Node
from bintree.traversal import preorder


def sample_tree():
    """The tree used by the height, depth, size, leaves and nodes examples."""
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def left_chain(n):
    root = Node(1)
    node = root
    for value in range(2, n + 1):
        node = node.insert_left(value)
    return root, node


def right_chain(n):
    root = Node(1)
    node = root
    for value in range(2, n + 1):
        node = node.insert_right(value)
    return root, node


def perfect_tree(levels):
    counter = iter(range(1, 10_000))
    root = Node(next(counter))
    frontier = [root]
    for _ in range(levels):
        nxt = []
        for node in frontier:
            node.left = Node(next(counter), node)
            node.right = Node(next(counter), node)
            nxt.extend([node.left, node.right])
        frontier = nxt
    return root


def test_empty_tree_measures_zero():
    assert height(None) == 0
    assert depth(None) == 0
    assert size(None) == 0
    assert leaves(None) == 0
    assert internal_nodes(None) == 0
    assert balance(None) == 0


def test_empty_tree_is_neither_full_nor_perfect():
    assert is_full(None) is False
    assert is_perfect(None) is False


def test_single_node():
    node = Node(7)
    assert height(node) == 0
    assert depth(node) == 0
    assert size(node) == 1
    assert leaves(node) == 1
    assert internal_nodes(node) == 0
    assert balance(node) == 0
    assert is_full(node) is True
    assert is_perfect(node) is True


@pytest.mark.parametrize("n", [1, 2, 5, 20])
def test_chain_measures(n):
    root, bottom = left_chain(n)
    assert height(root) == n - 1
    assert depth(bottom) == n - 1
    assert size(root) == n
    assert leaves(root) == 1
    assert internal_nodes(root) == n - 1


@pytest.mark.parametrize("n", [2, 3, 6])
def test_balance_of_chains_has_opposite_signs(n):
    left_root, _ = left_chain(n)
    right_root, _ = right_chain(n)
    assert balance(left_root) == n - 1
    assert balance(right_root) == -(n - 1)


def test_sample_tree_relations():
    root = sample_tree()
    assert size(root) == len(list(preorder(root)))
    assert leaves(root) + internal_nodes(root) == size(root)
    assert depth(root) == 0
    assert depth(root.left.right) == depth(root.left) + 1
    assert height(root.left.right) == 0
    assert height(root) == height(root.right) + 1


def test_size_of_subtree_counts_only_descendants():
    root = sample_tree()
    assert size(root) == 1 + size(root.left) + size(root.right)
    assert size(root.left.right) == 1


def test_balance_example():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    assert balance(root) == 2
    assert balance(root.right) == -1
    assert balance(root.left.left.right) == 0


def test_is_full_example():
    root = sample_tree()
    root.left.left = Node(10, root.left)
    assert is_full(root) is False
    assert is_full(root.left) is True
    assert is_full(root.right) is False


@pytest.mark.parametrize("levels", [0, 1, 2, 4])
def test_perfect_trees(levels):
    root = perfect_tree(levels)
    assert is_perfect(root) is True
    assert is_full(root) is True
    assert height(root) == levels
    assert size(root) == 2 ** (levels + 1) - 1
    assert leaves(root) == 2 ** levels
    assert balance(root) == 0


def test_is_perfect_example():
    root = sample_tree()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    assert is_perfect(root) is True

    deeper = root.right.right
    deeper.left = Node(10, deeper)
    assert is_perfect(root) is False

    deeper.right = Node(10, deeper)
    assert is_perfect(root) is False
    assert is_full(root) is True


def test_one_child_is_not_perfect():
    root = Node(1)
    root.insert_left(2)
    assert is_perfect(root) is False
    assert is_full(root) is False