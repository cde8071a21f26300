import pytest
from hypothesis import given, strategies as st

from dsakit.trees import (
    TreeNode,
    boundary,
    inorder_iterative,
    level_order,
    postorder_iterative,
    preorder_iterative,
)


@pytest.fixture
def sample():
    root = TreeNode(-1)
    root.left = TreeNode(2)
    root.right = TreeNode(3)
    root.left.right = TreeNode(-5)
    return root


def _build(values):
    root = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        node = root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
    return root


def test_level_order_sample(sample):
    assert level_order(sample) == [[-1], [2, 3], [-5]]


def test_boundary_sample(sample):
    assert boundary(sample) == [-1, 2, -5, 3]


def test_postorder_sample(sample):
    assert postorder_iterative(sample) == [-5, 2, 3, -1]


def test_inorder_sample(sample):
    assert inorder_iterative(sample) == [2, -5, -1, 3]


def test_preorder_sample(sample):
    assert preorder_iterative(sample) == [-1, 2, -5, 3]


@pytest.mark.parametrize(
    "traversal",
    [level_order, boundary, postorder_iterative, inorder_iterative, preorder_iterative],
)
def test_empty_tree(traversal):
    assert traversal(None) == []


def test_single_leaf_boundary():
    assert boundary(TreeNode(7)) == [7]


def test_is_leaf(sample):
    assert sample.left.right.is_leaf
    assert not sample.left.is_leaf


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=40))
def test_inorder_of_search_tree_is_sorted(values):
    assert inorder_iterative(_build(values)) == sorted(values)


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=40))
def test_traversals_visit_every_node(values):
    root = _build(values)
    expected = sorted(values)
    assert sorted(preorder_iterative(root)) == expected
    assert sorted(postorder_iterative(root)) == expected
    assert sorted(v for level in level_order(root) for v in level) == expected


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=40))
def test_root_positions(values):
    root = _build(values)
    assert preorder_iterative(root)[0] == values[0]
    assert postorder_iterative(root)[-1] == values[0]
    assert level_order(root)[0] == [values[0]]


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=40))
def test_boundary_is_subset(values):
    root = _build(values)
    result = boundary(root)
    assert set(result) <= set(values)
    assert len(result) <= len(values)