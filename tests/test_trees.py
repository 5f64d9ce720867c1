from hypothesis import given
from hypothesis import strategies as st

from algokit.trees import ArrayTree, BinarySearchTree, Node


@given(st.lists(st.integers()))
def test_bst_inorder_is_sorted(values):
    tree = BinarySearchTree(values)
    assert list(tree.inorder()) == sorted(values)
    assert list(tree) == sorted(values)


@given(st.lists(st.integers(), min_size=1))
def test_bst_preorder_starts_at_root(values):
    tree = BinarySearchTree(values)
    order = list(tree.preorder())
    assert order[0] == values[0]
    assert sorted(order) == sorted(values)


def test_bst_duplicates_go_left():
    tree = BinarySearchTree([5, 5])
    assert tree.root.value == 5
    assert tree.root.right is None
    assert tree.root.left == Node(5)


def test_bst_larger_goes_right():
    tree = BinarySearchTree()
    tree.insert(4)
    tree.insert(9)
    tree.insert(1)
    assert tree.root.right.value == 9
    assert tree.root.left.value == 1
    assert list(tree.preorder()) == [4, 1, 9]


def test_bst_empty():
    tree = BinarySearchTree()
    assert list(tree.inorder()) == []
    assert list(tree.preorder()) == []
    assert tree.root is None


def test_bst_deep_sorted_input():
    values = list(range(3000))
    tree = BinarySearchTree(values)
    assert list(tree) == values
    assert list(tree.preorder()) == values


def test_array_tree_full_traversals():
    tree = ArrayTree([1, 2, 3, 4, 5, 6, 7], complete_node=7)
    assert list(tree.preorder()) == [1, 2, 4, 5, 3, 6, 7]
    assert list(tree.inorder()) == [4, 2, 5, 1, 6, 3, 7]
    assert list(tree.postorder()) == [4, 5, 2, 6, 7, 3, 1]


@given(st.lists(st.integers(min_value=1), max_size=31))
def test_array_tree_visits_every_value(values):
    tree = ArrayTree(values)
    for order in (tree.preorder(), tree.inorder(), tree.postorder()):
        assert sorted(order) == sorted(values)


@given(st.lists(st.integers(min_value=1), min_size=1, max_size=31))
def test_array_tree_preorder_and_postorder_ends(values):
    tree = ArrayTree(values)
    assert list(tree.preorder())[0] == values[0]
    assert list(tree.postorder())[-1] == values[0]


def test_array_tree_children_indices():
    tree = ArrayTree([1, 2, 3, 4, 5, 6, 7])
    for index in range(3):
        assert tree.left_child(index) == 2 * index + 1
        assert tree.right_child(index) == 2 * index + 2


def test_array_tree_zero_is_empty_slot():
    tree = ArrayTree([1, 0, 3, 4, 5])
    assert list(tree.preorder()) == [1, 3]
    assert tree.left_child(1) is None
    assert tree.right_child(1) is None


def test_array_tree_complete_node_limits_children():
    tree = ArrayTree([1, 2, 3], complete_node=1)
    assert tree.right_child(0) is None
    assert list(tree.inorder()) == [2, 1]


def test_array_tree_empty():
    tree = ArrayTree([])
    assert list(tree.preorder()) == []
    assert tree.left_child(0) is None