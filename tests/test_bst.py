import pytest

from dsakit import tree
from dsakit.bst import BinarySearchTree

KEYS = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


def test_inorder_is_sorted():
    bst = BinarySearchTree(KEYS)
    assert bst.inorder() == sorted(KEYS)
    assert list(bst) == sorted(KEYS)


def test_duplicates_are_kept():
    bst = BinarySearchTree([5, 3, 5, 7, 3])
    assert bst.inorder() == [3, 3, 5, 5, 7]
    assert len(bst) == 5


def test_first_key_is_root():
    bst = BinarySearchTree(KEYS)
    assert bst.preorder()[0] == KEYS[0]
    assert bst.level_order()[0] == KEYS[0]
    assert bst.postorder()[-1] == KEYS[0]


def test_recursive_insert_builds_same_shape():
    iterative = BinarySearchTree(KEYS)
    recursive = BinarySearchTree()
    for key in KEYS:
        recursive.insert_recursive(key)
    assert recursive.preorder() == iterative.preorder()
    assert recursive.level_order() == iterative.level_order()


def test_small_tree_traversals():
    bst = BinarySearchTree([2, 1, 3])
    assert bst.preorder() == [2, 1, 3]
    assert bst.postorder() == [1, 3, 2]
    assert bst.level_order() == [2, 1, 3]


@pytest.mark.parametrize("key", KEYS)
def test_delete_each_key(key):
    bst = BinarySearchTree(KEYS)
    assert bst.delete(key) is True
    expected = sorted(KEYS)
    expected.remove(key)
    assert bst.inorder() == expected
    assert key not in bst


@pytest.mark.parametrize("key", KEYS)
def test_remove_each_key(key):
    bst = BinarySearchTree(KEYS)
    bst.remove(key)
    expected = sorted(KEYS)
    expected.remove(key)
    assert bst.inorder() == expected
    assert len(bst) == len(KEYS) - 1


def test_delete_missing_leaves_tree_unchanged():
    bst = BinarySearchTree(KEYS)
    before = bst.preorder()
    assert bst.delete(999) is False
    assert bst.preorder() == before


def test_remove_missing_raises():
    bst = BinarySearchTree(KEYS)
    with pytest.raises(KeyError):
        bst.remove(999)


def test_delete_until_empty():
    bst = BinarySearchTree(KEYS)
    for key in KEYS:
        bst.delete(key)
    assert len(bst) == 0
    assert bst.root is None


def test_remove_root_with_two_children_takes_successor():
    bst = BinarySearchTree(KEYS)
    bst.remove(50)
    successor = min(k for k in KEYS if k > 50)
    assert bst.root.key == successor


def test_delete_root_with_two_children_takes_successor():
    bst = BinarySearchTree(KEYS)
    bst.delete(50)
    successor = min(k for k in KEYS if k > 50)
    assert bst.root.key == successor


def test_minimum_and_maximum():
    bst = BinarySearchTree(KEYS)
    assert bst.minimum() == min(KEYS)
    assert bst.maximum() == max(KEYS)


def test_minimum_of_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()
    with pytest.raises(ValueError):
        BinarySearchTree().maximum()


def test_height_of_sorted_input_is_degenerate():
    keys = list(range(10))
    bst = BinarySearchTree(keys)
    assert bst.height() == len(keys)
    assert bst.is_balanced() is False


def test_balanced_tree():
    assert BinarySearchTree([2, 1, 3]).is_balanced() is True
    assert BinarySearchTree().height() == 0


def test_mirror_reverses_inorder_and_keeps_original():
    bst = BinarySearchTree(KEYS)
    mirrored = bst.mirror()
    assert tree.inorder(mirrored) == sorted(KEYS, reverse=True)
    assert bst.inorder() == sorted(KEYS)


def test_siblings():
    bst = BinarySearchTree([2, 1, 3])
    assert bst.are_siblings(1, 3) is True
    assert bst.are_siblings(3, 1) is True
    assert bst.are_siblings(2, 1) is False


def test_total_and_contains():
    bst = BinarySearchTree(KEYS)
    assert bst.total() == sum(KEYS)
    assert all(key in bst for key in KEYS)
    assert 999 not in bst