import pytest

from dsalab.bst import BinarySearchTree

VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def tree():
    return BinarySearchTree(VALUES)


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(VALUES)


def test_preorder_starts_with_root(tree):
    assert tree.preorder()[0] == VALUES[0]
    assert sorted(tree.preorder()) == sorted(VALUES)


def test_postorder_ends_with_root(tree):
    assert tree.postorder()[-1] == VALUES[0]
    assert sorted(tree.postorder()) == sorted(VALUES)


def test_min_and_max(tree):
    assert tree.minimum() == min(VALUES)
    assert tree.maximum() == max(VALUES)


def test_height_of_balanced_tree(tree):
    assert tree.height() == 3


def test_height_of_chain():
    values = list(range(6))
    assert BinarySearchTree(values).height() == len(values)


def test_contains(tree):
    for v in VALUES:
        assert tree.contains(v)
    assert not tree.contains(55)


def test_mirror_reverses_inorder(tree):
    tree.mirror()
    assert tree.inorder() == sorted(VALUES, reverse=True)
    assert tree.preorder()[0] == VALUES[0]


def test_mirror_twice_restores(tree):
    before = tree.preorder()
    tree.mirror()
    tree.mirror()
    assert tree.preorder() == before


def test_duplicates_kept():
    t = BinarySearchTree([5, 5, 3])
    assert t.inorder() == [3, 5, 5]


def test_empty_tree():
    t = BinarySearchTree()
    assert t.minimum() is None
    assert t.maximum() is None
    assert t.height() == 0
    assert t.inorder() == []
    assert not t.contains(1)