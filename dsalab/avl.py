"""A word dictionary kept in an AVL tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _Node:
    word: str
    meaning: str
    left: _Node | None = None
    right: _Node | None = None
    ht: int = 0


def _height(node: _Node | None) -> int:
    if node is None:
        return 0
    lh = 1 + node.left.ht if node.left else 0
    rh = 1 + node.right.ht if node.right else 0
    return max(lh, rh)


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    lh = 1 + node.left.ht if node.left else 0
    rh = 1 + node.right.ht if node.right else 0
    return lh - rh


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    node.ht = _height(node)
    pivot.ht = _height(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    node.ht = _height(node)
    pivot.ht = _height(pivot)
    return pivot


def _left_right(node: _Node) -> _Node:
    node.left = _rotate_left(node.left)
    return _rotate_right(node)


def _right_left(node: _Node) -> _Node:
    node.right = _rotate_right(node.right)
    return _rotate_left(node)


def _fix_left_heavy(node: _Node) -> _Node:
    return _rotate_right(node) if _balance(node.left) >= 0 else _left_right(node)


def _fix_right_heavy(node: _Node) -> _Node:
    return _rotate_left(node) if _balance(node.right) <= 0 else _right_left(node)


class AVLDictionary:
    """Words and their meanings in a height-balanced search tree.

    A repeated word is stored again in the left subtree of the earlier one.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, word: str, meaning: str) -> None:
        self._root = self._insert(self._root, word, meaning)

    def _insert(self, node: _Node | None, word: str, meaning: str) -> _Node:
        if node is None:
            return _Node(word, meaning)
        if word > node.word:
            node.right = self._insert(node.right, word, meaning)
            if _balance(node) == -2:
                node = _rotate_left(node) if word > node.right.word else _right_left(node)
        else:
            node.left = self._insert(node.left, word, meaning)
            if _balance(node) == 2:
                node = _left_right(node) if word > node.left.word else _rotate_right(node)
        node.ht = _height(node)
        return node

    def delete(self, word: str) -> None:
        """Remove ``word``; raise KeyError if it is not present."""
        self._root = self._delete(self._root, word)

    def _delete(self, node: _Node | None, word: str) -> _Node | None:
        if node is None:
            raise KeyError(word)
        if word > node.word:
            node.right = self._delete(node.right, word)
            if _balance(node) == 2:
                node = _fix_left_heavy(node)
        elif word < node.word:
            node.left = self._delete(node.left, word)
            if _balance(node) == -2:
                node = _fix_right_heavy(node)
        else:
            if node.right is None:
                return node.left
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.word, node.meaning = successor.word, successor.meaning
            node.right = self._delete(node.right, successor.word)
            if _balance(node) == 2:
                node = _fix_left_heavy(node)
        node.ht = _height(node)
        return node

    def items(self) -> list[tuple[str, str]]:
        """All (word, meaning) pairs in word order."""
        result: list[tuple[str, str]] = []

        def walk(node: _Node | None) -> None:
            if node is not None:
                walk(node.left)
                result.append((node.word, node.meaning))
                walk(node.right)

        walk(self._root)
        return result

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return 0 if self._root is None else self._root.ht + 1