"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree; equal values go to the right subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        node = _Node(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    @staticmethod
    def _inorder(node: _Node | None) -> Iterator[Any]:
        if node is not None:
            yield from BinarySearchTree._inorder(node.left)
            yield node.value
            yield from BinarySearchTree._inorder(node.right)

    @staticmethod
    def _preorder(node: _Node | None) -> Iterator[Any]:
        if node is not None:
            yield node.value
            yield from BinarySearchTree._preorder(node.left)
            yield from BinarySearchTree._preorder(node.right)

    @staticmethod
    def _postorder(node: _Node | None) -> Iterator[Any]:
        if node is not None:
            yield from BinarySearchTree._postorder(node.left)
            yield from BinarySearchTree._postorder(node.right)
            yield node.value

    def inorder(self) -> list[Any]:
        return list(self._inorder(self.root))

    def preorder(self) -> list[Any]:
        return list(self._preorder(self.root))

    def postorder(self) -> list[Any]:
        return list(self._postorder(self.root))

    def minimum(self) -> Any:
        """The leftmost value, or None for an empty tree."""
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Any:
        """The rightmost value, or None for an empty tree."""
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        """Number of levels; an empty tree has height 0."""

        def measure(node: _Node | None) -> int:
            if node is None:
                return 0
            return max(measure(node.left), measure(node.right)) + 1

        return measure(self.root)

    def contains(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def mirror(self) -> None:
        """Swap left and right children throughout the tree."""

        def flip(node: _Node | None) -> None:
            if node is None:
                return
            flip(node.left)
            flip(node.right)
            node.left, node.right = node.right, node.left

        flip(self.root)