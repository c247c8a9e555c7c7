"""Expression trees built from prefix expressions of single-letter operands."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

OPERATORS = frozenset("+-*/")


@dataclass
class ExprNode:
    data: str
    left: ExprNode | None = None
    right: ExprNode | None = None

    def _inorder(self) -> Iterator[str]:
        if self.left:
            yield from self.left._inorder()
        yield self.data
        if self.right:
            yield from self.right._inorder()

    def _postorder(self) -> Iterator[str]:
        stack = [self]
        reversed_order = []
        while stack:
            node = stack.pop()
            reversed_order.append(node.data)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        return reversed(reversed_order)

    def inorder(self) -> str:
        return "".join(self._inorder())

    def postorder(self) -> str:
        return "".join(self._postorder())

    def deletion_order(self) -> list[str]:
        """The order in which nodes are released: children before parents."""
        order: list[str] = []

        def release(node: ExprNode | None) -> None:
            if node is None:
                return
            release(node.left)
            release(node.right)
            order.append(node.data)

        release(self)
        return order


def parse_prefix(prefix: str) -> ExprNode:
    """Build a tree from a prefix expression; characters that are neither
    ASCII letters nor operators are ignored."""
    stack: list[ExprNode] = []
    for ch in reversed(prefix):
        if ch.isascii() and ch.isalpha():
            stack.append(ExprNode(ch))
        elif ch in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands")
            left = stack.pop()
            right = stack.pop()
            stack.append(ExprNode(ch, left, right))
    if not stack:
        raise ValueError("expression has no operands")
    return stack.pop()