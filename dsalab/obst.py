"""Optimal binary search trees built by dynamic programming."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class OptimalBST:
    """The optimal search tree for ``keys`` with success weights ``p`` and failure weights ``q``.

    ``p[i]`` belongs to the key numbered ``i + 1``; ``q`` has one more entry than ``keys``.
    Nodes of the tree are the key numbers ``1..n``.
    """

    def __init__(self, keys: Sequence, p: Sequence[int], q: Sequence[int]) -> None:
        self.keys = list(keys)
        self.p = list(p)
        self.q = list(q)
        n = len(self.keys)
        if len(self.p) != n:
            raise ValueError("p must have one weight per key")
        if len(self.q) != n + 1:
            raise ValueError("q must have one more weight than there are keys")
        self.n = n

        success = [0, *self.p]
        w = [[0] * (n + 1) for _ in range(n + 1)]
        c = [[0] * (n + 1) for _ in range(n + 1)]
        r = [[0] * (n + 1) for _ in range(n + 1)]
        for i in range(n + 1):
            w[i][i] = self.q[i]
        for span in range(1, n + 1):
            for i in range(n - span + 1):
                j = i + span
                w[i][j] = w[i][j - 1] + success[j] + self.q[j]
                k = min(range(i + 1, j + 1), key=lambda k: c[i][k - 1] + c[k][j])
                c[i][j] = c[i][k - 1] + c[k][j] + w[i][j]
                r[i][j] = k

        self._r = r
        self.root = r[0][n]
        self.cost = c[0][n]
        self.weight = w[0][n]

    def tree_rows(self) -> list[tuple[int, int | None, int | None]]:
        """``(node, left child, right child)`` in breadth-first order; a missing child is None."""
        if self.n == 0:
            return []
        r = self._r
        rows = []
        queue = deque([(0, self.n)])
        while queue:
            i, j = queue.popleft()
            k = r[i][j]
            left = r[i][k - 1] or None
            if left is not None:
                queue.append((i, k - 1))
            right = r[k][j] or None
            if right is not None:
                queue.append((k, j))
            rows.append((k, left, right))
        return rows

    def render(self) -> str:
        """A report of the root, the cost and each node's children."""
        parts = [
            "The Optimal Binary Search Tree For The Given Nodes is ....\n",
            f"\n The Root of this OBST is :: {self.root}",
            f"\n The Cost Of this OBST is :: {self.cost}",
            "\n\n\t  NODE\t  LEFT CHILD\t   RIGHT CHILD",
            "\n " + "-" * 55,
        ]
        for node, left, right in self.tree_rows():
            parts.append(f"\n         {node}")
            parts.append(f"              {left if left is not None else '-'}")
            parts.append(f"              {right if right is not None else '-'}")
        parts.append("\n")
        return "".join(parts)