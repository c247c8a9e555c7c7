"""Undirected graphs stored as adjacency matrices, with BFS and DFS traversals."""

from __future__ import annotations

from collections import deque


class Graph:
    """An undirected graph of ``n`` vertices numbered from ``first`` upwards."""

    def __init__(self, n: int, first: int = 0) -> None:
        if n < 0:
            raise ValueError("number of vertices must not be negative")
        self.n = n
        self.first = first
        self._adj = [[0] * n for _ in range(n)]

    @property
    def vertices(self) -> range:
        return range(self.first, self.first + self.n)

    def _index(self, vertex: int) -> int:
        if vertex not in self.vertices:
            raise ValueError(f"vertex {vertex} is out of range")
        return vertex - self.first

    def add_edge(self, v1: int, v2: int) -> None:
        """Connect two vertices in both directions."""
        i, j = self._index(v1), self._index(v2)
        self._adj[i][j] = 1
        self._adj[j][i] = 1

    def neighbours(self, vertex: int) -> list[int]:
        """Vertices adjacent to ``vertex``, in ascending order."""
        row = self._adj[self._index(vertex)]
        return [v for v, linked in zip(self.vertices, row) if linked]

    def bfs(self, start: int) -> list[int]:
        """Breadth-first order of the vertices reachable from ``start``."""
        self._index(start)
        visited = {start}
        queue = deque([start])
        order = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for nxt in self.neighbours(current):
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return order

    def dfs(self, start: int) -> list[int]:
        """Recursive depth-first order, visiting lower-numbered neighbours first."""
        self._index(start)
        visited: set[int] = set()
        order: list[int] = []

        def visit(vertex: int) -> None:
            order.append(vertex)
            visited.add(vertex)
            for nxt in self.neighbours(vertex):
                if nxt not in visited:
                    visit(nxt)

        visit(start)
        return order

    def dfs_stack(self, start: int) -> list[int]:
        """Depth-first order using an explicit stack; vertices are marked when pushed."""
        self._index(start)
        visited = {start}
        stack = [start]
        order = []
        while stack:
            vertex = stack.pop()
            order.append(vertex)
            for nxt in reversed(self.neighbours(vertex)):
                if nxt not in visited:
                    stack.append(nxt)
                    visited.add(nxt)
        return order

    def format_matrix(self) -> str:
        """The adjacency matrix as text, with a header row of vertex numbers."""
        lines = ["   " + "".join(f"{v} " for v in self.vertices)]
        for j, label in enumerate(self.vertices):
            cells = "".join(f"{self._adj[i][j]} " for i in range(self.n))
            lines.append(f"{label} |{cells}")
        return "\n".join(lines) + "\n"