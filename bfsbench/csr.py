"""Undirected compressed-sparse-row graph with a level-synchronous BFS."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class CSRGraph:
    """Symmetric adjacency structure built from an edge list.

    Self-loops, duplicate edges and edges with a negative endpoint are
    dropped. Each vertex's neighbours are kept sorted and unique.
    ``max_vertex`` is the largest endpoint seen in the input, or -1.
    """

    rowstarts: list[int] = field(default_factory=lambda: [0])
    column: list[int] = field(default_factory=list)
    max_vertex: int = -1

    @property
    def nv(self) -> int:
        """Number of vertices: one more than the largest endpoint."""
        return self.max_vertex + 1

    @property
    def nedges(self) -> int:
        """Number of stored directed adjacency entries."""
        return len(self.column)

    @classmethod
    def from_edgelist(cls, edges: Iterable[tuple[int, int]]) -> "CSRGraph":
        """Build the graph from ``(i, j)`` pairs."""
        pairs = list(edges)
        max_vertex = max((max(i, j) for i, j in pairs), default=-1)
        max_vertex = max(max_vertex, -1)
        nv = max_vertex + 1
        adjacency: list[set[int]] = [set() for _ in range(nv)]
        for i, j in pairs:
            if i >= 0 and j >= 0 and i != j:
                adjacency[i].add(j)
                adjacency[j].add(i)
        rowstarts = [0]
        column: list[int] = []
        for neighbours in adjacency:
            column.extend(sorted(neighbours))
            rowstarts.append(len(column))
        return cls(rowstarts=rowstarts, column=column, max_vertex=max_vertex)

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.nv:
            raise ValueError(f"vertex {v} is outside the graph (0..{self.nv - 1})")

    def neighbors(self, v: int) -> list[int]:
        """Return the sorted neighbours of ``v``."""
        self._check_vertex(v)
        return self.column[self.rowstarts[v]:self.rowstarts[v + 1]]

    def bfs_tree(self, root: int) -> list[int]:
        """Return the BFS parent of every vertex; -1 where unreachable.

        The root is its own parent. A vertex's parent is the first
        vertex, in queue order, that reaches it.
        """
        self._check_vertex(root)
        parent = [-1] * self.nv
        parent[root] = root
        queue = deque([root])
        while queue:
            v = queue.popleft()
            for w in self.column[self.rowstarts[v]:self.rowstarts[v + 1]]:
                if parent[w] == -1:
                    parent[w] = v
                    queue.append(w)
        return parent