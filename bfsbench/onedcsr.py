"""Row-distributed CSR construction for a single process.

Edges arrive in blocks; each block is compressed into a CSR keyed on
the first endpoint and merged into the graph built so far. Every edge
is stored in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence


def lg_int64(x: int) -> int:
    """Return ceil(log2(x)) for a positive integer."""
    if x <= 0:
        raise ValueError("lg_int64 needs a positive argument")
    return (x - 1).bit_length()


@dataclass
class LocalCSR:
    """CSR rows for the vertices held locally.

    Row ``v`` holds ``column[rowstarts[v]:rowstarts[v + 1]]``.
    ``lg_nglobalverts`` is -1 for a graph that has seen no edges.
    """

    rowstarts: list[int] = field(default_factory=lambda: [0])
    column: list[int] = field(default_factory=list)
    lg_nglobalverts: int = -1

    @property
    def nlocalverts(self) -> int:
        return len(self.rowstarts) - 1

    @property
    def nlocaledges(self) -> int:
        return len(self.column)

    @property
    def nglobalverts(self) -> int:
        return 1 << self.lg_nglobalverts if self.lg_nglobalverts >= 0 else 0

    def neighbors(self, v: int) -> list[int]:
        """Return the stored targets of row ``v`` in insertion order."""
        if not 0 <= v < self.nlocalverts:
            raise ValueError(f"vertex {v} is not a local row")
        return self.column[self.rowstarts[v]:self.rowstarts[v + 1]]

    def _rows(self) -> list[list[int]]:
        return [self.column[s:e] for s, e in zip(self.rowstarts, self.rowstarts[1:])]


def _from_rows(rows: Sequence[Sequence[int]], lg_nglobalverts: int) -> LocalCSR:
    rowstarts = [0]
    column: list[int] = []
    for row in rows:
        column.extend(row)
        rowstarts.append(len(column))
    return LocalCSR(rowstarts=rowstarts, column=column, lg_nglobalverts=lg_nglobalverts)


def make_csr(edges: Iterable[tuple[int, int]], nlocalverts: int,
             lg_nglobalverts: int) -> LocalCSR:
    """Compress ``(v0, v1)`` pairs into rows keyed on ``v0``."""
    rows: list[list[int]] = [[] for _ in range(nlocalverts)]
    for v0, v1 in edges:
        if not 0 <= v0 < nlocalverts:
            raise ValueError(f"edge source {v0} is outside 0..{nlocalverts - 1}")
        rows[v0].append(v1)
    return _from_rows(rows, lg_nglobalverts)


def merge_csr(b: LocalCSR, a: LocalCSR) -> LocalCSR:
    """Return ``b`` union ``a``: each row holds b's entries, then a's.

    When ``a`` has more rows, the result grows to match and takes its
    vertex-count exponent.
    """
    b_rows = b._rows()
    a_rows = a._rows()
    lg = b.lg_nglobalverts
    if len(a_rows) > len(b_rows):
        b_rows.extend([] for _ in range(len(a_rows) - len(b_rows)))
        lg = a.lg_nglobalverts
    for row, extra in zip(b_rows, a_rows):
        row.extend(extra)
    return _from_rows(b_rows, lg)


def build_csr(edge_blocks: Iterable[Iterable[tuple[int, int]]]) -> LocalCSR:
    """Build the graph from blocks of edges, storing each edge both ways.

    The vertex count grows to the next power of two covering every
    endpoint seen so far.
    """
    graph = LocalCSR()
    max_vertex = -1
    for block in edge_blocks:
        pairs = list(block)
        for v0, v1 in pairs:
            if v0 < 0 or v1 < 0:
                raise ValueError(f"edge ({v0}, {v1}) has a negative endpoint")
            max_vertex = max(max_vertex, v0, v1)
        if max_vertex < 0:
            continue
        lg = lg_int64(max_vertex + 1)
        doubled = [e for v0, v1 in pairs for e in ((v0, v1), (v1, v0))]
        graph = merge_csr(graph, make_csr(doubled, 1 << lg, lg))
    return graph