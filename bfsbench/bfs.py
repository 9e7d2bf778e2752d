"""Level-synchronous breadth-first search over a local CSR graph."""

from __future__ import annotations

from .onedcsr import LocalCSR


def bfs_simple(graph: LocalCSR, root: int) -> list[int]:
    """Return the BFS predecessor of every local vertex.

    The root is its own predecessor and unreached vertices get -1. The
    search runs one level at a time: every vertex of the current level
    is expanded, in queue order, before the next level starts, and a
    vertex takes as predecessor the first vertex that reaches it.
    """
    nlocalverts = graph.nlocalverts
    if not 0 <= root < nlocalverts:
        raise ValueError(f"root {root} is outside 0..{nlocalverts - 1}")

    rowstarts = graph.rowstarts
    column = graph.column
    pred = [-1] * nlocalverts
    visited = bytearray(nlocalverts)

    visited[root] = 1
    pred[root] = root
    oldq = [root]

    while True:
        newq: list[int] = []
        for src in oldq:
            for tgt in column[rowstarts[src]:rowstarts[src + 1]]:
                if not 0 <= tgt < nlocalverts:
                    raise ValueError(
                        f"edge ({src}, {tgt}) leaves the local vertex range"
                    )
                if not visited[tgt]:
                    visited[tgt] = 1
                    pred[tgt] = src
                    newq.append(tgt)
        if not newq:
            break
        oldq = newq
    return pred