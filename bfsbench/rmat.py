"""R-MAT edge list generation with random vertex and edge permutation.

Random sources are objects with a ``random()`` method returning floats
in [0, 1), such as :class:`random.Random`.
"""

from __future__ import annotations

import math
from typing import Iterable, MutableSequence, Protocol


class _RandomSource(Protocol):
    def random(self) -> float: ...


Edge = tuple[int, int]


def rmat_edge(scale: int, a: float, b: float, c: float, d: float,
              rn: Iterable[float]) -> Edge:
    """Choose one edge by recursive quadrant descent over a 2**scale grid.

    Consumes ``5 * scale - 4`` values from ``rn``; the quadrant
    probabilities are perturbed by up to 5% at each level.
    """
    if scale < 1:
        raise ValueError("scale must be at least 1")
    draws = iter(rn)

    def draw() -> float:
        try:
            return next(draws)
        except StopIteration:
            raise ValueError("not enough random numbers for an R-MAT edge") from None

    i = j = 0
    for level in reversed(range(scale)):
        bit = 1 << level
        r = draw()
        if r > a:
            if r <= a + b:
                j |= bit
            elif r <= a + b + c:
                i |= bit
            else:
                i |= bit
                j |= bit
        if bit == 1:
            break
        a *= 0.95 + draw() / 10
        b *= 0.95 + draw() / 10
        c *= 0.95 + draw() / 10
        d *= 0.95 + draw() / 10
        norm = 1.0 / (a + b + c + d)
        a *= norm
        b *= norm
        c *= norm
        d = 1.0 - (a + b + c)
    return i, j


def randpermute(items: MutableSequence, rng: _RandomSource) -> None:
    """Shuffle ``items`` in place, one draw per position."""
    n = len(items)
    for k in range(n):
        place = k + math.floor(rng.random() * (n - k))
        if place != k:
            items[k], items[place] = items[place], items[k]


def permute_vertex_labels(edges: MutableSequence[Edge], max_nvtx: int,
                          rng: _RandomSource) -> list[int]:
    """Relabel every vertex in ``edges`` in place by a random permutation.

    Returns the permutation used: vertex ``v`` becomes ``labels[v]``.
    """
    labels = list(range(max_nvtx))
    randpermute(labels, rng)
    edges[:] = [(labels[i], labels[j]) for i, j in edges]
    return labels


def permute_edgelist(edges: MutableSequence[Edge], rng: _RandomSource) -> None:
    """Shuffle the order of ``edges`` in place."""
    randpermute(edges, rng)


def rmat_edgelist(nedge: int, scale: int, a: float, b: float, c: float,
                  rng: _RandomSource) -> list[Edge]:
    """Generate ``nedge`` R-MAT edges, then permute labels and edge order."""
    if nedge < 0:
        raise ValueError("edge count must be non-negative")
    if scale < 1:
        raise ValueError("scale must be at least 1")
    d = 1.0 - (a + b + c)
    nrand = 5 * scale
    edges = [
        rmat_edge(scale, a, b, c, d, [rng.random() for _ in range(nrand)])
        for _ in range(nedge)
    ]
    permute_vertex_labels(edges, 1 << scale, rng)
    permute_edgelist(edges, rng)
    return edges