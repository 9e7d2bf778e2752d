"""Breadth-first search with bitmap queues and min-combined predecessors.

Each queue is a bitmap in which one bit covers a small group of vertices.
Because of this the queue may name more vertices than need visiting, so
the predecessor map is checked before a vertex is expanded.

The working predecessor map uses this coding:

* white (not visited): ``INT64_MAX``
* grey (in the current queue): ``0 .. nglobalverts - 1``
* black (done): ``-nglobalverts .. -1``

Predecessors are offered with a minimum, so when several vertices of
one level reach the same vertex, the smallest of them becomes its
predecessor.
"""

from __future__ import annotations

from typing import MutableSequence

from .onedcsr import LocalCSR

INT64_MAX = (1 << 63) - 1
ELTS_PER_QUEUE_BIT = 4
ULONG_BITS = 64


def atomic_min(array: MutableSequence[int], index: int, value: int) -> int:
    """Lower ``array[index]`` to ``value`` if that is smaller.

    Returns the value held before the update.
    """
    old = array[index]
    if value < old:
        array[index] = value
    return old


def atomic_or(array: MutableSequence[int], index: int, value: int) -> int:
    """Set the bits of ``value`` in ``array[index]``.

    Returns the value held before the update.
    """
    old = array[index]
    new = old | value
    if new != old:
        array[index] = new
    return old


def _queue_position(v: int) -> tuple[int, int]:
    bit_index = v // ELTS_PER_QUEUE_BIT
    return bit_index // ULONG_BITS, 1 << (bit_index % ULONG_BITS)


def bfs_bitmap(graph: LocalCSR, root: int) -> list[int]:
    """Return the BFS predecessor of every vertex; -1 where unreachable.

    The root is its own predecessor. Among the vertices of one level
    that reach a vertex, the smallest becomes its predecessor.
    """
    nlocalverts = graph.nlocalverts
    if not 0 <= root < nlocalverts:
        raise ValueError(f"root {root} is outside 0..{nlocalverts - 1}")
    nglobalverts = max(graph.nglobalverts, nlocalverts)

    rowstarts = graph.rowstarts
    column = graph.column
    queue_nbits = (nlocalverts + ELTS_PER_QUEUE_BIT - 1) // ELTS_PER_QUEUE_BIT
    queue_nwords = (queue_nbits + ULONG_BITS - 1) // ULONG_BITS

    def is_grey(value: int) -> bool:
        return 0 <= value < nglobalverts

    pred = [INT64_MAX] * nlocalverts
    queue1 = [0] * queue_nwords
    pred[root] = root
    word, mask = _queue_position(root)
    queue1[word] |= mask

    while True:
        queue2 = [0] * queue_nwords
        pred2 = [p - nglobalverts if is_grey(p) else p for p in pred]

        for word_index, bits in enumerate(queue1):
            if not bits:
                continue
            for bitnum in range(ULONG_BITS):
                first = (word_index * ULONG_BITS + bitnum) * ELTS_PER_QUEUE_BIT
                if first >= nlocalverts:
                    break
                if not (bits >> bitnum) & 1:
                    continue
                for v in range(first, min(first + ELTS_PER_QUEUE_BIT, nlocalverts)):
                    if not is_grey(pred[v]):
                        continue
                    for w in column[rowstarts[v]:rowstarts[v + 1]]:
                        if w == v:
                            continue
                        if not 0 <= w < nlocalverts:
                            raise ValueError(
                                f"edge ({v}, {w}) leaves the local vertex range"
                            )
                        atomic_min(pred2, w, v)
                        target_word, target_mask = _queue_position(w)
                        atomic_or(queue2, target_word, target_mask)

        if not any(queue2):
            break
        pred, pred2 = pred2, pred
        queue1 = queue2

    result = []
    for p in pred2:
        if p < 0:
            result.append(p + nglobalverts)
        elif p == INT64_MAX:
            result.append(-1)
        else:
            result.append(p)
    return result