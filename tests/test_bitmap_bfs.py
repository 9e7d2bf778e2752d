import random

import pytest

from bfsbench.bfs import bfs_simple
from bfsbench.bitmap_bfs import INT64_MAX, atomic_min, atomic_or, bfs_bitmap
from bfsbench.onedcsr import build_csr
from bfsbench.rmat import rmat_edgelist


def _depths(pred, root):
    depths = []
    for v, p in enumerate(pred):
        if p == -1:
            depths.append(None)
            continue
        d = 0
        cur = v
        while cur != root:
            cur = pred[cur]
            d += 1
            assert d <= len(pred)
        depths.append(d)
    return depths


def test_atomic_min_lowers_value():
    array = [5, 3]
    old = atomic_min(array, 0, 2)
    assert old == 5
    assert array == [2, 3]


def test_atomic_min_keeps_smaller_value():
    array = [5, 3]
    atomic_min(array, 1, 9)
    assert array == [5, 3]


def test_atomic_min_against_white_marker():
    array = [INT64_MAX]
    atomic_min(array, 0, 7)
    assert array == [7]


def test_atomic_or_sets_bits_and_is_idempotent():
    array = [0b1010]
    old = atomic_or(array, 0, 0b0101)
    assert old == 0b1010
    assert array == [0b1111]
    atomic_or(array, 0, 0b0001)
    assert array == [0b1111]


def test_path_graph():
    graph = build_csr([[(0, 1), (1, 2), (2, 3)]])
    assert bfs_bitmap(graph, 0) == [0, 0, 1, 2]


def test_smallest_predecessor_wins():
    graph = build_csr([[(0, 2), (0, 3), (2, 1), (3, 1)]])
    pred = bfs_bitmap(graph, 0)
    assert pred[1] == 2
    assert pred[0] == 0


def test_unreachable_vertices_and_isolated_root():
    graph = build_csr([[(0, 1), (2, 3)]])
    pred = bfs_bitmap(graph, 0)
    assert pred == [0, 0, -1, -1]
    lonely = build_csr([[(0, 1), (1, 3)]])
    assert bfs_bitmap(lonely, 2) == [-1, -1, 2, -1]


def test_self_loops_ignored():
    graph = build_csr([[(1, 1), (0, 1)]])
    assert bfs_bitmap(graph, 1) == [1, 1]


def test_root_out_of_range():
    graph = build_csr([[(0, 1)]])
    with pytest.raises(ValueError):
        bfs_bitmap(graph, 5)
    with pytest.raises(ValueError):
        bfs_bitmap(graph, -1)


def test_matches_simple_bfs_depths_on_rmat_graph():
    rng = random.Random(7)
    edges = rmat_edgelist(300, 7, 0.57, 0.19, 0.19, rng)
    graph = build_csr([edges])
    root = edges[0][0]
    bitmap_pred = bfs_bitmap(graph, root)
    simple_pred = bfs_simple(graph, root)
    depths = _depths(bitmap_pred, root)
    assert depths == _depths(simple_pred, root)
    for v, p in enumerate(bitmap_pred):
        if p == -1 or v == root:
            continue
        candidates = [u for u in graph.neighbors(v)
                      if depths[u] is not None and depths[u] == depths[v] - 1]
        assert p == min(candidates)


def test_many_queue_words():
    edges = [(k, k + 1) for k in range(299)]
    graph = build_csr([edges])
    pred = bfs_bitmap(graph, 0)
    assert pred[:300] == [0] + list(range(299))
    assert all(p == -1 for p in pred[300:])