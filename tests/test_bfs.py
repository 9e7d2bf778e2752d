from collections import deque

import pytest

from bfsbench.bfs import bfs_simple
from bfsbench.onedcsr import build_csr, make_csr


def _depths(pred, root):
    depth = {}
    for v, p in enumerate(pred):
        if p == -1:
            continue
        d, cur = 0, v
        while cur != root:
            cur = pred[cur]
            d += 1
            assert d <= len(pred)
        depth[v] = d
    return depth


def _reference_depths(edges, n, root):
    adj = [set() for _ in range(n)]
    for a, b in edges:
        adj[a].add(b)
        adj[b].add(a)
    dist = {root: 0}
    queue = deque([root])
    while queue:
        v = queue.popleft()
        for w in adj[v]:
            if w not in dist:
                dist[w] = dist[v] + 1
                queue.append(w)
    return dist


EDGES = [(0, 1), (1, 2), (2, 3), (0, 4), (4, 3), (5, 6), (3, 3), (1, 2)]


def test_path_graph_predecessors():
    graph = build_csr([[(0, 1), (1, 2), (2, 3)]])
    assert bfs_simple(graph, 0) == [0, 0, 1, 2]


def test_root_is_own_parent_and_unreached_is_minus_one():
    graph = build_csr([EDGES])
    pred = bfs_simple(graph, 0)
    assert pred[0] == 0
    assert pred[5] == -1 and pred[6] == -1
    assert pred[7] == -1


def test_depths_match_reference_bfs():
    graph = build_csr([EDGES[:3], EDGES[3:]])
    for root in range(graph.nlocalverts):
        pred = bfs_simple(graph, root)
        assert _depths(pred, root) == _reference_depths(EDGES, graph.nlocalverts, root)


def test_parent_edges_exist():
    graph = build_csr([EDGES])
    pred = bfs_simple(graph, 2)
    for v, p in enumerate(pred):
        if p != -1 and v != 2:
            assert p in graph.neighbors(v)


def test_first_reaching_vertex_wins():
    graph = build_csr([[(0, 1), (0, 2), (1, 3), (2, 3)]])
    pred = bfs_simple(graph, 0)
    assert pred[3] == 1


@pytest.mark.parametrize("root", [-1, 4, 100])
def test_root_out_of_range(root):
    graph = build_csr([[(0, 1), (2, 3)]])
    with pytest.raises(ValueError):
        bfs_simple(graph, root)


def test_edge_leaving_range_is_rejected():
    graph = make_csr([(0, 9)], 2, 1)
    with pytest.raises(ValueError):
        bfs_simple(graph, 0)