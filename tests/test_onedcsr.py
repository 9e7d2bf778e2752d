from collections import Counter

import pytest

from bfsbench.onedcsr import LocalCSR, build_csr, lg_int64, make_csr, merge_csr


def _pairs(g):
    return Counter((v, w) for v in range(g.nlocalverts) for w in g.neighbors(v))


@pytest.mark.parametrize("k", range(0, 20))
def test_lg_int64_powers_of_two(k):
    assert lg_int64(2 ** k) == k
    assert lg_int64(2 ** k + 1) == k + 1


@pytest.mark.parametrize("x", [0, -3])
def test_lg_int64_rejects_non_positive(x):
    with pytest.raises(ValueError):
        lg_int64(x)


def test_make_csr_rows_keep_input_order():
    edges = [(0, 3), (2, 0), (0, 1)]
    g = make_csr(edges, 4, 2)
    assert g.neighbors(0) == [3, 1]
    assert g.neighbors(2) == [0]
    assert g.neighbors(1) == []
    assert g.nlocalverts == 4
    assert g.nlocaledges == 3
    assert g.nglobalverts == 4
    assert _pairs(g) == Counter(edges)


def test_make_csr_rejects_out_of_range_source():
    with pytest.raises(ValueError):
        make_csr([(4, 0)], 4, 2)


def test_rowstarts_are_monotonic_prefix_sums():
    edges = [(1, 0), (1, 2), (3, 3), (0, 1)]
    g = make_csr(edges, 4, 2)
    assert g.rowstarts[0] == 0
    assert g.rowstarts[-1] == len(edges)
    assert all(x <= y for x, y in zip(g.rowstarts, g.rowstarts[1:]))


def test_merge_puts_b_entries_before_a_entries():
    b = make_csr([(0, 1), (1, 0)], 2, 1)
    a = make_csr([(0, 3), (3, 0), (1, 2)], 4, 2)
    m = merge_csr(b, a)
    assert m.nlocalverts == 4
    assert m.lg_nglobalverts == 2
    assert m.neighbors(0) == [1, 3]
    assert m.neighbors(1) == [0, 2]
    assert m.neighbors(3) == [0]
    assert _pairs(m) == _pairs(a) + _pairs(b)


def test_merge_with_smaller_a_keeps_size():
    b = make_csr([(3, 1), (0, 2)], 4, 2)
    a = make_csr([(1, 0)], 2, 1)
    m = merge_csr(b, a)
    assert m.nlocalverts == b.nlocalverts
    assert m.lg_nglobalverts == b.lg_nglobalverts
    assert _pairs(m) == _pairs(a) + _pairs(b)


def test_merge_into_empty():
    a = make_csr([(1, 0)], 2, 1)
    m = merge_csr(LocalCSR(), a)
    assert m == a


def test_build_csr_is_symmetric_and_complete():
    blocks = [[(0, 1), (1, 2)], [(5, 3), (2, 2)], [(7, 0)]]
    g = build_csr(blocks)
    all_edges = [e for block in blocks for e in block]
    assert g.nlocaledges == 2 * len(all_edges)
    assert g.nglobalverts == 8
    assert g.nlocalverts == g.nglobalverts
    pairs = _pairs(g)
    for (v, w), n in pairs.items():
        assert pairs[(w, v)] == n
    expected = Counter()
    for v0, v1 in all_edges:
        expected[(v0, v1)] += 1
        expected[(v1, v0)] += 1
    assert pairs == expected


def test_build_csr_empty():
    g = build_csr([])
    assert g.nlocalverts == 0
    assert g.nglobalverts == 0
    with pytest.raises(ValueError):
        g.neighbors(0)


def test_build_csr_rejects_negative_endpoint():
    with pytest.raises(ValueError):
        build_csr([[(0, -1)]])