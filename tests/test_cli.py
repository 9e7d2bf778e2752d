import random

import pytest

from bfsbench.cli import (
    INVALID_RUN_TEXT,
    NUM_BFS_ROOTS,
    choose_roots,
    main,
    run_benchmark,
)


def _ring(n):
    return [(v, (v + 1) % n) for v in range(n)]


def test_choose_roots_count_and_range():
    edges = _ring(64)
    roots = choose_roots(edges, 64, 10, random.Random(7))
    assert len(roots) == 10
    assert all(0 <= r < 64 for r in roots)


def test_choose_roots_distinct_and_with_edges():
    edges = [(0, 1), (2, 3), (4, 5), (6, 7)] + [(v, v) for v in range(8, 1000)]
    roots = choose_roots(edges, 1000, 3, random.Random(11))
    assert len(roots) == 3
    assert len(set(roots)) == 3
    assert set(roots) <= set(range(8))


def test_choose_roots_deterministic():
    edges = _ring(128)
    first = choose_roots(edges, 128, 20, random.Random(5))
    second = choose_roots(edges, 128, 20, random.Random(5))
    assert first == second


def test_choose_roots_without_edges_still_fills():
    roots = choose_roots([(1, 1)], 4, 5, random.Random(3))
    assert len(roots) == 5
    assert all(0 <= r < 4 for r in roots)


def test_choose_roots_rejects_empty_graph():
    with pytest.raises(ValueError):
        choose_roots([], 0, 1, random.Random(1))


def test_run_benchmark_invariants():
    result = run_benchmark(6, 8, 12345)
    nedges = 8 << 6
    n = len(result.bfs_times)
    assert 1 <= n <= NUM_BFS_ROOTS
    assert len(result.validate_times) == n
    assert len(result.edge_counts) == n
    assert len(result.roots) == n
    assert all(0 <= c <= nedges for c in result.edge_counts)
    assert result.passed == (not result.errors)
    assert result.nlocalverts == 1 << 6
    if result.passed:
        assert n == NUM_BFS_ROOTS


def test_run_benchmark_deterministic():
    a = run_benchmark(5, 4, 99)
    b = run_benchmark(5, 4, 99)
    assert a.roots == b.roots
    assert a.edge_counts == b.edge_counts
    assert a.passed == b.passed


def test_run_benchmark_report_form():
    result = run_benchmark(6, 16, 7)
    report = result.report()
    if result.passed:
        assert report.startswith("SCALE:                          6\n")
        assert "edgefactor:                     16\n" in report
    else:
        assert report == INVALID_RUN_TEXT


@pytest.mark.parametrize("scale,edgefactor", [(0, 4), (4, 0), (-1, 4)])
def test_run_benchmark_rejects_bad_sizes(scale, edgefactor):
    with pytest.raises(ValueError):
        run_benchmark(scale, edgefactor, 1)


@pytest.mark.parametrize("argv", [[], ["0"], ["4", "0"], ["4", "2", "3"], ["abc"]])
def test_main_usage_errors(argv, capsys):
    assert main(argv) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_runs(capsys):
    assert main(["5", "4"]) == 0
    out = capsys.readouterr().out
    assert "nlocalverts: 32" in out
    assert "SCALE:                          5" in out or INVALID_RUN_TEXT in out