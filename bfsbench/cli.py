"""Benchmark driver: generate a graph, run BFS from sampled roots, report."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .bfs import bfs_simple
from .onedcsr import build_csr, make_csr, merge_csr
from .options import A_PARAM, B_PARAM, C_PARAM, _strtol
from .rmat import rmat_edgelist
from .stats import format_report
from .validate import validate_bfs_result

NUM_BFS_ROOTS = 64
DEFAULT_SCALE = 16
DEFAULT_EDGEFACTOR = 16

_SEED1 = 2
_SEED2 = 3
DEFAULT_SEED = (_SEED1 << 64) | _SEED2

_USAGE = (
    "Usage: {prog} SCALE edgefactor\n"
    "  SCALE = log_2(# vertices) [integer, required]\n"
    "  edgefactor = (# edges) / (# vertices) = .5 * (average vertex degree)"
    " [integer, defaults to 16]\n"
    "(Random number seed and Kronecker initiator are fixed in the driver)\n"
)

INVALID_RUN_TEXT = "No results printed for invalid run.\n"


def choose_roots(edges: Iterable[tuple[int, int]], nglobalverts: int,
                 count: int, rng: random.Random) -> list[int]:
    """Pick ``count`` BFS roots among vertices with a non-self-loop edge.

    Candidates are drawn two random numbers at a time. Once more than
    ``2 * nglobalverts`` numbers have been drawn in total, every further
    root is the next candidate as drawn, whether or not it qualifies.
    """
    if nglobalverts <= 0:
        raise ValueError("the graph needs at least one vertex")
    if count < 0:
        raise ValueError("root count must be non-negative")
    has_edge = set()
    for src, tgt in edges:
        if src != tgt:
            has_edge.add(src)
            has_edge.add(tgt)

    roots: list[int] = []
    counter = 0
    for _ in range(count):
        while True:
            d0, d1 = rng.random(), rng.random()
            root = int((d0 + d1) * nglobalverts) % nglobalverts
            counter += 2
            if counter > 2 * nglobalverts:
                break
            if root in roots:
                continue
            if root in has_edge:
                break
        roots.append(root)
    return roots


@dataclass
class BenchmarkResult:
    """Timings and counts from one benchmark run.

    The per-BFS lists hold one entry for every run completed; a run whose
    validation fails is the last one recorded.
    """

    scale: int
    edgefactor: int
    generation_time: float
    construction_time: float
    nlocalverts: int
    roots: list[int] = field(default_factory=list)
    bfs_times: list[float] = field(default_factory=list)
    validate_times: list[float] = field(default_factory=list)
    edge_counts: list[int] = field(default_factory=list)
    passed: bool = True
    errors: list[str] = field(default_factory=list)

    def report(self) -> str:
        """Return the result block, or the notice for an invalid run."""
        if not self.passed:
            return INVALID_RUN_TEXT
        return format_report(
            self.scale,
            self.edgefactor,
            self.generation_time,
            self.construction_time,
            self.bfs_times,
            [float(c) for c in self.edge_counts],
            self.validate_times,
        )


def run_benchmark(scale: int, edgefactor: int, seed: int) -> BenchmarkResult:
    """Generate the graph, run every BFS and validate each result."""
    if scale <= 0:
        raise ValueError("scale must be positive")
    if edgefactor <= 0:
        raise ValueError("edge factor must be positive")
    nglobaledges = edgefactor << scale
    nglobalverts = 1 << scale

    start = time.perf_counter()
    edges = rmat_edgelist(nglobaledges, scale, A_PARAM, B_PARAM, C_PARAM,
                          random.Random(seed))
    roots = choose_roots(edges, nglobalverts, NUM_BFS_ROOTS,
                         random.Random(f"roots-{seed}"))
    max_used_vertex = max((max(s, t) for s, t in edges if s != t), default=0)
    generation_time = time.perf_counter() - start

    start = time.perf_counter()
    graph = build_csr([edges])
    if graph.nlocalverts < nglobalverts:
        graph = merge_csr(graph, make_csr([], nglobalverts, scale))
    construction_time = time.perf_counter() - start

    result = BenchmarkResult(
        scale=scale,
        edgefactor=edgefactor,
        generation_time=generation_time,
        construction_time=construction_time,
        nlocalverts=graph.nlocalverts,
    )
    for root in roots:
        start = time.perf_counter()
        pred = bfs_simple(graph, root)
        bfs_time = time.perf_counter() - start

        start = time.perf_counter()
        check = validate_bfs_result(edges, max_used_vertex + 1, root, pred)
        validate_time = time.perf_counter() - start

        result.roots.append(root)
        result.bfs_times.append(bfs_time)
        result.validate_times.append(validate_time)
        result.edge_counts.append(check.edge_visit_count)
        if not check.passed:
            result.passed = False
            result.errors.extend(check.errors)
            break
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark from ``SCALE [edgefactor]`` arguments."""
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "bfsbench"
    args = list(sys.argv[1:] if argv is None else argv)

    scale = DEFAULT_SCALE
    edgefactor = DEFAULT_EDGEFACTOR
    if len(args) >= 1:
        scale = _strtol(args[0])[0]
    if len(args) >= 2:
        edgefactor = _strtol(args[1])[0]
    if not 1 <= len(args) <= 2 or scale == 0 or edgefactor == 0:
        sys.stderr.write(_USAGE.format(prog=prog))
        return 1
    if scale < 0 or edgefactor < 0:
        sys.stderr.write(_USAGE.format(prog=prog))
        return 1

    result = run_benchmark(scale, edgefactor, DEFAULT_SEED)

    err = sys.stderr
    err.write(f"graph_generation:               {result.generation_time:f} s\n")
    err.write(f"construction_time:              {result.construction_time:f} s\n")
    print(f"nlocalverts: {result.nlocalverts}")
    for index, (bfs_time, validate_time, count) in enumerate(
        zip(result.bfs_times, result.validate_times, result.edge_counts)
    ):
        err.write(f"Running BFS {index}\n")
        err.write(f"Time for BFS {index} is {bfs_time:f}\n")
        err.write(f"Validating BFS {index}\n")
        err.write(f"Validate time for BFS {index} is {validate_time:f}\n")
        teps = count / bfs_time if bfs_time > 0 else float("inf")
        err.write(f"TEPS for BFS {index} is {teps:g}\n")
    for message in result.errors:
        err.write(message + "\n")
    if not result.passed:
        err.write("Validation failed for this BFS root; skipping rest.\n")

    sys.stdout.write(result.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())