# bfsbench

A breadth-first search graph benchmark in pure Python. It generates a random
scale-free (R-MAT) graph, builds compressed sparse row (CSR) adjacency from
it, runs BFS from a set of sampled roots, checks every resulting BFS tree, and
reports timing and traversed-edges-per-second (TEPS) statistics.

## Installation

```
pip install .
```

Install with the `test` extra if you want to run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
bfsbench SCALE [EDGEFACTOR]
```

* `SCALE` is log2 of the number of vertices. It is required.
* `EDGEFACTOR` is the number of edges divided by the number of vertices, which
  is half the average vertex degree. It defaults to 16.

Without a `SCALE`, with more than two arguments, or with a zero or negative
value, the command prints a usage message to standard error and exits with
status 1.

The random seed and the R-MAT parameters (A = 0.57, B = 0.19, C = 0.19) are
fixed, so repeated runs with the same arguments build the same graph and
pick the same 64 BFS roots.

Progress goes to standard error. The report goes to standard output as
`key: value` lines: `SCALE`, `edgefactor`, `NBFS`, `graph_generation`,
`num_mpi_processes` (always 1), `construction_time`; the min, quartiles,
median, max, mean and standard deviation of the BFS times (`*_time`) and
visited edge counts (`*_nedge`); the TEPS figures (`min_TEPS` through
`max_TEPS`, `harmonic_mean_TEPS`, `harmonic_stddev_TEPS`); and the same
statistics for the validation times (`*_validate`). If a BFS tree fails
validation, the remaining roots are skipped and the report is replaced by
`No results printed for invalid run.`

## Library use

```python
from bfsbench.cli import run_benchmark

result = run_benchmark(scale=8, edgefactor=16, seed=1)
print(result.report())
```

`run_benchmark` returns a `BenchmarkResult` holding the timings, the roots
used, the visited edge counts, whether validation passed and any validation
errors.

The modules can also be used on their own:

* `bfsbench.options`: `parse_options` reads generator options (`-s` scale,
  `-e` edge factor, `-A/-B/-C/-D` R-MAT parameters, `-R`, `-V`, `-o`, `-r`,
  `-v`, `-h`) into an `Options` value, normalising the R-MAT parameters as
  described by `usage_text`. It raises `OptionsError` listing every problem.
* `bfsbench.prng`: `make_mrg_seed` spreads a 64-bit seed into five nonzero
  seed values, and `seed_from_environment` reads a seed from the `SEED`
  environment variable, falling back to `0xDECAFBAD`.
* `bfsbench.rmat`: `rmat_edgelist` generates a randomly permuted R-MAT edge
  list from any object with a `random()` method, such as `random.Random`.
  It is built from `rmat_edge`, `randpermute`, `permute_vertex_labels` and
  `permute_edgelist`.
* `bfsbench.csr`: `CSRGraph.from_edgelist` builds an undirected graph with
  duplicate edges, self-loops and negative endpoints removed; the graph
  offers `neighbors` and `bfs_tree`.
* `bfsbench.onedcsr`: `make_csr`, `merge_csr` and `build_csr` build a
  `LocalCSR` block by block, storing each edge in both directions;
  `lg_int64` gives a ceiling log2.
* `bfsbench.bfs`: `bfs_simple` is a level-synchronous BFS with two queues.
  It is the kernel the command line uses.
* `bfsbench.bitmap_bfs`: `bfs_bitmap` is a BFS that keeps its queues as
  bitmaps and picks the smallest predecessor within a level, built on
  `atomic_min` and `atomic_or`.
* `bfsbench.validate`: `validate_bfs_result` checks a predecessor map
  against the edge list and returns a `ValidationResult` with the visited
  edge count, the depths and any errors. `get_pred_from_entry`,
  `get_depth_from_entry` and `with_depth` work on packed 48-bit
  predecessor / 16-bit depth entries.
* `bfsbench.stats`: `get_statistics` returns `Statistics`, and
  `format_report` renders the full report.
* `bfsbench.cli`: `choose_roots`, `run_benchmark` and `main`.

## What it does not do

* Everything runs in one process; there is no distributed or parallel run.
* The command line does not use `bfsbench.options` or the `SEED` variable;
  it takes only `SCALE` and `EDGEFACTOR`. The `-o` and `-r` options are
  only recorded in `Options`: nothing reads or writes edge-list or root
  files, and the edge list is kept in memory.
* There is no Kronecker generator; graphs come from the R-MAT generator,
  driven by Python's `random.Random`. `make_mrg_seed` only computes seed
  values and there is no multiple-recursive generator to feed them to.