"""Summary statistics and the benchmark's result report."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Statistics:
    """Order statistics, mean and sample standard deviation of a sample."""

    minimum: float
    firstquartile: float
    median: float
    thirdquartile: float
    maximum: float
    mean: float
    std: float


def _div(num: float, den: float) -> float:
    """Divide with IEEE results for a zero denominator."""
    if den != 0:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def get_statistics(values: Sequence[float]) -> Statistics:
    """Compute quartiles, mean and standard deviation (n - 1 divisor).

    A single value gives a NaN standard deviation.
    """
    xs = [float(v) for v in values]
    n = len(xs)
    if n == 0:
        raise ValueError("statistics need at least one value")
    mean = sum(xs) / n
    variance = _div(sum((x - mean) * (x - mean) for x in xs), n - 1)
    std = math.sqrt(variance) if not math.isnan(variance) else math.nan
    xx = sorted(xs)
    return Statistics(
        minimum=xx[0],
        firstquartile=(xx[(n - 1) // 4] + xx[n // 4]) * 0.5,
        median=(xx[(n - 1) // 2] + xx[n // 2]) * 0.5,
        thirdquartile=(xx[n - 1 - (n - 1) // 4] + xx[n - 1 - n // 4]) * 0.5,
        maximum=xx[n - 1],
        mean=mean,
        std=std,
    )


def _line(key: str, text: str) -> str:
    return f"{key + ':':<32}{text}"


def _g(value: float) -> str:
    return "%g" % value


def _g11(value: float) -> str:
    return "%.11g" % value


def _stat_lines(suffix: str, stats: Statistics, fmt) -> list[str]:
    return [
        _line(f"min_{suffix}", fmt(stats.minimum)),
        _line(f"firstquartile_{suffix}", fmt(stats.firstquartile)),
        _line(f"median_{suffix}", fmt(stats.median)),
        _line(f"thirdquartile_{suffix}", fmt(stats.thirdquartile)),
        _line(f"max_{suffix}", fmt(stats.maximum)),
        _line(f"mean_{suffix}", fmt(stats.mean)),
        _line(f"stddev_{suffix}", fmt(stats.std)),
    ]


def format_report(scale: int, edgefactor: int, generation_time: float,
                  construction_time: float, bfs_times: Sequence[float],
                  edge_counts: Sequence[float],
                  validate_times: Sequence[float]) -> str:
    """Render the "key: value" result block for a valid run."""
    nbfs = len(bfs_times)
    if nbfs == 0:
        raise ValueError("the report needs at least one BFS run")
    if len(edge_counts) != nbfs or len(validate_times) != nbfs:
        raise ValueError("every BFS run needs a time, an edge count and a validation time")

    lines = [
        _line("SCALE", str(scale)),
        _line("edgefactor", str(edgefactor)),
        _line("NBFS", str(nbfs)),
        _line("graph_generation", _g(generation_time)),
        _line("num_mpi_processes", "1"),
        _line("construction_time", _g(construction_time)),
    ]
    lines += _stat_lines("time", get_statistics(bfs_times), _g)
    lines += _stat_lines("nedge", get_statistics(edge_counts), _g11)

    secs_per_edge = [_div(float(t), float(e)) for t, e in zip(bfs_times, edge_counts)]
    s = get_statistics(secs_per_edge)
    harmonic_std = _div(s.std, s.mean * s.mean * math.sqrt(nbfs - 1))
    lines += [
        _line("min_TEPS", _g(_div(1.0, s.maximum))),
        _line("firstquartile_TEPS", _g(_div(1.0, s.thirdquartile))),
        _line("median_TEPS", _g(_div(1.0, s.median))),
        _line("thirdquartile_TEPS", _g(_div(1.0, s.firstquartile))),
        _line("max_TEPS", _g(_div(1.0, s.minimum))),
        _line("harmonic_mean_TEPS", _g(_div(1.0, s.mean))),
        _line("harmonic_stddev_TEPS", _g(harmonic_std)),
    ]
    lines += _stat_lines("validate", get_statistics(validate_times), _g)
    return "\n".join(lines) + "\n"