"""Typed result shapes and statistics helpers for the analysis pipeline.

Defines ``TypedDict`` structures for experiment outputs and provides utilities
to compute aggregate statistics across repeated runs.
"""
from __future__ import annotations

import statistics
from time import perf_counter
from typing import Dict, List, Optional, TypedDict


class TimingSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class BTRecord(TypedDict):
    solution_found: bool
    valid: bool
    nodes: int
    backtracks: int
    max_depth: int
    time: float


class BTEntry(TypedDict):
    solution_found: bool
    valid: bool
    nodes: int
    backtracks: int
    max_depth: int
    time: TimingSummary
    positions: List[int]
    raw_runs: List[BTRecord]


# engine label -> N -> aggregated entry
ExperimentResults = Dict[str, Dict[int, BTEntry]]


class ProgressPrinter:
    """Print one stdout line per step of an experiment loop, with elapsed time.

    ``total`` values <= 0 are treated as 1.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label
        self._start = perf_counter()

    def update(self, index: int, detail: str = "") -> None:
        elapsed = perf_counter() - self._start
        line = f"[{self.label}] step {index} of {self.total}, {elapsed:.1f}s elapsed"
        if detail:
            line += f" ({detail})"
        print(line)


def summarize_timings(values: List[float]) -> TimingSummary:
    """Summarize repeated wall-time measurements of one search.

    Quartiles use the inclusive method of ``statistics.quantiles``; a single
    measurement is its own quartiles. An empty input yields ``count`` 0 and
    ``None`` everywhere else so CSV rows keep their shape.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    if len(values) > 1:
        q25, _, q75 = statistics.quantiles(values, n=4, method="inclusive")
        spread = statistics.pstdev(values)
    else:
        q25 = q75 = values[0]
        spread = 0.0

    fastest, slowest = min(values), max(values)
    return {
        "count": len(values),
        "mean": statistics.fmean(values),
        "median": statistics.median(values),
        "std": spread,
        "min": fastest,
        "max": slowest,
        "q25": q25,
        "q75": q75,
        "range": slowest - fastest,
    }
