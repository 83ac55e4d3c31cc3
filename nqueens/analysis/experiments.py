"""Scalability experiment runners for the backtracking engines.

For every requested board size these routines run each engine a fixed number
of times on a fresh empty board, record effort counters and wall time, and
shape the outcome into dictionaries suitable for CSV export and plotting.
"""
from __future__ import annotations

from time import perf_counter
from typing import List, Optional

from .stats import BTEntry, BTRecord, ExperimentResults, ProgressPrinter, summarize_timings
from nqueens.backtracking import SearchStats, get_engine
from nqueens.board import Board
from nqueens.utils import is_valid_solution


def run_single_bt_experiment(size: int, engine: str) -> tuple[BTRecord, Board]:
    """Run one engine once on an empty ``size`` board."""
    search = get_engine(engine)
    board = Board(size)
    stats = SearchStats()
    start = perf_counter()
    solved = search(size, board, stats)
    elapsed = perf_counter() - start
    record: BTRecord = {
        "solution_found": solved,
        "valid": is_valid_solution(board) if solved else board.occupied_count() == 0,
        "nodes": stats.nodes,
        "backtracks": stats.backtracks,
        "max_depth": stats.max_depth,
        "time": elapsed,
    }
    return record, board


def summarize_runs(records: List[BTRecord], board: Board) -> BTEntry:
    """Collapse repeated runs of a deterministic search into one entry.

    Effort counters come from the first run; all runs must agree on them.
    """
    first = records[0]
    for record in records[1:]:
        if (record["nodes"], record["backtracks"], record["solution_found"]) != (
            first["nodes"],
            first["backtracks"],
            first["solution_found"],
        ):
            raise AssertionError("Repeated runs of a deterministic search disagree on effort counters.")
    return {
        "solution_found": first["solution_found"],
        "valid": all(r["valid"] for r in records),
        "nodes": first["nodes"],
        "backtracks": first["backtracks"],
        "max_depth": first["max_depth"],
        "time": summarize_timings([r["time"] for r in records]),
        "positions": board.positions(),
        "raw_runs": records,
    }


def run_scalability_experiments(
    N_values: List[int],
    runs: int,
    engines: List[str],
    progress_label: Optional[str] = None,
) -> ExperimentResults:
    """Run every engine ``runs`` times for each N in ``N_values``.

    Returns a mapping ``engine -> N -> BTEntry``.
    """
    if runs < 1:
        raise ValueError(f"Runs per N must be >= 1, got {runs}")
    for engine in engines:
        get_engine(engine)

    results: ExperimentResults = {engine: {} for engine in engines}
    progress = ProgressPrinter(len(N_values), progress_label) if progress_label else None

    for index, N in enumerate(N_values, start=1):
        if progress:
            progress.update(index, f"N={N}")
        for engine in engines:
            records: List[BTRecord] = []
            board = None
            for _ in range(runs):
                record, board = run_single_bt_experiment(N, engine)
                records.append(record)
            entry = summarize_runs(records, board)
            results[engine][N] = entry
            status = "solved" if entry["solution_found"] else "no solution"
            print(
                f"  [BT-{engine}] N={N}: {status}, nodes={entry['nodes']}, "
                f"backtracks={entry['backtracks']}, mean time={entry['time']['mean']:.6f}s"
            )

    return results
