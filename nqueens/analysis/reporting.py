"""CSV export utilities for experiment outputs (aggregates and raw runs).

These helpers materialize concise CSV summaries as well as full per-run raw
data for downstream analysis or spreadsheet inspection.
"""
from __future__ import annotations

import csv
import os
from typing import List

from . import settings
from .stats import ExperimentResults


def _present_N(results: ExperimentResults, engine: str, N_values: List[int]) -> List[int]:
    return [N for N in N_values if N in results.get(engine, {})]


def save_results_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write compact per-N, per-engine aggregate metrics to CSV.

    Returns the path of the written file.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_backtracking{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "n",
            "engine",
            "solution_found",
            "valid",
            "nodes_explored",
            "backtracks",
            "max_depth",
            "runs",
            "time_mean",
            "time_median",
            "time_std",
            "time_min",
            "time_max",
            "time_q25",
            "time_q75",
            "time_range",
            "positions",
        ])
        for engine in results:
            for N in _present_N(results, engine, N_values):
                entry = results[engine][N]
                time_stats = entry["time"]
                writer.writerow([
                    N,
                    engine,
                    int(entry["solution_found"]),
                    int(entry["valid"]),
                    entry["nodes"],
                    entry["backtracks"],
                    entry["max_depth"],
                    time_stats.get("count", 0),
                    time_stats.get("mean", ""),
                    time_stats.get("median", ""),
                    time_stats.get("std", ""),
                    time_stats.get("min", ""),
                    time_stats.get("max", ""),
                    time_stats.get("q25", ""),
                    time_stats.get("q75", ""),
                    time_stats.get("range", ""),
                    " ".join(str(col) for col in entry["positions"]),
                ])

    print(f"CSV saved: {filename}")
    return filename


def save_raw_data_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write one row per individual run.

    Returns the path of the written file.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_backtracking{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["n", "engine", "run", "solution_found", "nodes_explored", "backtracks", "time_seconds"])
        for engine in results:
            for N in _present_N(results, engine, N_values):
                for run, record in enumerate(results[engine][N]["raw_runs"], start=1):
                    writer.writerow([
                        N,
                        engine,
                        run,
                        int(record["solution_found"]),
                        record["nodes"],
                        record["backtracks"],
                        record["time"],
                    ])

    print(f"Raw data saved: {filename}")
    return filename
