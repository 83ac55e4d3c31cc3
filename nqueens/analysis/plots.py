"""Visualization utilities for analysis outputs.

Overview
--------
This module contains plotting helpers that generate PNG charts from the
aggregated experiment results produced by the analysis pipeline.

Inputs and data contract
------------------------
- The primary input is an ``ExperimentResults`` mapping ``engine -> N ->
    BTEntry`` (see ``nqueens.analysis.stats``).
- Functions also accept an ordered list of ``N_values`` that determines the
    x-axis for every chart.

Chart map
---------
- 01_nodes_vs_N.png — Explored nodes vs N (log scale)
    - What: Hardware-independent search effort as the board grows.
    - Dashed line: exponential fit ``nodes ≈ exp(a*N + b)`` over solvable N.
- 02_time_vs_N.png — Mean wall time vs N (log scale), ±1σ error bars.
- 03_time_per_node_vs_N.png — Mean time divided by nodes vs N.
    - What: Should stay roughly flat; growth means per-node cost depends on N
      (the safety scans are O(N)).
"""
from __future__ import annotations

import os
from typing import List

import matplotlib.pyplot as plt
import numpy as np

from . import settings
from .stats import ExperimentResults

_MARKERS = ["o", "s", "^", "D"]


def _series(results: ExperimentResults, engine: str, N_values: List[int], key: str) -> np.ndarray:
    return np.array([float(results[engine][N][key]) for N in N_values])


def _mean_times(results: ExperimentResults, engine: str, N_values: List[int]) -> np.ndarray:
    return np.array([float(results[engine][N]["time"].get("mean") or 0.0) for N in N_values])


def _std_times(results: ExperimentResults, engine: str, N_values: List[int]) -> np.ndarray:
    return np.array([float(results[engine][N]["time"].get("std") or 0.0) for N in N_values])


def exponential_fit(N_values: List[int], nodes: np.ndarray) -> tuple[float, float]:
    """Fit ``log(nodes) = a*N + b`` and return ``(a, b)``.

    Requires at least two points with positive node counts.
    """
    xs = np.asarray(N_values, dtype=float)
    mask = nodes > 0
    if mask.sum() < 2:
        raise ValueError("Exponential fit needs at least two positive node counts.")
    a, b = np.polyfit(xs[mask], np.log(nodes[mask]), 1)
    return float(a), float(b)


def plot_and_save(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Generate the chart set described in the module docstring.

    Returns the list of PNG paths written into ``out_dir``.
    """
    os.makedirs(out_dir, exist_ok=True)
    suffix = settings.filename_suffix()
    engines = [engine for engine in results if all(N in results[engine] for N in N_values)]
    saved: List[str] = []

    plt.figure(figsize=(12, 8))
    for i, engine in enumerate(engines):
        nodes = _series(results, engine, N_values, "nodes")
        plt.semilogy(N_values, np.maximum(nodes, 1), marker=_MARKERS[i % len(_MARKERS)], linewidth=2, markersize=8, label=f"BT-{engine}")
    if engines:
        solvable = [N for N in N_values if results[engines[0]][N]["solution_found"]]
        if len(solvable) >= 2:
            nodes = _series(results, engines[0], solvable, "nodes")
            a, b = exponential_fit(solvable, nodes)
            x_trend = np.linspace(min(solvable), max(solvable), 100)
            plt.semilogy(x_trend, np.exp(a * x_trend + b), "--", alpha=0.7, label=f"fit: exp({a:.2f}·N)")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Explored nodes (log scale)", fontsize=12)
    plt.title("Search Effort vs Problem Size\n(tentative placements until the first solution)", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    fname = os.path.join(out_dir, f"01_nodes_vs_N{suffix}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved nodes chart: {fname}")
    saved.append(fname)

    plt.figure(figsize=(12, 8))
    for i, engine in enumerate(engines):
        means = np.maximum(_mean_times(results, engine, N_values), 1e-7)
        stds = _std_times(results, engine, N_values)
        plt.errorbar(N_values, means, yerr=stds, marker=_MARKERS[i % len(_MARKERS)], linewidth=2, markersize=8, capsize=4, label=f"BT-{engine}")
    plt.yscale("log")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Mean time [s] (log scale)", fontsize=12)
    plt.title("Execution Time vs Problem Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    fname = os.path.join(out_dir, f"02_time_vs_N{suffix}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved execution-time chart: {fname}")
    saved.append(fname)

    plt.figure(figsize=(12, 8))
    for i, engine in enumerate(engines):
        nodes = np.maximum(_series(results, engine, N_values, "nodes"), 1)
        per_node = _mean_times(results, engine, N_values) / nodes
        plt.plot(N_values, per_node, marker=_MARKERS[i % len(_MARKERS)], linewidth=2, markersize=8, label=f"BT-{engine}")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Time per node [s/node]", fontsize=12)
    plt.title("Time per Explored Node vs Problem Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    fname = os.path.join(out_dir, f"03_time_per_node_vs_N{suffix}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved time-per-node chart: {fname}")
    saved.append(fname)

    return saved
