"""Command-line interface and high-level pipelines for the N-Queens solver.

This module wires together configuration loading, the default run (solve one
board and print it), the scalability analysis and the quick regression
checks. It isolates I/O, argument parsing, and progress reporting from the
core algorithmic modules so that the rest of the codebase remains easy to test
programmatically.
"""
from __future__ import annotations

import argparse
import os
import tempfile
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from . import settings
from .experiments import run_scalability_experiments
from .plots import plot_and_save
from .reporting import save_raw_data_to_csv, save_results_to_csv
from config_manager import ConfigManager
from nqueens.backtracking import ENGINES, bt_nqueens_first, get_engine
from nqueens.board import Board, validate_size
from nqueens.render import render
from nqueens.utils import is_valid_solution


# ------------- Utils --------------------------------------------------------

def _positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


def _section(value: Any, name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a JSON object, got {value!r}")
    return value


def _list(value: Any, name: str) -> List[Any]:
    if not isinstance(value, list) or not value:
        raise ValueError(f"{name} must be a non-empty list, got {value!r}")
    return value


def _engine_name(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Engine names must be strings, got {value!r}")
    get_engine(value)
    return value


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and apply it to the ``settings`` module in place.

    Every value is validated before any setting changes, so a rejected file
    leaves ``settings`` untouched. Raises ``FileNotFoundError`` when the file
    is missing and ``ValueError`` when a section or value is unusable (wrong
    type, bad size, unknown engine, empty lists...).
    """
    config_mgr = ConfigManager(config_path)

    board_settings = _section(config_mgr.get_board_settings(), "board_settings")
    board_size = validate_size(board_settings.get("size", settings.BOARD_SIZE))
    glyph = board_settings.get("queen_glyph", settings.QUEEN_GLYPH)
    if not isinstance(glyph, str) or len(glyph) != 1:
        raise ValueError(f"queen_glyph must be a single character, got {glyph!r}")
    engine = _engine_name(board_settings.get("engine", settings.ENGINE))

    analysis_settings = _section(config_mgr.get_analysis_settings(), "analysis_settings")
    n_values = [validate_size(n) for n in _list(analysis_settings.get("N_values", settings.N_VALUES), "N_values")]
    runs = _positive_int(analysis_settings.get("runs_per_n", settings.RUNS_PER_N), "runs_per_n")
    engines = list(dict.fromkeys(
        _engine_name(name) for name in _list(analysis_settings.get("engines", settings.ENGINES), "engines")
    ))
    out_dir = analysis_settings.get("output_dir", settings.OUT_DIR)
    if not isinstance(out_dir, str) or not out_dir:
        raise ValueError(f"output_dir must be a non-empty string, got {out_dir!r}")
    date_in_filenames = analysis_settings.get("date_in_filenames", settings.DATE_IN_FILENAMES)
    if not isinstance(date_in_filenames, bool):
        raise ValueError(f"date_in_filenames must be true or false, got {date_in_filenames!r}")

    settings.BOARD_SIZE = board_size
    settings.QUEEN_GLYPH = glyph
    settings.ENGINE = engine
    settings.N_VALUES = sorted(set(n_values))
    settings.RUNS_PER_N = runs
    settings.ENGINES = engines
    settings.OUT_DIR = out_dir
    settings.DATE_IN_FILENAMES = date_in_filenames

    return config_mgr


# ------------- Default run --------------------------------------------------

def solve_board(size: int, engine: str = "recursive") -> tuple[Board, bool]:
    """Solve an empty ``size`` board with ``engine`` and return ``(board, solved)``."""
    board, solved, _, _ = bt_nqueens_first(size, engine)
    return board, solved


def print_solution(size: Optional[int] = None, engine: Optional[str] = None, queen: Optional[str] = None) -> bool:
    """Solve one board and write it to stdout.

    The board is printed whether or not the search succeeded; a failed search
    prints the empty grid. Returns the search outcome.
    """
    board, solved = solve_board(
        size if size is not None else settings.BOARD_SIZE,
        engine or settings.ENGINE,
    )
    print(render(board, queen or settings.QUEEN_GLYPH), end="")
    return solved


# ------------- Pipeline: analysis ------------------------------------------

def main_analysis(
    N_values: Optional[List[int]] = None,
    runs: Optional[int] = None,
    engines: Optional[List[str]] = None,
    out_dir: Optional[str] = None,
) -> None:
    """Run the scalability experiments and write CSV files and charts."""
    N_values = N_values or settings.N_VALUES
    engines = engines or settings.ENGINES
    out_dir = out_dir or settings.OUT_DIR
    os.makedirs(out_dir, exist_ok=True)

    print("\n============================================")
    print("BACKTRACKING SCALABILITY ANALYSIS")
    print("============================================")
    print(f"Board sizes: {N_values}")
    print(f"Engines: {', '.join(engines)}")

    start_total = perf_counter()
    results = run_scalability_experiments(
        N_values,
        runs or settings.RUNS_PER_N,
        engines,
        progress_label="Backtracking experiments",
    )

    save_results_to_csv(results, N_values, out_dir)
    save_raw_data_to_csv(results, N_values, out_dir)
    plot_and_save(results, N_values, out_dir)

    total_time = perf_counter() - start_total
    print("\nAnalysis pipeline completed.")
    print(f"Total time: {total_time:.1f}s")


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test for every engine at N=8.

    Verifies that:
    - Each engine finds the same valid solution with a positive node count.
    - A board without solutions (N=3) is left empty.
    - The experiment pipeline produces a non-empty CSV in a temporary folder.
    """
    print("Running quick regression tests (N=8) across all engines...")

    reference = None
    for name in sorted(ENGINES):
        board, solved, nodes, elapsed = bt_nqueens_first(8, name)
        if not solved:
            raise AssertionError(f"{name} failed to find a solution for N=8.")
        if nodes <= 0:
            raise AssertionError(f"{name} returned invalid nodes count: {nodes}.")
        if not is_valid_solution(board):
            raise AssertionError(f"{name} returned an invalid solution for N=8: {board.positions()}.")
        if reference is not None and board != reference:
            raise AssertionError(f"{name} disagrees with the other engines for N=8: {board.positions()}.")
        reference = board
        print(f"  [BT] {name}: solution found, nodes={nodes}, time={elapsed:.4f}s")

        empty, solved, _, _ = bt_nqueens_first(3, name)
        if solved or empty.occupied_count() != 0:
            raise AssertionError(f"{name} did not restore the board after exhausting N=3.")

    results = run_scalability_experiments([4, 8], runs=1, engines=sorted(ENGINES))
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(save_results_to_csv(results, [4, 8], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Results CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Solve the N-Queens problem by backtracking and print the board.")
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file (default: built-in settings).")
    parser.add_argument(
        "--engine",
        choices=sorted(ENGINES),
        default=None,
        help="Search engine: recursive (default) or iterative (explicit stack).",
    )
    parser.add_argument("--analyze", action="store_true", help="Run the scalability analysis instead of printing one board.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests (N=8) and exit.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    if args.config is not None:
        try:
            apply_configuration(args.config)
        except FileNotFoundError as exc:
            print(f"Configuration file not found: {exc}")
            raise SystemExit(1) from exc
        except ValueError as exc:
            print(f"Configuration error: {exc}")
            raise SystemExit(1) from exc

    if args.engine is not None:
        settings.ENGINE = args.engine

    try:
        if args.analyze:
            engines = [args.engine] if args.engine is not None else None
            main_analysis(engines=engines)
        else:
            print_solution()
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except ValueError as exc:
        print(f"Execution error: {exc}")
        raise SystemExit(1) from exc
