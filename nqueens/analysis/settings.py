"""Global settings for the N-Queens solver and its analysis pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`nqueens.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from datetime import datetime
from typing import List

# Board used by the default run
BOARD_SIZE: int = 8
QUEEN_GLYPH: str = "♕"
ENGINE: str = "recursive"

# Board sizes to evaluate (in ascending order) for scalability analysis
N_VALUES: List[int] = [1, 2, 3, 4, 5, 6, 7, 8, 10, 12]

# Repetitions per N; the search is deterministic, repeats only smooth timings
RUNS_PER_N: int = 3

# Engines compared by the analysis pipeline
ENGINES: List[str] = ["recursive", "iterative"]

# Output directory for CSV and charts
OUT_DIR: str = "results_nqueens_backtracking"

# Output naming policy --------------------------------------------------------

# When True, results and plots include a datestamp suffix (e.g., _20251113-142530)
# applied consistently across all artifacts produced within the same run.
DATE_IN_FILENAMES: bool = False

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")


def filename_suffix() -> str:
    """Return the suffix appended to every artifact name of this run."""
    return f"_{RUN_ID}" if DATE_IN_FILENAMES else ""
