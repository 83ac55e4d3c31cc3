"""
Analysis and orchestration package for the N-Queens solver.

This package contains:
- settings: global knobs for the default run and the analysis
- stats: typed summaries and aggregation helpers
- experiments: scalability runners for the backtracking engines
- reporting: CSV exports and raw-data writers
- plots: visualization utilities
- cli: top-level pipeline entry points and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    TimingSummary,
    BTRecord,
    BTEntry,
    ExperimentResults,
    summarize_timings,
    ProgressPrinter,
)

__all__ = [
    # types
    "TimingSummary",
    "BTRecord",
    "BTEntry",
    "ExperimentResults",
    # utils
    "summarize_timings",
    "ProgressPrinter",
    # settings module
    "settings",
]
