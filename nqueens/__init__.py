"""N-Queens backtracking solver and board rendering."""

from .backtracking import (
    ENGINES,
    SearchStats,
    bt_nqueens_first,
    get_engine,
    solve,
    solve_iterative,
)
from .board import DEFAULT_SIZE, Board, InvalidBoardSizeError
from .render import render
from .utils import conflicts, is_safe, is_valid_solution

__all__ = [
    "Board",
    "DEFAULT_SIZE",
    "InvalidBoardSizeError",
    "solve",
    "solve_iterative",
    "bt_nqueens_first",
    "get_engine",
    "ENGINES",
    "SearchStats",
    "is_safe",
    "conflicts",
    "is_valid_solution",
    "render",
]
