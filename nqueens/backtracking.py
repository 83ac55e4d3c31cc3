"""Backtracking solvers for the N-Queens problem.

This module implements depth-first backtracking search that stops at the first
complete placement and provides these entry points:

- solve(remaining, board): recursive search that mutates ``board`` in place.
- solve_iterative(remaining, board): the same decision tree walked with an
    explicit stack of frames, for boards large enough to worry about the
    interpreter's recursion limit.
- bt_nqueens_first(size, engine="recursive"): convenience wrapper that builds
    an empty board, runs one engine and reports effort and wall time.

Implementation overview
-----------------------
- State representation: a ``Board`` occupancy grid shared by every level of
    the search. Nothing else is global.
- Candidate order: each level fills the first row that holds no queen, trying
    columns left to right. Rows are therefore filled top to bottom and the
    first solution found is the lexicographically smallest one
    (N=4 -> columns [1, 3, 0, 2]).
- Pruning: a candidate is tried only if ``is_safe`` accepts it; a queen that
    leads nowhere is removed before the next column is tried.

Contract (public API)
---------------------
- Input: ``remaining >= 0`` queens to add to ``board``.
- Output: ``True`` when ``remaining`` queens were added and the board now holds
    a full placement; ``False`` when the search space is exhausted, in which
    case the board is back to its state before the call.
- Nodes explored semantics: incremented every time a queen is tentatively
    placed. Backtracks count the placements that were undone.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Dict, List, Optional, Tuple

from .board import Board
from .utils import is_safe, row_occupied

ReturnHook = Callable[[int, Board, bool], None]


@dataclass
class SearchStats:
    """Effort counters filled in by a search when supplied."""

    nodes: int = 0
    backtracks: int = 0
    max_depth: int = 0


@dataclass
class _Frame:
    """Mutable stack frame capturing the state at a decision level."""

    row: int
    next_col: int = 0
    placed_col: int = -1


def _next_free_row(board: Board) -> Optional[int]:
    for row in range(board.size):
        if not row_occupied(row, board):
            return row
    return None


def _next_safe_col(row: int, start: int, board: Board) -> Optional[int]:
    for col in range(start, board.size):
        if is_safe(row, col, board):
            return col
    return None


def solve(
    remaining: int,
    board: Board,
    stats: Optional[SearchStats] = None,
    on_return: Optional[ReturnHook] = None,
) -> bool:
    """Place ``remaining`` queens on ``board`` by recursive backtracking.

    Parameters
    ----------
    remaining : int
        Queens still to place (>= 0).
    board : Board
        Grid mutated in place. On success it holds the solution; on failure it
        is restored to its state before the call.
    stats : SearchStats | None
        Optional counters updated as the search runs.
    on_return : callable | None
        Optional hook ``on_return(remaining, board, solved)`` invoked at every
        return point of every level, with that level's ``remaining``.

    Returns
    -------
    bool
        True if a complete placement was found.
    """
    if remaining < 0:
        raise ValueError(f"Queens to place must be >= 0, got {remaining}")
    return _solve(remaining, board, stats, on_return, 0)


def _solve(
    remaining: int,
    board: Board,
    stats: Optional[SearchStats],
    on_return: Optional[ReturnHook],
    depth: int,
) -> bool:
    if stats is not None and depth > stats.max_depth:
        stats.max_depth = depth

    solved = remaining == 0
    if not solved:
        row = _next_free_row(board)
        col = _next_safe_col(row, 0, board) if row is not None else None
        while col is not None:
            board.place(row, col)
            if stats is not None:
                stats.nodes += 1
            if _solve(remaining - 1, board, stats, on_return, depth + 1):
                # The queen stays; success propagates upward.
                solved = True
                break
            board.remove(row, col)
            if stats is not None:
                stats.backtracks += 1
            col = _next_safe_col(row, col + 1, board)

    if on_return is not None:
        on_return(remaining, board, solved)
    return solved


def solve_iterative(remaining: int, board: Board, stats: Optional[SearchStats] = None) -> bool:
    """Explicit-stack equivalent of ``solve``.

    Walks the same decision tree in the same order, so the final board and the
    ``stats`` counters match the recursive engine exactly.
    """
    if remaining < 0:
        raise ValueError(f"Queens to place must be >= 0, got {remaining}")
    if remaining == 0:
        return True

    row = _next_free_row(board)
    if row is None:
        return False

    stack: List[_Frame] = [_Frame(row)]
    while stack:
        frame = stack[-1]

        if frame.placed_col != -1:
            # The level below failed; undo this level's queen before moving on.
            board.remove(frame.row, frame.placed_col)
            frame.placed_col = -1
            if stats is not None:
                stats.backtracks += 1

        col = _next_safe_col(frame.row, frame.next_col, board)
        if col is None:
            stack.pop()
            continue

        board.place(frame.row, col)
        frame.placed_col = col
        frame.next_col = col + 1
        depth = len(stack)
        if stats is not None:
            stats.nodes += 1
            if depth > stats.max_depth:
                stats.max_depth = depth

        if depth == remaining:
            return True

        next_row = _next_free_row(board)
        if next_row is not None:
            stack.append(_Frame(next_row))

    return False


ENGINES: Dict[str, Callable[..., bool]] = {
    "recursive": solve,
    "iterative": solve_iterative,
}


def get_engine(name: str) -> Callable[..., bool]:
    """Look up a search engine by name (``recursive`` or ``iterative``)."""
    try:
        return ENGINES[name]
    except KeyError:
        raise ValueError(
            f"Unknown engine '{name}'. Allowed: " + ", ".join(sorted(ENGINES))
        ) from None


def bt_nqueens_first(size: int, engine: str = "recursive") -> Tuple[Board, bool, int, float]:
    """Find the first solution on an empty ``size`` x ``size`` board.

    Returns
    -------
    (board, solved, nodes_explored, elapsed_seconds)
        - board: the final board, partial (empty) when ``solved`` is False.
        - solved: whether all ``size`` queens were placed.
        - nodes_explored: tentative placements made by the search.
        - elapsed_seconds: wall time measured via ``perf_counter()``.
    """
    search = get_engine(engine)
    board = Board(size)
    stats = SearchStats()
    start = perf_counter()
    solved = search(size, board, stats)
    return board, solved, stats.nodes, perf_counter() - start
