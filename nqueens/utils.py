"""Safety checks and validation helpers for the N-Queens project.

This module provides the low-level predicates the search engines depend upon.
Every function is pure: boards are read, never mutated.

Representation
--------------
Functions take a ``Board`` (see ``nqueens.board``) and 0-based ``(row, col)``
coordinates. The left-leaning diagonal through a cell is the one with constant
``row - col``; the right-leaning diagonal has constant ``row + col``.
"""

from __future__ import annotations

from collections import Counter

from .board import Board


def row_occupied(row: int, board: Board) -> bool:
    """Return True if any cell of ``row`` holds a queen."""
    return any(board.is_occupied(row, col) for col in range(board.size))


def column_occupied(col: int, board: Board) -> bool:
    """Return True if any cell of ``col`` holds a queen."""
    return any(board.is_occupied(row, col) for row in range(board.size))


def left_diagonal_occupied(row: int, col: int, board: Board) -> bool:
    """Scan the constant ``row - col`` diagonal through (row, col).

    Walks up-left to the board edge, then scans down-right to the opposite edge.
    """
    step = min(row, col)
    row, col = row - step, col - step
    while row < board.size and col < board.size:
        if board.is_occupied(row, col):
            return True
        row += 1
        col += 1
    return False


def right_diagonal_occupied(row: int, col: int, board: Board) -> bool:
    """Scan the constant ``row + col`` diagonal through (row, col).

    Walks up-right to the board edge, then scans down-left to the opposite edge.
    """
    step = min(row, board.size - 1 - col)
    row, col = row - step, col + step
    while row < board.size and col >= 0:
        if board.is_occupied(row, col):
            return True
        row += 1
        col -= 1
    return False


def is_safe(row: int, col: int, board: Board) -> bool:
    """Return True if a queen at (row, col) would attack no queen on ``board``.

    Contract
    - Checks, in order: row, column, left diagonal, right diagonal.
    - An occupied cell is never safe (it shares its own row).
    - No side effects.
    """
    if row_occupied(row, board):
        return False
    if column_occupied(col, board):
        return False
    if left_diagonal_occupied(row, col, board):
        return False
    return not right_diagonal_occupied(row, col, board)


def conflicts(board: Board) -> int:
    """Compute the number of attacking queen pairs in O(N^2).

    Counts queens per row, column and both diagonal families and sums the
    pairs inside each group.
    """
    row_count: Counter[int] = Counter()
    col_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for row, col in board.queens():
        row_count[row] += 1
        col_count[col] += 1
        diag1[row - col] += 1
        diag2[row + col] += 1

    def _pairs(counter: Counter[int]) -> int:
        return sum(count * (count - 1) // 2 for count in counter.values() if count > 1)

    return _pairs(row_count) + _pairs(col_count) + _pairs(diag1) + _pairs(diag2)


def is_valid_solution(board: Board) -> bool:
    """Return True if ``board`` holds exactly N mutually non-attacking queens."""
    return board.occupied_count() == board.size and conflicts(board) == 0
