"""Mutable N×N occupancy grid for the N-Queens search.

The board is the single piece of state shared by the search engines and the
renderer. It is created empty, mutated only through ``place``/``remove`` while
a search runs, and read afterwards.

Representation
--------------
``cells[row][col]`` is ``True`` when a queen occupies (row, col). Rows are
indexed top to bottom and columns left to right, both 0-based.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

DEFAULT_SIZE = 8


class InvalidBoardSizeError(ValueError):
    """Raised when a board is requested with a size the search cannot handle."""


def validate_size(size: int) -> int:
    """Return ``size`` if it is a usable board dimension, else raise.

    Booleans are rejected even though they are ``int`` instances.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidBoardSizeError(f"Board size must be an integer, got {size!r}")
    if size < 1:
        raise InvalidBoardSizeError(f"Board size must be >= 1, got {size}")
    return size


class Board:
    """Square chessboard holding queen occupancy marks.

    Parameters
    ----------
    size : int, default 8
        Board dimension N (N >= 1).
    """

    def __init__(self, size: int = DEFAULT_SIZE):
        self._size = validate_size(size)
        self._cells: List[List[bool]] = [[False] * size for _ in range(size)]

    @classmethod
    def from_positions(cls, positions: Sequence[int]) -> "Board":
        """Build a board from ``positions[row] = col`` (``-1`` leaves a row empty)."""
        board = cls(len(positions))
        for row, col in enumerate(positions):
            if col != -1:
                board.place(row, col)
        return board

    @property
    def size(self) -> int:
        return self._size

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self._size}x{self._size} board")

    def is_occupied(self, row: int, col: int) -> bool:
        self._check(row, col)
        return self._cells[row][col]

    def place(self, row: int, col: int) -> None:
        """Occupy (row, col); the cell must be empty."""
        self._check(row, col)
        if self._cells[row][col]:
            raise ValueError(f"Cell ({row}, {col}) is already occupied")
        self._cells[row][col] = True

    def remove(self, row: int, col: int) -> None:
        """Empty (row, col); the cell must hold a queen."""
        self._check(row, col)
        if not self._cells[row][col]:
            raise ValueError(f"Cell ({row}, {col}) holds no queen")
        self._cells[row][col] = False

    def clear(self) -> None:
        for line in self._cells:
            for col in range(self._size):
                line[col] = False

    def occupied_count(self) -> int:
        return sum(sum(line) for line in self._cells)

    def queens(self) -> List[Tuple[int, int]]:
        """Return occupied cells as ``(row, col)`` pairs in row-major order."""
        return [
            (row, col)
            for row, line in enumerate(self._cells)
            for col, occupied in enumerate(line)
            if occupied
        ]

    def positions(self) -> List[int]:
        """Return the column of the leftmost queen per row, ``-1`` for empty rows."""
        result = []
        for line in self._cells:
            result.append(line.index(True) if True in line else -1)
        return result

    def rows(self) -> Tuple[Tuple[bool, ...], ...]:
        """Read-only snapshot of the grid."""
        return tuple(tuple(line) for line in self._cells)

    def copy(self) -> "Board":
        clone = Board(self._size)
        clone._cells = [list(line) for line in self._cells]
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __iter__(self) -> Iterator[Tuple[bool, ...]]:
        return iter(self.rows())

    def __repr__(self) -> str:
        return f"Board(size={self._size}, queens={self.queens()})"
