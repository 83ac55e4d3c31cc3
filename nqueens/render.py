"""Text rendering of a board as a bordered chessboard."""

from __future__ import annotations

from .board import Board

QUEEN_GLYPH = "♕"
SPACE = " "
LINE = "|"
NEWROW = "===="


def render(board: Board, queen: str = QUEEN_GLYPH) -> str:
    """Return the board drawn as rows of ``| x |`` cells between separators.

    Each row starts with a gap of four spaces and a separator of ``====``
    repeated once per column; each cell is a space, the queen glyph or a
    space, a space and a vertical bar. The gap of the next row continues the
    previous cell line. A closing separator follows the last row.

    Partial boards are drawn as they are.
    """
    separator = NEWROW * board.size
    parts = []
    for line in board.rows():
        parts.append(SPACE * 4 + "\n")
        parts.append(separator + "\n")
        for occupied in line:
            parts.append(SPACE + (queen if occupied else SPACE) + SPACE + LINE)
    parts.append("\n" + separator + "\n")
    return "".join(parts)
