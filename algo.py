"""Solve the N-Queens problem and print the board.

Run without arguments to print the first solution on the default 8x8 board;
see ``--help`` for the analysis and regression modes.
"""
from nqueens.analysis.cli import main


if __name__ == "__main__":
    main()
