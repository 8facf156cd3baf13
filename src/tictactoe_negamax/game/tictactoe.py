from enum import IntEnum
from typing import Optional

import numpy as np


class Player(IntEnum):
    """
    The two sides of the game.

    The integer value is what gets written into the board array, so a board
    cell is 1 for FIRST, -1 for SECOND and 0 when empty.
    """
    FIRST = 1
    SECOND = -1

    def opponent(self) -> "Player":
        return Player(-self.value)

    @property
    def symbol(self) -> str:
        return 'X' if self is Player.FIRST else 'O'

    def __str__(self):
        return self.symbol


EMPTY = 0
EMPTY_SYMBOL = '.'

Move = tuple[int, int]


class TicTacToe:
    """
    Generalized N×N tic-tac-toe rules.

    Board: N rows x N columns, int8 array with values in {-1, 0, 1}
    Win condition: a full row, a full column or either full diagonal
    Actions: (row, col) of an empty cell

    The rules object is stateless; the board array is passed in and owned
    by the caller (the search engine mutates it in place).
    """

    def __init__(self, board_size=3):
        if board_size < 1:
            raise ValueError(f"Board size must be at least 1, got {board_size}")
        self.board_size = board_size
        self.action_size = board_size * board_size

    def __repr__(self):
        return f"TicTacToe({self.board_size}x{self.board_size})"

    def get_initial_state(self):
        """Returns an empty board."""
        return np.zeros((self.board_size, self.board_size), dtype=np.int8)

    def get_empty_cells(self, state) -> list[Move]:
        """
        Empty cells in row-major order (row ascending, then column).

        Args:
            state: Board state (board_size, board_size)

        Returns:
            List of (row, col) tuples
        """
        return [(int(r), int(c)) for r, c in np.argwhere(state == EMPTY)]

    def check_win(self, state, player) -> bool:
        """
        Check whether `player` occupies a complete line.

        Only full-length lines count: for N > 3 a run shorter than N is not a
        win.

        Args:
            state: Board state
            player: Player (or its integer value) to test

        Returns:
            True if any row, column or diagonal is entirely `player`
        """
        owned = state == int(player)

        if owned.all(axis=1).any():
            return True
        if owned.all(axis=0).any():
            return True
        if np.diagonal(owned).all():
            return True
        if np.diagonal(np.fliplr(owned)).all():
            return True

        return False

    def is_full(self, state) -> bool:
        """Board has no empty cell (draw condition, ignores winners)."""
        return not (state == EMPTY).any()

    def get_winner(self, state) -> Optional[Player]:
        for player in Player:
            if self.check_win(state, player):
                return player
        return None

    def is_terminal(self, state) -> bool:
        return self.get_winner(state) is not None or self.is_full(state)

    def square_to_cell(self, square: int) -> Move:
        """Map a 1-based row-major square number onto (row, col)."""
        return (square - 1) // self.board_size, (square - 1) % self.board_size

    def cell_to_square(self, row: int, col: int) -> int:
        return row * self.board_size + col + 1

    def render(self, state) -> str:
        """One line per row, one character per cell."""
        symbols = {EMPTY: EMPTY_SYMBOL, int(Player.FIRST): Player.FIRST.symbol,
                   int(Player.SECOND): Player.SECOND.symbol}
        return '\n'.join(
            ''.join(symbols[int(cell)] for cell in row)
            for row in state
        )
