"""
Alpha-beta negamax search engine for N×N tic-tac-toe.

The engine solves the game exactly: there is no depth limit and no static
evaluation, every leaf is a won, lost or drawn board.

Key features:
- Negamax framework (the value for the side to move is the negation of the
  best value for the opponent)
- Alpha-beta pruning (cut branches that can't affect final result)
- Transposition table keyed by Zobrist hash
- In-place make/undo on a single shared board

Algorithm overview:

    def negamax(player, alpha, beta):
        # Transposition table lookup
        if tt_entry := tt.probe(hash(board), alpha, beta):
            return tt_entry

        # Terminal
        if won(player): return +1
        if won(opponent): return -1
        if full: return 0

        # Search all empty cells in row-major order
        best = -infinity
        for cell in empty_cells:
            place(cell, player)
            score = -negamax(opponent, -beta, -alpha)
            undo(cell)

            best = max(best, score)
            alpha = max(alpha, best)

            if alpha >= beta:
                break  # Beta cutoff

        tt.store(hash, best, bound_type, best_move)
        return best
"""

import time
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from tictactoe_negamax.game.tictactoe import EMPTY, Move, Player, TicTacToe
from tictactoe_negamax.engine.zobrist import ZobristHasher
from tictactoe_negamax.engine.transposition_table import TranspositionTable, BoundType


@dataclass
class SearchResult:
    """Result of a full-window search from the current board."""
    best_move: Optional[Move]
    score: int
    nodes_searched: int
    time_ms: int
    tt_stats: dict


# Terminal scores from the side to move
SCORE_WIN = 1
SCORE_LOSS = -1
SCORE_DRAW = 0
# Window bound, strictly outside the score range
SCORE_INF = 2


class NegamaxEngine:
    """
    Exhaustive alpha-beta negamax solver.

    The engine owns the board (`state`). Callers apply moves through
    `engine[row, col] = player` and ask for the best reply with `negamax` or
    `search`. Every search leaves the board exactly as it found it.
    """

    def __init__(
        self,
        board_size: int = 3,
        seed: Optional[int] = None,
        use_transposition_table: bool = True
    ):
        """
        Initialize negamax engine.

        Args:
            board_size: Board dimension N
            seed: Zobrist table seed (None draws a fresh table)
            use_transposition_table: Cache searched positions by hash
        """
        self.game = TicTacToe(board_size)
        self.board_size = board_size
        self.state = self.game.get_initial_state()

        self.zobrist = ZobristHasher(board_size, seed=seed)
        self.tt = TranspositionTable() if use_transposition_table else None

        # Search statistics
        self.nodes_searched = 0

    def __getitem__(self, cell: Move) -> Optional[Player]:
        piece = int(self.state[cell])
        return None if piece == EMPTY else Player(piece)

    def __setitem__(self, cell: Move, player: Union[Player, int, None]):
        self.state[cell] = EMPTY if player is None else int(player)

    def __str__(self):
        return self.render()

    def render(self) -> str:
        return self.game.render(self.state)

    def is_winner(self, player: Player) -> bool:
        return self.game.check_win(self.state, player)

    def is_draw(self) -> bool:
        """True when no empty cell remains, whether or not someone has won."""
        return self.game.is_full(self.state)

    def empty_cells(self) -> list[Move]:
        return self.game.get_empty_cells(self.state)

    def search(
        self,
        player: Player,
        alpha: float = -SCORE_INF,
        beta: float = SCORE_INF
    ) -> SearchResult:
        """
        Solve the current position for `player`, timing the search.

        Args:
            player: Player to move
            alpha: Root alpha bound (defaults to the full window)
            beta: Root beta bound

        Returns:
            SearchResult with best move, score, statistics
        """
        start_time = time.time() * 1000
        self.nodes_searched = 0

        score, best_move = self.negamax(player, alpha, beta)

        elapsed_ms = int(time.time() * 1000 - start_time)

        return SearchResult(
            best_move=best_move,
            score=score,
            nodes_searched=self.nodes_searched,
            time_ms=elapsed_ms,
            tt_stats=self.tt.get_stats() if self.tt is not None else {}
        )

    def negamax(
        self,
        player: Player,
        alpha: float = -SCORE_INF,
        beta: float = SCORE_INF
    ) -> tuple[int, Optional[Move]]:
        """
        Negamax alpha-beta search.

        Args:
            player: Player to move
            alpha: Alpha bound
            beta: Beta bound

        Returns:
            (score, best_move) with score from `player`'s perspective. The
            move is None at terminal positions.
        """
        self.nodes_searched += 1
        player = Player(player)

        # Probe transposition table
        if self.tt is not None:
            hash_val = self.zobrist.hash_position(self.state)
            tt_result = self.tt.probe(hash_val, alpha, beta)
            if tt_result is not None:
                return tt_result

        # Terminal checks
        if self.is_winner(player):
            return SCORE_WIN, None
        if self.is_winner(player.opponent()):
            return SCORE_LOSS, None
        if self.is_draw():
            return SCORE_DRAW, None

        best_score = -np.inf
        best_move = None
        original_alpha = alpha

        for row, col in self.empty_cells():
            self.state[row, col] = int(player)
            try:
                child_score, _ = self.negamax(player.opponent(), -beta, -alpha)
            finally:
                self.state[row, col] = EMPTY

            score = -child_score
            # Strict comparison: ties keep the first cell in scan order
            if score > best_score:
                best_score = score
                best_move = (row, col)

            alpha = max(alpha, best_score)

            # Beta cutoff
            if alpha >= beta:
                break

        if self.tt is not None:
            if best_score <= original_alpha:
                bound = BoundType.UPPER  # All moves failed low
            elif best_score >= beta:
                bound = BoundType.LOWER  # We failed high
            else:
                bound = BoundType.EXACT
            self.tt.store(hash_val, best_score, bound, best_move)

        return best_score, best_move

    def clear_tt(self):
        """Clear transposition table."""
        if self.tt is not None:
            self.tt.clear()

    def get_stats(self) -> dict:
        """Get search statistics."""
        return {
            'nodes_searched': self.nodes_searched,
            'tt_stats': self.tt.get_stats() if self.tt is not None else {},
        }
