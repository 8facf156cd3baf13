"""
Transposition table for caching negamax search results.

Different move orders reach the same tic-tac-toe position constantly, so the
engine memoizes each searched position under its Zobrist hash. The search is
exhaustive (no depth limit), so entries never go stale and the table is never
evicted; it lives as long as the engine that owns it.

Key concepts:
- Bound types: EXACT (searched inside the window), LOWER (fail-high/beta
  cutoff), UPPER (fail-low, every move at or below alpha)
- A probe only answers when the stored bound settles the query's window, so
  results cached under one alpha/beta window are never misused under another
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tictactoe_negamax.game.tictactoe import Move


class BoundType(Enum):
    """Type of bound stored in transposition table entry."""
    EXACT = 0   # Exact value (searched with the value inside the window)
    LOWER = 1   # Lower bound (beta cutoff, actual value >= stored value)
    UPPER = 2   # Upper bound (fail low, actual value <= stored value)


@dataclass
class TTEntry:
    """
    Transposition table entry storing a cached search result.

    Attributes:
        zobrist_hash: 64-bit position hash
        score: Score (or bound) from the side to move
        bound: Type of bound (EXACT/LOWER/UPPER)
        best_move: Best move found at this position
    """
    zobrist_hash: int
    score: int
    bound: BoundType
    best_move: Optional[Move]

    def usable(self, alpha: float, beta: float) -> bool:
        if self.bound == BoundType.EXACT:
            return True
        if self.bound == BoundType.LOWER:
            return self.score >= beta
        return self.score <= alpha


class TranspositionTable:
    """
    Unbounded transposition table keyed by Zobrist hash.

    Entries are only added or upgraded, never evicted. Hit/miss/store
    counters are kept for reporting.
    """

    def __init__(self):
        self.table: dict[int, TTEntry] = {}

        # Statistics
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def __len__(self):
        return len(self.table)

    def __contains__(self, zobrist_hash: int):
        return zobrist_hash in self.table

    def probe(
        self,
        zobrist_hash: int,
        alpha: float,
        beta: float
    ) -> Optional[tuple[int, Optional[Move]]]:
        """
        Probe transposition table for cached result.

        Returns cached score if:
        1. An entry exists for the hash
        2. Bound type allows cutoff given current alpha-beta window

        Args:
            zobrist_hash: Position hash
            alpha: Current alpha bound
            beta: Current beta bound

        Returns:
            (score, best_move) if usable entry found, None otherwise
        """
        entry = self.table.get(zobrist_hash)

        if entry is None or not entry.usable(alpha, beta):
            self.misses += 1
            return None

        self.hits += 1
        return (entry.score, entry.best_move)

    def store(
        self,
        zobrist_hash: int,
        score: int,
        bound: BoundType,
        best_move: Optional[Move]
    ):
        """
        Store search result in transposition table.

        An EXACT entry is never replaced by a bound.

        Args:
            zobrist_hash: Position hash
            score: Score or bound
            bound: Type of bound
            best_move: Best move found (None if no child was searched)
        """
        existing = self.table.get(zobrist_hash)
        if existing is not None and existing.bound == BoundType.EXACT and bound != BoundType.EXACT:
            return

        self.table[zobrist_hash] = TTEntry(
            zobrist_hash=zobrist_hash,
            score=score,
            bound=bound,
            best_move=best_move
        )
        self.stores += 1

    def get_entry(self, zobrist_hash: int) -> Optional[TTEntry]:
        return self.table.get(zobrist_hash)

    def get_best_move(self, zobrist_hash: int) -> Optional[Move]:
        """Best move stored for a position regardless of bound, or None."""
        entry = self.table.get(zobrist_hash)
        return entry.best_move if entry is not None else None

    def clear(self):
        """Clear all entries (use between games)."""
        self.table = {}
        self._reset_stats()

    def _reset_stats(self):
        """Reset statistics counters."""
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def get_stats(self) -> dict:
        """
        Get transposition table statistics.

        Returns:
            Dictionary with hits, misses, hit rate, stores and entry count
        """
        total_queries = self.hits + self.misses
        hit_rate = self.hits / total_queries if total_queries > 0 else 0.0

        return {
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': hit_rate,
            'stores': self.stores,
            'size_entries': len(self.table),
        }
