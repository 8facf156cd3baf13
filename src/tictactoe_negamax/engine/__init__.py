"""
Negamax search engine for N×N tic-tac-toe.

This module contains the solver components:
- Zobrist hashing for fast position lookup
- Transposition table for caching search results
- Alpha-beta negamax search over a shared, backtracked board
"""

from tictactoe_negamax.engine.zobrist import ZobristHasher
from tictactoe_negamax.engine.transposition_table import TranspositionTable, BoundType, TTEntry
from tictactoe_negamax.engine.negamax import NegamaxEngine, SearchResult

__all__ = [
    'ZobristHasher',
    'TranspositionTable',
    'BoundType',
    'TTEntry',
    'NegamaxEngine',
    'SearchResult',
]
