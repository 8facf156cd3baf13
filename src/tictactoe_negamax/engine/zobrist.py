"""
Zobrist hashing for N×N tic-tac-toe positions.

Zobrist hashing gives every board configuration a 64-bit fingerprint so the
transposition table can recognise the same position reached through
different move orders.

Implementation:
- Pre-generate one random 64-bit key per (cell, player) combination
- Hash = XOR of the keys of all occupied cells; empty cells contribute 0
- Incremental update: hash ^= key[cell][player] (placing and removing a mark
  are the same operation)

No canonicalization is done: boards that differ by a rotation or reflection
hash differently.
"""

from typing import Optional

import numpy as np


class ZobristHasher:
    """
    Zobrist hashing for tic-tac-toe board positions.

    A 3×3 board needs 9 cells × 2 players = 18 keys. A new table is drawn for
    every hasher; pass `seed` only when reproducible hashes are wanted.
    """

    def __init__(self, board_size: int = 3, seed: Optional[int] = None):
        """
        Initialize Zobrist hash table with random 64-bit keys.

        Args:
            board_size: Board dimension N
            seed: Optional random seed (None draws a fresh table)
        """
        if board_size < 1:
            raise ValueError(f"Board size must be at least 1, got {board_size}")
        self.board_size = board_size

        rng = np.random.RandomState(seed)

        # Generate zobrist keys: [cell_index, player_idx]
        # player_idx: 0 for player=-1, 1 for player=1
        self.zobrist_table = rng.randint(
            0, np.iinfo(np.uint64).max,
            size=(board_size * board_size, 2),
            dtype=np.uint64
        )

    @staticmethod
    def _player_index(piece) -> int:
        return 0 if piece == -1 else 1

    def hash_position(self, state: np.ndarray) -> int:
        """
        Compute Zobrist hash for a board state.

        Args:
            state: Board state (board_size, board_size) with values in {-1, 0, 1}

        Returns:
            64-bit hash value (int)
        """
        hash_value = np.uint64(0)

        for index, piece in enumerate(state.flat):
            if piece != 0:
                hash_value ^= self.zobrist_table[index, self._player_index(piece)]

        return int(hash_value)

    def incremental_hash(self, current_hash: int, row: int, col: int, player) -> int:
        """
        Toggle one mark in or out of a hash.

        Args:
            current_hash: Hash before the change
            row: Row of the cell
            col: Column of the cell
            player: Player whose mark is placed or removed

        Returns:
            Updated hash value
        """
        key = self.zobrist_table[row * self.board_size + col, self._player_index(player)]
        return current_hash ^ int(key)

    def verify_hash(self, state: np.ndarray, claimed_hash: int) -> bool:
        """Check a claimed hash against a full recomputation."""
        return self.hash_position(state) == claimed_hash
