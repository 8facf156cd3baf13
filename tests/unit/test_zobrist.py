"""
Unit tests for Zobrist hashing.

Tests verify:
1. Identical boards hash identically, and the empty board hashes to 0
2. Any single-cell change alters the hash
3. Incremental updates match full recomputation
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from tictactoe_negamax.game.tictactoe import Player, TicTacToe
from tictactoe_negamax.engine.zobrist import ZobristHasher


@pytest.fixture
def base_state():
    state = TicTacToe(3).get_initial_state()
    state[0, 0] = Player.FIRST
    state[1, 1] = Player.SECOND
    state[2, 1] = Player.FIRST
    return state


class TestZobristHashing:
    """Test Zobrist hashing correctness."""

    def test_table_shape(self):
        zobrist = ZobristHasher(4)
        assert zobrist.zobrist_table.shape == (16, 2)
        assert zobrist.zobrist_table.dtype == np.uint64

    def test_empty_board_hashes_to_zero(self):
        zobrist = ZobristHasher(3)
        assert zobrist.hash_position(TicTacToe(3).get_initial_state()) == 0

    def test_identical_boards_hash_equal(self, base_state):
        zobrist = ZobristHasher(3)
        assert zobrist.hash_position(base_state) == zobrist.hash_position(base_state.copy())

    def test_single_cell_difference(self, base_state):
        """Adding, removing or swapping the mark on any one cell changes the hash."""
        zobrist = ZobristHasher(3, seed=7)
        base_hash = zobrist.hash_position(base_state)

        for row in range(3):
            for col in range(3):
                for piece in (0, 1, -1):
                    if base_state[row, col] == piece:
                        continue
                    changed = base_state.copy()
                    changed[row, col] = piece
                    assert zobrist.hash_position(changed) != base_hash

    def test_hash_fits_in_64_bits(self, base_state):
        zobrist = ZobristHasher(3)
        hash_val = zobrist.hash_position(base_state)
        assert isinstance(hash_val, int)
        assert 0 <= hash_val < 2 ** 64

    def test_incremental_hash(self, base_state):
        """Incremental hash should match full recomputation."""
        zobrist = ZobristHasher(3)
        hash1 = zobrist.hash_position(base_state)

        after = base_state.copy()
        after[0, 2] = Player.SECOND
        hash2_incremental = zobrist.incremental_hash(hash1, 0, 2, Player.SECOND)

        assert hash2_incremental == zobrist.hash_position(after)
        # Removing the mark again restores the original hash
        assert zobrist.incremental_hash(hash2_incremental, 0, 2, Player.SECOND) == hash1

    def test_verify_hash(self, base_state):
        zobrist = ZobristHasher(3)
        hash_val = zobrist.hash_position(base_state)
        assert zobrist.verify_hash(base_state, hash_val)
        assert not zobrist.verify_hash(base_state, hash_val ^ 1)

    def test_seed_reproducible(self, base_state):
        assert (ZobristHasher(3, seed=11).hash_position(base_state)
                == ZobristHasher(3, seed=11).hash_position(base_state))

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            ZobristHasher(0)
