"""
Configuration for N×N tic-tac-toe play against the negamax engine.
"""

# Game Configuration
GAME_CONFIG = {
    'board_size': 3,                    # N for an N×N board (3 = classic)
    'engine_first': True,               # Engine opens the game and plays X
}

# Search Configuration
SEARCH_CONFIG = {
    'alpha': -2,                        # Root window, strictly outside {-1, 0, 1}
    'beta': 2,
    'use_transposition_table': True,
    'seed': None,                       # Zobrist seed, None = fresh table per engine
}
