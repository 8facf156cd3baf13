"""
Exact N×N tic-tac-toe solver: alpha-beta negamax with a Zobrist-keyed
transposition table.
"""

__version__ = "0.1"
