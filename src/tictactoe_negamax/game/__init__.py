from tictactoe_negamax.game.tictactoe import Player, TicTacToe, Move, EMPTY

__all__ = ['Player', 'TicTacToe', 'Move', 'EMPTY']
