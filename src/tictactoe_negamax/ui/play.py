#!/usr/bin/env python3
"""
Play N×N tic-tac-toe against the negamax engine in the terminal.

Usage:
    tictactoe-negamax                 # engine (X) opens on a 3×3 board
    tictactoe-negamax --human-first   # you are X and move first
    tictactoe-negamax --size 4 --stats

Squares are numbered row-major from 1, so on a 3×3 board:

    1 2 3
    4 5 6
    7 8 9
"""

import sys
import argparse
from pathlib import Path
from datetime import datetime
from typing import Callable, Optional

from tictactoe_negamax.game.tictactoe import Move, Player
from tictactoe_negamax.engine.negamax import NegamaxEngine
from tictactoe_negamax.config_tictactoe import GAME_CONFIG, SEARCH_CONFIG


class InvalidMoveError(ValueError):
    """Human input that does not name an empty square."""


class Tee:
    def __init__(self, *files):
        self.files = files
    def write(self, data):
        for f in self.files:
            f.write(data)
            f.flush()
    def flush(self):
        for f in self.files:
            f.flush()


def setup_logging(log_dir: str):
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_path = log_dir / f'game_{ts}.log'
    log_file = open(log_path, 'w', encoding='utf-8')
    sys.stdout = Tee(sys.stdout, log_file)
    print(f"📝 Logging to: {log_path}")
    return log_path, log_file


def parse_square(text: str, engine: NegamaxEngine) -> Move:
    """
    Turn a typed square number into an empty (row, col).

    Raises:
        InvalidMoveError: non-numeric, out of range, or occupied square
    """
    try:
        square = int(text.strip())
    except ValueError:
        raise InvalidMoveError("Error: Enter a valid number.") from None

    if not 1 <= square <= engine.game.action_size:
        raise InvalidMoveError("Error: Enter a valid number.")

    row, col = engine.game.square_to_cell(square)
    if engine[row, col] is not None:
        raise InvalidMoveError("Error: That square already has a value.")
    return row, col


def get_human_move(engine: NegamaxEngine, input_fn: Optional[Callable[[str], str]] = None) -> Optional[Move]:
    """Prompt until a legal square is entered. Returns None on end of input."""
    if input_fn is None:
        input_fn = input
    prompt = f"Choose an empty square from 1-{engine.game.action_size}: "
    while True:
        try:
            text = input_fn(prompt)
        except EOFError:
            return None
        try:
            return parse_square(text, engine)
        except InvalidMoveError as e:
            print(e)


def print_stats(result):
    print(f"   score={result.score} nodes={result.nodes_searched} time={result.time_ms}ms")
    if result.tt_stats:
        tt = result.tt_stats
        print(f"   tt: entries={tt['size_entries']} hits={tt['hits']} "
              f"hit_rate={tt['hit_rate']:.1%}")


def play(
    engine: NegamaxEngine,
    engine_first: bool = True,
    show_stats: bool = False,
    input_fn: Optional[Callable[[str], str]] = None
) -> Optional[str]:
    """
    Run one game between the engine and a human.

    The side that moves first plays X.

    Returns:
        'engine', 'human' or 'draw'; None if input ran out mid-game
    """
    engine_player = Player.FIRST if engine_first else Player.SECOND
    human_player = engine_player.opponent()
    player = Player.FIRST

    while True:
        if player == engine_player:
            print("Computer's turn...")
            result = engine.search(engine_player, SEARCH_CONFIG['alpha'], SEARCH_CONFIG['beta'])
            if show_stats:
                print_stats(result)
            engine[result.best_move] = engine_player
            print(engine)
            print()
            if engine.is_winner(engine_player):
                print("Computer won!")
                return 'engine'
        else:
            move = get_human_move(engine, input_fn)
            if move is None:
                print()
                return None
            engine[move] = human_player
            print(engine)
            print()
            if engine.is_winner(human_player):
                print("You... won?")
                return 'human'

        if engine.is_draw():
            print("Game was a draw.")
            return 'draw'

        player = player.opponent()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play N×N tic-tac-toe against a negamax solver")
    parser.add_argument("--size", type=int, default=GAME_CONFIG['board_size'],
                        help="Board dimension N")
    parser.add_argument("--human-first", action="store_true",
                        help="Human plays X and moves first")
    parser.add_argument("--no-tt", action="store_true",
                        help="Disable the transposition table")
    parser.add_argument("--seed", type=int, default=SEARCH_CONFIG['seed'],
                        help="Zobrist table seed")
    parser.add_argument("--stats", action="store_true",
                        help="Print search statistics after each engine move")
    parser.add_argument("--log-dir", type=str, default=None,
                        help="Also write console output to a timestamped log in this directory")

    args = parser.parse_args(argv)

    if args.size < 1:
        parser.error("--size must be at least 1")

    log_file = None
    original_stdout = sys.stdout
    if args.log_dir:
        _, log_file = setup_logging(args.log_dir)

    try:
        engine = NegamaxEngine(
            board_size=args.size,
            seed=args.seed,
            use_transposition_table=SEARCH_CONFIG['use_transposition_table'] and not args.no_tt,
        )
        engine_first = GAME_CONFIG['engine_first'] and not args.human_first
        return play(engine, engine_first=engine_first, show_stats=args.stats)
    finally:
        if log_file is not None:
            sys.stdout = original_stdout
            log_file.close()


if __name__ == "__main__":
    main()
