"""
cli.py - Command-line interface for Connect Four

This module is the terminal presentation layer: it runs hot-seat games for two
people, inspects board positions and benchmarks the engine. All game rules
live in connectfour.game; this module only reads input and prints results.
"""

import argparse
import random
import sys
from typing import List, Optional

import numpy as np

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import Board
from connectfour.game.rules import ConnectFourGame
from connectfour.utils import (DEFAULT_ROWS, DEFAULT_COLS, COLORS, EMPTY, Player,
                               OutcomeKind, find_winning_run, parse_position)

COLOR_NAMES = [name for name, _ in COLORS]

REJECTION_MESSAGES = {
    OutcomeKind.INVALID_COLUMN: "That column is not on the board.",
    OutcomeKind.COLUMN_FULL: "That column is full, pick another one.",
    OutcomeKind.GAME_ALREADY_OVER: "The game is already over.",
}


def color_value(name: str) -> str:
    """Look up the css value of a palette colour by display name (case-insensitive)."""
    for text, value in COLORS:
        if text.lower() == name.lower():
            return value
    raise ValueError(f"Unknown colour: {name}")


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, argv: Optional[List[str]] = None):
        self.argv = argv
        self.args = None
        self.game: Optional[ConnectFourGame] = None

    def parse_args(self) -> None:
        """Parse command-line arguments and configure logging."""
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug logging (same as --debug_level debug)')
        parser.add_argument('--debug_level',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            default='warning', help='Logging verbosity')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a hot-seat game for two people')
        play_parser.add_argument('--rows', type=int, default=DEFAULT_ROWS, help='Board height')
        play_parser.add_argument('--columns', type=int, default=DEFAULT_COLS, help='Board width')
        play_parser.add_argument('--p1-color', default='Red', type=str.title,
                                 choices=COLOR_NAMES, help='Colour of player 1')
        play_parser.add_argument('--p2-color', default='Yellow', type=str.title,
                                 choices=COLOR_NAMES, help='Colour of player 2')

        test_parser = subparsers.add_parser('test', help='Inspect a board position')
        test_parser.add_argument('--position', type=str,
                                 help='Comma-separated cell values (0/1/2), top row first')
        test_parser.add_argument('--rows', type=int, default=DEFAULT_ROWS, help='Board height')
        test_parser.add_argument('--columns', type=int, default=DEFAULT_COLS, help='Board width')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the engine')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of iterations for benchmarking')

        self.args = parser.parse_args(self.argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

    def run(self) -> int:
        """Run the selected command and return a process exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'test':
            return self.test_position()
        elif self.args.command == 'benchmark':
            return self.benchmark()

        print("Please specify a command. Use --help for options.")
        return 1

    def create_players(self) -> Optional[List[Player]]:
        """Build both players from the colour flags, or None if they clash."""
        if self.args.p1_color == self.args.p2_color:
            print("Players can't use the same colour!")
            return None

        return [Player(name, color_value(name))
                for name in (self.args.p1_color, self.args.p2_color)]

    def play_game(self) -> int:
        """Play a Connect Four game between two people at one terminal."""
        players = self.create_players()
        if players is None:
            return 1

        try:
            self.game = ConnectFourGame(*players, rows=self.args.rows, columns=self.args.columns)
        except ValueError as e:
            print(f"Cannot start game: {e}")
            return 1

        symbols = {players[0]: "X", players[1]: "O"}
        print("Starting a new Connect Four game!")
        print(f"{players[0]} plays X, {players[1]} plays O. Enter 'q' to quit.")
        print(self.game.render())

        while not self.game.is_game_over():
            player = self.game.current_player
            move = self.get_human_move(player, symbols[player])
            if move is None:
                print("Quitting game.")
                return 0

            outcome = self.game.drop_piece(move)
            if outcome.is_rejection:
                print(REJECTION_MESSAGES[outcome.kind])
                continue

            print(self.game.render())

        print("Game over!")
        if self.game.winner is not None:
            print(f"Whoever is {self.game.winner} won!")
        else:
            print("Tie!")
        return 0

    def get_human_move(self, player: Player, symbol: str) -> Optional[int]:
        """
        Prompt until the player enters a column number or 'q'.

        Returns:
            Column index, or None when the player quits
        """
        last_col = self.game.columns - 1
        while True:
            try:
                user_input = input(f"{player} ({symbol}), your move (0-{last_col}, q): ").strip().lower()
            except EOFError:
                return None

            if user_input == 'q':
                return None

            try:
                return int(user_input)
            except ValueError:
                print("Invalid input. Please enter a column number or 'q'.")

    def test_position(self) -> int:
        """Report wins, fullness and valid moves for a given position."""
        if not self.args.position:
            print("Please provide a position string with --position")
            return 1

        try:
            grid = parse_position(self.args.position, self.args.rows, self.args.columns)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        board = Board.from_rows(grid)
        print("Loaded position:")
        print(board.render())

        print("\nTesting win conditions:")
        has_win = False
        for token, symbol in ((1, "X"), (2, "O")):
            run = find_winning_run(board.grid, token)
            if run:
                print(f"Win for {symbol} detected at {run}")
                has_win = True

        if not has_win:
            print("No win detected for any player")

        if board.is_full():
            print("Board is full")
        else:
            print(f"Empty spaces: {board.empty_count()}")

        print(f"Valid moves: {board.get_valid_moves()}")
        return 0

    def benchmark(self) -> int:
        """Time board creation, random games and win checks."""
        iterations = max(1, self.args.iterations)
        players = (Player("X"), Player("O"))
        print(f"Running benchmark with {iterations} iterations...")

        debug.start_timer("board_init")
        for _ in range(iterations):
            Board()
        board_init_time = debug.end_timer("board_init", "cli")
        print(f"Board initialization: {board_init_time:.6f} seconds total, "
              f"{board_init_time / iterations * 1000:.6f} ms per board")

        debug.start_timer("game_simulation")
        games_played = 0
        total_moves = 0
        for _ in range(max(1, iterations // 10)):
            game = ConnectFourGame(*players)
            while not game.is_game_over():
                game.drop_piece(random.choice(game.get_valid_moves()))
                total_moves += 1
            games_played += 1
        simulation_time = debug.end_timer("game_simulation", "cli")
        print(f"Played {games_played} games with {total_moves} total moves: "
              f"{simulation_time:.6f} seconds total, "
              f"{simulation_time / games_played * 1000:.6f} ms per game, "
              f"{simulation_time / total_moves * 1000:.6f} ms per move")

        # Random half-filled grids; gravity does not matter for the scan
        rng = np.random.default_rng()
        grids = [rng.choice([EMPTY, 1, 2], size=(DEFAULT_ROWS, DEFAULT_COLS)).astype(np.int8)
                 for _ in range(iterations)]
        debug.start_timer("win_check")
        for grid in grids:
            find_winning_run(grid, 1)
        win_check_time = debug.end_timer("win_check", "cli")
        print(f"Performing {iterations} full-board win checks: {win_check_time:.6f} seconds total, "
              f"{win_check_time / iterations * 1000:.6f} ms per check")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI(argv).run()


if __name__ == "__main__":
    sys.exit(main())
