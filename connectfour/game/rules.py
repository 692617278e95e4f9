"""
rules.py - Turn state machine, public game API and Gymnasium environment

This module provides:
1. ConnectFourGame, which owns a Board, the turn order and the game status
2. Module-level functions (create_game, drop_piece, ...) for presentation layers
3. A gymnasium-compatible environment that drives a game one drop at a time
"""

from typing import Dict, List, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import (DEFAULT_ROWS, DEFAULT_COLS, EMPTY, Player, GameStatus,
                               OutcomeKind, MoveOutcome, find_winning_run,
                               check_win_at_position)


class ConnectFourGame:
    """
    A single game between two players.

    Players sit in seats 0 and 1 and their pieces are stored on the board as
    tokens 1 and 2. Player 1 moves first. Every call to drop_piece either
    applies completely or is rejected without touching any state.
    """

    def __init__(self, player1: Player, player2: Player,
                 rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLS,
                 full_scan: bool = True):
        """
        Args:
            player1: Player who moves first
            player2: Player who moves second
            rows: Board height
            columns: Board width
            full_scan: Rescan the whole board for a win after every move.
                When False only lines through the last piece are checked.
        """
        if player1 is player2:
            raise ValueError("A game needs two distinct players")

        debug.debug(f"Initializing ConnectFourGame {player1} vs {player2}", "game")
        self.players: Tuple[Player, Player] = (player1, player2)
        self.full_scan = full_scan
        self.board = Board(rows, columns)
        self._reset_state()

    def _reset_state(self) -> None:
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.moves_made: List[int] = []
        self.last_move: Optional[Tuple[int, int]] = None
        self._seat = 0
        self._winning_line: List[Tuple[int, int]] = []

    def reset(self) -> None:
        """Start over on an empty board with the same players."""
        debug.debug("Resetting game", "game")
        self.board = Board(self.board.height, self.board.width)
        self._reset_state()

    def copy(self) -> 'ConnectFourGame':
        """Return an independent copy sharing only the Player objects."""
        new_game = ConnectFourGame(*self.players, rows=self.board.height,
                                   columns=self.board.width, full_scan=self.full_scan)
        new_game.board = self.board.copy()
        new_game.status = self.status
        new_game.winner = self.winner
        new_game.moves_made = self.moves_made.copy()
        new_game.last_move = self.last_move
        new_game._seat = self._seat
        new_game._winning_line = self._winning_line.copy()
        return new_game

    @property
    def current_player(self) -> Player:
        """The player whose turn it is (the winner once the game is won)."""
        return self.players[self._seat]

    @property
    def rows(self) -> int:
        """Board height."""
        return self.board.height

    @property
    def columns(self) -> int:
        """Board width."""
        return self.board.width

    def token_for(self, player: Player) -> int:
        """Board token used for ``player``'s pieces."""
        for seat, seated in enumerate(self.players):
            if seated is player:
                return seat + 1
        raise ValueError(f"{player} is not playing this game")

    def drop_piece(self, column: int) -> MoveOutcome:
        """
        Drop the current player's piece into ``column``.

        Args:
            column: The column to play (0-indexed)

        Returns:
            The outcome of the move. Rejections (INVALID_COLUMN, COLUMN_FULL,
            GAME_ALREADY_OVER) leave the game unchanged.
        """
        player = self.current_player
        debug.debug(f"Attempting move in column {column} for {player}", "game")

        if self.status.is_game_over():
            debug.debug(f"Rejected move: game is over ({self.status.name})", "game")
            return MoveOutcome(OutcomeKind.GAME_ALREADY_OVER)

        if not self.board.is_valid_column(column):
            debug.debug(f"Rejected move: column {column} out of bounds", "game")
            return MoveOutcome(OutcomeKind.INVALID_COLUMN)

        row = self.board.find_landing_row(column)
        if row is None:
            debug.debug(f"Rejected move: column {column} is full", "game")
            return MoveOutcome(OutcomeKind.COLUMN_FULL)

        token = self._seat + 1
        self.board.place(row, column, token)
        self.moves_made.append(column)
        self.last_move = (row, column)

        debug.start_timer("win_check")
        line = self._find_win(row, column, token)
        debug.end_timer("win_check", "game")

        if line:
            self.status = GameStatus.WON
            self.winner = player
            self._winning_line = line
            debug.info(f"{player} wins after move at {self.last_move}", "game")
            return MoveOutcome(OutcomeKind.WON, player, row, column)

        if self.board.is_full():
            self.status = GameStatus.TIED
            debug.info("Game ends in a tie", "game")
            return MoveOutcome(OutcomeKind.TIED, None, row, column)

        self._seat = 1 - self._seat
        debug.debug(f"Switching to {self.current_player}", "game")
        return MoveOutcome(OutcomeKind.CONTINUED, self.current_player, row, column)

    def _find_win(self, row: int, column: int, token: int) -> Optional[List[Tuple[int, int]]]:
        if self.full_scan:
            return find_winning_run(self.board.grid, token)
        return check_win_at_position(self.board.grid, row, column)

    def get_cell(self, row: int, column: int) -> Optional[Player]:
        """Player occupying (row, column), or None when the cell is empty."""
        token = self.board.get_cell(row, column)
        if token == EMPTY:
            return None
        return self.players[token - 1]

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """(row, column) cells of the winning run, empty unless the game was won."""
        return list(self._winning_line)

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that can still be played.

        Returns:
            Column indices with room, or an empty list once the game is over
        """
        if self.status.is_game_over():
            return []
        return self.board.get_valid_moves()

    def is_game_over(self) -> bool:
        """
        Check if the game is over.

        Returns:
            True once the game has been won or tied
        """
        return self.status.is_game_over()

    def render(self) -> str:
        """
        Render the game as a string.

        Returns:
            String representation of the board
        """
        return self.board.render()


def create_game(player1: Player, player2: Player,
                rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLS) -> ConnectFourGame:
    """Create a game with ``player1`` to move first."""
    return ConnectFourGame(player1, player2, rows=rows, columns=columns)


def drop_piece(game: ConnectFourGame, column: int) -> MoveOutcome:
    """Play ``column`` for whoever is on turn and report what happened."""
    return game.drop_piece(column)


def apply_move(game: ConnectFourGame, column: int) -> Tuple[ConnectFourGame, MoveOutcome]:
    """
    Pure form of drop_piece.

    ``game`` is never modified. On success the returned game is a new object
    holding the post-move state; on rejection the original game is returned
    alongside the rejection.
    """
    next_game = game.copy()
    outcome = next_game.drop_piece(column)
    if outcome.is_rejection:
        return game, outcome
    return next_game, outcome


def get_cell(game: ConnectFourGame, row: int, column: int) -> Optional[Player]:
    """Player occupying (row, column) in ``game``, or None for an empty cell."""
    return game.get_cell(row, column)


def is_game_over(game: ConnectFourGame) -> bool:
    """True once ``game`` has reached a won or tied state."""
    return game.is_game_over()


class ConnectFourEnv(gym.Env):
    """
    Connect Four following the Gymnasium interface.

    Both seats are driven through ``step``; rewards are given from the point
    of view of the player who just moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLS,
                 render_mode: Optional[str] = None):
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(columns)

        # Each cell holds 0 (empty), 1 or 2
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(rows, columns), dtype=np.int8
        )

        self.game = ConnectFourGame(Player("Player 1", "red"), Player("Player 2", "yellow"),
                                    rows=rows, columns=columns)
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_draw = 0.0
        self.reward_invalid_move = -1.0
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.game.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player on turn.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")
        outcome = self.game.drop_piece(int(action))

        if outcome.is_rejection:
            debug.warning(f"Invalid action {action}: {outcome.kind.name}", "env")
            info = self._get_info()
            info['invalid_move'] = outcome.kind.name
            return self._get_observation(), self.reward_invalid_move, False, True, info

        if outcome.kind == OutcomeKind.WON:
            reward, terminated = self.reward_win, True
        elif outcome.kind == OutcomeKind.TIED:
            reward, terminated = self.reward_draw, True
        else:
            reward, terminated = self.reward_step, False

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode == "ascii":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.board.get_state()

    def _get_info(self) -> Dict:
        valid_moves = self.game.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.token_for(self.game.current_player),
            'game_result': self.game.status.name,
            'moves_made': len(self.game.moves_made),
            'winning_line': self.game.get_winning_line(),
            'last_move': self.game.last_move,
        }
