"""
connectfour - Connect Four game engine

This package provides the board, the turn state machine with win and tie
detection, a Gymnasium environment for driving games programmatically, and a
terminal interface for playing hot-seat games.
"""

__version__ = '0.1.0'

from connectfour.utils import Player, GameStatus, OutcomeKind, MoveOutcome
from connectfour.game import (Board, ConnectFourGame, create_game, drop_piece,
                              apply_move, get_cell, is_game_over)

__all__ = ['Player', 'GameStatus', 'OutcomeKind', 'MoveOutcome', 'Board',
           'ConnectFourGame', 'create_game', 'drop_piece', 'apply_move',
           'get_cell', 'is_game_over']
