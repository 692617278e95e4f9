"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the turn state machine and
the functions presentation layers call to drive a game.
"""

from connectfour.game.board import Board, InvalidColumnError
from connectfour.game.rules import (ConnectFourGame, ConnectFourEnv, create_game,
                                    drop_piece, apply_move, get_cell, is_game_over)

__all__ = ['Board', 'InvalidColumnError', 'ConnectFourGame', 'ConnectFourEnv',
           'create_game', 'drop_piece', 'apply_move', 'get_cell', 'is_game_over']
