"""
reversi.game - Core game mechanics for Reversi

This package contains the board representation, move evaluation and
game state management.
"""

from reversi.game.board import Board
from reversi.game.rules import ReversiGame, ReversiEnv

__all__ = ['Board', 'ReversiGame', 'ReversiEnv']
