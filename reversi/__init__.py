"""
reversi - Rules engine for a two-player disc-flipping board game

This package provides the board representation, move legality and capture
resolution, turn handling, game-end detection and a greedy computer
player, plus a command-line interface and a Gymnasium environment.
"""

# Version number
__version__ = '0.1.0'
