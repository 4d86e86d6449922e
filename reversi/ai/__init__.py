"""
reversi/ai/__init__.py - Computer players for Reversi

The only computer player is the one-ply greedy selector.
"""

from reversi.ai.greedy import GreedyPlayer, best_move, rank_moves

__all__ = ['GreedyPlayer', 'best_move', 'rank_moves']
