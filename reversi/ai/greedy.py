"""
greedy.py - One-ply greedy computer player for Reversi

The greedy player looks at every legal move for the player it is asked about
and picks the one that flips the most discs. It does not look ahead.
"""

from typing import List, Optional

from reversi.debug import debug
from reversi.utils import Coord, Player
from reversi.game.board import Board, MoveCandidate


def rank_moves(candidates: List[MoveCandidate]) -> List[MoveCandidate]:
    """
    Order move candidates from most to fewest captures.

    The sort is stable, so among equal counts the enumeration order
    (row-major) is kept and the first found wins.
    """
    return sorted(candidates, key=lambda move: move[2], reverse=True)


def best_move(board: Board, player: Player = None) -> Optional[Coord]:
    """
    Pick the legal move that captures the most discs.

    Args:
        board: The board to search
        player: The player to move for. If None, uses the board's current player.

    Returns:
        The (x, y) of the chosen move, or None if the player has no legal move
    """
    ranked = rank_moves(board.get_move_candidates(player))
    if not ranked:
        return None
    x, y, _ = ranked[0]
    return (x, y)


class GreedyPlayer:
    """Computer player wrapping ``best_move``, keeping simple search statistics."""

    def __init__(self):
        self.moves_evaluated = 0

    def get_move(self, board: Board, player: Player = None) -> Optional[Coord]:
        """
        Get the greedy move for ``player``.

        Returns:
            The (x, y) of the chosen move, or None when no move is legal
        """
        if player is None:
            player = board.current_player

        candidates = board.get_move_candidates(player)
        self.moves_evaluated = len(candidates)

        ranked = rank_moves(candidates)
        if not ranked:
            debug.debug(f"No legal move for player {player.name}", "ai")
            return None

        x, y, count = ranked[0]
        debug.debug(f"Greedy choice for {player.name}: ({x}, {y}) capturing {count} "
                    f"of {len(candidates)} candidates", "ai")
        return (x, y)
