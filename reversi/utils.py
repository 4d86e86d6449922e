"""
utils.py - Constants, enumerations and ray-casting helpers for Reversi

This module holds the pieces shared by the board, the game manager and the
computer player: the default board dimensions, the cell/player enumeration,
the eight direction vectors and the capture search itself.

Coordinates are always given as (x, y): x is the column, y is the row.
Grids are numpy arrays of shape (height, width) indexed as grid[y, x].
"""

from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np

# Board configuration
BOARD_WIDTH = 6
BOARD_HEIGHT = 6

Coord = Tuple[int, int]


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # Moves first
    TWO = 2

    def other(self) -> 'Player':
        """
        Get the opposing player.

        Raises:
            ValueError: If called on EMPTY, which is a cell state and not a player
        """
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        raise ValueError("EMPTY is not a player and has no opponent")

    def __str__(self):
        if self == Player.ONE:
            return "X"
        elif self == Player.TWO:
            return "O"
        return "."


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def winner(self) -> Optional[Player]:
        """The winning player, or None for a draw or an unfinished game."""
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        elif self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None


# (dx, dy) offsets, clockwise from "right"; y grows downwards
DIRECTIONS: Tuple[Coord, ...] = (
    (1, 0),    # right
    (1, -1),   # up and right
    (0, -1),   # up
    (-1, -1),  # up and left
    (-1, 0),   # left
    (-1, 1),   # down and left
    (0, 1),    # down
    (1, 1),    # down and right
)


def is_valid_position(grid: np.ndarray, x: int, y: int) -> bool:
    """
    Check if a position lies on the grid.

    Args:
        grid: The game grid
        x: Column index
        y: Row index

    Returns:
        True if the position is on the grid, False otherwise
    """
    height, width = grid.shape
    return 0 <= x < width and 0 <= y < height


def initial_grid(width: int, height: int) -> np.ndarray:
    """
    Build a grid in the starting position.

    The four centre cells are split diagonally between the players, with
    Player.ONE on the top-left/bottom-right diagonal. Odd dimensions give an
    off-centre pattern.
    """
    grid = np.full((height, width), Player.EMPTY.value, dtype=np.int8)

    mid_x = width // 2
    mid_y = height // 2

    grid[mid_y - 1, mid_x - 1] = Player.ONE.value
    grid[mid_y - 1, mid_x] = Player.TWO.value
    grid[mid_y, mid_x - 1] = Player.TWO.value
    grid[mid_y, mid_x] = Player.ONE.value

    return grid


def captures_in_direction(grid: np.ndarray, x: int, y: int, dx: int, dy: int,
                          player: Player) -> List[Coord]:
    """
    Cast a single ray from (x, y) and return the opponent discs it brackets.

    The ray must start on an opponent disc. It then continues over opponent
    discs until it meets one of ``player``'s discs (the run is captured) or
    an empty cell or the edge of the grid (nothing is captured).

    Returns:
        Coordinates strictly between (x, y) and the bracketing disc
    """
    opponent = player.other().value
    run: List[Coord] = []

    cx, cy = x + dx, y + dy
    while is_valid_position(grid, cx, cy):
        cell = grid[cy, cx]
        if cell == opponent:
            run.append((cx, cy))
        elif cell == player.value and run:
            return run
        else:
            break
        cx += dx
        cy += dy

    return []


def find_captures(grid: np.ndarray, x: int, y: int, player: Player) -> List[Coord]:
    """
    Find every opponent disc that a disc placed at (x, y) would flip.

    The target cell itself is not inspected; callers decide whether an
    occupied target makes the move illegal.

    Args:
        grid: The game grid
        x: Column of the placed disc
        y: Row of the placed disc
        player: The player placing the disc

    Returns:
        Captured coordinates, grouped by direction in DIRECTIONS order
    """
    captures: List[Coord] = []
    for dx, dy in DIRECTIONS:
        captures.extend(captures_in_direction(grid, x, y, dx, dy, player))
    return captures


def count_captures(grid: np.ndarray, x: int, y: int, player: Player) -> int:
    """Number of discs a move at (x, y) would flip."""
    return len(find_captures(grid, x, y, player))


def count_cells(grid: np.ndarray, player: Player) -> int:
    """Number of cells holding ``player`` (EMPTY counts empty cells)."""
    return int(np.count_nonzero(grid == player.value))


def render_board_ascii(grid: np.ndarray, hints: Optional[Dict[Coord, int]] = None) -> str:
    """
    Render the grid as ASCII art.

    Args:
        grid: The game grid
        hints: Optional capture counts keyed by (x, y); shown on empty cells

    Returns:
        ASCII representation of the board, column numbers on top and
        row numbers on the left
    """
    height, width = grid.shape
    label_width = len(str(height - 1))

    result = [" " * label_width + " " + " ".join(str(x % 10) for x in range(width))]

    for y in range(height):
        cells = []
        for x in range(width):
            player = Player(int(grid[y, x]))
            if player == Player.EMPTY and hints and hints.get((x, y)):
                count = hints[(x, y)]
                cells.append(str(count) if count < 10 else "+")
            else:
                cells.append(str(player))
        result.append(str(y).rjust(label_width) + " " + " ".join(cells))

    return "\n".join(result)
