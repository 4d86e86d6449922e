"""
board.py - Board representation and core game mechanics for Reversi

This module implements the Board class which holds the grid and the player
to move, evaluates moves by ray casting, and applies accepted moves.
"""

from typing import List, Optional, Tuple

import numpy as np

from reversi.debug import debug, DebugLevel
from reversi.utils import (BOARD_WIDTH, BOARD_HEIGHT, Coord, Player, GameResult,
                           initial_grid, is_valid_position, find_captures,
                           count_captures, count_cells, render_board_ascii)

MoveCandidate = Tuple[int, int, int]


class Board:
    """
    Represents a Reversi game board.

    The grid is only ever written by ``make_move`` and ``reset``. Illegal
    moves are rejected by returning False; they never raise.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT):
        """
        Initialize a board in the starting position.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is too small to hold the
                four starting discs
        """
        if width < 2 or height < 2:
            raise ValueError(f"Board must be at least 2x2, got {width}x{height}")

        debug.debug(f"Initializing new {width}x{height} Board", "board")
        self.width = width
        self.height = height
        self.reset()

    def reset(self):
        """Reset the board to the starting position with Player.ONE to move."""
        debug.debug("Resetting board", "board")
        self.grid = initial_grid(self.width, self.height)
        self.current_player = Player.ONE
        self.moves_made: List[Coord] = []
        self.last_move: Optional[Coord] = None

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same state
        """
        debug.trace("Creating board copy", "board")
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        new_board.current_player = self.current_player
        new_board.moves_made = self.moves_made.copy()
        new_board.last_move = self.last_move
        return new_board

    @classmethod
    def from_grid(cls, grid, current_player: Player = Player.ONE) -> 'Board':
        """
        Build a board from an explicit grid of cell values.

        Args:
            grid: Nested sequence or array of shape (height, width) holding
                Player values or their integer codes
            current_player: The player to move
        """
        cells = np.array([[Player(c).value for c in row] for row in grid], dtype=np.int8)
        height, width = cells.shape
        board = cls(width, height)
        board.grid = cells
        board.current_player = current_player
        return board

    def in_bounds(self, x: int, y: int) -> bool:
        return is_valid_position(self.grid, x, y)

    def cell(self, x: int, y: int) -> Player:
        return Player(int(self.grid[y, x]))

    def get_captures(self, x: int, y: int, player: Player = None) -> List[Coord]:
        """
        Get the discs that ``player`` would flip by placing at (x, y).

        The target cell is not inspected; see ``is_valid_move``.

        Args:
            x: Column of the move
            y: Row of the move
            player: The moving player. If None, uses the current player.

        Returns:
            List of (x, y) coordinates that would change colour
        """
        if player is None:
            player = self.current_player
        return find_captures(self.grid, x, y, player)

    def count_captures(self, x: int, y: int, player: Player = None) -> int:
        if player is None:
            player = self.current_player
        return count_captures(self.grid, x, y, player)

    def is_valid_move(self, x: int, y: int, player: Player = None) -> bool:
        """A move is legal if the cell is on the board, empty, and captures something."""
        if not self.in_bounds(x, y):
            return False
        if self.grid[y, x] != Player.EMPTY.value:
            return False
        return self.count_captures(x, y, player) > 0

    def get_move_candidates(self, player: Player = None) -> List[MoveCandidate]:
        """
        Enumerate every legal move with its capture count.

        Cells are visited in row-major order (y outer, x inner), which is
        the order the returned list keeps.

        Returns:
            List of (x, y, capture_count) tuples
        """
        if player is None:
            player = self.current_player

        candidates = []
        for y in range(self.height):
            for x in range(self.width):
                if self.grid[y, x] != Player.EMPTY.value:
                    continue
                count = self.count_captures(x, y, player)
                if count:
                    candidates.append((x, y, count))
        return candidates

    def get_valid_moves(self, player: Player = None) -> List[Coord]:
        return [(x, y) for x, y, _ in self.get_move_candidates(player)]

    def has_valid_move(self, player: Player = None) -> bool:
        return bool(self.get_move_candidates(player))

    def make_move(self, x: int, y: int) -> bool:
        """
        Place a disc for the current player and flip the captured discs.

        Args:
            x: Column of the move
            y: Row of the move

        Returns:
            True if the move was applied, False if it was illegal (the board
            is left untouched)
        """
        player = self.current_player
        debug.debug(f"Attempting move at ({x}, {y}) for player {player.name}", "board")

        if not self.in_bounds(x, y):
            debug.debug(f"Invalid move: ({x}, {y}) is off the board", "board")
            return False

        if self.grid[y, x] != Player.EMPTY.value:
            debug.debug(f"Invalid move: ({x}, {y}) is occupied", "board")
            return False

        captures = self.get_captures(x, y, player)
        if not captures:
            debug.debug(f"Invalid move: ({x}, {y}) captures nothing", "board")
            return False

        self.grid[y, x] = player.value
        for cx, cy in captures:
            self.grid[cy, cx] = player.value
        debug.trace(f"Flipped {len(captures)} discs: {captures}", "board")

        self.last_move = (x, y)
        self.moves_made.append((x, y))
        self.current_player = player.other()
        debug.debug(f"Switching to player {self.current_player.name}", "board")

        return True

    def count(self, player: Player) -> int:
        """Number of cells held by ``player``."""
        return count_cells(self.grid, player)

    def empty_count(self) -> int:
        return count_cells(self.grid, Player.EMPTY)

    def is_game_over(self, player: Player = None) -> bool:
        """The game ends when the player to move has nowhere to play."""
        return not self.has_valid_move(player)

    @property
    def game_result(self) -> GameResult:
        """
        Outcome of the game, decided by disc count once it is over.

        Equal counts are a draw.
        """
        if not self.is_game_over():
            return GameResult.IN_PROGRESS

        one = self.count(Player.ONE)
        two = self.count(Player.TWO)
        if one > two:
            return GameResult.PLAYER_ONE_WIN
        elif two > one:
            return GameResult.PLAYER_TWO_WIN
        return GameResult.DRAW

    def get_state(self) -> np.ndarray:
        """
        Get the current grid as a read-only numpy array.

        Returns:
            A copy of the grid that cannot be written to
        """
        snapshot = self.grid.copy()
        snapshot.flags.writeable = False
        return snapshot

    def get_hints(self, player: Player = None) -> dict:
        """Capture counts of the legal moves, keyed by (x, y)."""
        return {(x, y): count for x, y, count in self.get_move_candidates(player)}

    def render(self, show_hints: bool = False) -> str:
        """
        Render the board as a string.

        Args:
            show_hints: Overlay the current player's capture counts on
                empty cells

        Returns:
            String representation of the board
        """
        hints = self.get_hints() if show_hints else None
        return render_board_ascii(self.grid, hints)

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    debug.configure(level=DebugLevel.DEBUG)

    board = Board()
    print("Initial board:")
    print(board.render(show_hints=True))

    for x, y in [(3, 1), (2, 1), (1, 1), (4, 3)]:
        print(f"\nMaking move at ({x}, {y})")
        if board.make_move(x, y):
            print(board)
        else:
            print(f"Invalid move: ({x}, {y})")

    print(f"\nScore X: {board.count(Player.ONE)}, O: {board.count(Player.TWO)}")
    print(f"Game result: {board.game_result}")
