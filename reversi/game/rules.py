"""
rules.py - Game state management and Gymnasium environment for Reversi

This module provides:
1. ReversiGame, the interface a display or input layer talks to
2. A gymnasium-compatible environment for reinforcement learning
"""

from typing import Dict, Tuple, Optional, Any, List

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from reversi.debug import debug, DebugLevel
from reversi.utils import BOARD_WIDTH, BOARD_HEIGHT, Coord, Player, GameResult
from reversi.game.board import Board


class ReversiGame:
    """
    High-level Reversi game manager.

    Every state change goes through ``attempt_move``,
    ``request_automated_move`` or ``reset``. ``get_board`` hands out
    read-only snapshots, so callers cannot change the game behind its back.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT):
        # imported here to avoid a circular import with reversi.ai
        from reversi.ai.greedy import GreedyPlayer

        debug.debug("Initializing ReversiGame", "game")
        self.board = Board(width, height)
        self.computer = GreedyPlayer()

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    def reset(self) -> None:
        """Return to the starting position with Player.ONE to move."""
        debug.debug("Resetting game", "game")
        self.board.reset()

    def get_board(self) -> np.ndarray:
        """
        Get a read-only snapshot of the grid.

        Returns:
            numpy array of shape (height, width) holding Player values
        """
        return self.board.get_state()

    def get_current_player(self) -> Player:
        return self.board.current_player

    def attempt_move(self, x: int, y: int) -> bool:
        """
        Play the current player's disc at (x, y).

        Args:
            x: Column of the move
            y: Row of the move

        Returns:
            True if the move was applied; False if it was illegal, in which
            case nothing changed
        """
        debug.debug(f"Game: attempting move at ({x}, {y})", "game")
        if not self.board.make_move(x, y):
            return False

        if self.is_game_over():
            debug.info(f"Game over: {self.get_result().name} "
                       f"({self.score(Player.ONE)}-{self.score(Player.TWO)})", "game")
        return True

    def legal_move_count(self, x: int, y: int, player: Player = None) -> int:
        """
        Number of discs a move at (x, y) would flip, 0 if the move is illegal.

        Args:
            x: Column of the move
            y: Row of the move
            player: The player to ask for. If None, uses the current player.
        """
        if not self.board.in_bounds(x, y):
            debug.debug(f"Count requested for off-board cell ({x}, {y})", "game")
            return 0
        if self.board.cell(x, y) != Player.EMPTY:
            return 0
        return self.board.count_captures(x, y, player)

    def get_valid_moves(self, player: Player = None) -> List[Coord]:
        return self.board.get_valid_moves(player)

    def score(self, player: Player) -> int:
        return self.board.count(player)

    def is_game_over(self, player: Player = None) -> bool:
        """
        Check if the game is over.

        Args:
            player: Ask whether this player could move instead of the
                current player

        Returns:
            True if the player has no legal move anywhere on the board
        """
        return self.board.is_game_over(player)

    def get_result(self) -> GameResult:
        return self.board.game_result

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The player holding more discs once the game is over, or None
            while the game is running or when it ends in a draw
        """
        return self.get_result().winner()

    def request_automated_move(self, player: Player = None) -> Optional[Coord]:
        """
        Let the greedy computer player move for ``player``.

        Only the player to move can be played for; asking for the other
        player, or for a player with no legal move, changes nothing.

        Returns:
            The (x, y) that was played, or None if no move was made
        """
        if player is None:
            player = self.get_current_player()

        if player != self.get_current_player():
            debug.debug(f"Ignoring computer move for {player.name}: "
                        f"{self.get_current_player().name} is to move", "game")
            return None

        move = self.computer.get_move(self.board, player)
        if move is None:
            return None

        self.attempt_move(*move)
        return move

    def render(self, show_hints: bool = False) -> str:
        return self.board.render(show_hints)


class ReversiEnv(gym.Env):
    """
    Reversi environment following the Gymnasium interface.

    Both sides are played by the agent: each step places a disc for the
    player to move. Action ``a`` is the cell ``(a % width, a // width)``.
    Rewards are from the point of view of the player who just moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT):
        debug.debug("Initializing ReversiEnv", "env")

        self.game = ReversiGame(width, height)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(width * height)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(height, width), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.0
        self.reward_invalid_move = -0.5
        self.reward_step = 0.0

    def action_to_coord(self, action: int) -> Coord:
        return (int(action) % self.game.width, int(action) // self.game.width)

    def coord_to_action(self, x: int, y: int) -> int:
        return y * self.game.width + x

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to the starting position.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.game.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Place a disc for the player to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        x, y = self.action_to_coord(action)
        mover = self.game.get_current_player()
        debug.debug(f"Environment step with action {action} -> ({x}, {y})", "env")

        if not self.game.attempt_move(x, y):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = self.game.is_game_over()
        if terminated:
            winner = self.game.get_winner()
            if winner is None:
                reward = self.reward_draw
            elif winner == mover:
                reward = self.reward_win
            else:
                reward = self.reward_lose
            debug.info(f"Episode finished: {self.game.get_result().name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.game.render()
        elif self.render_mode == "human":
            print(self.game.render())
        return None

    def action_mask(self) -> np.ndarray:
        """Boolean mask over the action space marking legal actions."""
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.game.get_valid_moves():
            mask[self.coord_to_action(x, y)] = True
        return mask

    def _get_observation(self) -> np.ndarray:
        return np.array(self.game.get_board(), dtype=np.int8)

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.game.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.get_current_player().value,
            'game_result': self.game.get_result().name,
            'score': (self.game.score(Player.ONE), self.game.score(Player.TWO)),
            'last_move': self.game.board.last_move,
        }

    def close(self):
        pass


if __name__ == "__main__":
    debug.configure(level=DebugLevel.INFO)

    print("Testing ReversiEnv:")
    env = ReversiEnv(render_mode="human")
    observation, info = env.reset(seed=0)

    done = False
    while not done:
        x, y = info['valid_moves'][np.random.randint(info['num_valid_moves'])]
        action = env.coord_to_action(x, y)
        print(f"Taking action: {action}")
        observation, reward, terminated, truncated, info = env.step(action)
        done = terminated or truncated
        print(f"Reward: {reward}, Done: {done}")

    print("\nTesting ReversiGame with greedy moves:")
    game = ReversiGame()
    while not game.is_game_over():
        move = game.request_automated_move()
        print(f"\n{game.get_current_player().other().name} played {move}")
        print(game.render())
    print(f"Result: {game.get_result().name}")
