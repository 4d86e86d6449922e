"""
cli.py - Command-line interface for playing and exercising the Reversi engine

This module provides a CLI for playing interactively against the greedy
computer player (or another human), watching greedy self-play, and timing
the engine. The hint overlay is a display setting owned by the CLI; the
engine is only asked for capture counts.
"""

import argparse
import random
import sys
from typing import Optional, Tuple, Union

from reversi.debug import debug, DebugLevel
from reversi.utils import BOARD_WIDTH, BOARD_HEIGHT, Player, GameResult
from reversi.game.board import Board
from reversi.game.rules import ReversiGame

# Special commands returned by get_human_move
QUIT = 'quit'
RESTART = 'restart'
HINTS = 'hints'
COMPUTER = 'computer'

COMMANDS = {'q': QUIT, 'r': RESTART, 'h': HINTS, 'c': COMPUTER}


def parse_coord(text: str) -> Tuple[int, int]:
    """
    Parse "x y" or "x,y" into a coordinate pair.

    Raises:
        ValueError: If the text is not two integers
    """
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        raise ValueError(f"Expected two numbers, got {text!r}")
    return int(parts[0]), int(parts[1])


def describe_result(result: GameResult) -> str:
    if result == GameResult.PLAYER_ONE_WIN:
        return f"Player 1 ({Player.ONE}) wins"
    elif result == GameResult.PLAYER_TWO_WIN:
        return f"Player 2 ({Player.TWO}) wins"
    elif result == GameResult.DRAW:
        return "It's a draw"
    return "Game in progress"


class SimpleCLI:
    """Simple command-line interface for Reversi."""

    def __init__(self):
        self.game: Optional[ReversiGame] = None
        self.show_hints = False
        self.args = None

    def parse_args(self, argv=None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Reversi CLI')
        parser.add_argument('--debug-level', default='info',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging verbosity')
        parser.add_argument('--log-file', type=str, default=None,
                            help='Also write log output to this file')
        parser.add_argument('--width', type=int, default=BOARD_WIDTH, help='Board width')
        parser.add_argument('--height', type=int, default=BOARD_HEIGHT, help='Board height')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--ai', choices=['greedy', 'none'], default='greedy',
                                 help='Computer opponent for player 2')
        play_parser.add_argument('--hints', action='store_true',
                                 help='Start with capture hints shown')

        subparsers.add_parser('demo', help='Watch the greedy player play both sides')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of iterations for benchmarking')

        self.args = parser.parse_args(argv)

        debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv=None) -> None:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        try:
            try:
                self.game = ReversiGame(self.args.width, self.args.height)
            except ValueError as e:
                print(f"Error: {e}")
                sys.exit(2)

            if self.args.command == 'play':
                self.show_hints = self.args.hints
                self.play_game()
            elif self.args.command == 'demo':
                self.demo()
            elif self.args.command == 'benchmark':
                self.benchmark()
            else:
                print("Please specify a command. Use --help for options.")
                sys.exit(1)
        finally:
            debug.close()

    def render(self) -> str:
        """Board plus the score line, marking the player to move."""
        turn = self.game.get_current_player()
        scores = []
        for player in (Player.ONE, Player.TWO):
            marker = '>' if player == turn else ' '
            scores.append(f"{marker}{player}: {self.game.score(player)}")
        return self.game.render(self.show_hints) + "\n" + "   ".join(scores)

    def play_game(self) -> None:
        """Play a Reversi game interactively."""
        print("Starting a new Reversi game!")
        print("Enter 'x y' to place a disc.")
        print("Other commands: 'h' hints, 'c' computer move, 'r' restart, 'q' quit.")

        self.game.reset()
        print(self.render())

        while not self.game.is_game_over():
            current_player = self.game.get_current_player()

            if current_player == Player.TWO and self.args.ai == 'greedy':
                move = self.game.request_automated_move()
                print(f"Computer plays {move[0]} {move[1]}")
                print(self.render())
                continue

            move = self.get_human_move(current_player)
            if move is None:
                continue
            elif move == QUIT:
                print("Quitting game.")
                return
            elif move == RESTART:
                self.game.reset()
                print("Game restarted.")
            elif move == HINTS:
                self.show_hints = not self.show_hints
                print(f"Hints {'on' if self.show_hints else 'off'}.")
            elif move == COMPUTER:
                played = self.game.request_automated_move()
                print(f"Computer plays {played[0]} {played[1]}")
            elif not self.game.attempt_move(*move):
                print(f"Illegal move: {move[0]} {move[1]}")
                continue

            print(self.render())

        print("Game over!")
        print(describe_result(self.game.get_result()))

    def get_human_move(self, player: Player) -> Union[Tuple[int, int], str, None]:
        """
        Read a move or command from the player.

        Returns:
            A coordinate pair, a command constant, or None for bad input
        """
        user_input = input(f"Player {player} move (x y, h/c/r/q): ").strip().lower()

        if user_input in COMMANDS:
            return COMMANDS[user_input]

        try:
            return parse_coord(user_input)
        except ValueError:
            print("Invalid input. Please enter two numbers or a command.")
            return None

    def demo(self) -> None:
        """Play a full game with the greedy player on both sides."""
        self.game.reset()
        print(self.render())

        while not self.game.is_game_over():
            player = self.game.get_current_player()
            x, y = self.game.request_automated_move()
            print(f"\nPlayer {player} plays {x} {y}")
            print(self.render())

        print(f"\n{describe_result(self.game.get_result())}")

    def benchmark(self) -> None:
        """Benchmark the engine on random and greedy games."""
        iterations = self.args.iterations
        width, height = self.args.width, self.args.height
        print(f"Running benchmark with {iterations} iterations...")

        debug.start_timer("board_init")
        for _ in range(iterations):
            Board(width, height)
        board_init_time = debug.end_timer("board_init")
        print(f"Board initialization: {board_init_time:.6f} seconds total, "
              f"{board_init_time / iterations * 1000:.6f} ms per board")

        board = Board(width, height)
        debug.start_timer("move_generation")
        for _ in range(iterations):
            board.get_move_candidates()
        generation_time = debug.end_timer("move_generation")
        print(f"Move generation: {generation_time:.6f} seconds total, "
              f"{generation_time / iterations * 1000:.6f} ms per position")

        games = max(1, iterations // 10)
        total_moves = 0
        debug.start_timer("random_games")
        for _ in range(games):
            board = Board(width, height)
            while True:
                moves = board.get_valid_moves()
                if not moves:
                    break
                board.make_move(*random.choice(moves))
                total_moves += 1
        random_time = debug.end_timer("random_games")
        print(f"Played {games} random games with {total_moves} moves: "
              f"{random_time / games * 1000:.6f} ms per game")

        debug.start_timer("greedy_games")
        for _ in range(games):
            game = ReversiGame(width, height)
            while game.request_automated_move() is not None:
                pass
        greedy_time = debug.end_timer("greedy_games")
        print(f"Played {games} greedy games: {greedy_time / games * 1000:.6f} ms per game")


def main(argv=None):
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.run(argv)


if __name__ == "__main__":
    main()
