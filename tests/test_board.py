"""Unit tests for the board: start position, capture search, applying moves."""

import numpy as np
import pytest

from reversi.game.board import Board
from reversi.utils import (DIRECTIONS, GameResult, Player, count_captures, find_captures,
                           render_board_ascii)

E, A, B = Player.EMPTY.value, Player.ONE.value, Player.TWO.value


def empty_grid(width=6, height=6):
    return [[E] * width for _ in range(height)]


class TestInitialBoard:
    def test_start_position(self):
        board = Board()
        assert board.cell(2, 2) == Player.ONE
        assert board.cell(3, 3) == Player.ONE
        assert board.cell(3, 2) == Player.TWO
        assert board.cell(2, 3) == Player.TWO
        assert board.count(Player.ONE) == 2
        assert board.count(Player.TWO) == 2
        assert board.empty_count() == 32
        assert board.current_player == Player.ONE

    def test_grid_shape_is_height_by_width(self):
        board = Board(8, 4)
        assert board.grid.shape == (4, 8)
        assert board.cell(3, 1) == Player.ONE
        assert board.cell(4, 1) == Player.TWO
        assert board.cell(3, 2) == Player.TWO
        assert board.cell(4, 2) == Player.ONE

    def test_odd_dimensions_are_allowed(self):
        board = Board(5, 5)
        assert board.cell(1, 1) == Player.ONE
        assert board.cell(2, 1) == Player.TWO
        assert board.cell(1, 2) == Player.TWO
        assert board.cell(2, 2) == Player.ONE
        assert board.empty_count() == 21

    def test_too_small_board_rejected(self):
        with pytest.raises(ValueError):
            Board(1, 6)

    def test_reset_restores_start(self):
        board = Board()
        board.make_move(3, 1)
        board.reset()
        assert np.array_equal(board.grid, Board().grid)
        assert board.current_player == Player.ONE
        assert board.moves_made == []
        assert board.last_move is None

    def test_opening_moves(self):
        board = Board()
        assert set(board.get_valid_moves(Player.ONE)) == {(3, 1), (4, 2), (1, 3), (2, 4)}
        assert set(board.get_valid_moves(Player.TWO)) == {(2, 1), (1, 2), (4, 3), (3, 4)}


class TestCaptures:
    def test_horizontal_bracket(self):
        grid = empty_grid()
        grid[2] = [E, B, B, A, E, E]
        board = Board.from_grid(grid)
        assert set(board.get_captures(0, 2)) == {(1, 2), (2, 2)}

    def test_horizontal_bracket_leftwards(self):
        grid = empty_grid()
        grid[2] = [A, B, B, E, E, E]
        board = Board.from_grid(grid)
        assert set(board.get_captures(3, 2)) == {(1, 2), (2, 2)}

    def test_vertical_bracket(self):
        grid = empty_grid()
        grid[0][4] = A
        grid[1][4] = B
        grid[2][4] = B
        grid[3][4] = B
        board = Board.from_grid(grid)
        assert set(board.get_captures(4, 4)) == {(4, 1), (4, 2), (4, 3)}

    def test_diagonal_bracket(self):
        grid = empty_grid()
        grid[0][0] = A
        grid[1][1] = B
        grid[2][2] = B
        board = Board.from_grid(grid)
        assert set(board.get_captures(3, 3)) == {(1, 1), (2, 2)}

    @pytest.mark.parametrize("dx,dy", DIRECTIONS)
    def test_every_direction(self, dx, dy):
        grid = empty_grid()
        grid[2 + dy][2 + dx] = B
        grid[2 + 2 * dy][2 + 2 * dx] = A
        board = Board.from_grid(grid)
        assert board.get_captures(2, 2, Player.ONE) == [(2 + dx, 2 + dy)]

    def test_several_directions_add_up(self):
        grid = empty_grid()
        grid[2] = [E, B, A, E, E, E]
        grid[1][0] = B
        grid[0][0] = A
        grid[1][1] = B
        grid[0][2] = A
        board = Board.from_grid(grid)
        assert set(board.get_captures(0, 2)) == {(1, 2), (0, 1), (1, 1)}
        assert board.count_captures(0, 2) == 3

    def test_run_to_edge_captures_nothing(self):
        grid = empty_grid()
        grid[0] = [E, B, B, B, B, B]
        board = Board.from_grid(grid)
        assert board.get_captures(0, 0) == []

    def test_run_ending_in_empty_captures_nothing(self):
        grid = empty_grid()
        grid[0] = [E, B, B, E, A, E]
        board = Board.from_grid(grid)
        assert board.get_captures(0, 0) == []

    def test_adjacent_own_disc_stops_the_ray(self):
        grid = empty_grid()
        grid[0] = [E, A, B, A, E, E]
        board = Board.from_grid(grid)
        assert board.get_captures(0, 0) == []

    def test_adjacent_empty_stops_the_ray(self):
        grid = empty_grid()
        grid[0] = [E, E, B, A, E, E]
        board = Board.from_grid(grid)
        assert board.get_captures(0, 0) == []

    def test_captures_for_other_player(self):
        grid = empty_grid()
        grid[0] = [E, A, A, B, E, E]
        board = Board.from_grid(grid)
        assert board.get_captures(0, 0, Player.ONE) == []
        assert board.get_captures(0, 0, Player.TWO) == [(1, 0), (2, 0)]

    def test_target_cell_not_inspected(self):
        grid = empty_grid()
        grid[0] = [B, B, A, E, E, E]
        board = Board.from_grid(grid)
        assert find_captures(board.grid, 0, 0, Player.ONE) == [(1, 0)]
        assert not board.is_valid_move(0, 0, Player.ONE)

    def test_off_board_move_is_invalid(self):
        board = Board()
        assert not board.is_valid_move(-1, 0)
        assert not board.is_valid_move(0, 6)


class TestMakeMove:
    def test_move_flips_and_switches_turn(self):
        board = Board()
        assert board.make_move(3, 1)
        assert board.cell(3, 1) == Player.ONE
        assert board.cell(3, 2) == Player.ONE
        assert board.count(Player.ONE) == 4
        assert board.count(Player.TWO) == 1
        assert board.current_player == Player.TWO
        assert board.last_move == (3, 1)
        assert board.moves_made == [(3, 1)]

    def test_flips_exactly_the_bracketed_run(self):
        grid = empty_grid()
        grid[3] = [E, B, B, B, A, B]
        board = Board.from_grid(grid)
        assert board.make_move(0, 3)
        assert [board.cell(x, 3) for x in range(6)] == [
            Player.ONE, Player.ONE, Player.ONE, Player.ONE, Player.ONE, Player.TWO]

    def test_occupied_cell_is_noop(self):
        board = Board()
        before = board.grid.copy()
        assert not board.make_move(2, 2)
        assert np.array_equal(board.grid, before)
        assert board.current_player == Player.ONE
        assert board.moves_made == []

    def test_zero_capture_cell_is_noop(self):
        board = Board()
        before = board.grid.copy()
        assert not board.make_move(0, 0)
        assert np.array_equal(board.grid, before)
        assert board.current_player == Player.ONE

    def test_off_board_is_noop(self):
        board = Board()
        before = board.grid.copy()
        assert not board.make_move(6, 0)
        assert np.array_equal(board.grid, before)

    def test_copy_is_independent(self):
        board = Board()
        clone = board.copy()
        clone.make_move(3, 1)
        assert board.cell(3, 1) == Player.EMPTY
        assert board.current_player == Player.ONE


class TestGameResult:
    def test_in_progress_at_start(self):
        assert Board().game_result == GameResult.IN_PROGRESS

    def test_full_board_draw(self):
        grid = [[A if (x + y) % 2 == 0 else B for x in range(6)] for y in range(6)]
        board = Board.from_grid(grid)
        assert board.is_game_over(Player.ONE)
        assert board.is_game_over(Player.TWO)
        assert board.game_result == GameResult.DRAW
        assert board.game_result.winner() is None

    def test_full_board_winner(self):
        grid = [[A if y < 4 else B for x in range(6)] for y in range(6)]
        board = Board.from_grid(grid, Player.TWO)
        assert board.is_game_over()
        assert board.game_result == GameResult.PLAYER_ONE_WIN
        assert board.game_result.winner() == Player.ONE

    def test_player_to_move_stuck_ends_game(self):
        grid = empty_grid()
        grid[0] = [A, B, E, E, E, E]
        board = Board.from_grid(grid, Player.TWO)
        assert board.is_game_over()
        assert not board.is_game_over(Player.ONE)
        assert board.game_result == GameResult.DRAW

    def test_get_state_is_read_only(self):
        board = Board()
        state = board.get_state()
        with pytest.raises(ValueError):
            state[0, 0] = Player.ONE.value
        assert board.cell(0, 0) == Player.EMPTY


class TestPlayer:
    def test_other(self):
        assert Player.ONE.other() == Player.TWO
        assert Player.TWO.other() == Player.ONE

    def test_empty_has_no_opponent(self):
        with pytest.raises(ValueError):
            Player.EMPTY.other()

    def test_empty_cannot_be_evaluated(self):
        board = Board()
        with pytest.raises(ValueError):
            board.get_captures(3, 1, Player.EMPTY)

    def test_board_and_grid_counts_agree(self):
        board = Board()
        for y in range(board.height):
            for x in range(board.width):
                assert board.count_captures(x, y) == count_captures(board.grid, x, y, Player.ONE)
                assert board.count_captures(x, y) == len(board.get_captures(x, y))


class TestHints:
    def test_opening_hints(self):
        board = Board()
        assert board.get_hints() == {(3, 1): 1, (4, 2): 1, (1, 3): 1, (2, 4): 1}
        assert board.get_hints(Player.TWO) == {(2, 1): 1, (1, 2): 1, (4, 3): 1, (3, 4): 1}

    def test_opening_render_with_hints(self):
        assert Board().render(show_hints=True) == "\n".join([
            "  0 1 2 3 4 5",
            "0 . . . . . .",
            "1 . . . 1 . .",
            "2 . . X O 1 .",
            "3 . 1 O X . .",
            "4 . . 1 . . .",
            "5 . . . . . .",
        ])

    def test_render_without_hints_has_no_digits_on_board(self):
        rows = Board().render().split("\n")[1:]
        for row in rows:
            assert not any(ch.isdigit() for ch in row[2:])

    def test_occupied_cells_never_show_a_count(self):
        board = Board()
        rendered = render_board_ascii(board.grid, {(2, 2): 3, (3, 2): 4, (0, 0): 2})
        rows = rendered.split("\n")
        assert rows[1] == "0 2 . . . . ."
        assert rows[3] == "2 . . X O . ."

    def test_counts_hidden_after_move(self):
        board = Board()
        board.make_move(3, 1)
        rows = board.render(show_hints=True).split("\n")[1:]
        for y, row in enumerate(rows):
            cells = row.split()[1:]
            for x, cell in enumerate(cells):
                if board.cell(x, y) != Player.EMPTY:
                    assert not cell.isdigit()

    def test_large_count_shown_as_plus(self):
        grid = Board(12, 2).grid
        rendered = render_board_ascii(grid, {(0, 0): 11})
        assert rendered.split("\n")[1].split()[1] == "+"
