"""
Unit tests for the Tic-Tac-Toe page model: status line, board cells, move list.
"""
import unittest

from app.projects.tic_tac_toe.core.game import GameState
from app.projects.tic_tac_toe.core.view import (
    move_description,
    move_entries,
    render,
    sort_label,
    status_text,
)


def _play(moves):
    game = GameState()
    for index in moves:
        game.apply_move(index)
    return game


class TestStatusText(unittest.TestCase):

    def test_new_game(self):
        self.assertEqual(status_text(GameState()), "Next player: X")

    def test_after_first_move(self):
        self.assertEqual(status_text(_play([4])), "Next player: O")

    def test_winner(self):
        self.assertEqual(status_text(_play([0, 1, 3, 4, 6])), "Winner: X")

    def test_o_wins(self):
        self.assertEqual(status_text(_play([0, 4, 1, 2, 8, 6])), "Winner: O")

    def test_draw(self):
        self.assertEqual(status_text(_play([0, 1, 2, 4, 3, 5, 7, 6, 8])), "It's a draw!")

    def test_win_on_full_board_beats_draw(self):
        self.assertEqual(status_text(_play([0, 1, 2, 3, 4, 5, 7, 6, 8])), "Winner: X")


class TestMoveDescription(unittest.TestCase):

    def test_game_start(self):
        self.assertEqual(move_description(0), "Go to game start")

    def test_row_and_col_from_move_number(self):
        self.assertEqual(move_description(1), "Go to move #1 (row: 0, col: 0)")
        self.assertEqual(move_description(3), "Go to move #3 (row: 0, col: 2)")
        self.assertEqual(move_description(4), "Go to move #4 (row: 1, col: 0)")
        self.assertEqual(move_description(9), "Go to move #9 (row: 2, col: 2)")

    def test_label_ignores_cell_played(self):
        # First move played in the centre is still labelled row 0, col 0
        game = _play([4, 0])
        game.jump_to(0)
        self.assertEqual(move_entries(game)[1]["label"], "Go to move #1 (row: 0, col: 0)")


class TestSortLabel(unittest.TestCase):

    def test_labels(self):
        self.assertEqual(sort_label(True), "Sort Descending")
        self.assertEqual(sort_label(False), "Sort Ascending")


class TestMoveEntries(unittest.TestCase):

    def test_current_move_is_inert(self):
        game = _play([0, 1])
        entries = move_entries(game)
        self.assertEqual([e["move"] for e in entries], [0, 1, 2])
        self.assertEqual(entries[2], {"move": 2, "label": "You are at move #2", "is_current": True})
        self.assertFalse(entries[0]["is_current"])
        self.assertEqual(entries[0]["label"], "Go to game start")

    def test_descending_order(self):
        game = _play([0, 1])
        game.toggle_sort_order()
        self.assertEqual([e["move"] for e in move_entries(game)], [2, 1, 0])

    def test_entry_per_history_index_after_jump(self):
        game = _play([0, 1, 2])
        game.jump_to(1)
        entries = move_entries(game)
        self.assertEqual(len(entries), 4)
        self.assertEqual(entries[1]["label"], "You are at move #1")
        self.assertEqual(entries[3]["label"], "Go to move #3 (row: 0, col: 2)")


class TestRender(unittest.TestCase):

    def test_new_game(self):
        view = render(GameState())
        self.assertEqual(view["status"], "Next player: X")
        self.assertEqual(view["sort_label"], "Sort Descending")
        self.assertEqual(len(view["rows"]), 3)
        self.assertTrue(all(len(row) == 3 for row in view["rows"]))
        self.assertEqual([cell["index"] for row in view["rows"] for cell in row], list(range(9)))
        self.assertFalse(any(cell["is_winning"] for row in view["rows"] for cell in row))

    def test_winning_cells_are_marked(self):
        view = render(_play([0, 1, 3, 4, 6]))
        self.assertEqual(view["winner"], "X")
        self.assertEqual(view["winning_squares"], [0, 3, 6])
        winning = [cell["index"] for row in view["rows"] for cell in row if cell["is_winning"]]
        self.assertEqual(winning, [0, 3, 6])

    def test_cell_values(self):
        view = render(_play([4]))
        self.assertEqual(view["rows"][1][1]["value"], "X")
        self.assertIsNone(view["rows"][0][0]["value"])

    def test_render_does_not_change_state(self):
        game = _play([0, 1])
        game.toggle_sort_order()
        render(game)
        self.assertEqual(game.current_move, 2)
        self.assertEqual(len(game.history), 3)
        self.assertFalse(game.is_ascending)
