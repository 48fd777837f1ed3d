import itertools
import unittest

from tictactoe.board import EMPTY, WINNING_LINES, Board


class TestBoard(unittest.TestCase):
    def test_empty_board_has_no_winner(self) -> None:
        board = Board()
        self.assertFalse(board.check_win("X"))
        self.assertFalse(board.check_win("O"))
        self.assertEqual(board.count_empty(), 9)
        self.assertFalse(board.is_full())

    def test_every_line_is_detected(self) -> None:
        for symbol in ("X", "O"):
            for line in WINNING_LINES:
                board = Board()
                for row, col in line:
                    self.assertTrue(board.place(row, col, symbol))
                self.assertTrue(board.check_win(symbol), f"{symbol} on {line}")
                self.assertEqual(board.winning_line(symbol), line)
                other = "O" if symbol == "X" else "X"
                self.assertFalse(board.check_win(other))

    def test_two_in_a_row_is_not_a_win(self) -> None:
        board = Board.from_rows([["X", "X", " "], ["O", "O", " "], [" ", " ", " "]])
        self.assertFalse(board.check_win("X"))
        self.assertFalse(board.check_win("O"))

    def test_place_rejects_bad_input_without_mutation(self) -> None:
        board = Board()
        for row, col in [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)]:
            self.assertFalse(board.place(row, col, "X"))
        self.assertFalse(board.place(0, 0, "Z"))
        self.assertFalse(board.place(0, 0, EMPTY))
        self.assertEqual(board, Board())

    def test_place_on_occupied_cell_keeps_first_symbol(self) -> None:
        board = Board()
        self.assertTrue(board.place(1, 1, "X"))
        self.assertFalse(board.place(1, 1, "O"))
        self.assertFalse(board.place(1, 1, "X"))
        self.assertEqual(board.get(1, 1), "X")
        self.assertEqual(board.count_empty(), 8)

    def test_clone_is_independent_both_ways(self) -> None:
        original = Board.from_rows([["X", " ", " "], [" ", "O", " "], [" ", " ", " "]])
        for row, col in itertools.product(range(3), range(3)):
            clone = original.clone()
            before = original.rows()
            clone.place(row, col, "X")
            self.assertEqual(original.rows(), before)

        clone = original.clone()
        original.place(2, 2, "O")
        self.assertTrue(clone.is_cell_empty(2, 2))
        original.clear()
        self.assertEqual(clone.get(0, 0), "X")

    def test_full_board_without_winner(self) -> None:
        board = Board.from_rows([["X", "O", "X"], ["X", "O", "O"], ["O", "X", "X"]])
        self.assertTrue(board.is_full())
        self.assertEqual(board.count_empty(), 0)
        self.assertFalse(board.check_win("X"))
        self.assertFalse(board.check_win("O"))
        self.assertEqual(board.empty_cells(), [])

    def test_clear_resets_every_cell(self) -> None:
        board = Board.from_rows([["X", "O", "X"], ["X", "O", "O"], ["O", "X", "X"]])
        board.clear()
        self.assertEqual(board, Board())

    def test_empty_cells_are_row_major(self) -> None:
        board = Board.from_rows([["X", " ", " "], [" ", "O", " "], [" ", " ", "X"]])
        self.assertEqual(board.empty_cells(), [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)])

    def test_is_cell_empty_out_of_range(self) -> None:
        self.assertFalse(Board().is_cell_empty(3, 1))

    def test_from_rows_rejects_wrong_shape(self) -> None:
        with self.assertRaises(ValueError):
            Board.from_rows([["X", "O"], ["O", "X"]])


if __name__ == "__main__":
    unittest.main()
