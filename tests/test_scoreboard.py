import unittest

from tictactoe.scoreboard import Difficulty, GameStateError, Player, ScoreTracker


class TestScoreTracker(unittest.TestCase):
    def setUp(self) -> None:
        self.alice = Player("X", "Alice")
        self.computer = Player("O", "Computer", is_computer=True)
        self.score = ScoreTracker(self.alice, self.computer)

    def test_player_one_moves_first(self) -> None:
        self.assertIs(self.score.current_player, self.alice)
        self.assertEqual(self.score.players, (self.alice, self.computer))

    def test_switch_twice_returns_to_original(self) -> None:
        self.assertIs(self.score.switch_player(), self.computer)
        self.assertIs(self.score.current_player, self.computer)
        self.score.switch_player()
        self.assertIs(self.score.current_player, self.alice)

    def test_unset_current_falls_back_to_player_one(self) -> None:
        score = ScoreTracker()
        score.register(self.alice)
        score.register(self.computer)
        self.assertIs(score.current_player, self.alice)
        self.assertIs(score.switch_player(), self.alice)

    def test_reset_turn(self) -> None:
        self.score.switch_player()
        self.score.reset_turn()
        self.assertIs(self.score.current_player, self.alice)

    def test_no_players_is_a_state_error(self) -> None:
        score = ScoreTracker()
        with self.assertRaises(GameStateError):
            score.current_player
        with self.assertRaises(GameStateError):
            score.switch_player()
        with self.assertRaises(GameStateError):
            score.summary()

    def test_register_rejects_duplicates(self) -> None:
        score = ScoreTracker(self.alice)
        with self.assertRaises(ValueError):
            score.register(Player("X", "Bob"))
        score.register(self.computer)
        with self.assertRaises(GameStateError):
            score.register(Player("O", "Carol"))

    def test_current_player_setter_validates(self) -> None:
        self.score.current_player = self.computer
        self.assertIs(self.score.current_player, self.computer)
        with self.assertRaises(ValueError):
            self.score.current_player = Player("O", "Stranger")

    def test_record_win_and_draw(self) -> None:
        self.score.record_win(self.alice)
        self.score.record_win(self.alice)
        self.score.record_win(self.computer)
        self.score.record_draw()
        self.assertEqual(self.alice.wins, 2)
        self.assertEqual(self.computer.wins, 1)
        self.assertEqual(self.score.draws, 1)
        with self.assertRaises(ValueError):
            self.score.record_win(Player("O", "Stranger"))

    def test_summary_lists_player_two_first(self) -> None:
        self.score.record_win(self.alice)
        self.score.record_draw()
        self.score.record_draw()
        expected = "Computer wins: 0 | Alice wins: 1 | Draws: 2"
        self.assertEqual(self.score.summary(), expected)
        self.assertEqual(str(self.score), expected)


class TestPlayer(unittest.TestCase):
    def test_rejects_unknown_symbol(self) -> None:
        with self.assertRaises(ValueError):
            Player("Z", "Zed")

    def test_players_compare_by_identity(self) -> None:
        self.assertNotEqual(Player("X", "Computer", True), Player("X", "Computer", True))


class TestDifficulty(unittest.TestCase):
    def test_parse_accepts_numbers_and_names(self) -> None:
        self.assertIs(Difficulty.parse("1"), Difficulty.EASY)
        self.assertIs(Difficulty.parse(" Medium "), Difficulty.MEDIUM)
        self.assertIs(Difficulty.parse("normal"), Difficulty.MEDIUM)
        self.assertIs(Difficulty.parse("HARD"), Difficulty.HARD)

    def test_parse_falls_back(self) -> None:
        self.assertIs(Difficulty.parse(""), Difficulty.HARD)
        self.assertIs(Difficulty.parse(None), Difficulty.HARD)
        self.assertIs(Difficulty.parse(1), Difficulty.EASY)
        self.assertIs(Difficulty.parse("expert", Difficulty.EASY), Difficulty.EASY)


if __name__ == "__main__":
    unittest.main()
