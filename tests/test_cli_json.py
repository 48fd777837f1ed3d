import io
import json
import random
import tempfile
import unittest
from contextlib import redirect_stdout

from tictactoe import selfplay
from tictactoe.logs import shutdown_logger
from tictactoe.scoreboard import Difficulty, Player, ScoreTracker


class TestSelfPlayCli(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self) -> None:
        shutdown_logger()
        self.temp_dir.cleanup()

    def _run(self, *extra: str) -> str:
        buf = io.StringIO()
        with redirect_stdout(buf):
            selfplay.main(["--ai-x", "Hard", "--ai-o", "Hard", "--log-dir", self.temp_dir.name, *extra])
        return buf.getvalue()

    def test_json_output_and_expectation(self) -> None:
        output = self._run("--rounds", "3", "--seed", "11", "--output", "json", "--expect-winner", "Draw")
        data = json.loads(output)
        self.assertEqual(data["ai_x"], "Hard")
        self.assertEqual(data["ai_o"], "Hard")
        self.assertEqual(data["rounds"], 3)
        self.assertEqual(data["scores"], {"X": 0, "O": 0, "Draw": 3})
        self.assertEqual(data["leader"], "Draw")

    def test_text_output(self) -> None:
        output = self._run("--rounds", "1")
        self.assertIn("Hard (X) vs Hard (O) over 1 rounds:", output)
        self.assertIn("Draws: 1", output)

    def test_expectation_failure_exits(self) -> None:
        with self.assertRaises(SystemExit):
            self._run("--rounds", "1", "--output", "json", "--expect-winner", "X")


class TestSelfPlayRounds(unittest.TestCase):
    def test_round_result_is_recorded(self) -> None:
        rng = random.Random(42)
        for _ in range(10):
            result = selfplay.play_ai_round(Difficulty.EASY, Difficulty.MEDIUM, rng)
            self.assertIn(result, selfplay.RESULTS)
        score = ScoreTracker(Player("X", "Computer (Hard)", True), Player("O", "Computer (Hard)", True))
        self.assertEqual(selfplay.play_ai_round(Difficulty.HARD, Difficulty.HARD, rng, score), "Draw")
        self.assertEqual(score.draws, 1)

    def test_run_batch_counts_every_round(self) -> None:
        tallies = selfplay.run_batch(5, Difficulty.EASY, Difficulty.EASY, seed=3)
        self.assertEqual(sum(tallies.values()), 5)

    def test_leading_result_ties_go_to_draw(self) -> None:
        self.assertEqual(selfplay.leading_result({"X": 2, "O": 2, "Draw": 1}), "Draw")
        self.assertEqual(selfplay.leading_result({"X": 3, "O": 1, "Draw": 1}), "X")


if __name__ == "__main__":
    unittest.main()
