"""
Computer vs. computer rounds for sanity-checking the difficulty tiers.

Pick a tier for each side and let them play headless rounds; tallies are kept
in memory only.
"""

import argparse
import json
import logging
import random
from typing import Dict, List, Optional

from .ai import ComputerPlayer
from .board import Board
from .logs import init_logger
from .scoreboard import COMPUTER_NAME, DIFFICULTIES, Difficulty, Player, ScoreTracker

logger = logging.getLogger("tictactoe.selfplay")

RESULTS = ("X", "O", "Draw")


def play_ai_round(ai_x: Difficulty, ai_o: Difficulty, rng: Optional[random.Random] = None, score: Optional[ScoreTracker] = None) -> str:
    """Play one round; returns ``"X"``, ``"O"`` or ``"Draw"``."""
    rng = rng or random.Random()
    board = Board()
    if score is None:
        score = ScoreTracker(
            Player("X", f"{COMPUTER_NAME} ({ai_x.value})", is_computer=True),
            Player("O", f"{COMPUTER_NAME} ({ai_o.value})", is_computer=True),
        )
    else:
        score.reset_turn()
    engines = {
        "X": ComputerPlayer(board, ai_x, rng),
        "O": ComputerPlayer(board, ai_o, rng),
    }

    while True:
        player = score.current_player
        if not engines[player.symbol].make_move(player.symbol):
            score.record_draw()
            return "Draw"
        if board.check_win(player.symbol):
            score.record_win(player)
            return player.symbol
        if board.is_full():
            score.record_draw()
            return "Draw"
        score.switch_player()


def run_batch(rounds: int, ai_x: Difficulty, ai_o: Difficulty, seed: Optional[int] = None) -> Dict[str, int]:
    rng = random.Random(seed)
    tallies = {result: 0 for result in RESULTS}
    score = ScoreTracker(
        Player("X", f"{COMPUTER_NAME} ({ai_x.value})", is_computer=True),
        Player("O", f"{COMPUTER_NAME} ({ai_o.value})", is_computer=True),
    )
    for _ in range(max(0, rounds)):
        result = play_ai_round(ai_x, ai_o, rng, score)
        tallies[result] += 1
    logger.info("Self-play %s vs %s over %d rounds: %s", ai_x.value, ai_o.value, rounds, score.summary())
    return tallies


def leading_result(tallies: Dict[str, int]) -> str:
    """Most frequent result; ties go to Draw."""
    best = max(tallies.values()) if tallies else 0
    leaders = [result for result in RESULTS if tallies.get(result, 0) == best]
    return leaders[0] if len(leaders) == 1 else "Draw"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless computer vs. computer tic-tac-toe rounds.")
    parser.add_argument("--ai-x", choices=DIFFICULTIES, default="Hard", help="Difficulty for the X side (moves first).")
    parser.add_argument("--ai-o", choices=DIFFICULTIES, default="Hard", help="Difficulty for the O side.")
    parser.add_argument("--rounds", type=int, default=10, help="Number of rounds to play (default 10).")
    parser.add_argument("--seed", type=int, help="Seed for the random tiers, for reproducible runs.")
    parser.add_argument("--output", choices=("text", "json"), default="text", help="Summary format.")
    parser.add_argument(
        "--expect-winner",
        choices=RESULTS,
        help="Exit non-zero unless the most frequent result matches.",
    )
    parser.add_argument("--log-dir", help="Directory for app.log (default data/logs).")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    init_logger(args.log_dir)
    ai_x = Difficulty(args.ai_x)
    ai_o = Difficulty(args.ai_o)
    tallies = run_batch(args.rounds, ai_x, ai_o, args.seed)
    leader = leading_result(tallies)

    if args.output == "json":
        summary = {
            "ai_x": ai_x.value,
            "ai_o": ai_o.value,
            "rounds": args.rounds,
            "seed": args.seed,
            "scores": tallies,
            "leader": leader,
        }
        print(json.dumps(summary, indent=2))
    else:
        print(f"{ai_x.value} (X) vs {ai_o.value} (O) over {args.rounds} rounds:")
        print(f"X wins: {tallies['X']}  |  O wins: {tallies['O']}  |  Draws: {tallies['Draw']}")

    if args.expect_winner and leader != args.expect_winner:
        print(f"Expected {args.expect_winner}, but got {leader}.")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
