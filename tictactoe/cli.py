"""Console entry point: ``python -m tictactoe`` or the ``tictactoe`` script."""

import argparse
import atexit
import logging
import random
from pathlib import Path
from typing import List, Optional

from .channel import GameCancelled
from .console import ConsoleUI
from .game import Game
from .logs import init_logger, shutdown_logger
from .scoreboard import DIFFICULTIES, Difficulty
from .settings import SETTINGS_FILE, load_settings

logger = logging.getLogger("tictactoe.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe against the computer in your terminal.")
    parser.add_argument("--name", help="Your display name (skips the prompt).")
    parser.add_argument("--symbol", choices=("X", "O"), help="Play as X (moves first) or O (skips the prompt).")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, help="Default AI difficulty offered at each round.")
    parser.add_argument(
        "--fixed-difficulty",
        action="store_true",
        help="Use --difficulty (or the saved default) for every round instead of asking.",
    )
    parser.add_argument("--settings", help=f"Path to the settings JSON (default {SETTINGS_FILE}).")
    parser.add_argument("--log-dir", help="Directory for app.log (default data/logs).")
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG or INFO.")
    parser.add_argument("--seed", type=int, help="Seed the AI's random choices for a reproducible session.")
    return parser.parse_args(argv)


class _PresetConsoleUI(ConsoleUI):
    """Console UI that answers the setup prompts from command-line flags when given."""

    def __init__(self, name: Optional[str], symbol: Optional[str], **kwargs) -> None:
        super().__init__(**kwargs)
        self.preset_name = name
        self.preset_symbol = symbol

    def get_players_name(self) -> str:
        return self.preset_name or super().get_players_name()

    def get_players_symbol(self) -> str:
        return self.preset_symbol or super().get_players_symbol()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    settings = load_settings(Path(args.settings) if args.settings else None)
    init_logger(args.log_dir, args.log_level or settings.get("log_level", "INFO"))
    atexit.register(shutdown_logger)

    difficulty = Difficulty.parse(args.difficulty or settings.get("difficulty"))
    ui = _PresetConsoleUI(
        args.name,
        args.symbol,
        default_name=settings.get("player_name") or "Human",
        default_symbol=settings.get("symbol") if settings.get("symbol") in ("X", "O") else "X",
        default_difficulty=difficulty,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    print("Tic-Tac-Toe")
    try:
        game = Game(ui, difficulty, prompt_difficulty_each_round=not args.fixed_difficulty, rng=rng)
        game.play()
    except (KeyboardInterrupt, GameCancelled):
        print("\nInterrupted.")
        logger.info("Console session interrupted.")
        return
    print(f"\nThanks for playing! {game.score.summary()}")


if __name__ == "__main__":
    main()
