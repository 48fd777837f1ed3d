"""In-memory players, difficulty tiers and the score/turn tracker for a session."""

import enum
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .board import SYMBOLS

COMPUTER_NAME = "Computer"
DEFAULT_PLAYER_NAME = "Human"


class GameStateError(RuntimeError):
    """Session state was used before it was set up (a programming error)."""


class Difficulty(enum.Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def parse(cls, text: Optional[object], default: Optional["Difficulty"] = None) -> "Difficulty":
        """Map ``1``/``easy``/``Easy`` style answers onto a tier; unknown text gives ``default`` (Hard)."""
        fallback = default or cls.HARD
        if text is None:
            return fallback
        return DIFFICULTY_CHOICES.get(str(text).strip().lower(), fallback)


DIFFICULTY_CHOICES: Dict[str, Difficulty] = {
    "1": Difficulty.EASY,
    "easy": Difficulty.EASY,
    "2": Difficulty.MEDIUM,
    "medium": Difficulty.MEDIUM,
    "normal": Difficulty.MEDIUM,
    "3": Difficulty.HARD,
    "hard": Difficulty.HARD,
}
DIFFICULTIES = tuple(level.value for level in Difficulty)


@dataclass(eq=False)
class Player:
    """A participant; compared by identity so two "Computer" players never collide."""

    symbol: str
    name: str
    is_computer: bool = False
    wins: int = 0

    def __post_init__(self) -> None:
        if self.symbol not in SYMBOLS:
            raise ValueError(f"Player symbol must be one of {SYMBOLS}, got {self.symbol!r}.")


class ScoreTracker:
    """Tracks whose turn it is plus wins and draws for the two registered players."""

    def __init__(self, player1: Optional[Player] = None, player2: Optional[Player] = None) -> None:
        self.player1: Optional[Player] = None
        self.player2: Optional[Player] = None
        self.draws = 0
        self._current: Optional[Player] = None
        for player in (player1, player2):
            if player is not None:
                self.register(player)
        if self.player1 is not None:
            self._current = self.player1

    def register(self, player: Player) -> None:
        if self.player1 is None:
            self.player1 = player
        elif self.player2 is None:
            if player.symbol == self.player1.symbol:
                raise ValueError(f"Both players cannot use {player.symbol}.")
            self.player2 = player
        else:
            raise GameStateError("Two players are already registered.")

    @property
    def players(self) -> Tuple[Player, Player]:
        if self.player1 is None or self.player2 is None:
            raise GameStateError("Score tracker needs two registered players.")
        return self.player1, self.player2

    @property
    def current_player(self) -> Player:
        if self.player1 is None:
            raise GameStateError("No players registered; cannot determine the current player.")
        if self._current is None:
            return self.player1
        return self._current

    @current_player.setter
    def current_player(self, player: Player) -> None:
        if player is not self.player1 and player is not self.player2:
            raise ValueError(f"{player.name} is not registered with this score tracker.")
        self._current = player

    def switch_player(self) -> Player:
        player1, player2 = self.players
        self._current = player2 if self._current is player1 else player1
        return self._current

    def reset_turn(self) -> None:
        """Hand the opening move back to player one for a new round."""
        self._current = self.players[0]

    def record_win(self, player: Player) -> None:
        if player is not self.player1 and player is not self.player2:
            raise ValueError(f"{player.name} is not registered with this score tracker.")
        player.wins += 1

    def record_draw(self) -> None:
        self.draws += 1

    def summary(self) -> str:
        player1, player2 = self.players
        return f"{player2.name} wins: {player2.wins} | {player1.name} wins: {player1.wins} | Draws: {self.draws}"

    def __str__(self) -> str:
        return self.summary()
