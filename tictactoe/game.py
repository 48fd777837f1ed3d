"""
Turn loop for a human vs. computer session.

The orchestrator talks to front ends only through ``GameUI``. It owns the live
board: human moves arrive as coordinates and are placed here under the game
lock, and UIs are handed clones for rendering.
"""

import abc
import enum
import logging
import random
import threading
from typing import Optional, Tuple

from .ai import ComputerPlayer
from .board import Board, Cell, other_symbol
from .channel import GameCancelled
from .scoreboard import COMPUTER_NAME, DEFAULT_PLAYER_NAME, Difficulty, GameStateError, Player, ScoreTracker

logger = logging.getLogger("tictactoe.game")


class GameState(enum.Enum):
    AWAITING_MOVE = "awaiting_move"
    EVALUATING = "evaluating"
    WON = "won"
    DRAW = "draw"
    ROUND_OVER = "round_over"
    TERMINATED = "terminated"


class MoveOutcome(enum.Enum):
    CONTINUE = "continue"
    WON = "won"
    DRAW = "draw"


class GameUI(abc.ABC):
    """Capabilities the orchestrator needs from a front end."""

    @abc.abstractmethod
    def get_players_name(self) -> str:
        ...

    @abc.abstractmethod
    def get_players_symbol(self) -> str:
        ...

    @abc.abstractmethod
    def prompt_difficulty(self) -> Difficulty:
        ...

    @abc.abstractmethod
    def acquire_human_move(self, player: Player, board: Board) -> Optional[Cell]:
        """Return the chosen cell, ``None`` if no move arrived, or raise ``GameCancelled``."""

    @abc.abstractmethod
    def prompt_play_again(self) -> bool:
        ...

    @abc.abstractmethod
    def display_board(self, board: Board, highlight_row: Optional[int] = None, highlight_col: Optional[int] = None) -> None:
        ...

    @abc.abstractmethod
    def display_score(self, summary: str) -> None:
        ...

    @abc.abstractmethod
    def notify_win(self, player: Player) -> None:
        ...

    @abc.abstractmethod
    def notify_draw(self) -> None:
        ...

    def notify_invalid_move(self, row: int, col: int) -> None:
        """Called when a submitted cell could not be used."""

    def notify_auto_move(self, player: Player, row: int, col: int) -> None:
        """Called when a move was placed on the player's behalf after no input arrived."""


def initialize_players(ui: GameUI, existing: Optional[ScoreTracker] = None) -> ScoreTracker:
    """Create the human and computer players; X always moves first as player one."""
    if existing is not None:
        return existing
    symbol = (ui.get_players_symbol() or "X").strip().upper()
    if symbol not in ("X", "O"):
        symbol = "X"
    name = (ui.get_players_name() or "").strip() or DEFAULT_PLAYER_NAME
    human = Player(symbol, name)
    computer = Player(other_symbol(symbol), COMPUTER_NAME, is_computer=True)
    if symbol == "X":
        return ScoreTracker(human, computer)
    return ScoreTracker(computer, human)


class Game:
    def __init__(
        self,
        ui: GameUI,
        difficulty: Difficulty = Difficulty.HARD,
        score: Optional[ScoreTracker] = None,
        board: Optional[Board] = None,
        prompt_difficulty_each_round: bool = True,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.ui = ui
        self.board = board if board is not None else Board()
        self.score = initialize_players(ui, score)
        self.prompt_difficulty_each_round = prompt_difficulty_each_round
        self.computer = ComputerPlayer(self.board, difficulty, rng)
        self.state = GameState.AWAITING_MOVE
        self.winner: Optional[Player] = None
        self.rounds_played = 0
        self._lock = threading.Lock()
        self._cancelled = threading.Event()

    @property
    def difficulty(self) -> Difficulty:
        return self.computer.difficulty

    @difficulty.setter
    def difficulty(self, level: Difficulty) -> None:
        self.computer.difficulty = level

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Ask the loop to stop at the next move boundary."""
        self._cancelled.set()

    def board_snapshot(self) -> Board:
        with self._lock:
            return self.board.clone()

    def play(self) -> None:
        """Run rounds until the UI declines another one or the session is cancelled."""
        try:
            while not self.cancelled:
                if self.prompt_difficulty_each_round:
                    self.difficulty = self.ui.prompt_difficulty()
                self.play_round()
                if self.cancelled or not self.ui.prompt_play_again():
                    break
                self.new_round()
        except GameCancelled:
            logger.info("Session cancelled by the front end.")
        finally:
            self.state = GameState.TERMINATED
        logger.info("Session over. %s", self.score.summary())

    def new_round(self) -> None:
        with self._lock:
            self.board.clear()
        self.score.reset_turn()
        self.winner = None
        self.state = GameState.AWAITING_MOVE

    def play_round(self) -> MoveOutcome:
        players = self.score.players
        if self.score.current_player not in players:
            raise GameStateError("Current player is not one of the registered players.")
        logger.info(
            "Round %d starting on %s: %s (%s) vs %s (%s).",
            self.rounds_played + 1,
            self.difficulty.value,
            players[0].name,
            players[0].symbol,
            players[1].name,
            players[1].symbol,
        )
        while True:
            self._raise_if_cancelled()
            outcome = self.perform_move(self.score.current_player)
            if outcome is not MoveOutcome.CONTINUE:
                self.rounds_played += 1
                self.state = GameState.ROUND_OVER
                return outcome
            # The tracker may already belong to a newer game.
            self._raise_if_cancelled()
            self.score.switch_player()
            self.state = GameState.AWAITING_MOVE

    def _raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise GameCancelled("Game cancelled between moves.")

    def perform_move(self, player: Player) -> MoveOutcome:
        if player is None:
            raise GameStateError("No player to move.")
        self.ui.display_score(self.score.summary())
        self.ui.display_board(self.board_snapshot())
        self.state = GameState.AWAITING_MOVE

        if player.is_computer:
            with self._lock:
                self.computer.make_move(player.symbol)
            last_move = self.computer.last_move
        else:
            last_move = self._take_human_turn(player)

        self.state = GameState.EVALUATING
        return self._evaluate(player, last_move)

    def _take_human_turn(self, player: Player) -> Optional[Cell]:
        while True:
            move = self.ui.acquire_human_move(player, self.board_snapshot())
            if move is None:
                return self._auto_move(player)
            row, col = move
            with self._lock:
                placed = self.board.place(row, col, player.symbol)
            if placed:
                logger.info("%s (%s) plays row %d, column %d.", player.name, player.symbol, row + 1, col + 1)
                return row, col
            logger.debug("Rejected move (%d, %d) for %s.", row, col, player.name)
            self.ui.notify_invalid_move(row, col)

    def _auto_move(self, player: Player) -> Optional[Cell]:
        with self._lock:
            open_cells = self.board.empty_cells()
            if not open_cells:
                logger.warning("No move from %s and no open cells left.", player.name)
                return None
            row, col = open_cells[0]
            self.board.place(row, col, player.symbol)
        logger.warning("No move from %s; placed %s at row %d, column %d.", player.name, player.symbol, row + 1, col + 1)
        self.ui.notify_auto_move(player, row, col)
        return row, col

    def _evaluate(self, player: Player, last_move: Optional[Cell]) -> MoveOutcome:
        highlight: Tuple[Optional[int], Optional[int]] = last_move if last_move is not None else (None, None)
        with self._lock:
            line = self.board.winning_line(player.symbol)
            full = self.board.is_full()
        won = line is not None

        if won:
            self.state = GameState.WON
            self.winner = player
            self.ui.display_score(self.score.summary())
            self.ui.display_board(self.board_snapshot(), *highlight)
            self.ui.notify_win(player)
            self.score.record_win(player)
            logger.info("%s (%s) wins on %s. %s", player.name, player.symbol, line, self.score.summary())
            return MoveOutcome.WON

        if full:
            self.state = GameState.DRAW
            self.ui.display_board(self.board_snapshot(), *highlight)
            self.ui.notify_draw()
            self.score.record_draw()
            logger.info("Round drawn. %s", self.score.summary())
            return MoveOutcome.DRAW

        return MoveOutcome.CONTINUE
