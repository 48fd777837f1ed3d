"""Tic-tac-toe: board rules, a three-tier computer opponent, and a UI-agnostic turn loop."""

from .ai import (
    ComputerPlayer,
    count_potential_wins,
    easy_move,
    find_fork_cell,
    find_fork_cells,
    find_winning_cell,
    hard_move,
    medium_move,
    select_move,
)
from .board import BOARD_SIZE, EMPTY, WINNING_LINES, Board, other_symbol
from .channel import GameCancelled, MoveChannel
from .game import Game, GameState, GameUI, MoveOutcome, initialize_players
from .scoreboard import DIFFICULTIES, Difficulty, GameStateError, Player, ScoreTracker

__all__ = [
    "BOARD_SIZE",
    "Board",
    "ComputerPlayer",
    "DIFFICULTIES",
    "Difficulty",
    "EMPTY",
    "Game",
    "GameCancelled",
    "GameState",
    "GameStateError",
    "GameUI",
    "MoveChannel",
    "MoveOutcome",
    "Player",
    "ScoreTracker",
    "WINNING_LINES",
    "count_potential_wins",
    "easy_move",
    "find_fork_cell",
    "find_fork_cells",
    "find_winning_cell",
    "hard_move",
    "initialize_players",
    "medium_move",
    "other_symbol",
    "select_move",
]
