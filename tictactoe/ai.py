"""Computer opponent: Easy guesses at random, Medium wins/blocks, Hard adds forks and positional play."""

import logging
import random
from typing import Callable, Dict, List, Optional

from .board import BOARD_SIZE, Board, Cell, other_symbol
from .scoreboard import Difficulty

logger = logging.getLogger("tictactoe.ai")

EASY_ATTEMPTS = 10
CENTER: Cell = (1, 1)
CORNERS: List[Cell] = [(0, 0), (0, 2), (2, 0), (2, 2)]
# top-middle, middle-left, middle-right, bottom-middle
EDGES: List[Cell] = [(0, 1), (1, 0), (1, 2), (2, 1)]
OPENING_MAX_OCCUPIED = 2
MoveFn = Callable[[Board, str, random.Random], Optional[Cell]]


def find_winning_cell(board: Board, symbol: str) -> Optional[Cell]:
    """Return the first open cell (row-major) that completes a line for ``symbol``."""
    for row, col in board.empty_cells():
        trial = board.clone()
        trial.place(row, col, symbol)
        if trial.check_win(symbol):
            return row, col
    return None


def count_potential_wins(board: Board, symbol: str) -> int:
    """Count open cells where one more ``symbol`` would produce a win."""
    total = 0
    for row, col in board.empty_cells():
        trial = board.clone()
        trial.place(row, col, symbol)
        if trial.check_win(symbol):
            total += 1
    return total


def find_fork_cells(board: Board, symbol: str) -> List[Cell]:
    """Cells after which ``symbol`` would threaten two or more winning completions."""
    forks: List[Cell] = []
    for row, col in board.empty_cells():
        trial = board.clone()
        trial.place(row, col, symbol)
        if count_potential_wins(trial, symbol) >= 2:
            forks.append((row, col))
    return forks


def find_fork_cell(board: Board, symbol: str) -> Optional[Cell]:
    forks = find_fork_cells(board, symbol)
    return forks[0] if forks else None


def _first_open(board: Board, cells: List[Cell]) -> Optional[Cell]:
    for row, col in cells:
        if board.is_cell_empty(row, col):
            return row, col
    return None


def _random_open(board: Board, rng: random.Random) -> Optional[Cell]:
    open_cells = board.empty_cells()
    if not open_cells:
        return None
    return rng.choice(open_cells)


def easy_move(board: Board, symbol: str, rng: random.Random) -> Optional[Cell]:
    """Blind guesses; deliberately ignores winning and blocking chances."""
    for _ in range(EASY_ATTEMPTS):
        row = rng.randrange(BOARD_SIZE)
        col = rng.randrange(BOARD_SIZE)
        if board.is_cell_empty(row, col):
            return row, col
    open_cells = board.empty_cells()
    return open_cells[0] if open_cells else None


def medium_move(board: Board, symbol: str, rng: random.Random) -> Optional[Cell]:
    """Win, block, center, edge, then first open cell. Never looks for forks."""
    opponent = other_symbol(symbol)
    win_cell = find_winning_cell(board, symbol)
    if win_cell is not None:
        logger.debug("Medium: winning at %s", win_cell)
        return win_cell

    block_cell = find_winning_cell(board, opponent)
    if block_cell is not None:
        logger.debug("Medium: blocking %s at %s", opponent, block_cell)
        return block_cell

    if board.is_cell_empty(*CENTER):
        return CENTER

    edge = _first_open(board, EDGES)
    if edge is not None:
        return edge

    open_cells = board.empty_cells()
    return open_cells[0] if open_cells else None


def hard_move(board: Board, symbol: str, rng: random.Random) -> Optional[Cell]:
    """Fork-aware heuristic approximating perfect play."""
    opponent = other_symbol(symbol)
    win_cell = find_winning_cell(board, symbol)
    if win_cell is not None:
        logger.debug("Hard: winning at %s", win_cell)
        return win_cell

    block_cell = find_winning_cell(board, opponent)
    if block_cell is not None:
        logger.debug("Hard: blocking %s at %s", opponent, block_cell)
        return block_cell

    occupied = BOARD_SIZE * BOARD_SIZE - board.count_empty()
    if occupied <= OPENING_MAX_OCCUPIED and board.is_cell_empty(*CENTER):
        return CENTER

    fork_cell = find_fork_cell(board, symbol)
    if fork_cell is not None:
        logger.debug("Hard: forking at %s", fork_cell)
        return fork_cell

    # Several opponent forks fall through to positional play.
    opponent_forks = find_fork_cells(board, opponent)
    if len(opponent_forks) == 1:
        logger.debug("Hard: pre-empting %s fork at %s", opponent, opponent_forks[0])
        return opponent_forks[0]

    corner = _first_open(board, CORNERS)
    if corner is not None:
        return corner

    if board.is_cell_empty(*CENTER):
        return CENTER

    return _random_open(board, rng)


STRATEGIES: Dict[Difficulty, MoveFn] = {
    Difficulty.EASY: easy_move,
    Difficulty.MEDIUM: medium_move,
    Difficulty.HARD: hard_move,
}


def select_move(
    board: Board,
    difficulty: Difficulty,
    symbol: str,
    rng: Optional[random.Random] = None,
) -> Optional[Cell]:
    """Pick a cell for ``symbol`` without touching ``board``; ``None`` when no cell is open."""
    if board.is_full():
        return None
    strategy = STRATEGIES[difficulty]
    return strategy(board.clone(), symbol, rng or random.Random())


class ComputerPlayer:
    """Commits exactly one AI placement to the live board per call."""

    def __init__(self, board: Board, difficulty: Difficulty = Difficulty.HARD, rng: Optional[random.Random] = None) -> None:
        self.board = board
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.last_move: Optional[Cell] = None

    def make_move(self, symbol: str) -> bool:
        self.last_move = None
        cell = select_move(self.board, self.difficulty, symbol, self.rng)
        if cell is None:
            logger.warning("%s AI asked to move as %s on a full board; no move made.", self.difficulty.value, symbol)
            return False
        row, col = cell
        if not self.board.place(row, col, symbol):
            logger.warning("%s AI picked unavailable cell %s; no move made.", self.difficulty.value, cell)
            return False
        self.last_move = cell
        logger.info("%s AI (%s) plays row %d, column %d.", self.difficulty.value, symbol, row + 1, col + 1)
        return True
