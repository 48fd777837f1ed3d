"""Terminal front end: rows A-C, columns 1-3, moves typed as ``B2``, ``2 3``, ``2,3`` or a spot 1-9."""

from typing import Callable, Optional

from .board import BOARD_SIZE, Board, Cell
from .channel import GameCancelled
from .game import GameUI
from .scoreboard import DEFAULT_PLAYER_NAME, Difficulty, Player

ROW_LABELS = "ABC"
MAX_INVALID_ATTEMPTS = 5


def parse_move(text: str) -> Optional[Cell]:
    """Parse console input into zero-based (row, col); ``None`` if it is not a cell."""
    cleaned = text.strip().upper().replace(",", " ")
    compact = cleaned.replace(" ", "")
    if len(compact) == 2 and compact[0] in ROW_LABELS and compact[1].isdigit():
        col = int(compact[1])
        if 1 <= col <= BOARD_SIZE:
            return ROW_LABELS.index(compact[0]), col - 1
        return None

    parts = cleaned.split()
    if len(parts) == 1 and parts[0].isdigit():
        spot = int(parts[0])
        if 1 <= spot <= BOARD_SIZE * BOARD_SIZE:
            return divmod(spot - 1, BOARD_SIZE)
        return None

    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        return None
    row, col = int(parts[0]), int(parts[1])
    if not (1 <= row <= BOARD_SIZE and 1 <= col <= BOARD_SIZE):
        return None
    return row - 1, col - 1


def format_cell(row: int, col: int) -> str:
    return f"{ROW_LABELS[row]}{col + 1}"


def render_board(board: Board, highlight_row: Optional[int] = None, highlight_col: Optional[int] = None) -> str:
    lines = ["    1   2   3"]
    for r in range(BOARD_SIZE):
        cells = []
        for c in range(BOARD_SIZE):
            symbol = board.get(r, c)
            if r == highlight_row and c == highlight_col:
                cells.append(f"[{symbol}]")
            else:
                cells.append(f" {symbol} ")
        lines.append(f"{ROW_LABELS[r]}  " + "|".join(cells))
        if r < BOARD_SIZE - 1:
            lines.append("   ---+---+---")
    return "\n".join(lines)


class ConsoleUI(GameUI):
    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        default_name: str = DEFAULT_PLAYER_NAME,
        default_symbol: str = "X",
        default_difficulty: Difficulty = Difficulty.HARD,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.default_name = default_name
        self.default_symbol = default_symbol
        self.default_difficulty = default_difficulty

    def _ask(self, prompt: str) -> str:
        try:
            return self.input_fn(prompt).strip()
        except EOFError as exc:
            raise GameCancelled("Input closed.") from exc

    def get_players_name(self) -> str:
        name = self._ask(f"Enter your name ({self.default_name} default): ")
        return name or self.default_name

    def get_players_symbol(self) -> str:
        answer = self._ask(f"Do you want to play as X or O? X goes first ({self.default_symbol} default): ").upper()
        return answer if answer in {"X", "O"} else self.default_symbol

    def prompt_difficulty(self) -> Difficulty:
        self.output_fn("Select difficulty level:\n1. Easy\n2. Medium\n3. Hard")
        answer = self._ask(f"Enter choice (1-3) ({self.default_difficulty.value} default): ")
        return Difficulty.parse(answer, self.default_difficulty)

    def acquire_human_move(self, player: Player, board: Board) -> Optional[Cell]:
        """Prompt until the text names an open cell; ``q`` quits the session."""
        attempts = 0
        while attempts < MAX_INVALID_ATTEMPTS:
            text = self._ask(f"{player.name}'s turn ({player.symbol}). Enter a cell like B2, 2 3 or 1-9 (q to quit): ")
            if text.lower() in {"q", "quit"}:
                raise GameCancelled(f"{player.name} quit the game.")
            move = parse_move(text)
            if move is None:
                attempts += 1
                self.output_fn("Please enter a row A-C and column 1-3 (e.g. B2), row/col 1-3 (e.g. 2,3), or a spot 1-9.")
                continue
            if not board.is_cell_empty(*move):
                attempts += 1
                open_cells = ", ".join(format_cell(r, c) for r, c in board.empty_cells())
                self.output_fn(f"That spot is already taken. Open spots: {open_cells}")
                continue
            return move
        self.output_fn("Too many invalid tries.")
        return None

    def prompt_play_again(self) -> bool:
        answer = self._ask("Do you want to play again? (y/n) ").upper()
        return not answer.startswith("N")

    def display_board(self, board: Board, highlight_row: Optional[int] = None, highlight_col: Optional[int] = None) -> None:
        self.output_fn("")
        self.output_fn(render_board(board, highlight_row, highlight_col))
        self.output_fn("")

    def display_score(self, summary: str) -> None:
        self.output_fn(summary)

    def notify_win(self, player: Player) -> None:
        self.output_fn(f"{player.name} wins!")

    def notify_draw(self) -> None:
        self.output_fn("It's a draw!")

    def notify_invalid_move(self, row: int, col: int) -> None:
        self.output_fn(f"{format_cell(row, col)} is not available. Choose another.")

    def notify_auto_move(self, player: Player, row: int, col: int) -> None:
        self.output_fn(f"Move automatically placed at {format_cell(row, col)} for {player.name}.")
