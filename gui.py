"""
Tkinter front end for the tic-tac-toe engine.

The turn loop runs on a worker thread so the window stays responsive while it
waits for a click. Clicks travel to the game thread through a ``MoveChannel``;
everything the game asks of the window is queued and run on the Tk thread.
"""

import argparse
import atexit
import logging
import queue
import threading
import tkinter as tk
from pathlib import Path
from tkinter import messagebox, ttk
from typing import Callable, List, Optional

from tictactoe import Board, Difficulty, Game, GameCancelled, GameUI, MoveChannel, Player, ScoreTracker
from tictactoe.board import BOARD_SIZE, Cell
from tictactoe.logs import init_logger, shutdown_logger
from tictactoe.scoreboard import DIFFICULTIES
from tictactoe.settings import SETTINGS_FILE, load_settings, move_timeout, save_settings

logger = logging.getLogger("tictactoe.gui")

POLL_MS = 30
ANSWER_POLL_SECONDS = 0.1

PALETTE = {
    "BG": "#0f172a",
    "PANEL": "#1e293b",
    "ACCENT": "#38bdf8",
    "TEXT": "#e2e8f0",
    "MUTED": "#94a3b8",
    "X": "#ef4444",
    "O": "#3b82f6",
    "CELL": "#233244",
    "HIGHLIGHT": "#475569",
}

FONTS = {
    "board": ("Segoe UI", 28, "bold"),
    "text": ("Segoe UI", 11, "normal"),
    "title": ("Segoe UI", 13, "bold"),
}


class TkGameUI(GameUI):
    """Per-game bridge between the worker thread and the window."""

    def __init__(self, app: "TicTacToeGUI", channel: MoveChannel, generation: int) -> None:
        self.app = app
        self.channel = channel
        self.generation = generation

    def _post(self, fn: Callable[[], None]) -> None:
        self.app.post(self.generation, fn)

    def _ask(self, fn: Callable[[], object]) -> object:
        """Run ``fn`` on the Tk thread and block the worker until it answers."""
        if threading.current_thread() is threading.main_thread():
            return fn()
        answer: "queue.Queue[object]" = queue.Queue(maxsize=1)
        self.app.post(self.generation, lambda: answer.put(fn()))
        while True:
            if self.channel.closed:
                raise GameCancelled("Window closed while waiting for an answer.")
            try:
                return answer.get(timeout=ANSWER_POLL_SECONDS)
            except queue.Empty:
                continue

    def get_players_name(self) -> str:
        return str(self._ask(lambda: self.app.name_var.get().strip()))

    def get_players_symbol(self) -> str:
        return str(self._ask(self.app.symbol_var.get))

    def prompt_difficulty(self) -> Difficulty:
        return Difficulty.parse(str(self._ask(self.app.difficulty_var.get)))

    def acquire_human_move(self, player: Player, board: Board) -> Optional[Cell]:
        self.channel.reset()
        self._post(lambda: self.app.begin_human_turn(player))
        try:
            move = self.channel.wait(self.app.move_timeout)
        finally:
            self._post(self.app.end_human_turn)
        return move

    def prompt_play_again(self) -> bool:
        return bool(self._ask(lambda: messagebox.askyesno("Tic-Tac-Toe", "Play again?", parent=self.app.root)))

    def display_board(self, board: Board, highlight_row: Optional[int] = None, highlight_col: Optional[int] = None) -> None:
        self._post(lambda: self.app.render_board(board, highlight_row, highlight_col))

    def display_score(self, summary: str) -> None:
        self._post(lambda: self.app.score_var.set(summary))

    def notify_win(self, player: Player) -> None:
        self._post(lambda: self.app.status_var.set(f"{player.name} wins!"))

    def notify_draw(self) -> None:
        self._post(lambda: self.app.status_var.set("It's a draw!"))

    def notify_invalid_move(self, row: int, col: int) -> None:
        self._post(lambda: self.app.status_var.set("That cell is taken. Choose another."))

    def notify_auto_move(self, player: Player, row: int, col: int) -> None:
        self._post(lambda: self.app.status_var.set(f"Time's up: placed {player.symbol} at row {row + 1}, column {col + 1}."))


class TicTacToeGUI:
    def __init__(self, root: tk.Tk, settings_path: Optional[Path] = None) -> None:
        self.root = root
        self.root.title("Tic-Tac-Toe")
        self.root.minsize(420, 520)
        self.root.configure(bg=PALETTE["BG"])
        self.settings_path = Path(settings_path or SETTINGS_FILE)
        self.settings = load_settings(self.settings_path)
        self.move_timeout = move_timeout(self.settings)

        self.name_var = tk.StringVar(value=str(self.settings.get("player_name") or "Human"))
        symbol = self.settings.get("symbol")
        self.symbol_var = tk.StringVar(value=symbol if symbol in ("X", "O") else "X")
        self.difficulty_var = tk.StringVar(value=Difficulty.parse(self.settings.get("difficulty")).value)
        self.status_var = tk.StringVar(value="Choose your options and start a game.")
        self.score_var = tk.StringVar(value="")

        self.buttons: List[List[tk.Button]] = []
        self.channel = MoveChannel()
        self.game: Optional[Game] = None
        self.score: Optional[ScoreTracker] = None
        self.worker: Optional[threading.Thread] = None
        self.generation = 0
        self.awaiting_human = False
        self._tasks: "queue.Queue[tuple]" = queue.Queue()
        self._closing = False

        self._configure_style()
        self._build_layout()
        self.root.protocol("WM_DELETE_WINDOW", self.close)
        self.root.report_callback_exception = self._handle_exception
        self.root.after(POLL_MS, self._drain_tasks)

    def _configure_style(self) -> None:
        style = ttk.Style(self.root)
        style.configure("Panel.TFrame", background=PALETTE["PANEL"])
        style.configure("App.TLabel", background=PALETTE["PANEL"], foreground=PALETTE["TEXT"], font=FONTS["text"])
        style.configure("Title.TLabel", background=PALETTE["PANEL"], foreground=PALETTE["ACCENT"], font=FONTS["title"])

    def _build_layout(self) -> None:
        controls = ttk.Frame(self.root, padding=12, style="Panel.TFrame")
        controls.grid(row=0, column=0, sticky="ew")
        self.root.columnconfigure(0, weight=1)

        ttk.Label(controls, text="Name", style="App.TLabel").grid(row=0, column=0, sticky="w")
        ttk.Entry(controls, textvariable=self.name_var, width=14).grid(row=0, column=1, sticky="w", padx=(4, 12))
        ttk.Label(controls, text="Symbol", style="App.TLabel").grid(row=0, column=2, sticky="w")
        ttk.Combobox(controls, textvariable=self.symbol_var, values=("X", "O"), state="readonly", width=3).grid(
            row=0, column=3, sticky="w", padx=(4, 12)
        )
        ttk.Label(controls, text="Difficulty", style="App.TLabel").grid(row=1, column=0, sticky="w", pady=(6, 0))
        ttk.Combobox(controls, textvariable=self.difficulty_var, values=DIFFICULTIES, state="readonly", width=8).grid(
            row=1, column=1, sticky="w", padx=(4, 12), pady=(6, 0)
        )
        ttk.Button(controls, text="New game", command=self.start_new_game).grid(row=1, column=2, columnspan=2, sticky="ew", pady=(6, 0))

        ttk.Label(controls, textvariable=self.score_var, style="Title.TLabel").grid(row=2, column=0, columnspan=4, sticky="w", pady=(10, 0))
        ttk.Label(controls, textvariable=self.status_var, style="App.TLabel").grid(row=3, column=0, columnspan=4, sticky="w", pady=(4, 0))

        board_frame = tk.Frame(self.root, bg=PALETTE["BG"], padx=12, pady=12)
        board_frame.grid(row=1, column=0, sticky="nsew")
        self.root.rowconfigure(1, weight=1)
        for r in range(BOARD_SIZE):
            board_frame.rowconfigure(r, weight=1)
            row_buttons = []
            for c in range(BOARD_SIZE):
                board_frame.columnconfigure(c, weight=1)
                btn = tk.Button(
                    board_frame,
                    text=" ",
                    font=FONTS["board"],
                    bg=PALETTE["CELL"],
                    fg=PALETTE["TEXT"],
                    activebackground=PALETTE["HIGHLIGHT"],
                    relief="flat",
                    command=lambda r=r, c=c: self._on_cell_click(r, c),
                )
                btn.grid(row=r, column=c, sticky="nsew", padx=3, pady=3)
                row_buttons.append(btn)
            self.buttons.append(row_buttons)

    def post(self, generation: int, fn: Callable[[], None]) -> None:
        """Queue ``fn`` for the Tk thread; work from an abandoned game is dropped."""
        self._tasks.put((generation, fn))

    def _drain_tasks(self) -> None:
        try:
            while True:
                try:
                    generation, fn = self._tasks.get_nowait()
                except queue.Empty:
                    break
                if generation == self.generation:
                    fn()
        finally:
            if not self._closing:
                self.root.after(POLL_MS, self._drain_tasks)

    def start_new_game(self) -> None:
        self._stop_worker()
        self._save_settings()
        self.generation += 1
        self.channel = MoveChannel()
        ui = TkGameUI(self, self.channel, self.generation)
        self.game = Game(ui, Difficulty.parse(self.difficulty_var.get()), score=self._reusable_score())
        self.score = self.game.score
        self.score.reset_turn()
        self.render_board(self.game.board_snapshot())
        self.score_var.set(self.score.summary())
        self.status_var.set("Game on!")
        logger.info("New GUI game (%s).", self.difficulty_var.get())
        self.worker = threading.Thread(target=self._run_game, args=(self.game,), daemon=True)
        self.worker.start()

    def _reusable_score(self) -> Optional[ScoreTracker]:
        """Keep the session tally while the same name and symbol keep playing."""
        if self.score is None:
            return None
        human = next((p for p in self.score.players if not p.is_computer), None)
        if human is None or human.name != (self.name_var.get().strip() or "Human") or human.symbol != self.symbol_var.get():
            return None
        return self.score

    def _run_game(self, game: Game) -> None:
        try:
            game.play()
        except Exception:
            logger.exception("Game thread crashed.")
            raise

    def _stop_worker(self) -> None:
        if self.game is not None:
            self.game.cancel()
        self.channel.close()
        self.awaiting_human = False

    def begin_human_turn(self, player: Player) -> None:
        self.awaiting_human = True
        self.status_var.set(f"{player.name}'s turn ({player.symbol})")

    def end_human_turn(self) -> None:
        self.awaiting_human = False

    def _on_cell_click(self, row: int, col: int) -> None:
        if not self.awaiting_human:
            return
        if self.channel.submit(row, col):
            logger.debug("Cell (%d, %d) clicked.", row, col)

    def render_board(self, board: Board, highlight_row: Optional[int] = None, highlight_col: Optional[int] = None) -> None:
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                symbol = board.get(r, c)
                btn = self.buttons[r][c]
                highlighted = r == highlight_row and c == highlight_col
                btn.configure(
                    text=symbol,
                    fg=PALETTE.get(symbol, PALETTE["TEXT"]),
                    bg=PALETTE["HIGHLIGHT"] if highlighted else PALETTE["CELL"],
                )

    def _save_settings(self) -> None:
        self.settings.update(
            {
                "player_name": self.name_var.get().strip() or "Human",
                "symbol": self.symbol_var.get(),
                "difficulty": self.difficulty_var.get(),
            }
        )
        save_settings(self.settings, self.settings_path)

    def _handle_exception(self, exc_type, exc_value, exc_traceback) -> None:
        logger.error("Unhandled UI exception", exc_info=(exc_type, exc_value, exc_traceback))
        messagebox.showerror("Error", f"Something went wrong: {exc_value}", parent=self.root)

    def close(self) -> None:
        self._closing = True
        self._stop_worker()
        self._save_settings()
        self.root.destroy()


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe desktop window.")
    parser.add_argument("--settings", help=f"Path to the settings JSON (default {SETTINGS_FILE}).")
    parser.add_argument("--log-dir", help="Directory for app.log (default data/logs).")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = _parse_args(argv)
    settings_path = Path(args.settings) if args.settings else None
    settings = load_settings(settings_path)
    init_logger(args.log_dir, settings.get("log_level", "INFO"))
    atexit.register(shutdown_logger)
    root = tk.Tk()
    TicTacToeGUI(root, settings_path)
    root.mainloop()


if __name__ == "__main__":
    main()
