"""3x3 board state: placement, win/draw detection and cloning for lookahead."""

from typing import List, Optional, Sequence, Tuple

BOARD_SIZE = 3
EMPTY = " "
SYMBOLS = ("X", "O")
Cell = Tuple[int, int]

# Rows, columns, then both diagonals.
WINNING_LINES: Tuple[Tuple[Cell, Cell, Cell], ...] = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def other_symbol(symbol: str) -> str:
    return "O" if symbol == "X" else "X"


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Board:
    """Fixed-size grid of cell symbols.

    Placement never raises: bad symbols, out-of-range coordinates and occupied
    cells all return ``False`` and leave the board untouched. The AI works on
    ``clone()`` copies so lookahead never leaks into the live board.
    """

    def __init__(self) -> None:
        self._cells: List[List[str]] = []
        self.clear()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Board":
        board = cls()
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Board needs {BOARD_SIZE} rows of {BOARD_SIZE} cells.")
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                symbol = value if value in SYMBOLS else EMPTY
                board._cells[r][c] = symbol
        return board

    def clear(self) -> None:
        self._cells = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def clone(self) -> "Board":
        copied = Board()
        copied._cells = [row[:] for row in self._cells]
        return copied

    def place(self, row: int, col: int, symbol: str) -> bool:
        if symbol not in SYMBOLS:
            return False
        if not in_bounds(row, col) or self._cells[row][col] != EMPTY:
            return False
        self._cells[row][col] = symbol
        return True

    def get(self, row: int, col: int) -> str:
        return self._cells[row][col]

    def is_cell_empty(self, row: int, col: int) -> bool:
        return in_bounds(row, col) and self._cells[row][col] == EMPTY

    def empty_cells(self) -> List[Cell]:
        """Open cells in row-major order."""
        return [
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if self._cells[r][c] == EMPTY
        ]

    def count_empty(self) -> int:
        return sum(row.count(EMPTY) for row in self._cells)

    def is_full(self) -> bool:
        return self.count_empty() == 0

    def winning_line(self, symbol: str) -> Optional[Tuple[Cell, Cell, Cell]]:
        if symbol not in SYMBOLS:
            return None
        for line in WINNING_LINES:
            if all(self._cells[r][c] == symbol for r, c in line):
                return line
        return None

    def check_win(self, symbol: str) -> bool:
        return self.winning_line(symbol) is not None

    def rows(self) -> List[List[str]]:
        return [row[:] for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        text = "/".join("".join(cell if cell != EMPTY else "." for cell in row) for row in self._cells)
        return f"Board({text})"
