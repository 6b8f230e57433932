from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidInput

BOARD_SIZE = 8
EMPTY = 0

Move = Tuple[int, int]


class Side(IntEnum):
    """Disc colours. Values double as cell contents and as score signs."""

    DARK = -1
    LIGHT = 1

    @property
    def opponent(self) -> "Side":
        return Side.LIGHT if self is Side.DARK else Side.DARK

    @classmethod
    def parse(cls, value: str) -> "Side":
        try:
            return cls[value.upper()]
        except (KeyError, AttributeError):
            raise InvalidInput(f"Unknown side: {value!r}") from None


CHAR_MAP: Dict[int, str] = {EMPTY: ".", Side.DARK: "D", Side.LIGHT: "L"}
_CHAR_TO_CELL: Dict[str, int] = {ch: cell for cell, ch in CHAR_MAP.items()}


def check_coords(row: int, col: int) -> None:
    if not (isinstance(row, int) and isinstance(col, int)):
        raise InvalidInput(f"Coordinates must be integers: ({row!r}, {col!r})")
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise InvalidInput(f"Coordinates off the board: ({row}, {col})")


def check_side(side: object) -> Side:
    if not isinstance(side, Side):
        raise InvalidInput(f"Not a side: {side!r}")
    return side


class Board:
    """8x8 grid of cells holding EMPTY, Side.DARK or Side.LIGHT.

    Legality is not checked here; the only mutation primitive is ``set`` and
    it is meant to be called from the rules module.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[List[List[int]]] = None) -> None:
        if cells is None:
            cells = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._cells = cells

    @classmethod
    def initial(cls) -> "Board":
        board = cls()
        board._cells[3][3] = Side.LIGHT
        board._cells[3][4] = Side.DARK
        board._cells[4][3] = Side.DARK
        board._cells[4][4] = Side.LIGHT
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from 8 strings of '.', 'D' and 'L' (whitespace ignored)."""
        cleaned = ["".join(row.split()) for row in rows]
        if len(cleaned) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cleaned):
            raise InvalidInput("Board layout must be 8 rows of 8 cells")
        cells: List[List[int]] = []
        for row in cleaned:
            try:
                cells.append([_CHAR_TO_CELL[ch.upper()] for ch in row])
            except KeyError as exc:
                raise InvalidInput(f"Unknown cell character {exc.args[0]!r}") from None
        return cls(cells)

    def copy(self) -> "Board":
        return Board([row[:] for row in self._cells])

    def get(self, row: int, col: int) -> int:
        check_coords(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, side: Side) -> None:
        check_coords(row, col)
        self._cells[row][col] = check_side(side)

    @property
    def grid(self) -> Tuple[Tuple[int, ...], ...]:
        """The cells as nested tuples, for scans that read every cell."""
        return tuple(map(tuple, self._cells))

    def rows(self) -> List[List[int]]:
        """Read-only view for collaborators: a fresh nested list of ints."""
        return [[int(cell) for cell in row] for row in self._cells]

    def count(self, side: Side) -> int:
        return sum(row.count(side) for row in self._cells)

    def counts(self) -> Tuple[int, int]:
        """Return (dark, light) disc counts."""
        return self.count(Side.DARK), self.count(Side.LIGHT)

    def occupied(self) -> int:
        return sum(BOARD_SIZE - row.count(EMPTY) for row in self._cells)

    def __iter__(self) -> Iterator[Tuple[int, int, int]]:
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                yield r, c, cell

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self) -> str:
        lines = ["  " + " ".join(str(c) for c in range(BOARD_SIZE))]
        for r, row in enumerate(self._cells):
            lines.append(f"{r} " + " ".join(CHAR_MAP[cell] for cell in row))
        return "\n".join(lines)
