"""
Board representation and terminal-state detection.

Notes:
- A board is a tuple of 9 cells in row-major order (0,1,2 / 3,4,5 / 6,7,8).
- Boards never change after construction; with_move returns a new Board.
- Terminal detection scans WIN_LINES in a fixed order and reports the first
  complete line, so a constructed board with two lines is still deterministic.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .errors import InvalidBoard, InvalidPosition, InvalidSymbol


class CellValue(str, Enum):
    EMPTY = ''
    X = 'X'
    O = 'O'


class Winner(str, Enum):
    X = 'X'
    O = 'O'
    DRAW = 'DRAW'


WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)

BOARD_SIZE = 9

# Accepted notations for Board.from_string: digits (0/1/2) or symbols.
_CHAR_TO_CELL = {
    '0': CellValue.EMPTY, '1': CellValue.X, '2': CellValue.O,
    'X': CellValue.X, 'x': CellValue.X,
    'O': CellValue.O, 'o': CellValue.O,
    '.': CellValue.EMPTY, '_': CellValue.EMPTY, '-': CellValue.EMPTY, ' ': CellValue.EMPTY,
}


@dataclass(frozen=True)
class GameState:
    """Terminal classification of a board; derived, never stored on it."""
    finished: bool
    winner: Optional[Winner] = None
    winning_line: Optional[Tuple[int, int, int]] = None


IN_PROGRESS = GameState(finished=False)


def _to_cell(value: Union[CellValue, str]) -> CellValue:
    try:
        return CellValue(value)
    except ValueError:
        raise InvalidBoard(f"Unknown cell value: {value!r}") from None


class Board:
    __slots__ = ('_cells',)

    def __init__(self, cells: Optional[Iterable[Union[CellValue, str]]] = None) -> None:
        if cells is None:
            self._cells: Tuple[CellValue, ...] = (CellValue.EMPTY,) * BOARD_SIZE
            return
        parsed = tuple(_to_cell(c) for c in cells)
        if len(parsed) != BOARD_SIZE:
            raise InvalidBoard(f"A board has exactly {BOARD_SIZE} cells, got {len(parsed)}")
        self._cells = parsed

    @classmethod
    def _from_cells(cls, cells: Tuple[CellValue, ...]) -> "Board":
        # Trusted path for successors built inside this module.
        board = cls.__new__(cls)
        board._cells = cells
        return board

    @classmethod
    def from_string(cls, raw: str) -> "Board":
        """Parse 9 chars, either 0/1/2 digits or X/O with '.', '_', '-' or ' ' for empty."""
        if len(raw) != BOARD_SIZE:
            raise InvalidBoard(f"Board string must be {BOARD_SIZE} chars, got {len(raw)}: {raw!r}")
        try:
            return cls._from_cells(tuple(_CHAR_TO_CELL[c] for c in raw))
        except KeyError as e:
            raise InvalidBoard(f"Invalid board character {e.args[0]!r} in {raw!r}") from None

    def to_string(self) -> str:
        return ''.join(c.value or '.' for c in self._cells)

    @property
    def cells(self) -> Tuple[CellValue, ...]:
        return self._cells

    def __len__(self) -> int:
        return BOARD_SIZE

    def __iter__(self) -> Iterator[CellValue]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> CellValue:
        return self._cells[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def is_empty(self) -> bool:
        return all(c is CellValue.EMPTY for c in self._cells)

    def is_full(self) -> bool:
        return CellValue.EMPTY not in self._cells

    def occupied_count(self) -> int:
        return sum(1 for c in self._cells if c is not CellValue.EMPTY)

    def side_to_move(self) -> CellValue:
        """X moves first, so X is to move whenever both counts are equal."""
        x = self._cells.count(CellValue.X)
        o = self._cells.count(CellValue.O)
        return CellValue.X if x == o else CellValue.O

    def available_moves(self) -> List[int]:
        return [i for i, c in enumerate(self._cells) if c is CellValue.EMPTY]

    def with_move(self, symbol: Union[CellValue, str], position: int) -> Optional["Board"]:
        """Return a copy with `symbol` at `position`, or None if that cell is taken.

        Raises InvalidPosition for indices outside 0..8 and InvalidSymbol for
        anything other than X or O.
        """
        if isinstance(position, bool) or not isinstance(position, int) or not 0 <= position < BOARD_SIZE:
            raise InvalidPosition(position)
        if symbol not in (CellValue.X, CellValue.O):
            raise InvalidSymbol(symbol)
        if self._cells[position] is not CellValue.EMPTY:
            return None
        cells = list(self._cells)
        cells[position] = CellValue(symbol)
        return Board._from_cells(tuple(cells))

    def terminal_state(self) -> GameState:
        if self.is_empty():
            return IN_PROGRESS
        cells = self._cells
        for line in WIN_LINES:
            a, b, c = line
            v = cells[a]
            if v is not CellValue.EMPTY and v is cells[b] and v is cells[c]:
                return GameState(finished=True, winner=Winner(v.value), winning_line=line)
        if self.is_full():
            return GameState(finished=True, winner=Winner.DRAW)
        return IN_PROGRESS
