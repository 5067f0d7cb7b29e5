"""Immutable board model for tic-tac-toe.

Cells are numbered row by row::

    0|1|2
    -+-+-
    3|4|5
    -+-+-
    6|7|8

A :class:`BoardState` never changes after construction. Placing a mark returns
a new board, so game-tree searches can branch freely from any position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from .config import BOARD_CELLS, BOARD_WIDTH, EMPTY_MARK, PLAYER_ONE_MARK, PLAYER_TWO_MARK
from .errors import InvalidArgument, InvalidMove

Line = Tuple[int, int, int]
Cell = Optional["Player"]
CellValue = Union[None, int, "Player"]

WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class Player(Enum):
    ONE = 1
    TWO = 2

    @property
    def mark(self) -> str:
        return PLAYER_ONE_MARK if self is Player.ONE else PLAYER_TWO_MARK

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


def _coerce_cell(value: CellValue) -> Cell:
    if value is None or isinstance(value, Player):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if value == 0:
            return None
        try:
            return Player(value)
        except ValueError as exc:
            raise InvalidArgument(f"Unknown cell value: {value!r}") from exc
    raise InvalidArgument(f"Unknown cell value: {value!r}")


@dataclass(frozen=True)
class BoardState:
    """A 3x3 tic-tac-toe position."""

    cells: Tuple[Cell, ...] = (None,) * BOARD_CELLS
    _empty: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != BOARD_CELLS:
            raise InvalidArgument(f"A board has {BOARD_CELLS} cells, got {len(cells)}")
        for value in cells:
            if value is not None and not isinstance(value, Player):
                raise InvalidArgument(f"Unknown cell value: {value!r}")
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "_empty", _empty_indices(cells))

    # ---------------------------------------------------------------------
    # Construction helpers
    # ---------------------------------------------------------------------
    @classmethod
    def empty(cls) -> "BoardState":
        return cls()

    @classmethod
    def from_cells(cls, values: Iterable[CellValue]) -> "BoardState":
        """Build a board from ``0/1/2`` integers, ``None`` or :class:`Player` values."""

        return cls(tuple(_coerce_cell(value) for value in values))

    @classmethod
    def _derive(cls, cells: Tuple[Cell, ...]) -> "BoardState":
        # Skips validation; only used with cells produced by a valid board.
        board = cls.__new__(cls)
        object.__setattr__(board, "cells", cells)
        object.__setattr__(board, "_empty", _empty_indices(cells))
        return board

    def to_ints(self) -> Tuple[int, ...]:
        return tuple(0 if value is None else value.value for value in self.cells)

    # ---------------------------------------------------------------------
    # Query helpers
    # ---------------------------------------------------------------------
    def cell(self, index: int) -> Cell:
        """Return the occupant of ``index`` (``None`` when empty)."""

        if not is_cell_index(index):
            raise InvalidArgument(f"Cell {index!r} is outside the board")
        return self.cells[index]

    def is_empty(self, index: int) -> bool:
        return is_cell_index(index) and self.cells[index] is None

    def empty_cells(self) -> Tuple[int, ...]:
        """Indices of open cells in ascending order, possibly empty."""

        return self._empty

    def filled_cells(self) -> Tuple[int, ...]:
        """Indices of played cells in ascending order, possibly empty."""

        return tuple(index for index, value in enumerate(self.cells) if value is not None)

    def cells_of(self, player: Player) -> Tuple[int, ...]:
        """Indices held by ``player`` in ascending order."""

        return tuple(index for index, value in enumerate(self.cells) if value is player)

    @property
    def move_count(self) -> int:
        return BOARD_CELLS - len(self._empty)

    def is_full(self) -> bool:
        return not self._empty

    def has_winner(self) -> bool:
        return self.winner() is not None

    def winner(self) -> Optional[Player]:
        """Return the owner of the first completed line, if any."""

        cells = self.cells
        for a, b, c in WINNING_LINES:
            owner = cells[a]
            if owner is not None and owner is cells[b] and owner is cells[c]:
                return owner
        return None

    # ---------------------------------------------------------------------
    # Transformations
    # ---------------------------------------------------------------------
    def with_move(self, index: int, player: Player) -> "BoardState":
        """Return a new board with ``player`` marked at ``index``.

        Raises :class:`InvalidMove` when the index is outside ``0..8`` or the
        cell is already taken. The receiver is left untouched.
        """

        if not isinstance(player, Player):
            raise InvalidArgument(f"Not a player: {player!r}")
        if not is_cell_index(index):
            raise InvalidMove(f"Cell {index!r} is outside the board")
        if self.cells[index] is not None:
            raise InvalidMove(f"Cell {index} is already taken by {self.cells[index].mark}")
        cells = list(self.cells)
        cells[index] = player
        return BoardState._derive(tuple(cells))

    def __str__(self) -> str:
        marks = [EMPTY_MARK if value is None else value.mark for value in self.cells]
        rows = [
            "|".join(marks[start : start + BOARD_WIDTH])
            for start in range(0, BOARD_CELLS, BOARD_WIDTH)
        ]
        return "\n-+-+-\n".join(rows)


def is_cell_index(index: object) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_CELLS


def _empty_indices(cells: Tuple[Cell, ...]) -> Tuple[int, ...]:
    return tuple(index for index, value in enumerate(cells) if value is None)
