"""Threat and fork detection built on the fixed set of winning lines."""

from __future__ import annotations

from itertools import combinations
from typing import Dict, FrozenSet, Optional, Tuple

from .board import WINNING_LINES, BoardState, Player
from .config import BOARD_CELLS
from .errors import InvalidArgument


def _build_threat_table() -> Dict[Tuple[int, int], int]:
    table: Dict[Tuple[int, int], int] = {}
    for line in WINNING_LINES:
        for a, b in combinations(line, 2):
            (third,) = (cell for cell in line if cell not in (a, b))
            table[(a, b)] = third
            table[(b, a)] = third
    return table


# (a, b) -> the cell completing the line through a and b
_THREATS: Dict[Tuple[int, int], int] = _build_threat_table()


def threat_cell(a: int, b: int) -> Optional[int]:
    """Return the third cell of the winning line holding both ``a`` and ``b``.

    Returns ``None`` when no line contains both cells. Whether the third cell
    is still open is up to the caller to check.
    """

    if a == b:
        raise InvalidArgument(f"A cell cannot threaten itself (got {a} twice)")
    for index in (a, b):
        if not isinstance(index, int) or not 0 <= index < BOARD_CELLS:
            raise InvalidArgument(f"Cell {index!r} is outside the board")
    return _THREATS.get((a, b))


def all_threats(board: BoardState, player: Player) -> FrozenSet[int]:
    """Open cells that would complete a line for ``player``.

    Two or more results mean ``player`` already has a fork on ``board``.
    """

    threats = set()
    for a, b in combinations(board.cells_of(player), 2):
        third = threat_cell(a, b)
        if third is not None and board.is_empty(third):
            threats.add(third)
    return frozenset(threats)


def fork_moves(board: BoardState, player: Player) -> FrozenSet[int]:
    """Every open cell where a move by ``player`` creates two or more threats."""

    return frozenset(
        cell
        for cell in board.empty_cells()
        if len(all_threats(board.with_move(cell, player), player)) >= 2
    )
