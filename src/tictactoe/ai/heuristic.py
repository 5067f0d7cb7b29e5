"""Rule-ordered player following the classic tic-tac-toe playbook.

Rules are tried in order and the first one that applies decides the move:

1. opening move in the corner
2. win
3. block the opponent's win
4. fork
5. block the opponent's fork by taking the fork cell
6. center
7. corner opposite an opponent's corner
8. any corner
9. any edge

Rule 5 simply occupies the opponent's fork cell. A perfect player would first
look for a forcing threat that does not hand the fork back; that refinement is
left out.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Callable, Optional, Tuple

from ..board import BoardState, Player
from ..config import CENTER, CORNERS, EDGES, OPENING_MOVE, OPPOSITE_CORNERS
from ..errors import InternalInconsistency
from ..tactics import fork_moves, threat_cell
from .strategies import Strategy, require_open_cells

logger = logging.getLogger(__name__)

Rule = Callable[[BoardState, Player], Optional[int]]


def _opening(board: BoardState, player: Player) -> Optional[int]:
    if board.move_count == 0:
        return OPENING_MOVE
    return None


def _win(board: BoardState, player: Player) -> Optional[int]:
    for cell in board.empty_cells():
        if board.with_move(cell, player).has_winner():
            return cell
    return None


def _block_win(board: BoardState, player: Player) -> Optional[int]:
    for a, b in combinations(board.cells_of(player.opponent), 2):
        third = threat_cell(a, b)
        if third is not None and board.is_empty(third):
            return third
    return None


def _fork(board: BoardState, player: Player) -> Optional[int]:
    cells = fork_moves(board, player)
    return min(cells) if cells else None


def _block_fork(board: BoardState, player: Player) -> Optional[int]:
    cells = fork_moves(board, player.opponent)
    return min(cells) if cells else None


def _center(board: BoardState, player: Player) -> Optional[int]:
    return CENTER if board.is_empty(CENTER) else None


def _opposite_corner(board: BoardState, player: Player) -> Optional[int]:
    for taken, answer in OPPOSITE_CORNERS:
        if board.cells[taken] is player.opponent and board.is_empty(answer):
            return answer
    return None


def _first_open(candidates: Tuple[int, ...]) -> Rule:
    def rule(board: BoardState, player: Player) -> Optional[int]:
        for cell in candidates:
            if board.is_empty(cell):
                return cell
        return None

    return rule


RULES: Tuple[Tuple[str, Rule], ...] = (
    ("opening", _opening),
    ("win", _win),
    ("block-win", _block_win),
    ("fork", _fork),
    ("block-fork", _block_fork),
    ("center", _center),
    ("opposite-corner", _opposite_corner),
    ("corner", _first_open(CORNERS)),
    ("edge", _first_open(EDGES)),
)


class HeuristicStrategy(Strategy):
    """Plays the first applicable rule of the cascade above."""

    name = "good"

    def select_move(self, board: BoardState, player: Player) -> BoardState:
        require_open_cells(board)
        for rule_name, rule in RULES:
            cell = rule(board, player)
            if cell is not None:
                logger.debug("%s plays cell %d for %s (%s)", self.name, cell, player.mark, rule_name)
                return board.with_move(cell, player)
        raise InternalInconsistency("No rule produced a move on a board with open cells")
