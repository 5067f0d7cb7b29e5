"""Move-selection interface shared by every automated player."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from ..board import BoardState, Player
from ..errors import NoMovesAvailable

logger = logging.getLogger(__name__)


class Strategy(ABC):
    """Given a board and the player to move, produce the next board."""

    name: str = "strategy"

    @abstractmethod
    def select_move(self, board: BoardState, player: Player) -> BoardState:
        """Return ``board`` with exactly one new mark for ``player``.

        Raises :class:`NoMovesAvailable` when the board is full.
        """


def require_open_cells(board: BoardState) -> None:
    if board.is_full():
        raise NoMovesAvailable("Board is full, nothing left to play")


def winning_move(board: BoardState, player: Player) -> Optional[BoardState]:
    """Return the first board (by ascending cell) where ``player`` wins at once."""

    for cell in board.empty_cells():
        candidate = board.with_move(cell, player)
        if candidate.has_winner():
            return candidate
    return None


@dataclass
class RandomStrategy(Strategy):
    """Play any open cell, chosen uniformly at random."""

    rng: random.Random = field(default_factory=random.Random)
    name: str = "random"

    def select_move(self, board: BoardState, player: Player) -> BoardState:
        require_open_cells(board)
        choice = self.rng.choice(board.empty_cells())
        logger.debug("%s picks cell %d for %s", self.name, choice, player.mark)
        return board.with_move(choice, player)
