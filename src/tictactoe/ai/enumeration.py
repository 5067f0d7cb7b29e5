"""Exhaustive game-tree scoring.

Every candidate move is scored by counting the won and lost games across the
whole remaining game tree, with both sides filling every open cell in turn.
This is counting, not minimax: the opponent is not assumed to reply well, so
a move whose subtree holds many wins can be preferred over one that avoids a
forced loss elsewhere.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..board import BoardState, Player
from .strategies import Strategy, require_open_cells, winning_move

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Score:
    """Won and lost game counts for one side."""

    wins: int = 0
    losses: int = 0

    def __add__(self, other: "Score") -> "Score":
        if not isinstance(other, Score):
            return NotImplemented
        return Score(self.wins + other.wins, self.losses + other.losses)

    @property
    def margin(self) -> int:
        return self.wins - self.losses

    def beats(self, other: "Score") -> bool:
        return self.margin > other.margin


WIN = Score(wins=1)
LOSS = Score(losses=1)
SCRATCH = Score()

# (board, scoree, lastplayer) -> score of that subtree
_SCORE_CACHE: Dict[Tuple[BoardState, Player, Player], Score] = {}


def score_by_enumeration(board: BoardState, scoree: Player, lastplayer: Player) -> Score:
    """Sum the outcomes of every game that can continue from ``board``.

    ``lastplayer`` made the move that produced ``board``; play continues with
    the other side. A scratch counts as neither a win nor a loss.
    """

    key = (board, scoree, lastplayer)
    cached = _SCORE_CACHE.get(key)
    if cached is not None:
        return cached

    if board.has_winner():
        score = WIN if lastplayer is scoree else LOSS
    elif board.is_full():
        score = SCRATCH
    else:
        nextplayer = lastplayer.opponent
        score = SCRATCH
        for cell in board.empty_cells():
            score = score + score_by_enumeration(board.with_move(cell, nextplayer), scoree, nextplayer)

    _SCORE_CACHE[key] = score
    return score


def clear_score_cache() -> None:
    """Drop memoised subtree scores."""

    _SCORE_CACHE.clear()


def score_cache_size() -> int:
    return len(_SCORE_CACHE)


class EnumerationStrategy(Strategy):
    """Brute-force player: take a win if one is on the board, else the best-counted move."""

    name = "brute"

    def select_move(self, board: BoardState, player: Player) -> BoardState:
        require_open_cells(board)

        immediate = winning_move(board, player)
        if immediate is not None:
            logger.debug("%s takes an immediate win for %s", self.name, player.mark)
            return immediate

        best_board: Optional[BoardState] = None
        best_score: Optional[Score] = None
        best_cell = -1
        for cell in board.empty_cells():
            candidate = board.with_move(cell, player)
            score = score_by_enumeration(candidate, scoree=player, lastplayer=player)
            # strict comparison keeps the lowest cell on ties
            if best_score is None or score.beats(best_score):
                best_board, best_score, best_cell = candidate, score, cell

        assert best_board is not None and best_score is not None
        logger.debug(
            "%s picks cell %d for %s (wins=%d, losses=%d)",
            self.name,
            best_cell,
            player.mark,
            best_score.wins,
            best_score.losses,
        )
        return best_board
