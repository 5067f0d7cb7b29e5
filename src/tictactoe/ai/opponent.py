"""AI opponent orchestration for tic-tac-toe."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..board import Player
from .registry import StrategyProfile
from .strategies import Strategy

if TYPE_CHECKING:  # pragma: no cover
    from ..game import Match


@dataclass
class AIOpponent:
    """Automates turns for a given strategy and player."""

    strategy: Strategy
    player: Player

    def take_turn(self, match: "Match") -> bool:
        """Play the configured player's move if it is their turn."""

        if match.is_finished or match.current_player is not self.player:
            return False

        next_board = self.strategy.select_move(match.board, self.player)
        match.submit_board(next_board)
        return True


def create_ai_opponent(
    profile: StrategyProfile, player: Player, rng: Optional[random.Random] = None
) -> AIOpponent:
    """Factory helper that seeds the opponent's RNG consistently."""

    return AIOpponent(strategy=profile.build(rng or random.Random()), player=player)
