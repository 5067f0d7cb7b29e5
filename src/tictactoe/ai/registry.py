"""Named strategy profiles the front end can offer as opponents."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .enumeration import EnumerationStrategy
from .heuristic import HeuristicStrategy
from .strategies import RandomStrategy, Strategy

StrategyFactory = Callable[[random.Random], Strategy]


@dataclass(frozen=True)
class StrategyProfile:
    """Configuration bundle describing a selectable AI opponent."""

    key: str
    display_name: str
    level: int
    factory: StrategyFactory
    description: Optional[str] = None

    def build(self, rng: Optional[random.Random] = None) -> Strategy:
        """Create a fresh strategy instance for this profile."""

        return self.factory(rng or random.Random())


def _profiles(*profiles: StrategyProfile) -> Dict[str, StrategyProfile]:
    return {profile.key: profile for profile in sorted(profiles, key=lambda profile: profile.level)}


# key -> profile, ordered by level
STRATEGIES: Dict[str, StrategyProfile] = _profiles(
    StrategyProfile(
        key="random",
        display_name="Random",
        level=1,
        factory=lambda rng: RandomStrategy(rng=rng),
        description="Plays any open cell.",
    ),
    StrategyProfile(
        key="brute",
        display_name="Brute",
        level=2,
        factory=lambda rng: EnumerationStrategy(),
        description="Counts every possible future game and plays the move with the most wins.",
    ),
    StrategyProfile(
        key="good",
        display_name="Good",
        level=3,
        factory=lambda rng: HeuristicStrategy(),
        description="Follows the classic win / block / fork playbook.",
    ),
)


def get_strategy_profile(identifier: str | int) -> StrategyProfile:
    """Return the profile registered under a key (``"good"``) or a level (``3``)."""

    if isinstance(identifier, int):
        for profile in STRATEGIES.values():
            if profile.level == identifier:
                return profile
    elif identifier in STRATEGIES:
        return STRATEGIES[identifier]
    raise KeyError(f"No opponent registered as {identifier!r}")
