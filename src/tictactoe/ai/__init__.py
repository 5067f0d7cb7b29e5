"""Move-selection strategies and AI opponent utilities."""

from .enumeration import EnumerationStrategy, Score, clear_score_cache, score_by_enumeration
from .heuristic import HeuristicStrategy
from .opponent import AIOpponent, create_ai_opponent
from .registry import STRATEGIES, StrategyProfile, get_strategy_profile
from .strategies import RandomStrategy, Strategy

__all__ = [
    "Strategy",
    "RandomStrategy",
    "EnumerationStrategy",
    "HeuristicStrategy",
    "Score",
    "score_by_enumeration",
    "clear_score_cache",
    "StrategyProfile",
    "STRATEGIES",
    "get_strategy_profile",
    "AIOpponent",
    "create_ai_opponent",
]
