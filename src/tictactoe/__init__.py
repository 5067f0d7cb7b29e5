"""Tic-tac-toe board model, move-selection strategies and terminal game."""

from .board import WINNING_LINES, BoardState, Player
from .errors import (
    InternalInconsistency,
    InvalidArgument,
    InvalidMove,
    NoMovesAvailable,
    TicTacToeError,
)
from .tactics import all_threats, fork_moves, threat_cell

__version__ = "0.1.0"
__all__ = [
    "BoardState",
    "Player",
    "WINNING_LINES",
    "threat_cell",
    "all_threats",
    "fork_moves",
    "TicTacToeError",
    "InvalidMove",
    "InvalidArgument",
    "NoMovesAvailable",
    "InternalInconsistency",
]
