"""Error types raised by the board model and the move-selection strategies."""

from __future__ import annotations


class TicTacToeError(Exception):
    """Base class for every error raised by the package."""


class InvalidMove(TicTacToeError, ValueError):
    """A move targets an out-of-range or already occupied cell."""


class InvalidArgument(TicTacToeError, ValueError):
    """An argument is malformed, e.g. ``threat_cell`` called with the same cell twice."""


class NoMovesAvailable(TicTacToeError, ValueError):
    """A strategy was asked to move on a full board."""


class InternalInconsistency(TicTacToeError, RuntimeError):
    """A strategy ran out of rules without producing a move."""
