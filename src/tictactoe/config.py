"""Configuration constants used across the tic-tac-toe project."""

from typing import Tuple

BOARD_WIDTH: int = 3
BOARD_CELLS: int = BOARD_WIDTH * BOARD_WIDTH
PLAYER_ONE_MARK: str = "X"
PLAYER_TWO_MARK: str = "O"
EMPTY_MARK: str = " "

CENTER: int = 4
CORNERS: Tuple[int, ...] = (0, 2, 6, 8)
EDGES: Tuple[int, ...] = (1, 3, 5, 7)
# (corner held by the opponent, corner to answer with)
OPPOSITE_CORNERS: Tuple[Tuple[int, int], ...] = ((0, 8), (8, 0), (2, 6), (6, 2))
OPENING_MOVE: int = 0

# Seconds to wait before an automated player moves, so the previous move stays visible.
AI_MOVE_DELAY: float = 0.4
ACTION_LOG_CAPACITY: int = 8
