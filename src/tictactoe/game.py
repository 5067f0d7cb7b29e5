"""Match engine: turn sequencing and end-of-game detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .board import BoardState, Player, is_cell_index
from .config import ACTION_LOG_CAPACITY, BOARD_WIDTH, CENTER
from .errors import InvalidArgument, InvalidMove

logger = logging.getLogger(__name__)

PLAYER_DEFAULT_ALIASES: Dict[Player, str] = {
    Player.ONE: "Player 1",
    Player.TWO: "Player 2",
}


def player_default_alias(player: Player) -> str:
    return PLAYER_DEFAULT_ALIASES[player]


@dataclass
class MoveResult:
    cell: int
    player: Player
    produced_win: bool
    produced_scratch: bool


@dataclass
class Match:
    """State manager for a single two-player match."""

    board: BoardState = field(default_factory=BoardState.empty)
    current_player: Player = Player.ONE
    cursor: int = CENTER
    last_move: Optional[MoveResult] = None
    info_message: Optional[str] = None
    winner: Optional[Player] = None
    scratch: bool = False
    action_log: List[str] = field(default_factory=list)
    _log_capacity: int = ACTION_LOG_CAPACITY
    player_aliases: Dict[Player, str] = field(
        default_factory=lambda: dict(PLAYER_DEFAULT_ALIASES)
    )

    @classmethod
    def new(cls) -> "Match":
        return cls()

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------
    def place_at_cursor(self) -> MoveResult:
        """Attempt to mark the cursor cell for the current player."""

        return self.place_mark(self.cursor)

    def place_mark(self, cell: int) -> MoveResult:
        if self.is_finished:
            raise InvalidMove("The match is already over")
        return self.submit_board(self.board.with_move(cell, self.current_player))

    def submit_board(self, board: BoardState) -> MoveResult:
        """Accept the board produced by the current player's move.

        ``board`` must equal the current board plus exactly one new mark
        belonging to the current player.
        """

        if self.is_finished:
            raise InvalidMove("The match is already over")

        cell = self._played_cell(board)
        produced_win = board.has_winner()
        produced_scratch = not produced_win and board.is_full()

        self.board = board
        result = MoveResult(
            cell=cell,
            player=self.current_player,
            produced_win=produced_win,
            produced_scratch=produced_scratch,
        )
        self.last_move = result
        self.info_message = None
        self._log_action(f"{self.player_label(self.current_player)} plays {self._cell_label(cell)}")

        if produced_win:
            self.winner = self.current_player
            self._log_action(f"{self.player_label(self.current_player)} wins")
            logger.info("%s wins after %d moves", self.current_player.name, board.move_count)
        elif produced_scratch:
            self.scratch = True
            self._log_action("Scratch game")
            logger.info("Scratch game")
        else:
            self.current_player = self.current_player.opponent

        return result

    def _played_cell(self, board: BoardState) -> int:
        changed = [
            index
            for index, (before, after) in enumerate(zip(self.board.cells, board.cells))
            if before != after
        ]
        if len(changed) != 1:
            raise InvalidMove(f"Expected exactly one new mark, found {len(changed)} changed cells")
        (cell,) = changed
        if self.board.cells[cell] is not None:
            raise InvalidMove(f"Cell {cell} was already taken")
        if board.cells[cell] is not self.current_player:
            raise InvalidMove(f"Cell {cell} was not marked by {self.player_alias(self.current_player)}")
        return cell

    # ------------------------------------------------------------------
    # Cursor management
    # ------------------------------------------------------------------
    def move_cursor(self, delta_row: int, delta_col: int) -> int:
        row, col = divmod(self.cursor, BOARD_WIDTH)
        new_row = (row + delta_row) % BOARD_WIDTH
        new_col = (col + delta_col) % BOARD_WIDTH
        self.cursor = new_row * BOARD_WIDTH + new_col
        return self.cursor

    def set_cursor(self, cell: int) -> None:
        if not is_cell_index(cell):
            raise InvalidArgument("Cursor cell is outside the board")
        self.cursor = cell

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.winner is not None or self.scratch

    def status_message(self) -> str:
        if self.winner:
            return f"{self.player_label(self.winner)} wins!"
        if self.scratch:
            return "Scratch game"
        return f"{self.player_label(self.current_player)} to move"

    def set_player_alias(self, player: Player, alias: str) -> None:
        cleaned = alias.strip() if alias else ""
        self.player_aliases[player] = cleaned or player_default_alias(player)

    def player_alias(self, player: Player) -> str:
        return self.player_aliases.get(player) or player_default_alias(player)

    def player_label(self, player: Player) -> str:
        return f"{self.player_alias(player)} ({player.mark})"

    def reset(self) -> None:
        self.board = BoardState.empty()
        self.current_player = Player.ONE
        self.cursor = CENTER
        self.last_move = None
        self.info_message = None
        self.winner = None
        self.scratch = False
        self.action_log.clear()
        self._log_action("New match")

    # ------------------------------------------------------------------
    # Action logging helpers
    # ------------------------------------------------------------------
    def _log_action(self, message: str) -> None:
        self.action_log.append(message)
        if len(self.action_log) > self._log_capacity:
            del self.action_log[0 : len(self.action_log) - self._log_capacity]

    @staticmethod
    def _cell_label(cell: int) -> str:
        row, col = divmod(cell, BOARD_WIDTH)
        return f"{chr(ord('A') + col)}{row + 1}"
