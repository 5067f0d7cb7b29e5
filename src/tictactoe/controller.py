"""Controller responsible for interpreting user commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from .game import Match


class Command:
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    PLACE = "place"
    RESET = "reset"


@dataclass
class Controller:
    """Translate symbolic commands into match actions."""

    match: Match

    def __post_init__(self) -> None:
        self._handlers: Dict[str, Callable[[], object]] = {
            Command.MOVE_UP: lambda: self.match.move_cursor(-1, 0),
            Command.MOVE_DOWN: lambda: self.match.move_cursor(1, 0),
            Command.MOVE_LEFT: lambda: self.match.move_cursor(0, -1),
            Command.MOVE_RIGHT: lambda: self.match.move_cursor(0, 1),
            Command.PLACE: self.match.place_at_cursor,
            Command.RESET: self.match.reset,
        }

    def handle_input(self, command: str) -> None:
        if self.match.is_finished and command != Command.RESET:
            return

        handler = self._handlers.get(command)
        if handler is None:
            raise ValueError(f"Unknown command: {command}")
        handler()
