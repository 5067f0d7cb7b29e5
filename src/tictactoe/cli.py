"""Command-line entry point for the tic-tac-toe TUI game."""

from __future__ import annotations

import argparse
import logging
import time
from typing import Optional, Sequence

from .ai import STRATEGIES, AIOpponent, StrategyProfile, create_ai_opponent, get_strategy_profile
from .board import Player
from .config import AI_MOVE_DELAY
from .controller import Command, Controller
from .game import Match
from .ui import input as input_mod
from .ui.renderer import render

KEY_COMMANDS = {
    "w": Command.MOVE_UP,
    "s": Command.MOVE_DOWN,
    "a": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    " ": Command.PLACE,
    "r": Command.RESET,
    "q": "quit",
}


def main(argv: Optional[Sequence[str]] = None) -> None:  # pragma: no cover - interactive loop
    """Launch the interactive tic-tac-toe game."""

    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper()))

    profile = get_strategy_profile(args.opponent) if args.opponent else _prompt_opponent_selection()
    human_player = _side_from_text(args.side) if args.side else _prompt_player_side()
    ai_player = human_player.opponent

    match = Match.new()
    match.set_player_alias(human_player, "You")
    match.set_player_alias(ai_player, profile.display_name)

    controller = Controller(match)
    ai_opponent = create_ai_opponent(profile, ai_player)

    _run_ai_turns(match, ai_opponent, delay=0.0)

    while True:
        print("\033[H\033[J", end="")  # Clear terminal
        print(render(match))
        try:
            key = input_mod.get_key()
        except NotImplementedError:
            print("Keyboard input is unavailable, exiting.")
            return

        command = _map_key_to_command(key)
        if command == "quit":
            return
        if command:
            try:
                controller.handle_input(command)
            except ValueError as exc:
                match.info_message = str(exc)
            else:
                if ai_opponent.player is match.current_player and not match.is_finished:
                    print("\033[H\033[J", end="")
                    print(render(match))
                _run_ai_turns(match, ai_opponent, delay=AI_MOVE_DELAY)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tictactoe", description="Play tic-tac-toe in the terminal.")
    parser.add_argument(
        "--opponent",
        choices=sorted(STRATEGIES.keys()),
        help="AI opponent to play against (prompted when omitted)",
    )
    parser.add_argument("--side", choices=("x", "o"), help="play X (moves first) or O")
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=("debug", "info", "warning", "error"),
        help="logging verbosity (default: warning)",
    )
    return parser.parse_args(argv)


def _map_key_to_command(key: str | None) -> str | None:
    if not key:
        return None
    return KEY_COMMANDS.get(key.lower())


def _prompt_opponent_selection() -> StrategyProfile:
    print("Choose your opponent:")
    for profile in STRATEGIES.values():
        print(f"  {profile.level}. {profile.display_name} - {profile.description}")

    while True:
        try:
            choice = input("Number or name [3]: ").strip()
        except EOFError:  # pragma: no cover - non-interactive fallback
            choice = ""
        identifier: int | str
        if not choice:
            identifier = 3
        elif choice.isdigit():
            identifier = int(choice)
        else:
            identifier = choice.lower()
        try:
            return get_strategy_profile(identifier)
        except KeyError:
            print("Unknown opponent, try again.")


def _prompt_player_side() -> Player:
    prompt = "Play [X] (moves first) or [O]? (default X): "
    while True:
        try:
            choice = input(prompt).strip()
        except EOFError:  # pragma: no cover - non-interactive fallback
            choice = ""
        try:
            return _side_from_text(choice)
        except ValueError:
            print("Please answer X or O.")


def _side_from_text(text: str) -> Player:
    choice = text.strip().lower()
    if choice in ("", "x", "1", "first"):
        return Player.ONE
    if choice in ("o", "2", "second"):
        return Player.TWO
    raise ValueError(f"Unknown side: {text}")


def _run_ai_turns(match: Match, opponent: Optional[AIOpponent], delay: float) -> None:
    if opponent is None:
        return
    while not match.is_finished and match.current_player is opponent.player:
        if delay:
            time.sleep(delay)
        acted = opponent.take_turn(match)
        if not acted:
            break


if __name__ == "__main__":  # pragma: no cover
    main()
