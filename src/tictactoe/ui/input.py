"""Keyboard input abstractions for the terminal UI."""

from __future__ import annotations

try:  # pragma: no cover - optional at import time
    import readchar
except ModuleNotFoundError:  # pragma: no cover
    readchar = None  # type: ignore


def get_key() -> str:
    """Return the next key pressed by the player.

    Raises :class:`NotImplementedError` when ``readchar`` is not available so
    that non-interactive tests can run without the dependency.
    """

    if readchar is None:
        raise NotImplementedError("readchar is not installed; keyboard input unavailable")
    return readchar.readkey()
