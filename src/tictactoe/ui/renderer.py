"""Rendering helpers for the terminal UI."""

from __future__ import annotations

import re
from typing import Iterable, List

from ..board import Player
from ..config import BOARD_WIDTH
from ..game import Match

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
FG_CYAN = "\033[36m"
FG_YELLOW = "\033[33m"
FG_GREEN = "\033[32m"
FG_RED = "\033[31m"
FG_MAGENTA = "\033[35m"
FG_BLUE = "\033[34m"
FG_WHITE = "\033[37m"

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

ROW_LABELS = [f"{i + 1}" for i in range(BOARD_WIDTH)]
COL_LABELS = [chr(ord("A") + i) for i in range(BOARD_WIDTH)]
ROW_RULE = "  ---+---+---"
CURSOR_EMPTY = "·"


def render(match: Match) -> str:
    lines: List[str] = []
    lines.extend(_render_hud(match))
    board_lines = [_render_header()] + list(_render_board(match))
    board_width = max(_display_width(line) for line in board_lines)
    log_lines = _render_action_log_panel(match, len(board_lines))

    for idx, board_line in enumerate(board_lines):
        log_line = log_lines[idx] if idx < len(log_lines) else ""
        padded_board = _pad_to_width(board_line, board_width)
        lines.append(f"{padded_board}   {log_line}".rstrip())

    lines.append(_render_controls_line())
    return "\n".join(lines)


def _render_header() -> str:
    return "   " + "   ".join(COL_LABELS)


def _render_board(match: Match) -> Iterable[str]:
    rows: List[str] = []
    for row_idx in range(BOARD_WIDTH):
        rendered_cells: List[str] = []
        for col_idx in range(BOARD_WIDTH):
            cell = row_idx * BOARD_WIDTH + col_idx
            occupant = match.board.cells[cell]
            if cell == match.cursor and not match.is_finished:
                rendered_cells.append(_render_cursor_cell(occupant))
            else:
                rendered_cells.append(f" {_render_cell(occupant)} ")
        rows.append(ROW_LABELS[row_idx] + " " + "|".join(rendered_cells))
        if row_idx < BOARD_WIDTH - 1:
            rows.append(ROW_RULE)
    return rows


def _render_hud(match: Match) -> Iterable[str]:
    info_message = match.info_message or "—"
    status_text = f"Status: {match.status_message()}"
    last_move = "—"
    if match.last_move:
        last_move = f"{match.player_label(match.last_move.player)} {_format_cell(match.last_move.cell)}"
    summary_text = f"Info: {info_message} | Last move: {last_move}"
    status_color = FG_GREEN if match.is_finished else FG_CYAN
    return [
        _color(status_text, BOLD, status_color),
        _color(summary_text, FG_YELLOW),
    ]


def _render_action_log_panel(match: Match, height: int) -> List[str]:
    lines: List[str] = [_color("Recent moves", BOLD, FG_MAGENTA)]
    if match.action_log:
        for entry in reversed(match.action_log):
            lines.append(_color(entry, FG_BLUE))
    else:
        lines.append(_color("—", FG_WHITE, DIM))

    if len(lines) < height:
        lines.extend([""] * (height - len(lines)))
    return lines[:height]


def _render_controls_line() -> str:
    return _color("Controls: W/A/S/D move | Space play | R restart | Q quit", FG_CYAN)


def _render_cell(occupant: Player | None) -> str:
    if occupant is None:
        return " "
    if occupant is Player.ONE:
        return _color(occupant.mark, BOLD, FG_RED)
    return _color(occupant.mark, BOLD, FG_BLUE)


def _render_cursor_cell(occupant: Player | None) -> str:
    token = CURSOR_EMPTY if occupant is None else occupant.mark
    return _color(f"[{token}]", FG_CYAN, BOLD)


def _format_cell(cell: int) -> str:
    row, col = divmod(cell, BOARD_WIDTH)
    return f"{COL_LABELS[col]}{ROW_LABELS[row]}"


def _color(text: str, *codes: str) -> str:
    if not codes:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{RESET}"


def _display_width(text: str) -> int:
    return len(ANSI_ESCAPE_RE.sub("", text))


def _pad_to_width(text: str, width: int) -> str:
    current = _display_width(text)
    if current >= width:
        return text
    return text + " " * (width - current)
