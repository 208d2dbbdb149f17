"""Terminal rendering primitives: cell-width text shaping and the frame canvas."""

from __future__ import annotations

from .ansi import (
    ANSI_ESCAPE_RE,
    char_display_width,
    clip_ansi_line,
    display_width,
    layout_field,
    pad_ansi_line,
    sanitize_terminal_text,
)
from .canvas import Canvas, Rect


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    """Lay out a one-row status bar with ``right_text`` flush right."""
    usable = max(1, width - 1)
    if usable <= display_width(right_text):
        return clip_ansi_line(right_text, usable)
    left_limit = max(0, usable - display_width(right_text) - 1)
    left = clip_ansi_line(left_text, left_limit)
    gap = " " * (usable - display_width(left) - display_width(right_text))
    return f"{left}{gap}{right_text}"


__all__ = [
    "ANSI_ESCAPE_RE",
    "Canvas",
    "Rect",
    "build_status_line",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "layout_field",
    "pad_ansi_line",
    "sanitize_terminal_text",
]
