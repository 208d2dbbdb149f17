"""Windowed commit list: selection, scroll acceleration, windowing, row layout."""

from __future__ import annotations

from .commands import Command, CommandInfo, navigation_scroll_type, parse_command_name
from .row_format import Span, author_field_width, format_row, spans_plain_text, spans_to_ansi
from .scroll import ScrollAccelerator
from .selection import ScrollType, SelectionController
from .viewport import CommitListViewport, RenderCache
from .windowing import next_window_start

__all__ = [
    "Command",
    "CommandInfo",
    "CommitListViewport",
    "RenderCache",
    "ScrollAccelerator",
    "ScrollType",
    "SelectionController",
    "Span",
    "author_field_width",
    "format_row",
    "navigation_scroll_type",
    "next_window_start",
    "parse_command_name",
    "spans_plain_text",
    "spans_to_ansi",
]
