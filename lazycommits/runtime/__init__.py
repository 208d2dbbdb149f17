"""Runtime layer: terminal session, config, clipboard, and the event loop."""

from __future__ import annotations

from .clipboard import ClipboardError, copy_text_to_clipboard
from .loop import (
    LoopState,
    dispatch_command,
    ensure_loaded,
    open_terminal_session,
    populate_viewport,
    render_screen,
    run_commit_list,
)
from .terminal import TerminalController

__all__ = [
    "ClipboardError",
    "LoopState",
    "TerminalController",
    "copy_text_to_clipboard",
    "dispatch_command",
    "ensure_loaded",
    "open_terminal_session",
    "populate_viewport",
    "render_screen",
    "run_commit_list",
]
