"""Main interactive event loop for the commit list.

Each iteration redraws when needed, reads one key, resolves it to a command,
and dispatches it. Paging more history into the viewport's batch is decided
here, never inside the viewport.
"""

from __future__ import annotations

import shutil
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from ..commit_list import Command, CommitListViewport
from ..input import Keymap, read_key
from ..log_model import LogEntry, Tags
from ..render import Canvas, Rect, build_status_line
from .clipboard import ClipboardError, copy_text_to_clipboard
from .terminal import TerminalController

SLICE_SIZE = 1200
STATUS_MESSAGE_SECONDS = 1.5
IDLE_TIMEOUT_MS = 200


class RowSource(Protocol):
    def count_commits(self) -> int: ...

    def load_batch(self, start: int, amount: int) -> list[LogEntry]: ...

    def load_tags(self) -> Tags: ...

    def current_branch(self) -> str | None: ...


@dataclass
class LoopState:
    """Mutable loop bookkeeping kept outside the viewport."""

    status_message: str = ""
    status_message_until: float = 0.0
    dirty: bool = True
    last_size: tuple[int, int] | None = None


def populate_viewport(viewport: CommitListViewport, source: RowSource, selection: int = 0) -> None:
    """Load history length, branch and tags, then page in the slice around ``selection``."""
    viewport.set_count_total(source.count_commits())
    viewport.select(selection)
    viewport.set_branch(source.current_branch())
    viewport.set_tags(source.load_tags())
    ensure_loaded(viewport, source)


def ensure_loaded(viewport: CommitListViewport, source: RowSource) -> bool:
    """Page in a slice centred on the selection when the batch no longer covers it."""
    if viewport.count_total() == 0:
        return False
    selection = viewport.selection()
    if not viewport.items.needs_data(selection, viewport.selection_max()):
        return False
    start = max(0, selection - SLICE_SIZE // 2)
    viewport.items.set_items(start, source.load_batch(start, SLICE_SIZE))
    return True


def _status_hints(viewport: CommitListViewport, keymap: Keymap) -> str:
    hints = [f"{info.keys} {info.name}" for info in viewport.commands() if info.enabled]
    copy_keys = keymap.keys_for(Command.COPY_HASH)
    quit_keys = keymap.keys_for(Command.QUIT)
    if copy_keys and viewport.selected_entry() is not None:
        hints.append(f"{copy_keys[0]} copy hash")
    if quit_keys:
        hints.append(f"{quit_keys[0]} quit")
    return "  ".join(hints)


def render_screen(
    viewport: CommitListViewport,
    width: int,
    height: int,
    status_text: str = "",
    hints: str = "",
) -> Canvas:
    """Draw the list above a one-row status bar on a fresh canvas."""
    canvas = Canvas(width, height)
    if height <= 0:
        return canvas
    viewport.draw(canvas, Rect(0, 0, width, max(0, height - 1)))
    status = build_status_line(status_text, width, hints)
    theme = viewport.theme
    if theme.status:
        status = f"{theme.status}{status}\033[0m"
    canvas.put_line(height - 1, status)
    return canvas


def set_status_message(state: LoopState, message: str, now: float) -> None:
    state.status_message = message
    state.status_message_until = now + STATUS_MESSAGE_SECONDS
    state.dirty = True


def dispatch_command(
    viewport: CommitListViewport,
    command: Command,
    source: RowSource,
    state: LoopState,
    clipboard: Callable[[str], None] = copy_text_to_clipboard,
    clock: Callable[[], float] = time.monotonic,
) -> bool:
    """Apply one command; return ``False`` when the loop should exit."""
    if command is Command.QUIT:
        return False

    if command is Command.COPY_HASH:
        entry = viewport.selected_entry()
        try:
            copied = viewport.copy_entry_hash(clipboard)
        except ClipboardError as exc:
            set_status_message(state, f"copy failed: {exc}", clock())
            return True
        if copied and entry is not None:
            set_status_message(state, f"copied {entry.hash_short}", clock())
        return True

    if viewport.handle_command(command):
        ensure_loaded(viewport, source)
        state.dirty = True
    return True


def run_commit_list(
    viewport: CommitListViewport,
    source: RowSource,
    terminal: TerminalController,
    stdin_fd: int,
    keymap: Keymap,
    clipboard: Callable[[str], None] = copy_text_to_clipboard,
) -> None:
    """Run the interactive loop until a quit command arrives."""
    state = LoopState()
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            now = time.monotonic()
            size = (term.columns, term.lines)
            if size != state.last_size:
                state.last_size = size
                state.dirty = True
            if state.status_message and now >= state.status_message_until:
                state.status_message = ""
                state.status_message_until = 0.0
                state.dirty = True

            if state.dirty:
                canvas = render_screen(
                    viewport,
                    term.columns,
                    term.lines,
                    state.status_message,
                    _status_hints(viewport, keymap),
                )
                terminal.write_frame(canvas.frame())
                state.dirty = False

            key = read_key(stdin_fd, timeout_ms=IDLE_TIMEOUT_MS)
            command = keymap.resolve(key)
            if command is None:
                continue
            if not dispatch_command(viewport, command, source, state, clipboard):
                return


def open_terminal_session() -> tuple[TerminalController, int]:
    """Bind a terminal controller to the process's stdin/stdout."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    return TerminalController(stdin_fd, stdout_fd), stdin_fd
