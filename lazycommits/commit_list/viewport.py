"""Scrollable commit list over a windowed batch of loaded history.

Navigation (``handle_command``/``move_selection``) and drawing (``draw``) touch
disjoint state: the selection controller for input, ``RenderCache`` for the
window start and size remembered between frames.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..log_model import ItemBatch, LogEntry, Tags
from ..render.ansi import sanitize_terminal_text
from ..render.canvas import Canvas, Rect
from ..ui_theme import DEFAULT_THEME, UITheme
from .commands import Command, CommandInfo, navigation_scroll_type
from .row_format import format_row, spans_to_ansi
from .scroll import ScrollAccelerator
from .selection import ScrollType, SelectionController
from .windowing import next_window_start


@dataclass
class RenderCache:
    """Geometry remembered from the last ``draw`` call.

    ``scroll_top`` is an absolute history index, independent of the batch offset.
    """

    current_size: tuple[int, int] = (0, 0)
    scroll_top: int = 0


class CommitListViewport:
    """Commit table with an absolute selection over ``count_total`` commits.

    Only rows in ``items`` can be drawn; the selection may point anywhere in
    history, in which case no visible row is highlighted until the loader
    brings that part of history into the batch.
    """

    def __init__(
        self,
        title: str,
        theme: UITheme | None = None,
        accelerator: ScrollAccelerator | None = None,
    ) -> None:
        self.title = title
        self.theme = theme or DEFAULT_THEME
        self.branch: str | None = None
        self.items = ItemBatch()
        self._tags: Tags | None = None
        self._selection = SelectionController(accelerator)
        self._render = RenderCache()

    def set_branch(self, name: str | None) -> None:
        self.branch = name

    def selection(self) -> int:
        return self._selection.selection

    def selection_max(self) -> int:
        return self._selection.selection_max()

    def count_total(self) -> int:
        return self._selection.count_total

    def current_size(self) -> tuple[int, int]:
        """Return inner ``(width, height)`` measured by the last draw."""
        return self._render.current_size

    def scroll_top(self) -> int:
        return self._render.scroll_top

    def set_count_total(self, total: int) -> None:
        self._selection.set_count_total(total)

    def tags(self) -> Tags | None:
        return self._tags

    def set_tags(self, tags: Tags) -> None:
        self._tags = tags

    def clear(self) -> None:
        self.items.clear()

    def reset(self) -> None:
        """Drop loaded rows and history length, returning to the empty state."""
        self.items.clear()
        self._selection.reset()
        self._render.scroll_top = 0

    def relative_selection(self) -> int | None:
        """Return selection index inside ``items``, or ``None`` when not loaded."""
        selection = self._selection.selection
        if not self.items.contains(selection):
            return None
        return selection - self.items.index_offset

    def selected_entry(self) -> LogEntry | None:
        relative = self.relative_selection()
        if relative is None:
            return None
        return self.items[relative]

    def copy_entry_hash(self, clipboard: Callable[[str], None]) -> bool:
        """Copy the selected short hash; clipboard errors propagate unchanged.

        Returns ``False`` without touching the clipboard when nothing is selected.
        """
        entry = self.selected_entry()
        if entry is None:
            return False
        clipboard(entry.hash_short)
        return True

    def move_selection(self, scroll: ScrollType) -> bool:
        """Move the selection using the viewport height from the last draw."""
        return self._selection.move_selection(scroll, self._render.current_size[1])

    def select(self, index: int) -> bool:
        return self._selection.select(index)

    def handle_command(self, command: Command) -> bool:
        """Apply a navigation command; return whether the selection changed."""
        scroll = navigation_scroll_type(command)
        if scroll is None:
            return False
        return self.move_selection(scroll)

    def commands(self) -> list[CommandInfo]:
        return [CommandInfo(name="scroll", keys="↑↓", enabled=self.selected_entry() is not None)]

    def title_text(self) -> str:
        total = self._selection.count_total
        remaining = max(0, total - self._selection.selection)
        title = f"{self.title} {remaining}/{total}"
        if self.branch:
            title += f" - {{{sanitize_terminal_text(self.branch)}}}"
        return title

    def _update_scroll_top(self, height: int) -> int:
        """Move the absolute window start so the selection stays visible."""
        selection = self._selection.selection
        if self.items.contains(selection):
            self._render.scroll_top = next_window_start(self._render.scroll_top, height, selection)
        else:
            self._render.scroll_top = max(
                self.items.index_offset,
                min(self._render.scroll_top, self.items.last_idx()),
            )
        return self._render.scroll_top

    def visible_lines(self, height: int, width: int) -> list[str]:
        """Render absolute rows ``[scroll_top, scroll_top + height)`` as ANSI lines.

        Rows the batch does not hold come back blank so loaded rows keep their
        screen position.
        """
        selection = self._selection.selection
        offset = self.items.index_offset
        start = self._render.scroll_top
        end = min(self.items.last_idx(), start + max(0, height))
        lines: list[str] = []
        for index in range(start, end):
            if index < offset:
                lines.append("")
                continue
            entry = self.items[index - offset]
            entry_tags = self._tags.get(entry.id) if self._tags is not None else None
            spans = format_row(
                entry,
                index == selection,
                " ".join(entry_tags) if entry_tags else None,
                width,
                self.theme,
            )
            lines.append(spans_to_ansi(spans))
        return lines

    def draw(self, canvas: Canvas, area: Rect) -> None:
        """Draw the bordered list into ``area``, updating cached geometry first."""
        inner = area.inner()
        self._render.current_size = (inner.width, inner.height)
        self._update_scroll_top(inner.height)
        canvas.draw_block(
            area,
            self.title_text(),
            self.visible_lines(inner.height, inner.width),
            title_style=self.theme.title,
            border_style=self.theme.block,
        )
