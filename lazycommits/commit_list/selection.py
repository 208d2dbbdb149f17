"""Absolute selection over a history of ``count_total`` commits."""

from __future__ import annotations

from enum import Enum

from .scroll import ScrollAccelerator


class ScrollType(Enum):
    """Resolved navigation directions accepted by the selection controller."""

    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


class SelectionController:
    """Own the selected absolute index and keep it inside ``[0, count_total - 1]``.

    All arithmetic saturates: moving past either end parks the selection on the
    boundary, and an empty history pins it at ``0``.
    """

    def __init__(self, accelerator: ScrollAccelerator | None = None) -> None:
        self.accelerator = accelerator or ScrollAccelerator()
        self.selection = 0
        self.count_total = 0

    def selection_max(self) -> int:
        return max(0, self.count_total - 1)

    def set_count_total(self, total: int) -> None:
        """Update history length and re-clamp the selection against it."""
        self.count_total = max(0, total)
        self.selection = min(self.selection, self.selection_max())

    def reset(self) -> None:
        self.count_total = 0
        self.selection = 0

    def select(self, index: int) -> bool:
        """Jump to absolute ``index`` (clamped); return whether it changed."""
        new_selection = max(0, min(index, self.selection_max()))
        changed = new_selection != self.selection
        self.selection = new_selection
        return changed

    def move_selection(self, scroll: ScrollType, viewport_height: int) -> bool:
        """Apply ``scroll`` and return whether the selection changed.

        Single steps use the accelerated step size; pages move by one row less
        than the viewport so the previous edge row stays visible.
        """
        page_offset = max(0, viewport_height - 1)

        if scroll is ScrollType.UP:
            new_selection = self.selection - self.accelerator.next_step()
        elif scroll is ScrollType.DOWN:
            new_selection = self.selection + self.accelerator.next_step()
        elif scroll is ScrollType.PAGE_UP:
            new_selection = self.selection - page_offset
        elif scroll is ScrollType.PAGE_DOWN:
            new_selection = self.selection + page_offset
        elif scroll is ScrollType.HOME:
            new_selection = 0
        else:
            new_selection = self.selection_max()

        new_selection = max(0, min(new_selection, self.selection_max()))
        changed = new_selection != self.selection
        self.selection = new_selection
        return changed
