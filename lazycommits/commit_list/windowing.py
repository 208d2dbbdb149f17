"""Keep-cursor-visible window arithmetic."""

from __future__ import annotations


def next_window_start(current_start: int, viewport_height: int, selection: int) -> int:
    """Return the first visible row so ``selection`` stays on screen.

    The window only moves when the selection leaves it, and then by the
    smallest amount that brings it back. A zero-height viewport follows the
    selection directly. Both indices must share one base; the viewport passes
    absolute history indices.
    """
    if viewport_height <= 0:
        return selection
    if selection < current_start:
        return selection
    if selection >= current_start + viewport_height:
        return selection - viewport_height + 1
    return current_start
