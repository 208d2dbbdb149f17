"""Fixed-size character-cell canvas used as the draw target.

The host hands components a canvas plus a rectangle; components write styled
rows into it and the runtime flushes the composed frame in one write.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import clip_ansi_line, display_width, pad_ansi_line

BORDER_TOP_LEFT = "┌"
BORDER_TOP_RIGHT = "┐"
BORDER_BOTTOM_LEFT = "└"
BORDER_BOTTOM_RIGHT = "┘"
BORDER_HORIZONTAL = "─"
BORDER_VERTICAL = "│"
RESET = "\033[0m"


@dataclass(frozen=True)
class Rect:
    """Cell rectangle inside a canvas."""

    x: int
    y: int
    width: int
    height: int

    def inner(self) -> Rect:
        """Return the area left after a one-cell border on every side."""
        return Rect(
            x=self.x + 1,
            y=self.y + 1,
            width=max(0, self.width - 2),
            height=max(0, self.height - 2),
        )


def _styled(text: str, style: str) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{RESET}"


class Canvas:
    """A ``width`` x ``height`` grid of rendered rows."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._rows: list[str] = [""] * self.height

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def rows(self) -> list[str]:
        """Return every row padded to the canvas width."""
        return [pad_ansi_line(row, self.width) for row in self._rows]

    def put_line(self, row: int, text: str) -> None:
        """Replace one full canvas row, clipping it to the canvas width."""
        if 0 <= row < self.height:
            self._rows[row] = clip_ansi_line(text, self.width)

    def _put(self, area: Rect, row: int, text: str) -> None:
        """Write ``text`` at ``(area.x, row)`` keeping cells outside ``area``."""
        if not 0 <= row < self.height:
            return
        existing = self._rows[row]
        prefix = pad_ansi_line(clip_ansi_line(existing, area.x), area.x)
        self._rows[row] = prefix + clip_ansi_line(text, max(0, self.width - area.x))

    def draw_block(
        self,
        area: Rect,
        title: str,
        lines: list[str],
        *,
        title_style: str = "",
        border_style: str = "",
    ) -> None:
        """Draw a bordered block with ``title`` in its top edge and body ``lines``.

        Body lines are clipped and padded to the inner width; missing lines are
        blank. Areas smaller than the border itself draw nothing.
        """
        if area.width < 2 or area.height < 2:
            return

        inner = area.inner()
        title_text = clip_ansi_line(title, inner.width)
        fill = BORDER_HORIZONTAL * (inner.width - display_width(title_text))
        top = (
            _styled(BORDER_TOP_LEFT, border_style)
            + _styled(title_text, title_style)
            + _styled(fill + BORDER_TOP_RIGHT, border_style)
        )
        self._put(area, area.y, top)

        side = _styled(BORDER_VERTICAL, border_style)
        for offset in range(inner.height):
            body = lines[offset] if offset < len(lines) else ""
            body = pad_ansi_line(clip_ansi_line(body, inner.width), inner.width)
            if "\033" in body:
                body += RESET
            self._put(area, inner.y + offset, side + body + side)

        bottom = BORDER_BOTTOM_LEFT + (BORDER_HORIZONTAL * inner.width) + BORDER_BOTTOM_RIGHT
        self._put(area, area.y + area.height - 1, _styled(bottom, border_style))

    def frame(self) -> str:
        """Compose the full frame, homing the cursor first."""
        return "\033[H" + "\r\n".join(self.rows())
