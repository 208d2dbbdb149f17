"""ANSI-aware text measurement and fixed-width field shaping.

Width math counts terminal cells, not characters or bytes, so commit rows stay
aligned when author names or subjects contain wide or combining characters.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
TAB_STOP = 8
ELLIPSIS = ".."


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def sanitize_terminal_text(text: str) -> str:
    """Escape control bytes in one-line text pulled from git (ESC, bell, CR, etc.).

    Tabs and line breaks become single spaces; every other C0, DEL or C1 control
    is shown as a visible ``\\xNN`` escape.
    """
    if _CONTROL_RE.search(text) is None:
        return text

    out: list[str] = []
    for ch in text:
        code = ord(ch)
        if ch in {"\t", "\n", "\r"}:
            out.append(" ")
        elif code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
        else:
            out.append(ch)
    return "".join(out)


def display_width(text: str) -> int:
    """Return terminal column width for ANSI-styled text."""
    plain = ANSI_ESCAPE_RE.sub("", text)
    col = 0
    for ch in plain:
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        if ch == "\t":
            out.append(" " * w)
        else:
            out.append(ch)
        col += w
        i += 1

    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Right-pad a styled line with spaces up to ``width`` display columns."""
    missing = width - display_width(text)
    if missing > 0:
        return text + (" " * missing)
    return text


def layout_field(text: str, width: int) -> str:
    """Fit plain ``text`` into a field exactly ``width`` display cells wide.

    Text that fits is right-padded. Longer text is cut at a display-cell
    boundary and suffixed with ``..``; when a wide character straddles the cut,
    one pad space fills the gap so the marker still ends on the last cell.
    Fields narrower than the marker keep as much of it as fits.
    """
    if width <= 0:
        return ""

    if display_width(text) <= width:
        return pad_ansi_line(text, width)

    if width < len(ELLIPSIS):
        return ELLIPSIS[:width]

    budget = width - len(ELLIPSIS)
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch, col)
        if col + w > budget:
            break
        out.append(ch)
        col += w
    return "".join(out) + (" " * (budget - col)) + ELLIPSIS
