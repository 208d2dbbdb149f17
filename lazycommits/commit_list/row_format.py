"""Commit row formatting into styled inline spans."""

from __future__ import annotations

from dataclasses import dataclass

from ..log_model import LogEntry
from ..render.ansi import layout_field, sanitize_terminal_text
from ..ui_theme import UITheme

SPLITTER = " "
AUTHOR_WIDTH_RESERVED = 19
AUTHOR_WIDTH_MIN = 3
AUTHOR_WIDTH_MAX = 20


@dataclass(frozen=True)
class Span:
    """A run of text drawn with one SGR style prefix."""

    text: str
    style: str = ""


def author_field_width(width: int) -> int:
    """Return author column width scaled to the row ``width``."""
    proportional = max(0, width - AUTHOR_WIDTH_RESERVED) // 3
    return max(AUTHOR_WIDTH_MIN, min(proportional, AUTHOR_WIDTH_MAX))


def format_row(
    entry: LogEntry,
    selected: bool,
    tags: str | None,
    width: int,
    theme: UITheme,
) -> list[Span]:
    """Build the spans for one row: hash, time, author, tags, then subject.

    Columns are joined by single spaces. The tag column is empty when the
    commit has no tags and carries a leading space otherwise. Text from git is
    passed through ``sanitize_terminal_text`` before it reaches the terminal.
    """
    splitter = Span(SPLITTER, theme.style("text", selected))
    tag_text = f" {sanitize_terminal_text(tags)}" if tags else ""
    author = sanitize_terminal_text(entry.author)
    return [
        Span(entry.hash_short, theme.style("commit_hash", selected)),
        splitter,
        Span(entry.time, theme.style("commit_time", selected)),
        splitter,
        Span(layout_field(author, author_field_width(width)), theme.style("commit_author", selected)),
        splitter,
        Span(tag_text, theme.style("tags", selected)),
        splitter,
        Span(sanitize_terminal_text(entry.msg), theme.style("text", selected)),
    ]


def spans_to_ansi(spans: list[Span], reset: str = "\033[0m") -> str:
    """Join spans into one ANSI string, resetting after every styled span."""
    out: list[str] = []
    for span in spans:
        if not span.text:
            continue
        if span.style:
            out.append(f"{span.style}{span.text}{reset}")
        else:
            out.append(span.text)
    return "".join(out)


def spans_plain_text(spans: list[Span]) -> str:
    return "".join(span.text for span in spans)
