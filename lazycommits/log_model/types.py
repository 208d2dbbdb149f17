"""Commit row and loaded-batch types shared by the loader and the viewport."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime

HASH_SHORT_LEN = 7
SLICE_OFFSET_RELOAD_THRESHOLD = 100
UNKNOWN_COMMIT_TIME = "?"

Tags = dict[str, list[str]]


def format_commit_time(timestamp: int | None, now: datetime | None = None) -> str:
    """Format a unix timestamp as local time of day when it is today, else as a date.

    Missing or out-of-range timestamps render as ``UNKNOWN_COMMIT_TIME``.
    """
    if timestamp is None:
        return UNKNOWN_COMMIT_TIME
    try:
        when = datetime.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_COMMIT_TIME
    now = now or datetime.now()
    if when.date() == now.date():
        return when.strftime("%H:%M:%S")
    return when.strftime("%Y-%m-%d")


@dataclass(frozen=True)
class LogEntry:
    """One commit row as displayed in the list."""

    id: str
    hash_short: str
    author: str
    time: str
    msg: str

    @classmethod
    def from_commit(
        cls,
        commit_id: str,
        author: str,
        timestamp: int | None,
        msg: str,
        now: datetime | None = None,
    ) -> LogEntry:
        return cls(
            id=commit_id,
            hash_short=commit_id[:HASH_SHORT_LEN],
            author=author,
            time=format_commit_time(timestamp, now),
            msg=msg,
        )


class ItemBatch:
    """Contiguous slice of history rows starting at absolute ``index_offset``.

    The loader replaces the whole slice at once; readers only index or iterate.
    """

    def __init__(self) -> None:
        self._items: list[LogEntry] = []
        self._index_offset = 0

    @property
    def index_offset(self) -> int:
        return self._index_offset

    def last_idx(self) -> int:
        """Return the absolute index one past the last loaded row."""
        return self._index_offset + len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._items)

    def __getitem__(self, index: int) -> LogEntry:
        return self._items[index]

    def clear(self) -> None:
        self._items = []
        self._index_offset = 0

    def set_items(self, start_index: int, entries: Iterable[LogEntry]) -> None:
        """Replace loaded rows with ``entries`` beginning at ``start_index``."""
        self._items = list(entries)
        self._index_offset = max(0, start_index)

    def contains(self, index: int) -> bool:
        """Return whether absolute ``index`` is covered by the loaded rows."""
        return self._index_offset <= index < self.last_idx()

    def needs_data(self, idx: int, idx_max: int) -> bool:
        """Return whether rows around ``idx`` fall outside the loaded slice.

        The wanted range reaches ``SLICE_OFFSET_RELOAD_THRESHOLD`` rows to each
        side of ``idx``, capped at ``idx_max`` below.
        """
        want_min = max(0, idx - SLICE_OFFSET_RELOAD_THRESHOLD)
        want_max = min(idx + SLICE_OFFSET_RELOAD_THRESHOLD, idx_max)
        needs_data_top = want_min < self._index_offset
        needs_data_bottom = want_max >= self.last_idx()
        return needs_data_top or needs_data_bottom
