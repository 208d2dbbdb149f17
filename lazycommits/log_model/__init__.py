"""Commit history model: rows, the loaded batch, tags, and the git source."""

from __future__ import annotations

from .git_log import GitLogSource, is_git_repository
from .types import (
    HASH_SHORT_LEN,
    SLICE_OFFSET_RELOAD_THRESHOLD,
    UNKNOWN_COMMIT_TIME,
    ItemBatch,
    LogEntry,
    Tags,
    format_commit_time,
)

__all__ = [
    "GitLogSource",
    "HASH_SHORT_LEN",
    "ItemBatch",
    "LogEntry",
    "SLICE_OFFSET_RELOAD_THRESHOLD",
    "Tags",
    "UNKNOWN_COMMIT_TIME",
    "format_commit_time",
    "is_git_repository",
]
