"""Git-backed row source: commit counts, paged log slices, tags, and branch.

Every query shells out to ``git`` with a timeout. Failures never raise; they
are logged at debug level and degrade to an empty result.
"""

from __future__ import annotations

import logging
import subprocess
from datetime import datetime
from pathlib import Path

from .types import LogEntry, Tags

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 5.0
_LOG_FORMAT = "%H%x00%an%x00%at%x00%s"
_TAG_FORMAT = "%(objectname)%00%(*objectname)%00%(refname:short)"


def _run_git(repo_root: Path, args: list[str], timeout_seconds: float) -> subprocess.CompletedProcess[str] | None:
    try:
        proc = subprocess.run(
            ["git", "-C", str(repo_root), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git %s failed to run: %s", args[0], exc)
        return None
    if proc.returncode != 0:
        logger.debug("git %s exited %d: %s", args[0], proc.returncode, proc.stderr.strip())
        return None
    return proc


def is_git_repository(path: Path, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> bool:
    """Return whether ``path`` lies inside a git work tree."""
    proc = _run_git(path, ["rev-parse", "--is-inside-work-tree"], timeout_seconds)
    return proc is not None and proc.stdout.strip() == "true"


def _parse_log_records(output: str, now: datetime | None = None) -> list[LogEntry]:
    entries: list[LogEntry] = []
    for line in output.splitlines():
        parts = line.split("\0")
        if len(parts) != 4:
            continue
        commit_id, author, raw_time, msg = parts
        # One entry per record so absolute indices match ``--skip``.
        timestamp: int | None
        try:
            timestamp = int(raw_time)
        except ValueError:
            timestamp = None
        entries.append(LogEntry.from_commit(commit_id, author, timestamp, msg, now=now))
    return entries


def _parse_tag_records(output: str) -> Tags:
    tags: Tags = {}
    for line in output.splitlines():
        parts = line.split("\0")
        if len(parts) != 3:
            continue
        object_id, peeled_id, name = parts
        # Annotated tags point at a tag object; the peeled id is the commit.
        target = peeled_id or object_id
        if not target or not name:
            continue
        tags.setdefault(target, []).append(name)
    return tags


class GitLogSource:
    """Query commit history of one repository in paged slices."""

    def __init__(self, repo_path: Path, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> None:
        self.repo_path = repo_path
        self.timeout_seconds = timeout_seconds

    def count_commits(self) -> int:
        """Return number of commits reachable from ``HEAD`` (0 when unknown)."""
        proc = _run_git(self.repo_path, ["rev-list", "--count", "HEAD"], self.timeout_seconds)
        if proc is None:
            return 0
        try:
            return max(0, int(proc.stdout.strip()))
        except ValueError:
            return 0

    def load_batch(self, start: int, amount: int) -> list[LogEntry]:
        """Return up to ``amount`` rows beginning at absolute history index ``start``."""
        if amount <= 0:
            return []
        proc = _run_git(
            self.repo_path,
            ["log", f"--skip={max(0, start)}", f"--max-count={amount}", f"--format={_LOG_FORMAT}", "HEAD"],
            self.timeout_seconds,
        )
        if proc is None:
            return []
        return _parse_log_records(proc.stdout)

    def load_tags(self) -> Tags:
        proc = _run_git(
            self.repo_path,
            ["for-each-ref", f"--format={_TAG_FORMAT}", "refs/tags"],
            self.timeout_seconds,
        )
        if proc is None:
            return {}
        return _parse_tag_records(proc.stdout)

    def current_branch(self) -> str | None:
        """Return checked-out branch name, or ``None`` for detached or unknown HEAD."""
        proc = _run_git(self.repo_path, ["rev-parse", "--abbrev-ref", "HEAD"], self.timeout_seconds)
        if proc is None:
            return None
        name = proc.stdout.strip()
        if not name or name == "HEAD":
            return None
        return name
