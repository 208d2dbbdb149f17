"""Tests for command dispatch, history paging, and screen composition."""

from __future__ import annotations

import unittest
from unittest import mock

from lazycommits.commit_list import Command, CommitListViewport
from lazycommits.log_model import LogEntry
from lazycommits.render import Canvas, Rect, display_width
from lazycommits.runtime.clipboard import ClipboardError
from lazycommits.runtime.loop import (
    SLICE_SIZE,
    STATUS_MESSAGE_SECONDS,
    LoopState,
    dispatch_command,
    ensure_loaded,
    populate_viewport,
    render_screen,
)
from lazycommits.ui_theme import resolve_theme


def _entry(index: int) -> LogEntry:
    commit_id = f"{index:040x}"
    return LogEntry(commit_id, commit_id[:7], "dev", "2024-01-01", f"commit {index}")


class FakeSource:
    def __init__(self, total: int, branch: str | None = "main") -> None:
        self.total = total
        self.branch = branch
        self.batch_calls: list[tuple[int, int]] = []

    def count_commits(self) -> int:
        return self.total

    def load_batch(self, start: int, amount: int) -> list[LogEntry]:
        self.batch_calls.append((start, amount))
        return [_entry(idx) for idx in range(start, min(self.total, start + amount))]

    def load_tags(self) -> dict[str, list[str]]:
        return {_entry(0).id: ["v1.0"]}

    def current_branch(self) -> str | None:
        return self.branch


class PopulateAndPagingTests(unittest.TestCase):
    def test_populate_loads_slice_around_selection(self) -> None:
        viewport = CommitListViewport("Commit")
        source = FakeSource(5000)

        populate_viewport(viewport, source, selection=3000)

        self.assertEqual(viewport.count_total(), 5000)
        self.assertEqual(viewport.selection(), 3000)
        self.assertEqual(viewport.branch, "main")
        self.assertEqual(viewport.tags(), {_entry(0).id: ["v1.0"]})
        self.assertEqual(source.batch_calls, [(3000 - SLICE_SIZE // 2, SLICE_SIZE)])
        self.assertEqual(viewport.selected_entry(), _entry(3000))

    def test_populate_clamps_selection_past_history(self) -> None:
        viewport = CommitListViewport("Commit")
        populate_viewport(viewport, FakeSource(10), selection=99)

        self.assertEqual(viewport.selection(), 9)
        self.assertEqual(len(viewport.items), 10)

    def test_empty_history_never_loads(self) -> None:
        viewport = CommitListViewport("Commit")
        source = FakeSource(0, branch=None)

        populate_viewport(viewport, source)

        self.assertEqual(source.batch_calls, [])
        self.assertFalse(ensure_loaded(viewport, source))
        self.assertIsNone(viewport.selected_entry())

    def test_ensure_loaded_skips_when_batch_covers_selection(self) -> None:
        viewport = CommitListViewport("Commit")
        source = FakeSource(5000)
        populate_viewport(viewport, source)
        source.batch_calls.clear()

        viewport.select(50)
        self.assertFalse(ensure_loaded(viewport, source))
        self.assertEqual(source.batch_calls, [])

    def test_end_command_pages_in_tail_of_history(self) -> None:
        viewport = CommitListViewport("Commit")
        source = FakeSource(5000)
        populate_viewport(viewport, source)
        state = LoopState(dirty=False)

        self.assertTrue(dispatch_command(viewport, Command.END, source, state))

        self.assertTrue(state.dirty)
        self.assertEqual(viewport.selection(), 4999)
        self.assertEqual(source.batch_calls[-1], (4999 - SLICE_SIZE // 2, SLICE_SIZE))
        self.assertEqual(viewport.selected_entry(), _entry(4999))

    def test_window_stays_put_when_batch_reloads_under_it(self) -> None:
        accelerator = mock.Mock(next_step=mock.Mock(return_value=1))
        viewport = CommitListViewport("Commit", accelerator=accelerator)
        source = FakeSource(5000)
        populate_viewport(viewport, source)
        state = LoopState()
        canvas = Canvas(60, 12)
        viewport.draw(canvas, Rect(0, 0, 60, 12))

        screen_rows: list[int] = []
        for _ in range(1150):
            dispatch_command(viewport, Command.MOVE_DOWN, source, state)
            viewport.draw(canvas, Rect(0, 0, 60, 12))
            screen_rows.append(viewport.selection() - viewport.scroll_top())

        self.assertGreater(len(source.batch_calls), 1)
        self.assertGreater(viewport.items.index_offset, 0)
        self.assertEqual(viewport.selection(), 1150)
        self.assertEqual(screen_rows[:9], list(range(1, 10)))
        self.assertEqual(set(screen_rows[9:]), {9})
        self.assertIn("commit 1150", canvas.rows()[10])

class DispatchCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.viewport = CommitListViewport("Commit")
        self.source = FakeSource(20)
        populate_viewport(self.viewport, self.source)
        self.state = LoopState(dirty=False)

    def test_quit_stops_loop(self) -> None:
        self.assertFalse(dispatch_command(self.viewport, Command.QUIT, self.source, self.state))

    def test_unchanged_selection_stays_clean(self) -> None:
        self.assertTrue(dispatch_command(self.viewport, Command.MOVE_UP, self.source, self.state))
        self.assertFalse(self.state.dirty)

    def test_copy_hash_sets_status_message(self) -> None:
        copied: list[str] = []

        dispatch_command(
            self.viewport,
            Command.COPY_HASH,
            self.source,
            self.state,
            clipboard=copied.append,
            clock=lambda: 10.0,
        )

        self.assertEqual(copied, [_entry(0).hash_short])
        self.assertEqual(self.state.status_message, f"copied {_entry(0).hash_short}")
        self.assertEqual(self.state.status_message_until, 10.0 + STATUS_MESSAGE_SECONDS)
        self.assertTrue(self.state.dirty)

    def test_copy_failure_is_reported_not_raised(self) -> None:
        def failing_clipboard(_text: str) -> None:
            raise ClipboardError("no clipboard tool available")

        keep_running = dispatch_command(
            self.viewport,
            Command.COPY_HASH,
            self.source,
            self.state,
            clipboard=failing_clipboard,
            clock=lambda: 0.0,
        )

        self.assertTrue(keep_running)
        self.assertEqual(self.state.status_message, "copy failed: no clipboard tool available")


class RenderScreenTests(unittest.TestCase):
    def test_screen_has_list_and_status_row(self) -> None:
        viewport = CommitListViewport("Commit", theme=resolve_theme("default", no_color=True))
        populate_viewport(viewport, FakeSource(3))

        canvas = render_screen(viewport, 60, 6, "ready", "q quit")
        rows = canvas.rows()

        self.assertEqual(len(rows), 6)
        self.assertTrue(rows[0].startswith("┌Commit 3/3 - {main}"))
        self.assertIn("commit 0", rows[1])
        self.assertTrue(rows[4].startswith("└"))
        self.assertIn("ready", rows[5])
        self.assertIn("q quit", rows[5])
        self.assertTrue(all(display_width(row) == 60 for row in rows))
        self.assertEqual(viewport.current_size(), (58, 3))

    def test_zero_height_screen_is_empty(self) -> None:
        viewport = CommitListViewport("Commit")
        canvas = render_screen(viewport, 40, 0)
        self.assertEqual(canvas.rows(), [])


if __name__ == "__main__":
    unittest.main()
