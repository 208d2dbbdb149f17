"""Tests for saturating selection movement over a bounded history."""

from __future__ import annotations

import random
import unittest
from unittest import mock

from lazycommits.commit_list.selection import ScrollType, SelectionController


def _fixed_step_accelerator(step: int) -> mock.Mock:
    return mock.Mock(next_step=mock.Mock(return_value=step))


class SelectionControllerTests(unittest.TestCase):
    def test_empty_history_pins_selection_at_zero(self) -> None:
        controller = SelectionController(_fixed_step_accelerator(1))

        for scroll in ScrollType:
            self.assertFalse(controller.move_selection(scroll, 10))
            self.assertEqual(controller.selection, 0)

    def test_step_down_stops_at_last_commit(self) -> None:
        controller = SelectionController(_fixed_step_accelerator(3))
        controller.set_count_total(5)

        self.assertTrue(controller.move_selection(ScrollType.DOWN, 10))
        self.assertEqual(controller.selection, 3)
        self.assertTrue(controller.move_selection(ScrollType.DOWN, 10))
        self.assertEqual(controller.selection, 4)
        self.assertFalse(controller.move_selection(ScrollType.DOWN, 10))

    def test_step_up_saturates_at_zero(self) -> None:
        controller = SelectionController(_fixed_step_accelerator(3))
        controller.set_count_total(100)
        controller.select(2)

        self.assertTrue(controller.move_selection(ScrollType.UP, 10))
        self.assertEqual(controller.selection, 0)

    def test_page_moves_one_less_than_viewport_height(self) -> None:
        accelerator = _fixed_step_accelerator(1)
        controller = SelectionController(accelerator)
        controller.set_count_total(100)

        controller.move_selection(ScrollType.PAGE_DOWN, 10)
        self.assertEqual(controller.selection, 9)
        controller.move_selection(ScrollType.PAGE_UP, 4)
        self.assertEqual(controller.selection, 6)
        accelerator.next_step.assert_not_called()

    def test_page_with_zero_height_does_not_move(self) -> None:
        controller = SelectionController(_fixed_step_accelerator(1))
        controller.set_count_total(100)

        self.assertFalse(controller.move_selection(ScrollType.PAGE_DOWN, 0))
        self.assertFalse(controller.move_selection(ScrollType.PAGE_DOWN, 1))
        self.assertEqual(controller.selection, 0)

    def test_end_then_home_and_home_then_end(self) -> None:
        controller = SelectionController(_fixed_step_accelerator(1))
        controller.set_count_total(42)

        controller.move_selection(ScrollType.END, 10)
        controller.move_selection(ScrollType.HOME, 10)
        self.assertEqual(controller.selection, 0)

        controller.move_selection(ScrollType.HOME, 10)
        controller.move_selection(ScrollType.END, 10)
        self.assertEqual(controller.selection, 41)

    def test_shrinking_total_reclamps_selection(self) -> None:
        controller = SelectionController(_fixed_step_accelerator(1))
        controller.set_count_total(50)
        controller.select(40)

        controller.set_count_total(10)
        self.assertEqual(controller.selection, 9)
        controller.set_count_total(0)
        self.assertEqual(controller.selection, 0)

    def test_select_clamps_into_range(self) -> None:
        controller = SelectionController(_fixed_step_accelerator(1))
        controller.set_count_total(5)

        self.assertTrue(controller.select(99))
        self.assertEqual(controller.selection, 4)
        self.assertFalse(controller.select(4))
        controller.select(-3)
        self.assertEqual(controller.selection, 0)

    def test_random_command_sequences_keep_selection_in_bounds(self) -> None:
        rng = random.Random(1234)
        controller = SelectionController(_fixed_step_accelerator(7))
        scrolls = list(ScrollType)

        for _ in range(2000):
            if rng.random() < 0.05:
                controller.set_count_total(rng.randint(0, 300))
            controller.move_selection(rng.choice(scrolls), rng.randint(0, 40))
            self.assertGreaterEqual(controller.selection, 0)
            self.assertLessEqual(controller.selection, max(controller.count_total - 1, 0))


if __name__ == "__main__":
    unittest.main()
