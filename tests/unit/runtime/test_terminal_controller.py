"""Tests for terminal mode control sequences and raw-mode lifecycle."""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from lazycommits.runtime.terminal import ENTER_TUI_SEQUENCE, EXIT_TUI_SEQUENCE, TerminalController


class TerminalControllerTests(unittest.TestCase):
    def test_enable_and_disable_use_alternate_screen_sequences(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("lazycommits.runtime.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "lazycommits.runtime.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("lazycommits.runtime.terminal.os.write") as write_mock, mock.patch(
            "lazycommits.runtime.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list[0].args, (1, ENTER_TUI_SEQUENCE))
        self.assertEqual(write_mock.call_args_list[1].args, (1, EXIT_TUI_SEQUENCE))
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("lazycommits.runtime.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode") as enable_mock, mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_write_frame_encodes_utf8(self) -> None:
        with mock.patch("lazycommits.runtime.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch("lazycommits.runtime.terminal.os.write") as write_mock:
            controller.write_frame("│ä")

        write_mock.assert_called_once_with(1, "│ä".encode("utf-8"))


if __name__ == "__main__":
    unittest.main()
