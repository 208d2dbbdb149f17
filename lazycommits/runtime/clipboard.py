"""System clipboard sink backed by platform copy tools."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """Raised when text could not be placed on the system clipboard."""


def clipboard_commands() -> list[list[str]]:
    """Return candidate copy commands for the current platform, in preference order."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def copy_text_to_clipboard(text: str) -> None:
    """Copy ``text`` with the first available tool that succeeds.

    Each installed tool is tried once; ``ClipboardError`` is raised when none
    of them accepts the text.
    """
    if not text:
        raise ClipboardError("nothing to copy")

    tried: list[str] = []
    for command in clipboard_commands():
        if shutil.which(command[0]) is None:
            continue
        tried.append(command[0])
        try:
            proc = subprocess.run(
                command,
                input=text,
                text=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            logger.debug("clipboard tool %s failed to run: %s", command[0], exc)
            continue
        if proc.returncode == 0:
            return

    if not tried:
        raise ClipboardError("no clipboard tool available")
    raise ClipboardError(f"clipboard copy failed ({', '.join(tried)})")
