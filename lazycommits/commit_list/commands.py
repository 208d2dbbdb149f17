"""Resolved commands accepted by the commit list.

Key tokens are mapped to these by the input layer; the list never sees raw keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .selection import ScrollType


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    COPY_HASH = "copy_hash"
    QUIT = "quit"


_NAVIGATION: dict[Command, ScrollType] = {
    Command.MOVE_UP: ScrollType.UP,
    Command.MOVE_DOWN: ScrollType.DOWN,
    Command.PAGE_UP: ScrollType.PAGE_UP,
    Command.PAGE_DOWN: ScrollType.PAGE_DOWN,
    Command.HOME: ScrollType.HOME,
    Command.END: ScrollType.END,
}


def navigation_scroll_type(command: Command) -> ScrollType | None:
    """Return the scroll direction for a navigation command, else ``None``."""
    return _NAVIGATION.get(command)


def parse_command_name(name: object) -> Command | None:
    """Parse a config-style command name such as ``"MOVE_DOWN"``."""
    if not isinstance(name, str):
        return None
    try:
        return Command[name.strip().upper()]
    except KeyError:
        return None


@dataclass(frozen=True)
class CommandInfo:
    """Key-hint entry advertised in the status bar."""

    name: str
    keys: str
    enabled: bool
