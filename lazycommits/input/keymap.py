"""Key-token to command mapping with user overrides."""

from __future__ import annotations

from collections.abc import Mapping

from ..commit_list.commands import Command

DEFAULT_KEY_BINDINGS: dict[str, Command] = {
    "UP": Command.MOVE_UP,
    "k": Command.MOVE_UP,
    "DOWN": Command.MOVE_DOWN,
    "j": Command.MOVE_DOWN,
    "PAGE_UP": Command.PAGE_UP,
    "PAGE_DOWN": Command.PAGE_DOWN,
    "HOME": Command.HOME,
    "SHIFT_UP": Command.HOME,
    "g": Command.HOME,
    "END": Command.END,
    "SHIFT_DOWN": Command.END,
    "G": Command.END,
    "y": Command.COPY_HASH,
    "q": Command.QUIT,
    "ESC": Command.QUIT,
    "CTRL_C": Command.QUIT,
}


class Keymap:
    """Resolve key tokens into commands.

    Overrides replace default bindings per token; other defaults stay active.
    """

    def __init__(self, overrides: Mapping[str, Command] | None = None) -> None:
        self._bindings: dict[str, Command] = dict(DEFAULT_KEY_BINDINGS)
        if overrides:
            self._bindings.update(overrides)

    def resolve(self, key: str) -> Command | None:
        if not key:
            return None
        return self._bindings.get(key)

    def keys_for(self, command: Command) -> tuple[str, ...]:
        """Return every token bound to ``command`` in insertion order."""
        return tuple(key for key, bound in self._bindings.items() if bound is command)
