"""Input-layer public API: raw key decoding and key-to-command resolution."""

from .keymap import DEFAULT_KEY_BINDINGS, Keymap
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "DEFAULT_KEY_BINDINGS",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "Keymap",
    "read_key",
]
