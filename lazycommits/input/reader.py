"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing for arrows, paging keys, and shifted arrows.
Unrecognized CSI sequences are consumed whole so no stray bytes leak out.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []
_CSI_MAX_PARAM_BYTES = 16

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}

_SHIFTED_ARROWS: dict[bytes, str] = {
    b"A": "SHIFT_UP",
    b"B": "SHIFT_DOWN",
    b"C": "SHIFT_RIGHT",
    b"D": "SHIFT_LEFT",
}

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
    b"\t": "TAB",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, first: bytes) -> bytes:
    """Read continuation bytes of a multi-byte UTF-8 character."""
    lead = first[0]
    if lead >= 0xF0:
        extra = 3
    elif lead >= 0xE0:
        extra = 2
    elif lead >= 0xC0:
        extra = 1
    else:
        return first
    data = first
    for _ in range(extra):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data


def _read_csi(fd: int) -> str:
    """Consume the rest of an ``ESC [`` sequence through its final byte.

    Parameter and intermediate bytes are collected until a byte in ``@``..``~``
    arrives. Well-formed sequences without a known mapping decode to ``""``.
    """
    params = b""
    while len(params) < _CSI_MAX_PARAM_BYTES:
        ch = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if ch is None:
            return ""
        if 0x40 <= ch[0] <= 0x7E:
            return _decode_csi(params, ch)
        if not 0x20 <= ch[0] <= 0x3F:
            # Not part of a CSI sequence; hand it back as the next key.
            _PENDING_BYTES.append(ch)
            return ""
        params += ch
    return ""


def _decode_csi(params: bytes, final: bytes) -> str:
    if not params and final in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[final]
    if final == b"~" and params in _CSI_TILDE_KEYS:
        return _CSI_TILDE_KEYS[params]
    if params == b"1;2" and final in _SHIFTED_ARROWS:
        return _SHIFTED_ARROWS[final]
    return ""


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` on timeout, EOF, or an escape sequence with no known key.
    ``"ESC"`` is reported only for an escape byte with nothing after it, and
    escape followed by a character (Alt chords) decodes to ``"ALT_<char>"``.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch).decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"\x1b":
        _PENDING_BYTES.append(seq)
        return "ESC"
    if seq == b"O":
        # SS3 form used by some terminals in application cursor mode.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ALT_O"
        return _CSI_FINAL_KEYS.get(final, "")
    if seq == b"[":
        return _read_csi(fd)
    if seq in _CONTROL_KEYS:
        return f"ALT_{_CONTROL_KEYS[seq]}"
    return "ALT_" + _read_utf8_tail(fd, seq).decode("utf-8", errors="replace")
