"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Printable characters are returned as themselves; special keys use upper-case
token names such as ``UP``, ``PAGE_DOWN`` or ``BACKSPACE``.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
CSI_MAX_LENGTH = 16
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS: dict[str, str] = {
    "1": "HOME",
    "2": "INSERT",
    "3": "DELETE",
    "4": "END",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
    "7": "HOME",
    "8": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_sequence_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_utf8(fd: int, lead: bytes) -> str:
    """Read continuation bytes for a multi-byte UTF-8 lead byte."""
    raw = lead
    for _ in range(_utf8_sequence_length(lead[0]) - 1):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        if part[0] & 0xC0 != 0x80:
            # Not a continuation byte; it starts the next key.
            _PENDING_BYTES.append(part)
            break
        raw += part
    return raw.decode("utf-8", errors="replace")


def _control_key(ch: bytes) -> str | None:
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\t":
        return "TAB"
    if ch in {b"\r", b"\n"}:
        return "ENTER"
    code = ch[0]
    if 1 <= code <= 26:
        return f"CTRL_{chr(code + 64)}"
    if code == 0x1F:
        return "CTRL_QUESTION"
    if code < 32:
        return "UNKNOWN"
    return None


def _read_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` control sequence."""
    params = b""
    while len(params) < CSI_MAX_LENGTH:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        if 0x40 <= part[0] <= 0x7E:
            if part == b"~":
                first_param = params.split(b";", 1)[0].decode("ascii", errors="replace")
                return _CSI_TILDE_KEYS.get(first_param, "UNKNOWN")
            return _CSI_FINAL_KEYS.get(part, "UNKNOWN")
        params += part
    return "UNKNOWN"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block for one key press and return its token.

    With ``timeout_ms`` set, returns ``""`` when nothing arrives in time.
    Raises ``EOFError`` when a blocking read reaches end of input.
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
            raise EOFError("end of terminal input")

    if ch != b"\x1b":
        control = _control_key(ch)
        if control is not None:
            return control
        if ch[0] >= 0x80:
            return _decode_utf8(fd, ch)
        return ch.decode("ascii", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        # SS3 form sent by terminals in application cursor mode.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ALT_O"
        return _CSI_FINAL_KEYS.get(final, "UNKNOWN")
    if seq == b"\x1b":
        _PENDING_BYTES.append(seq)
        return "ESC"
    # Meta-prefixed keys (Alt+key) arrive as ESC followed by the key byte.
    if seq in {b"b", b"B"}:
        return "ALT_LEFT"
    if seq in {b"f", b"F"}:
        return "ALT_RIGHT"
    if 0x20 <= seq[0] < 0x7F:
        return f"ALT_{seq.decode('ascii')}"
    return "UNKNOWN"


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "read_key"]
