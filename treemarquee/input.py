"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, shift-arrow combos, and SGR mouse events,
including left-button motion reports used for drag gestures.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

SGR_MOTION_FLAG = 0b0010_0000
SGR_WHEEL_FLAG = 0b0100_0000


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def parse_mouse_key(key: str) -> tuple[str, int, int] | None:
    """Split ``"MOUSE_LEFT_DOWN:12:3"`` into ``("MOUSE_LEFT_DOWN", 12, 3)``."""
    parts = key.split(":")
    if len(parts) != 3 or not parts[0].startswith("MOUSE_"):
        return None
    try:
        return parts[0], int(parts[1]), int(parts[2])
    except ValueError:
        return None


def _decode_sgr_mouse(payload: bytes, final: bytes) -> str:
    try:
        btn_s, col_s, row_s = payload.decode("ascii").split(";")
        btn = int(btn_s)
        col = int(col_s)
        row = int(row_s)
    except ValueError:
        return "ESC"
    button = btn & 0b11
    if btn & SGR_WHEEL_FLAG:
        if button == 0:
            return f"MOUSE_WHEEL_UP:{col}:{row}"
        if button == 1:
            return f"MOUSE_WHEEL_DOWN:{col}:{row}"
        return "MOUSE"
    if button != 0:
        return "MOUSE"
    if final == b"m":
        return f"MOUSE_LEFT_UP:{col}:{row}"
    if btn & SGR_MOTION_FLAG:
        return f"MOUSE_LEFT_DRAG:{col}:{row}"
    return f"MOUSE_LEFT_DOWN:{col}:{row}"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key or mouse token; ``""`` on timeout or EOF."""
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

    if ch == b"\x03":
        return "CTRL_C"
    if ch == b"\t":
        return "TAB"
    if ch == b"\r":
        return "ENTER_CR"
    if ch == b"\n":
        return "ENTER_LF"

    if ch != b"\x1b":
        return ch.decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"A":
        return "UP"
    if seq == b"B":
        return "DOWN"
    if seq == b"C":
        return "RIGHT"
    if seq == b"D":
        return "LEFT"
    if seq == b"<":
        # SGR mouse: ESC [ < btn ; col ; row (M/m)
        payload: list[bytes] = []
        while True:
            part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                return "ESC"
            if part in {b"M", b"m"}:
                break
            payload.append(part)
            if len(payload) > 64:
                return "ESC"
        return _decode_sgr_mouse(b"".join(payload), part)
    if seq == b"1":
        # ESC [ 1 ; 2 C/D
        rest = [_read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS) for _ in range(3)]
        if rest == [b";", b"2", b"C"]:
            return "SHIFT_RIGHT"
        if rest == [b";", b"2", b"D"]:
            return "SHIFT_LEFT"
        return "ESC"
    return "ESC"
