"""Raw-key and SGR mouse decoding.

Feeds byte sequences through a pipe and checks the normalized tokens the
runtime dispatches on.
"""

import os
import unittest

from treemarquee import input as input_mod


class ReadKeyDecodingTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int = 1) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_sgr_left_press_drag_and_release(self) -> None:
        keys = self._read_all(b"\x1b[<0;12;3M\x1b[<32;14;5M\x1b[<0;14;5m", count=3)
        self.assertEqual(keys, ["MOUSE_LEFT_DOWN:12:3", "MOUSE_LEFT_DRAG:14:5", "MOUSE_LEFT_UP:14:5"])

    def test_sgr_wheel_events(self) -> None:
        keys = self._read_all(b"\x1b[<64;1;1M\x1b[<65;2;9M", count=2)
        self.assertEqual(keys, ["MOUSE_WHEEL_UP:1:1", "MOUSE_WHEEL_DOWN:2:9"])

    def test_other_buttons_collapse_to_generic_mouse_token(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[<2;4;4M"), ["MOUSE"])

    def test_malformed_sgr_payload_is_escape(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[<0;x;4M"), ["ESC"])

    def test_shift_arrows(self) -> None:
        keys = self._read_all(b"\x1b[1;2C\x1b[1;2D", count=2)
        self.assertEqual(keys, ["SHIFT_RIGHT", "SHIFT_LEFT"])

    def test_plain_arrows_and_control_keys(self) -> None:
        keys = self._read_all(b"\x1b[A\x1b[B\x03\t", count=4)
        self.assertEqual(keys, ["UP", "DOWN", "CTRL_C", "TAB"])

    def test_lone_escape_keeps_following_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1bq", count=2), ["ESC", "q"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(self._read_all(b"", count=1), [""])


class ParseMouseKeyTests(unittest.TestCase):
    def test_splits_kind_and_cell(self) -> None:
        self.assertEqual(input_mod.parse_mouse_key("MOUSE_LEFT_DRAG:7:21"), ("MOUSE_LEFT_DRAG", 7, 21))

    def test_rejects_non_mouse_tokens(self) -> None:
        self.assertIsNone(input_mod.parse_mouse_key("q"))
        self.assertIsNone(input_mod.parse_mouse_key("MOUSE"))
        self.assertIsNone(input_mod.parse_mouse_key("MOUSE_LEFT_UP:a:1"))
        self.assertIsNone(input_mod.parse_mouse_key("KEY:1:2"))


if __name__ == "__main__":
    unittest.main()
