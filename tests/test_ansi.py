"""Regression tests for ANSI width measurement and line fitting."""

import unittest

from treemarquee import ansi as ansi_mod


class AnsiWidthTests(unittest.TestCase):
    def test_escape_sequences_have_no_width(self) -> None:
        self.assertEqual(ansi_mod.display_width("\x1b[1;34mab\x1b[0m"), 2)
        self.assertEqual(ansi_mod.strip_ansi("\x1b[7m[clear]\x1b[0m"), "[clear]")

    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(ansi_mod.display_width("日本"), 4)
        self.assertEqual(ansi_mod.display_width("é"), 1)

    def test_clip_keeps_escapes_and_stops_before_wide_overflow(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("\x1b[1mabcdef", 3), "\x1b[1mabc")
        self.assertEqual(ansi_mod.clip_ansi_line("a日", 2), "a")
        self.assertEqual(ansi_mod.clip_ansi_line("abc", 0), "")

    def test_fit_pads_and_resets_styled_lines(self) -> None:
        self.assertEqual(ansi_mod.fit_ansi_line("ab", 4), "ab  ")
        self.assertEqual(ansi_mod.fit_ansi_line("\x1b[1mab", 3, "\x1b[0m"), "\x1b[1mab\x1b[0m ")
        self.assertEqual(ansi_mod.fit_ansi_line("plain", 3, "\x1b[0m"), "pla")


if __name__ == "__main__":
    unittest.main()
