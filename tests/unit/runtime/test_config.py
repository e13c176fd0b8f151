"""Tests for config persistence and input sanitization.

Malformed or out-of-range values must fall back to defaults instead of
reaching the layout.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treemarquee.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "config.json"
        patcher = mock.patch("treemarquee.runtime.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_missing_file_gives_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertEqual(config.load_row_height(), 2)
        self.assertEqual(config.load_indent_width(), 2)
        self.assertIsNone(config.load_theme_name())
        self.assertIsNone(config.load_tree_pane_percent())
        self.assertIsNone(config.load_last_tree_path())

    def test_malformed_json_is_ignored(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

        self.config_path.write_text("[1, 2]", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

    def test_bounded_ints_reject_bools_and_out_of_range(self) -> None:
        config.save_config({"row_height": True, "indent_width": 9})
        self.assertEqual(config.load_row_height(), 2)
        self.assertEqual(config.load_indent_width(), 2)

        config.save_config({"row_height": 3, "indent_width": 4})
        self.assertEqual(config.load_row_height(), 3)
        self.assertEqual(config.load_indent_width(), 4)

    def test_theme_name_is_normalized(self) -> None:
        config.save_theme_name("OCEAN")
        self.assertEqual(config.load_theme_name(), "ocean")
        config.save_theme_name("no-such-theme")
        self.assertEqual(config.load_theme_name(), "default")

    def test_tree_pane_percent_round_trip_and_clamp(self) -> None:
        config.save_tree_pane_percent(100, 32)
        self.assertEqual(config.load_tree_pane_percent(), 32.0)

        config.save_tree_pane_percent(0, 10)
        self.assertEqual(config.load_tree_pane_percent(), 32.0)

        config.save_config({"tree_pane_percent": 100})
        self.assertIsNone(config.load_tree_pane_percent())

    def test_saves_preserve_other_keys(self) -> None:
        config.save_theme_name("ocean")
        config.save_last_tree_path(Path("/tmp/tree.json"))
        saved = config.load_config()
        self.assertEqual(saved["theme"], "ocean")
        self.assertEqual(config.load_last_tree_path(), Path("/tmp/tree.json"))


if __name__ == "__main__":
    unittest.main()
