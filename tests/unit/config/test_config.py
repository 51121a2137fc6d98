from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirlist import config
from dirlist.types import ExitCodeScheme


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirlist.config.CONFIG_PATH", Path(tmp) / "config.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_default_path(), ".")
                self.assertIs(config.load_exit_code_scheme(), ExitCodeScheme.LEGACY)
                self.assertTrue(config.load_include_dot_entries())
                self.assertIsNone(config.load_log_level())

    def test_saved_values_round_trip_through_json_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("dirlist.config.CONFIG_PATH", config_path):
                config.save_default_path(Path("/srv/data"))
                config.save_exit_code_scheme(ExitCodeScheme.CONVENTIONAL)

                saved = json.loads(config_path.read_text(encoding="utf-8"))
                self.assertEqual(saved, {"path": str(Path("/srv/data")), "exit_codes": "conventional"})
                self.assertEqual(config.load_default_path(), str(Path("/srv/data")))
                self.assertIs(config.load_exit_code_scheme(), ExitCodeScheme.CONVENTIONAL)

    def test_malformed_or_mistyped_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                json.dumps({"path": "  ", "exit_codes": 3, "include_dot_entries": "no", "log_level": " "}),
                encoding="utf-8",
            )
            with mock.patch("dirlist.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_default_path(), ".")
                self.assertIs(config.load_exit_code_scheme(), ExitCodeScheme.LEGACY)
                self.assertTrue(config.load_include_dot_entries())
                self.assertIsNone(config.load_log_level())

            config_path.write_text("[1, 2", encoding="utf-8")
            with mock.patch("dirlist.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_blank_default_path_is_not_saved(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirlist.config.CONFIG_PATH", config_path):
                config.save_default_path("   ")

            self.assertFalse(config_path.exists())


if __name__ == "__main__":
    unittest.main()
