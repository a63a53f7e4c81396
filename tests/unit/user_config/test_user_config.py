from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirgrep import config


class UserConfigTests(unittest.TestCase):
    def test_missing_or_malformed_config_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirgrep.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_load_defaults_ignores_values_of_wrong_type(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                json.dumps(
                    {
                        "dirs": "src, tests",
                        "exts": [".py"],
                        "formats": ["list", 3],
                        "depth": "2",
                        "log_json": 1,
                    }
                ),
                encoding="utf-8",
            )
            with mock.patch("dirgrep.config.CONFIG_PATH", config_path):
                defaults = config.load_defaults()

            self.assertEqual(defaults.dirs, ("src", "tests"))
            self.assertEqual(defaults.exts, (".py",))
            self.assertIsNone(defaults.formats)
            self.assertIsNone(defaults.depth)
            self.assertIsNone(defaults.log_json)

    def test_boolean_depth_is_not_treated_as_integer(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({"depth": True, "log_json": True}), encoding="utf-8")
            with mock.patch("dirgrep.config.CONFIG_PATH", config_path):
                defaults = config.load_defaults()

            self.assertIsNone(defaults.depth)
            self.assertTrue(defaults.log_json)

    def test_save_defaults_merges_into_existing_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("dirgrep.config.CONFIG_PATH", config_path):
                config.save_defaults({"formats": ["tree"]})
                config.save_defaults({"depth": 3})

                self.assertEqual(config.load_config(), {"formats": ["tree"], "depth": 3})
                self.assertEqual(config.load_defaults().formats, ("tree",))


if __name__ == "__main__":
    unittest.main()
