"""Tests for the config module."""

import json
import os
import shutil
import tempfile
import unittest

import prayer_engine.config as config_mod
from prayer_engine.config import (
    DEFAULT_SETTINGS,
    LOCATION,
    clear_settings,
    load_settings,
    save_settings,
)


class TestLocation(unittest.TestCase):
    def test_fixed_location(self):
        self.assertEqual(LOCATION["timezone"], "Asia/Beirut")
        self.assertEqual(LOCATION["country"], "LB")


class TestSettings(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.mkdtemp()
        self._orig_config_dir = config_mod.CONFIG_DIR
        self._orig_config_file = config_mod.CONFIG_FILE
        config_mod.CONFIG_DIR = os.path.join(self._tmpdir, "prayertime")
        config_mod.CONFIG_FILE = os.path.join(config_mod.CONFIG_DIR, "settings.json")

    def tearDown(self):
        config_mod.CONFIG_DIR = self._orig_config_dir
        config_mod.CONFIG_FILE = self._orig_config_file
        shutil.rmtree(self._tmpdir, ignore_errors=True)

    def _write(self, text):
        os.makedirs(config_mod.CONFIG_DIR, exist_ok=True)
        with open(config_mod.CONFIG_FILE, "w", encoding="utf-8") as f:
            f.write(text)

    def test_defaults_when_no_file(self):
        self.assertEqual(load_settings(), DEFAULT_SETTINGS)

    def test_save_and_load(self):
        save_settings({"language": "fr"})
        self.assertEqual(load_settings()["language"], "fr")

    def test_save_rejects_unknown_language(self):
        with self.assertRaises(ValueError):
            save_settings({"language": "de"})
        self.assertFalse(os.path.exists(config_mod.CONFIG_FILE))

    def test_clear_settings(self):
        save_settings({"language": "en"})
        clear_settings()
        self.assertEqual(load_settings(), DEFAULT_SETTINGS)

    def test_invalid_json_falls_back(self):
        self._write("not valid json")
        with self.assertLogs("prayer_engine.config", level="WARNING"):
            self.assertEqual(load_settings(), DEFAULT_SETTINGS)

    def test_non_object_falls_back(self):
        self._write(json.dumps(["en"]))
        with self.assertLogs("prayer_engine.config", level="WARNING"):
            self.assertEqual(load_settings(), DEFAULT_SETTINGS)

    def test_unknown_language_falls_back(self):
        self._write(json.dumps({"language": "de"}))
        with self.assertLogs("prayer_engine.config", level="WARNING"):
            self.assertEqual(load_settings()["language"], "ar")


if __name__ == "__main__":
    unittest.main()
