import os
import sys
import tempfile
import textwrap
import unittest
from pathlib import Path
from unittest.mock import patch

from app_config import (
    AppConfigurationError,
    load_app_config,
    resolve_config_path,
)


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class AppConfigLoadingTests(unittest.TestCase):
    def test_load_app_config_reads_all_sections(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            config_path = root / "config.toml"
            _write_text(
                config_path,
                textwrap.dedent(
                    """
                    [timer]
                    default_duration_seconds = 600

                    [pomodoro]
                    work_seconds = 3000
                    short_break_seconds = 600
                    long_break_seconds = 1200
                    sessions_before_long_break = 3

                    [notifications]
                    enabled = false
                    app_name = "Focus"

                    [ui_server]
                    host = "0.0.0.0"
                    port = 9000
                    index_file = "web/index.html"

                    [logging]
                    level = "debug"
                    """
                ).strip(),
            )

            app_config = load_app_config(str(config_path))

            self.assertEqual(str(config_path), app_config.source_file)
            self.assertEqual(600, app_config.timer.default_duration_seconds)
            self.assertEqual(3000, app_config.pomodoro.work_seconds)
            self.assertEqual(600, app_config.pomodoro.short_break_seconds)
            self.assertEqual(1200, app_config.pomodoro.long_break_seconds)
            self.assertEqual(3, app_config.pomodoro.sessions_before_long_break)
            self.assertFalse(app_config.notifications.enabled)
            self.assertEqual("Focus", app_config.notifications.app_name)
            self.assertEqual("0.0.0.0", app_config.ui_server.host)
            self.assertEqual(9000, app_config.ui_server.port)
            self.assertEqual(
                str((root / "web/index.html").resolve()),
                app_config.ui_server.index_file,
            )
            self.assertEqual("DEBUG", app_config.logging.level)

    def test_missing_default_config_uses_builtin_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as cwd_dir:
            with patch.dict(os.environ, {}, clear=True):
                with patch("app_config.Path.cwd", return_value=Path(cwd_dir)):
                    app_config = load_app_config()

        self.assertEqual("", app_config.source_file)
        self.assertEqual(25 * 60, app_config.pomodoro.work_seconds)
        self.assertEqual(5 * 60, app_config.pomodoro.short_break_seconds)
        self.assertEqual(15 * 60, app_config.pomodoro.long_break_seconds)
        self.assertEqual(4, app_config.pomodoro.sessions_before_long_break)
        self.assertEqual(25 * 60, app_config.timer.default_duration_seconds)
        self.assertTrue(app_config.notifications.enabled)
        self.assertEqual("INFO", app_config.logging.level)

    def test_missing_explicit_config_is_an_error(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            missing = Path(temp_dir) / "absent.toml"
            with self.assertRaises(AppConfigurationError):
                load_app_config(str(missing))

            with patch.dict(os.environ, {"APP_CONFIG_FILE": str(missing)}, clear=True):
                with self.assertRaises(AppConfigurationError):
                    load_app_config()

    def test_env_var_selects_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "custom.toml"
            _write_text(config_path, "[timer]\ndefault_duration_seconds = 42\n")

            with patch.dict(os.environ, {"APP_CONFIG_FILE": str(config_path)}, clear=True):
                resolved = resolve_config_path()
                app_config = load_app_config()

            self.assertEqual(config_path.resolve(), resolved.resolve())
            self.assertEqual(42, app_config.timer.default_duration_seconds)

    def test_default_config_path_is_relative_to_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as cwd_dir, tempfile.TemporaryDirectory() as bundle_dir:
            cwd = Path(cwd_dir)
            _write_text(Path(bundle_dir) / "config.toml", "[timer]\ndefault_duration_seconds = 7\n")

            with patch.dict(os.environ, {}, clear=True):
                with patch("app_config.Path.cwd", return_value=cwd):
                    with patch.object(sys, "_MEIPASS", bundle_dir, create=True):
                        resolved = resolve_config_path()
                        app_config = load_app_config()

        self.assertEqual((cwd / "config.toml").resolve(), resolved)
        self.assertEqual("", app_config.source_file)
        self.assertEqual(25 * 60, app_config.timer.default_duration_seconds)

    def test_invalid_values_are_rejected(self) -> None:
        cases = {
            "negative duration": "[timer]\ndefault_duration_seconds = -5\n",
            "duration too large": "[pomodoro]\nwork_seconds = 4294967296\n",
            "zero threshold": "[pomodoro]\nsessions_before_long_break = 0\n",
            "bool as int": "[pomodoro]\nwork_seconds = true\n",
            "bad log level": "[logging]\nlevel = \"LOUD\"\n",
            "section not a table": "timer = 5\n",
            "broken toml": "[timer\n",
        }
        for label, content in cases.items():
            with self.subTest(label):
                with tempfile.TemporaryDirectory() as temp_dir:
                    config_path = Path(temp_dir) / "config.toml"
                    _write_text(config_path, content)
                    with self.assertRaises(AppConfigurationError):
                        load_app_config(str(config_path))


if __name__ == "__main__":
    unittest.main()
