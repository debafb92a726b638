"""Desktop notification popups via the platform's notification command."""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess
from typing import Optional

from .config import NotificationConfig


class NotificationError(Exception):
    """Raised when a desktop notification cannot be shown."""


class DesktopNotifier:
    """Shows transition popups with `notify-send` (Linux) or `osascript` (macOS)."""

    def __init__(
        self,
        config: Optional[NotificationConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config or NotificationConfig()
        self._logger = logger or logging.getLogger("notifications")

    def notify(self, title: str, body: str) -> None:
        command = self._build_command(title, body)
        if command is None:
            raise NotificationError(
                f"No notification backend available on {platform.system() or 'unknown'}"
            )

        self._logger.debug("Showing notification: %s", title)
        try:
            result = subprocess.run(
                command,
                check=False,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=5.0,
            )
        except (OSError, subprocess.SubprocessError) as error:
            raise NotificationError(f"{command[0]} failed: {error}") from error

        if result.returncode != 0:
            raise NotificationError(f"{command[0]} exited with status {result.returncode}")

    def _build_command(self, title: str, body: str) -> Optional[list[str]]:
        system_name = platform.system().lower()
        if system_name == "linux" and shutil.which("notify-send"):
            return ["notify-send", f"--app-name={self._config.app_name}", title, body]
        if system_name == "darwin" and shutil.which("osascript"):
            script = (
                "display notification "
                f"\"{_escape(body)}\" with title \"{_escape(title)}\""
            )
            return ["osascript", "-e", script]
        return None


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')
