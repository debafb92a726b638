"""Dispatcher that executes UI command payloads against the timer controller."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pomodoro import TimerSnapshot
from pomodoro.constants import MAX_DURATION_SECONDS, MODES
from contracts.ui_protocol import (
    COMMAND_PAUSE,
    COMMAND_RESET,
    COMMAND_SET_DURATION,
    COMMAND_START,
    COMMAND_SWITCH_MODE,
    COMMANDS,
)

from .state import TimerController
from .ui import RuntimeUIPublisher


class CommandError(Exception):
    """Raised when a command payload is malformed."""


class RuntimeCommandDispatcher:
    """Routes UI commands to the controller and publishes the resulting snapshot."""
    def __init__(
        self,
        *,
        controller: TimerController,
        ui: RuntimeUIPublisher,
        logger: Optional[logging.Logger] = None,
    ):
        self._controller = controller
        self._ui = ui
        self._logger = logger or logging.getLogger("commands")

    def handle_command(self, payload: Mapping[str, Any]) -> Optional[TimerSnapshot]:
        raw_name = payload.get("command")
        if not isinstance(raw_name, str):
            self._reject("Command payload must contain a 'command' string", payload)
            return None

        try:
            snapshot = self._execute(raw_name.strip().lower(), payload)
        except CommandError as error:
            self._reject(str(error), payload)
            return None

        # Publish only after the controller lock has been released.
        if snapshot is not None:
            self._ui.publish_snapshot(snapshot)
        return snapshot

    def _execute(
        self,
        name: str,
        payload: Mapping[str, Any],
    ) -> Optional[TimerSnapshot]:
        if name not in COMMANDS:
            raise CommandError(f"Unsupported command: {name}")
        if name == COMMAND_START:
            return self._controller.start()
        if name == COMMAND_PAUSE:
            return self._controller.pause()
        if name == COMMAND_RESET:
            return self._controller.reset()
        if name == COMMAND_SET_DURATION:
            return self._controller.set_duration(_parse_seconds(payload.get("secs")))
        if name == COMMAND_SWITCH_MODE:
            return self._controller.switch_mode(_parse_mode(payload.get("mode")))
        return self._controller.snapshot()

    def _reject(self, message: str, payload: Mapping[str, Any]) -> None:
        self._logger.warning("Rejected command %r: %s", dict(payload), message)
        self._ui.publish_error(message, command=payload.get("command"))


def _parse_seconds(value: Any) -> int:
    if isinstance(value, bool):
        raise CommandError("secs must be a non-negative integer")
    if isinstance(value, int):
        seconds = value
    elif isinstance(value, float) and value.is_integer():
        seconds = int(value)
    elif isinstance(value, str):
        try:
            seconds = int(value.strip())
        except ValueError as error:
            raise CommandError("secs must be a non-negative integer") from error
    else:
        raise CommandError("secs must be a non-negative integer")

    if seconds < 0:
        raise CommandError("secs must be a non-negative integer")
    if seconds > MAX_DURATION_SECONDS:
        raise CommandError(f"secs must not exceed {MAX_DURATION_SECONDS}")
    return seconds


def _parse_mode(value: Any) -> str:
    mode = value.strip().lower() if isinstance(value, str) else ""
    if mode not in MODES:
        allowed = ", ".join(sorted(MODES))
        raise CommandError(f"mode must be one of: {allowed}")
    return mode
