"""Single countdown timer with a terminal finished state."""

from __future__ import annotations

from typing import Literal

from .constants import (
    STATUS_FINISHED,
    STATUS_IDLE,
    STATUS_PAUSED,
    STATUS_RUNNING,
    TRAY_ICON_BASIC,
)
from .formatting import format_countdown

TimerStatus = Literal["idle", "running", "paused", "finished"]


def _validate_seconds(value: int, field: str) -> int:
    seconds = int(value)
    if seconds < 0:
        raise ValueError(f"{field} must not be negative, got: {seconds}")
    return seconds


class BasicTimer:
    """Countdown advanced by explicit one-second ticks.

    A timer that reached zero stays finished until it is reset or given a new
    duration; starting it again is a no-op.
    """

    def __init__(self, duration_secs: int):
        self._duration_secs = _validate_seconds(duration_secs, "duration_secs")
        self._remaining_secs = self._duration_secs
        self._status: TimerStatus = STATUS_IDLE

    def __repr__(self) -> str:
        return (
            f"BasicTimer(duration_secs={self._duration_secs}, "
            f"remaining_secs={self._remaining_secs}, status={self._status!r})"
        )

    @property
    def duration_secs(self) -> int:
        return self._duration_secs

    @property
    def remaining_secs(self) -> int:
        return self._remaining_secs

    @property
    def status(self) -> TimerStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._status == STATUS_RUNNING

    @property
    def is_finished(self) -> bool:
        return self._status == STATUS_FINISHED

    def start(self) -> None:
        if self._status != STATUS_FINISHED:
            self._status = STATUS_RUNNING

    def pause(self) -> None:
        if self._status == STATUS_RUNNING:
            self._status = STATUS_PAUSED

    def reset(self) -> None:
        self._remaining_secs = self._duration_secs
        self._status = STATUS_IDLE

    def set_duration(self, secs: int) -> None:
        self._duration_secs = _validate_seconds(secs, "secs")
        self._remaining_secs = self._duration_secs
        self._status = STATUS_IDLE

    def tick(self) -> None:
        if self._status != STATUS_RUNNING:
            return
        self._remaining_secs = max(0, self._remaining_secs - 1)
        if self._remaining_secs == 0:
            self._status = STATUS_FINISHED

    def display(self) -> str:
        return format_countdown(self._remaining_secs)

    def tray_title(self) -> str:
        return f"{TRAY_ICON_BASIC} {self.display()}"
