"""Lock-guarded owner of the active timer shared by commands and the tick loop."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from pomodoro import (
    ActiveTimer,
    BasicTimer,
    PomodoroConfig,
    PomodoroTimer,
    TimerMode,
    TimerSnapshot,
    TransitionEvent,
    advance_one_second,
    mode_of,
    snapshot,
)
from pomodoro.constants import DEFAULT_BASIC_DURATION_SECONDS, MODE_BASIC, MODE_POMODORO


@dataclass(frozen=True)
class TimerDefaults:
    """Settings used whenever a fresh timer is built on a mode switch."""
    basic_duration_secs: int = DEFAULT_BASIC_DURATION_SECONDS
    pomodoro: PomodoroConfig = field(default_factory=PomodoroConfig)
    initial_mode: TimerMode = MODE_POMODORO

    @classmethod
    def from_settings(cls, timer_settings, pomodoro_settings) -> "TimerDefaults":
        return cls(
            basic_duration_secs=timer_settings.default_duration_seconds,
            pomodoro=PomodoroConfig(
                work_secs=pomodoro_settings.work_seconds,
                short_break_secs=pomodoro_settings.short_break_seconds,
                long_break_secs=pomodoro_settings.long_break_seconds,
                sessions_before_long_break=pomodoro_settings.sessions_before_long_break,
            ),
        )


@dataclass(frozen=True)
class TickResult:
    """Snapshot taken right after a tick plus the transition it caused, if any."""
    snapshot: TimerSnapshot
    transition: Optional[TransitionEvent] = None


class TimerController:
    """Serializes every read and mutation of the active timer through one lock.

    Each method returns a snapshot built while the lock was held; callers
    publish it after the method returns, so no I/O happens under the lock.
    """

    def __init__(
        self,
        defaults: Optional[TimerDefaults] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._defaults = defaults or TimerDefaults()
        self._logger = logger or logging.getLogger("timer")
        self._lock = threading.Lock()
        self._active: ActiveTimer = self._build_timer(self._defaults.initial_mode)

    @property
    def defaults(self) -> TimerDefaults:
        return self._defaults

    def mode(self) -> TimerMode:
        with self._lock:
            return mode_of(self._active)

    def snapshot(self) -> TimerSnapshot:
        with self._lock:
            return snapshot(self._active)

    def start(self) -> TimerSnapshot:
        with self._lock:
            self._active.start()
            result = snapshot(self._active)
        self._logger.info("Timer started: mode=%s remaining=%ss", result.mode, result.remaining_secs)
        return result

    def pause(self) -> TimerSnapshot:
        with self._lock:
            self._active.pause()
            result = snapshot(self._active)
        self._logger.info("Timer paused: mode=%s remaining=%ss", result.mode, result.remaining_secs)
        return result

    def reset(self) -> TimerSnapshot:
        with self._lock:
            self._active.reset()
            result = snapshot(self._active)
        self._logger.info("Timer reset: mode=%s remaining=%ss", result.mode, result.remaining_secs)
        return result

    def set_duration(self, secs: int) -> Optional[TimerSnapshot]:
        """Retarget the basic timer; returns None when pomodoro mode is active."""
        with self._lock:
            active = self._active
            if not isinstance(active, BasicTimer):
                result = None
            else:
                active.set_duration(secs)
                result = snapshot(active)

        if result is None:
            self._logger.debug("Ignoring set_duration(%s) outside basic mode", secs)
        else:
            self._logger.info("Timer duration set: %ss", result.total_secs)
        return result

    def switch_mode(self, mode: TimerMode) -> TimerSnapshot:
        """Replace the active timer with a fresh default timer for `mode`."""
        with self._lock:
            self._active = self._build_timer(mode)
            result = snapshot(self._active)
        self._logger.info("Switched timer mode: %s", mode)
        return result

    def tick(self) -> TickResult:
        with self._lock:
            transition = advance_one_second(self._active)
            result = TickResult(snapshot=snapshot(self._active), transition=transition)

        if transition is not None:
            self._logger.info(
                "Timer transition: %s -> %s",
                transition.from_name,
                transition.to_name,
            )
        return result

    def _build_timer(self, mode: TimerMode) -> ActiveTimer:
        if mode == MODE_BASIC:
            return BasicTimer(self._defaults.basic_duration_secs)
        if mode == MODE_POMODORO:
            return PomodoroTimer(self._defaults.pomodoro)
        raise ValueError(f"Unsupported timer mode: {mode!r}")
