"""Cyclic work/break scheduler with session counting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .constants import (
    DEFAULT_LONG_BREAK_SECONDS,
    DEFAULT_SESSIONS_BEFORE_LONG_BREAK,
    DEFAULT_SHORT_BREAK_SECONDS,
    DEFAULT_WORK_SECONDS,
    PHASE_LONG_BREAK,
    PHASE_SHORT_BREAK,
    PHASE_WORK,
    SESSION_EMPTY_GLYPH,
    SESSION_FILLED_GLYPH,
    STATUS_IDLE,
    STATUS_PAUSED,
    STATUS_RUNNING,
    TRAY_ICON_BREAK,
    TRAY_ICON_WORK,
)
from .formatting import format_countdown

Phase = Literal["Work", "ShortBreak", "LongBreak"]
PomodoroStatus = Literal["idle", "running", "paused"]


@dataclass(frozen=True)
class PomodoroConfig:
    """Phase durations and the number of work sessions before a long break."""
    work_secs: int = DEFAULT_WORK_SECONDS
    short_break_secs: int = DEFAULT_SHORT_BREAK_SECONDS
    long_break_secs: int = DEFAULT_LONG_BREAK_SECONDS
    sessions_before_long_break: int = DEFAULT_SESSIONS_BEFORE_LONG_BREAK

    def __post_init__(self) -> None:
        for field in ("work_secs", "short_break_secs", "long_break_secs"):
            if getattr(self, field) < 0:
                raise ValueError(f"{field} must not be negative")
        if self.sessions_before_long_break < 1:
            raise ValueError(
                "sessions_before_long_break must be at least 1, "
                f"got: {self.sessions_before_long_break}"
            )

    def phase_duration_secs(self, phase: Phase) -> int:
        if phase == PHASE_WORK:
            return self.work_secs
        if phase == PHASE_SHORT_BREAK:
            return self.short_break_secs
        return self.long_break_secs


@dataclass(frozen=True)
class PhaseTransition:
    """Phase boundary crossed by a single tick."""
    from_phase: Phase
    to_phase: Phase


class PomodoroTimer:
    """Work/break cycle driven by one-second ticks.

    Unlike `BasicTimer` there is no terminal state: when a phase runs out the
    timer moves to the next phase and keeps running. `completed_sessions`
    counts finished work phases since the last reset and is never reduced by
    the long-break cycle.
    """

    def __init__(self, config: Optional[PomodoroConfig] = None):
        self._config = config or PomodoroConfig()
        self._phase: Phase = PHASE_WORK
        self._remaining_secs = self._config.work_secs
        self._completed_sessions = 0
        self._status: PomodoroStatus = STATUS_IDLE

    def __repr__(self) -> str:
        return (
            f"PomodoroTimer(phase={self._phase!r}, remaining_secs={self._remaining_secs}, "
            f"completed_sessions={self._completed_sessions}, status={self._status!r})"
        )

    @property
    def config(self) -> PomodoroConfig:
        return self._config

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_secs(self) -> int:
        return self._remaining_secs

    @property
    def completed_sessions(self) -> int:
        return self._completed_sessions

    @property
    def status(self) -> PomodoroStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._status == STATUS_RUNNING

    def phase_duration_secs(self) -> int:
        return self._config.phase_duration_secs(self._phase)

    def start(self) -> None:
        self._status = STATUS_RUNNING

    def pause(self) -> None:
        if self._status == STATUS_RUNNING:
            self._status = STATUS_PAUSED

    def reset(self) -> None:
        self._phase = PHASE_WORK
        self._remaining_secs = self._config.work_secs
        self._completed_sessions = 0
        self._status = STATUS_IDLE

    def tick(self) -> Optional[PhaseTransition]:
        if self._status != STATUS_RUNNING:
            return None

        self._remaining_secs = max(0, self._remaining_secs - 1)
        if self._remaining_secs > 0:
            return None

        from_phase = self._phase
        to_phase = self._next_phase()
        self._phase = to_phase
        self._remaining_secs = self._config.phase_duration_secs(to_phase)
        return PhaseTransition(from_phase=from_phase, to_phase=to_phase)

    def _next_phase(self) -> Phase:
        if self._phase != PHASE_WORK:
            return PHASE_WORK

        self._completed_sessions += 1
        if self._completed_sessions % self._config.sessions_before_long_break == 0:
            return PHASE_LONG_BREAK
        return PHASE_SHORT_BREAK

    def display(self) -> str:
        return format_countdown(self._remaining_secs)

    def session_display(self) -> str:
        glyphs = [
            SESSION_FILLED_GLYPH if index < self._completed_sessions else SESSION_EMPTY_GLYPH
            for index in range(self._config.sessions_before_long_break)
        ]
        return " ".join(glyphs)

    def tray_title(self) -> str:
        icon = TRAY_ICON_WORK if self._phase == PHASE_WORK else TRAY_ICON_BREAK
        return f"{icon} {self.display()}"
