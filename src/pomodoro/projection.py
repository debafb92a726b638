"""Active timer selection plus the render-ready snapshot projection."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal, Optional, Union

from .constants import MODE_BASIC, MODE_POMODORO, TRANSITION_FINISHED, TRANSITION_TIMER
from .service import PomodoroTimer
from .timer import BasicTimer

TimerMode = Literal["basic", "pomodoro"]

# Exactly one of the two timers is live at a time.
ActiveTimer = Union[BasicTimer, PomodoroTimer]


@dataclass(frozen=True)
class TimerSnapshot:
    """Immutable view of the active timer exposed to UI publishers."""
    mode: TimerMode
    display: str
    remaining_secs: int
    total_secs: int
    is_running: bool
    is_finished: bool
    phase: Optional[str]
    session_display: Optional[str]
    tray_title: str

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TransitionEvent:
    """Phase change, or the `timer -> finished` pair for a basic countdown."""
    from_name: str
    to_name: str

    @property
    def is_timer_finished(self) -> bool:
        return self.from_name == TRANSITION_TIMER and self.to_name == TRANSITION_FINISHED

    def to_payload(self) -> dict[str, str]:
        return {"from": self.from_name, "to": self.to_name}


def mode_of(active: ActiveTimer) -> TimerMode:
    if isinstance(active, BasicTimer):
        return MODE_BASIC
    if isinstance(active, PomodoroTimer):
        return MODE_POMODORO
    raise TypeError(f"Unsupported timer type: {type(active).__name__}")


def snapshot(active: ActiveTimer) -> TimerSnapshot:
    """Project the active timer into a snapshot without keeping a reference to it."""
    if isinstance(active, BasicTimer):
        return TimerSnapshot(
            mode=MODE_BASIC,
            display=active.display(),
            remaining_secs=active.remaining_secs,
            total_secs=active.duration_secs,
            is_running=active.is_running,
            is_finished=active.is_finished,
            phase=None,
            session_display=None,
            tray_title=active.tray_title(),
        )
    if isinstance(active, PomodoroTimer):
        return TimerSnapshot(
            mode=MODE_POMODORO,
            display=active.display(),
            remaining_secs=active.remaining_secs,
            total_secs=active.phase_duration_secs(),
            is_running=active.is_running,
            is_finished=False,
            phase=active.phase,
            session_display=active.session_display(),
            tray_title=active.tray_title(),
        )
    raise TypeError(f"Unsupported timer type: {type(active).__name__}")


def advance_one_second(active: ActiveTimer) -> Optional[TransitionEvent]:
    """Tick the active timer once and report at most one transition."""
    if isinstance(active, BasicTimer):
        was_finished = active.is_finished
        active.tick()
        if active.is_finished and not was_finished:
            return TransitionEvent(from_name=TRANSITION_TIMER, to_name=TRANSITION_FINISHED)
        return None
    if isinstance(active, PomodoroTimer):
        transition = active.tick()
        if transition is None:
            return None
        return TransitionEvent(from_name=transition.from_phase, to_name=transition.to_phase)
    raise TypeError(f"Unsupported timer type: {type(active).__name__}")
