from .constants import (
    DEFAULT_BASIC_DURATION_SECONDS,
    MODE_BASIC,
    MODE_POMODORO,
)
from .formatting import format_countdown
from .service import Phase, PhaseTransition, PomodoroConfig, PomodoroStatus, PomodoroTimer
from .projection import (
    ActiveTimer,
    TimerMode,
    TimerSnapshot,
    TransitionEvent,
    advance_one_second,
    mode_of,
    snapshot,
)
from .timer import BasicTimer, TimerStatus

__all__ = [
    "DEFAULT_BASIC_DURATION_SECONDS",
    "MODE_BASIC",
    "MODE_POMODORO",
    "ActiveTimer",
    "BasicTimer",
    "Phase",
    "PhaseTransition",
    "PomodoroConfig",
    "PomodoroStatus",
    "PomodoroTimer",
    "TimerMode",
    "TimerSnapshot",
    "TimerStatus",
    "TransitionEvent",
    "advance_one_second",
    "format_countdown",
    "mode_of",
    "snapshot",
]
