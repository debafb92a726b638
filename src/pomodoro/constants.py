"""Mode, phase, status, and display constants used by the timer state machines."""

from __future__ import annotations

MODE_BASIC = "basic"
MODE_POMODORO = "pomodoro"

MODES: frozenset[str] = frozenset({MODE_BASIC, MODE_POMODORO})

STATUS_IDLE = "idle"
STATUS_RUNNING = "running"
STATUS_PAUSED = "paused"
STATUS_FINISHED = "finished"

PHASE_WORK = "Work"
PHASE_SHORT_BREAK = "ShortBreak"
PHASE_LONG_BREAK = "LongBreak"

BREAK_PHASES: frozenset[str] = frozenset({PHASE_SHORT_BREAK, PHASE_LONG_BREAK})

DEFAULT_BASIC_DURATION_SECONDS = 25 * 60
DEFAULT_WORK_SECONDS = 25 * 60
DEFAULT_SHORT_BREAK_SECONDS = 5 * 60
DEFAULT_LONG_BREAK_SECONDS = 15 * 60
DEFAULT_SESSIONS_BEFORE_LONG_BREAK = 4

# Durations are unsigned 32-bit second counts.
MAX_DURATION_SECONDS = 0xFFFFFFFF

BASIC_TIMER_PRESETS_SECONDS: tuple[int, ...] = (5 * 60, 10 * 60, 15 * 60, 30 * 60)

# Sentinel pair reported when a basic countdown runs out.
TRANSITION_TIMER = "timer"
TRANSITION_FINISHED = "finished"

SESSION_FILLED_GLYPH = "●"
SESSION_EMPTY_GLYPH = "○"

TRAY_ICON_BASIC = "⏱"
TRAY_ICON_WORK = "\U0001f345"
TRAY_ICON_BREAK = "☕"
