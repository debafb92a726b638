"""Web UI websocket event and command constants."""

from __future__ import annotations

# Websocket event types
EVENT_HELLO = "hello"
EVENT_TICK = "tick"
EVENT_PHASE_CHANGE = "phase_change"
EVENT_ERROR = "error"

# Commands accepted from UI clients
COMMAND_START = "start"
COMMAND_PAUSE = "pause"
COMMAND_RESET = "reset"
COMMAND_SET_DURATION = "set_duration"
COMMAND_SWITCH_MODE = "switch_mode"
COMMAND_GET_SNAPSHOT = "get_snapshot"

COMMANDS: frozenset[str] = frozenset(
    {
        COMMAND_START,
        COMMAND_PAUSE,
        COMMAND_RESET,
        COMMAND_SET_DURATION,
        COMMAND_SWITCH_MODE,
        COMMAND_GET_SNAPSHOT,
    }
)

# Notification presentation hints carried by phase_change events
PRESENTATION_OVERLAY = "overlay"
PRESENTATION_NOTIFICATION = "notification"

STICKY_EVENT_TYPES: frozenset[str] = frozenset(
    {
        EVENT_TICK,
        EVENT_PHASE_CHANGE,
        EVENT_ERROR,
    }
)

STICKY_EVENT_ORDER: tuple[str, ...] = (
    EVENT_PHASE_CHANGE,
    EVENT_ERROR,
    EVENT_TICK,
)
