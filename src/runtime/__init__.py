"""Runtime engine exports."""

from .commands import RuntimeCommandDispatcher
from .loop import RuntimeBootstrap, RuntimeEngine, TickLoop
from .state import TickResult, TimerController, TimerDefaults

__all__ = [
    "RuntimeBootstrap",
    "RuntimeCommandDispatcher",
    "RuntimeEngine",
    "TickLoop",
    "TickResult",
    "TimerController",
    "TimerDefaults",
]
