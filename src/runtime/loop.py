"""Runtime orchestration: the 1 Hz tick loop and the engine that wires it up."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol

from notifications import DesktopNotifier
from pomodoro import TimerSnapshot

from .commands import RuntimeCommandDispatcher
from .messages import status_message
from .state import TickResult, TimerController, TimerDefaults
from .ticks import TickDependencies, TickProcessor
from .ui import RuntimeUIPublisher

TICK_INTERVAL_SECONDS = 1.0


class TickLoop:
    """Calls `tick` once per interval on a daemon thread and forwards each result.

    Deadlines are kept on the monotonic clock. Ticks missed while the process
    was suspended are dropped rather than replayed, so remaining time reflects
    ticks delivered, not wall-clock time elapsed.
    """

    def __init__(
        self,
        tick: Callable[[], TickResult],
        on_tick: Callable[[TickResult], None],
        *,
        interval_seconds: float = TICK_INTERVAL_SECONDS,
        logger: Optional[logging.Logger] = None,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero")

        self._tick = tick
        self._on_tick = on_tick
        self._interval_seconds = float(interval_seconds)
        self._logger = logger or logging.getLogger("ticks")
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            self._logger.warning("Tick loop is already running")
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run,
            daemon=True,
            name="tick-loop",
        )
        self._thread.start()

    def stop(self, timeout_seconds: float = 5.0) -> None:
        if self._thread is None:
            return

        self._stop_event.set()
        self._thread.join(timeout=timeout_seconds)
        if self._thread.is_alive():
            self._logger.error(
                "Tick loop thread did not stop within %.1fs",
                timeout_seconds,
            )
        self._thread = None

    def _run(self) -> None:
        interval = self._interval_seconds
        next_deadline = time.monotonic() + interval
        while not self._stop_event.wait(max(0.0, next_deadline - time.monotonic())):
            try:
                result = self._tick()
                self._logger.debug("Tick: %s", result.snapshot.display)
                self._on_tick(result)
            except Exception as error:
                self._logger.error("Tick handler failed: %s", error, exc_info=True)

            next_deadline += interval
            now = time.monotonic()
            if now - next_deadline > interval:
                self._logger.warning(
                    "Tick loop fell behind by %.1fs; skipping missed ticks",
                    now - next_deadline,
                )
                next_deadline = now + interval


class CommandSink(Protocol):
    def set_command_handler(
        self,
        handler: Callable[[Mapping[str, Any]], Any],
    ) -> None:
        ...

    def publish(self, event_type: str, **payload: Any) -> None:
        ...

    def stop(self, timeout_seconds: float = 5.0) -> None:
        ...


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle required to construct the runtime engine."""
    logger: logging.Logger
    defaults: TimerDefaults
    ui_server: Optional[CommandSink] = None
    notifier: Optional[DesktopNotifier] = None
    tick_interval_seconds: float = TICK_INTERVAL_SECONDS


class RuntimeEngine:
    """Owns the timer controller and runs the tick loop until stopped."""
    def __init__(self, bootstrap: RuntimeBootstrap):
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger
        self._stop_requested = threading.Event()

        self._ui = RuntimeUIPublisher(bootstrap.ui_server)
        self._controller = TimerController(
            bootstrap.defaults,
            logger=logging.getLogger("timer"),
        )
        self._dispatcher = RuntimeCommandDispatcher(
            controller=self._controller,
            ui=self._ui,
            logger=logging.getLogger("commands"),
        )
        self._tick_processor = TickProcessor(
            TickDependencies(
                logger=logging.getLogger("ticks"),
                ui=self._ui,
                notifier=bootstrap.notifier,
            )
        )
        self._tick_loop = TickLoop(
            self._controller.tick,
            self._tick_processor.handle_tick,
            interval_seconds=bootstrap.tick_interval_seconds,
            logger=logging.getLogger("ticks"),
        )

        if bootstrap.ui_server is not None:
            bootstrap.ui_server.set_command_handler(self.handle_command)

    @property
    def controller(self) -> TimerController:
        return self._controller

    def handle_command(self, payload: Mapping[str, Any]) -> Optional[TimerSnapshot]:
        return self._dispatcher.handle_command(payload)

    def stop(self) -> None:
        self._stop_requested.set()

    def run(self) -> int:
        startup_snapshot = self._controller.snapshot()
        self._ui.publish_snapshot(startup_snapshot)

        try:
            self._tick_loop.start()
            self._logger.info("Ready! %s", status_message(startup_snapshot))

            while not self._stop_requested.wait(0.25):
                if not self._tick_loop.is_running:
                    self._logger.error("Tick loop stopped unexpectedly")
                    return 1
            return 0

        except KeyboardInterrupt:
            self._logger.info("Shutdown requested by keyboard interrupt.")
            return 0
        finally:
            self._shutdown()

    def _shutdown(self) -> None:
        self._logger.info("Stopping tick loop...")
        self._tick_loop.stop(timeout_seconds=5.0)

        ui_server = self._bootstrap.ui_server
        if ui_server is not None:
            self._logger.info("Stopping UI server...")
            try:
                ui_server.stop(timeout_seconds=5.0)
            except Exception as error:
                self._logger.error("Error stopping UI server: %s", error, exc_info=True)
