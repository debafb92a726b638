import logging
import unittest

from notifications import NotificationError
from pomodoro import BasicTimer, TransitionEvent, snapshot
from runtime.state import TickResult
from runtime.ticks import TickDependencies, TickProcessor
from runtime.ui import RuntimeUIPublisher


class _UIServerStub:
    def __init__(self):
        self.events: list[tuple[str, dict[str, object]]] = []

    def publish(self, event_type: str, **payload):
        self.events.append((event_type, payload))


class _NotifierStub:
    def __init__(self, error: Exception | None = None):
        self.calls: list[tuple[str, str]] = []
        self._error = error

    def notify(self, title: str, body: str) -> None:
        self.calls.append((title, body))
        if self._error is not None:
            raise self._error


def _finished_snapshot():
    timer = BasicTimer(1)
    timer.start()
    timer.tick()
    return snapshot(timer)


class TickStateFlowTests(unittest.TestCase):
    def _processor(self, notifier=None) -> tuple[TickProcessor, _UIServerStub]:
        ui_server = _UIServerStub()
        processor = TickProcessor(
            TickDependencies(
                logger=logging.getLogger("test"),
                ui=RuntimeUIPublisher(ui_server),
                notifier=notifier,
            )
        )
        return processor, ui_server

    def test_plain_tick_publishes_snapshot_only(self) -> None:
        notifier = _NotifierStub()
        processor, ui_server = self._processor(notifier)

        processor.handle_tick(TickResult(snapshot=snapshot(BasicTimer(5))))

        self.assertEqual(["tick"], [kind for kind, _ in ui_server.events])
        self.assertEqual(5, ui_server.events[0][1]["remaining_secs"])
        self.assertEqual([], notifier.calls)

    def test_timer_completion_publishes_tick_then_single_phase_change(self) -> None:
        notifier = _NotifierStub()
        processor, ui_server = self._processor(notifier)

        processor.handle_tick(
            TickResult(
                snapshot=_finished_snapshot(),
                transition=TransitionEvent("timer", "finished"),
            )
        )

        self.assertEqual(["tick", "phase_change"], [kind for kind, _ in ui_server.events])
        phase_change = ui_server.events[1][1]
        self.assertEqual("timer", phase_change["from"])
        self.assertEqual("finished", phase_change["to"])
        self.assertEqual("Timer Finished!", phase_change["title"])
        self.assertEqual("notification", phase_change["presentation"])
        self.assertEqual([("Timer Finished!", "Your timer has completed.")], notifier.calls)

    def test_work_to_break_uses_overlay_presentation(self) -> None:
        processor, ui_server = self._processor()

        processor.handle_tick(
            TickResult(
                snapshot=_finished_snapshot(),
                transition=TransitionEvent("Work", "LongBreak"),
            )
        )

        phase_change = ui_server.events[1][1]
        self.assertEqual("overlay", phase_change["presentation"])
        self.assertEqual("Long Break!", phase_change["title"])

    def test_notification_failure_does_not_escape(self) -> None:
        notifier = _NotifierStub(error=NotificationError("no backend"))
        processor, ui_server = self._processor(notifier)

        with self.assertLogs("test", level="WARNING") as logs:
            processor.handle_tick(
                TickResult(
                    snapshot=_finished_snapshot(),
                    transition=TransitionEvent("ShortBreak", "Work"),
                )
            )

        self.assertEqual(1, len(notifier.calls))
        self.assertEqual(["tick", "phase_change"], [kind for kind, _ in ui_server.events])
        self.assertIn("no backend", "\n".join(logs.output))


if __name__ == "__main__":
    unittest.main()
