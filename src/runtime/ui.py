from __future__ import annotations

from typing import Any, Optional, Protocol

from pomodoro import TimerSnapshot, TransitionEvent
from contracts.ui_protocol import EVENT_ERROR, EVENT_PHASE_CHANGE, EVENT_TICK

from .messages import transition_message, transition_presentation


class UIServerLike(Protocol):
    def publish(self, event_type: str, **payload: Any) -> None:
        ...


class RuntimeUIPublisher:
    def __init__(self, ui_server: Optional[UIServerLike]):
        self._ui_server = ui_server

    def publish(self, event_type: str, **payload: Any) -> None:
        if self._ui_server:
            self._ui_server.publish(event_type, **payload)

    def publish_snapshot(self, snapshot: TimerSnapshot) -> None:
        self.publish(EVENT_TICK, **snapshot.to_payload())

    def publish_phase_change(self, transition: TransitionEvent) -> None:
        payload: dict[str, Any] = {
            **transition.to_payload(),
            "presentation": transition_presentation(transition),
        }
        message = transition_message(transition)
        if message is not None:
            payload["title"] = message.title
            payload["body"] = message.body
        self.publish(EVENT_PHASE_CHANGE, **payload)

    def publish_error(self, message: str, **payload: Any) -> None:
        self.publish(EVENT_ERROR, message=message, **payload)
