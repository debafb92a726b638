"""Tick handlers that publish snapshots and transition notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from notifications import DesktopNotifier, NotificationError

from .messages import status_message, transition_message
from .state import TickResult
from .ui import RuntimeUIPublisher


@dataclass(frozen=True)
class TickDependencies:
    """Dependencies required for processing timer tick results."""
    logger: logging.Logger
    ui: RuntimeUIPublisher
    notifier: Optional[DesktopNotifier] = None


class TickProcessor:
    """Handles tick side effects such as UI updates and transition popups."""
    def __init__(self, dependencies: TickDependencies):
        self._dependencies = dependencies

    def handle_tick(self, result: TickResult) -> None:
        deps = self._dependencies
        deps.ui.publish_snapshot(result.snapshot)

        transition = result.transition
        if transition is None:
            return

        deps.ui.publish_phase_change(transition)
        deps.logger.info("%s", status_message(result.snapshot))

        message = transition_message(transition)
        if deps.notifier is None or message is None:
            return
        try:
            deps.notifier.notify(message.title, message.body)
        except NotificationError as error:
            deps.logger.warning("Desktop notification failed: %s", error)
