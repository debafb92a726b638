"""Notification text and presentation hints for timer transitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pomodoro import TimerSnapshot, TransitionEvent
from pomodoro.constants import (
    BREAK_PHASES,
    PHASE_LONG_BREAK,
    PHASE_SHORT_BREAK,
    PHASE_WORK,
)
from contracts.ui_protocol import PRESENTATION_NOTIFICATION, PRESENTATION_OVERLAY


@dataclass(frozen=True)
class TransitionMessage:
    """Title and body shown to the user when a transition happens."""
    title: str
    body: str


def transition_message(transition: TransitionEvent) -> Optional[TransitionMessage]:
    """Return notification text for a transition, or None for unknown pairs."""
    source, target = transition.from_name, transition.to_name
    if transition.is_timer_finished:
        return TransitionMessage("Timer Finished!", "Your timer has completed.")
    if source == PHASE_WORK and target == PHASE_SHORT_BREAK:
        return TransitionMessage("Break Time!", "Take a short break.")
    if source == PHASE_WORK and target == PHASE_LONG_BREAK:
        return TransitionMessage("Long Break!", "Great work! Take a longer break.")
    if source in BREAK_PHASES and target == PHASE_WORK:
        return TransitionMessage("Back to Work!", "Time to focus.")
    return None


def transition_presentation(transition: TransitionEvent) -> str:
    """Work-to-break transitions get a full-screen overlay, the rest a popup."""
    if transition.from_name == PHASE_WORK and transition.to_name in BREAK_PHASES:
        return PRESENTATION_OVERLAY
    return PRESENTATION_NOTIFICATION


def status_message(snapshot: TimerSnapshot) -> str:
    """Build a one-line status text for logs and the UI header."""
    if snapshot.is_finished:
        return "Timer finished"
    label = snapshot.phase or "Timer"
    if snapshot.is_running:
        return f"{label} running ({snapshot.display} remaining)"
    if snapshot.remaining_secs < snapshot.total_secs:
        return f"{label} paused ({snapshot.display} remaining)"
    return f"{label} ready ({snapshot.display})"
