"""Countdown text formatting shared by all timers."""

from __future__ import annotations


def format_countdown(seconds: int) -> str:
    """Format seconds as `MM:SS`, or `H:MM:SS` from one hour upwards."""
    total = max(0, int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
