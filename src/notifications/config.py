"""Configuration model for desktop notification popups."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationConfig:
    """Resolved notification settings derived from app settings."""
    enabled: bool = True
    app_name: str = "Pomodoro Timer"

    @classmethod
    def from_settings(cls, settings) -> "NotificationConfig":
        app_name = (getattr(settings, "app_name", "") or "").strip()
        return cls(
            enabled=bool(settings.enabled),
            app_name=app_name or cls.app_name,
        )
