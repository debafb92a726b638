"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    LoggingSettings,
    NotificationSettings,
    PomodoroSettings,
    TimerSettings,
    UIServerSettings,
)
from pomodoro.constants import MAX_DURATION_SECONDS

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    timer = _parse_timer_settings(_section(raw, "timer"))
    pomodoro = _parse_pomodoro_settings(_section(raw, "pomodoro"))
    notifications = _parse_notification_settings(_section(raw, "notifications"))
    ui_server = _parse_ui_server_settings(_section(raw, "ui_server"), base_dir=base_dir)
    logging_settings = _parse_logging_settings(_section(raw, "logging"))

    return AppConfig(
        timer=timer,
        pomodoro=pomodoro,
        notifications=notifications,
        ui_server=ui_server,
        logging=logging_settings,
        source_file=source_file,
    )


def _parse_timer_settings(section: Mapping[str, Any]) -> TimerSettings:
    defaults = TimerSettings()
    return TimerSettings(
        default_duration_seconds=_as_seconds(
            section.get("default_duration_seconds", defaults.default_duration_seconds),
            "timer.default_duration_seconds",
        ),
    )


def _parse_pomodoro_settings(section: Mapping[str, Any]) -> PomodoroSettings:
    defaults = PomodoroSettings()
    sessions = _as_int(
        section.get("sessions_before_long_break", defaults.sessions_before_long_break),
        "pomodoro.sessions_before_long_break",
    )
    if sessions < 1:
        raise AppConfigurationError(
            "pomodoro.sessions_before_long_break must be at least 1."
        )

    return PomodoroSettings(
        work_seconds=_as_seconds(
            section.get("work_seconds", defaults.work_seconds),
            "pomodoro.work_seconds",
        ),
        short_break_seconds=_as_seconds(
            section.get("short_break_seconds", defaults.short_break_seconds),
            "pomodoro.short_break_seconds",
        ),
        long_break_seconds=_as_seconds(
            section.get("long_break_seconds", defaults.long_break_seconds),
            "pomodoro.long_break_seconds",
        ),
        sessions_before_long_break=sessions,
    )


def _parse_notification_settings(section: Mapping[str, Any]) -> NotificationSettings:
    defaults = NotificationSettings()
    return NotificationSettings(
        enabled=_as_bool(section.get("enabled", defaults.enabled), "notifications.enabled"),
        app_name=_as_str(
            section.get("app_name", defaults.app_name),
            "notifications.app_name",
        )
        or defaults.app_name,
    )


def _parse_ui_server_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> UIServerSettings:
    index_file = _as_str(section.get("index_file", ""), "ui_server.index_file")
    return UIServerSettings(
        enabled=_as_bool(section.get("enabled", True), "ui_server.enabled"),
        host=_as_str(section.get("host", "127.0.0.1"), "ui_server.host"),
        port=_as_int(section.get("port", 8765), "ui_server.port"),
        index_file=_resolve_path(base_dir, index_file) if index_file else "",
    )


def _parse_logging_settings(section: Mapping[str, Any]) -> LoggingSettings:
    level = _as_str(section.get("level", "INFO"), "logging.level").upper()
    if level not in _ALLOWED_LOG_LEVELS:
        allowed = ", ".join(sorted(_ALLOWED_LOG_LEVELS))
        raise AppConfigurationError(f"logging.level must be one of: {allowed}")
    return LoggingSettings(level=level)


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_seconds(value: Any, field: str) -> int:
    seconds = _as_int(value, field)
    if seconds < 0:
        raise AppConfigurationError(f"{field} must not be negative.")
    if seconds > MAX_DURATION_SECONDS:
        raise AppConfigurationError(f"{field} must not exceed {MAX_DURATION_SECONDS}.")
    return seconds


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
