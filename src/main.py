import logging
import signal
import sys
from typing import Optional

from app_config import AppConfigurationError, load_app_config, resolve_config_path
from notifications import DesktopNotifier, NotificationConfig
from runtime import RuntimeBootstrap, RuntimeEngine, TimerDefaults
from server import ServerConfigurationError, UIServer, UIServerConfig


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("pomodoro_app")


def setup_signal_handlers(engine: RuntimeEngine) -> None:
    """Set up graceful shutdown on SIGTERM and SIGINT."""

    def signal_handler(signum: int, frame) -> None:
        del frame
        logging.getLogger("pomodoro_app").info(
            "Signal %s received, stopping.",
            signal.Signals(signum).name,
        )
        engine.stop()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)


def main() -> int:
    """Run the timer runtime with its UI server until interrupted."""
    try:
        config_path = resolve_config_path()
        app_config = load_app_config()
    except AppConfigurationError as error:
        setup_logging().error("App configuration error: %s", error)
        return 1

    logger = setup_logging(level=getattr(logging, app_config.logging.level))
    if app_config.source_file:
        logger.info("Loaded runtime config: %s", config_path)
    else:
        logger.info("No config file at %s; using built-in defaults", config_path)

    try:
        defaults = TimerDefaults.from_settings(app_config.timer, app_config.pomodoro)
    except ValueError as error:
        logger.error("Timer configuration error: %s", error)
        return 1

    notifier: Optional[DesktopNotifier] = None
    notification_config = NotificationConfig.from_settings(app_config.notifications)
    if notification_config.enabled:
        notifier = DesktopNotifier(
            config=notification_config,
            logger=logging.getLogger("notifications"),
        )

    ui_server: Optional[UIServer] = None
    try:
        ui_server_config = UIServerConfig.from_settings(app_config.ui_server)
    except ServerConfigurationError as error:
        logger.error("UI server configuration error: %s", error)
        return 1

    if ui_server_config.enabled:
        ui_server = UIServer(
            config=ui_server_config,
            logger=logging.getLogger("ui_server"),
        )
    else:
        logger.info("UI server disabled via ui_server.enabled=false")

    engine = RuntimeEngine(
        RuntimeBootstrap(
            logger=logging.getLogger("runtime"),
            defaults=defaults,
            ui_server=ui_server,
            notifier=notifier,
        )
    )

    if ui_server is not None:
        try:
            ui_server.start()
        except RuntimeError as error:
            logger.error("UI server startup error: %s", error)
            return 1

    setup_signal_handlers(engine)
    return engine.run()


if __name__ == "__main__":
    sys.exit(main())
