"""Web UI server: static timer page plus websocket tick events and commands."""

from .config import WEBSOCKET_PATH, ServerConfigurationError, UIServerConfig
from .events import StickyEventStore, make_event, parse_command
from .service import CommandHandler, UIServer

__all__ = [
    "CommandHandler",
    "ServerConfigurationError",
    "StickyEventStore",
    "UIServerConfig",
    "UIServer",
    "WEBSOCKET_PATH",
    "make_event",
    "parse_command",
]
