"""Public exports for desktop notification components."""

from .config import NotificationConfig
from .service import DesktopNotifier, NotificationError

__all__ = [
    "DesktopNotifier",
    "NotificationConfig",
    "NotificationError",
]
