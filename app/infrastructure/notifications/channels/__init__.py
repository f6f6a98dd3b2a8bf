"""Admin notification channels."""

from infrastructure.notifications.channels.base import AdminNotifier
from infrastructure.notifications.channels.log import LoggingAdminNotifier
from infrastructure.notifications.channels.sns import SnsAdminNotifier

__all__ = [
    "AdminNotifier",
    "LoggingAdminNotifier",
    "SnsAdminNotifier",
]
