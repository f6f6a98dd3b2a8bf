"""Admin notifications.

Best-effort operator alerts delivered through a single configured channel.

Usage:
    from infrastructure.notifications import (
        NotificationPriority,
        create_admin_notifier,
    )

    notifier = create_admin_notifier("sns", topic_arn, "[Acorn Pups]", aws.sns)
    result = notifier.notify(
        "User Creation Retry Success",
        "User record created after 2 attempts",
        priority=NotificationPriority.NORMAL,
    )
    if not result.is_success:
        logger.warning("recovery_notification_failed", error=result.message)
"""

from infrastructure.notifications.models import AdminAlert, NotificationPriority
from infrastructure.notifications.channels import (
    AdminNotifier,
    LoggingAdminNotifier,
    SnsAdminNotifier,
)
from infrastructure.notifications.factory import create_admin_notifier

__all__ = [
    # Models
    "AdminAlert",
    "NotificationPriority",
    # Channels
    "AdminNotifier",
    "LoggingAdminNotifier",
    "SnsAdminNotifier",
    # Factory
    "create_admin_notifier",
]
