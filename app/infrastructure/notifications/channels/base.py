"""Admin notification channel abstract base class.

All channel implementations (SNS, log) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from infrastructure.logging import get_module_logger
from infrastructure.notifications.models import AdminAlert, NotificationPriority
from infrastructure.operations import OperationResult

logger = get_module_logger()


class AdminNotifier(ABC):
    """Abstract base class for admin alert channels.

    Delivery is best effort: ``notify`` never raises. Implementations report
    delivery problems through the returned OperationResult and the call site
    decides whether to log them.

    Example Implementation:
        class PagerChannel(AdminNotifier):

            @property
            def channel_name(self) -> str:
                return "pager"

            def send(self, alert: AdminAlert) -> OperationResult:
                return pager_client.page(alert.subject, alert.message)
    """

    def __init__(self, subject_prefix: str = "") -> None:
        self.subject_prefix = subject_prefix

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Channel identifier (sns, log).

        Returns:
            Channel name string for logging
        """
        pass

    @abstractmethod
    def send(self, alert: AdminAlert) -> OperationResult:
        """Deliver an alert.

        Args:
            alert: Alert to deliver

        Returns:
            OperationResult describing the delivery outcome
        """
        pass

    def notify(
        self,
        subject: str,
        message: str,
        priority: NotificationPriority = NotificationPriority.NORMAL,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> OperationResult:
        """Build and deliver an alert, converting any exception into an error result.

        Args:
            subject: Subject line (the channel prefix is added on delivery)
            message: Plain text body
            priority: Alert priority
            metadata: Extra context for the delivery log event

        Returns:
            OperationResult describing the delivery outcome
        """
        try:
            alert = AdminAlert(
                subject=subject,
                message=message,
                priority=priority,
                metadata=metadata or {},
            )
            return self.send(alert)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "admin_notification_exception",
                channel=self.channel_name,
                subject=subject,
                error=str(e),
            )
            return OperationResult.permanent_error(
                message=f"Failed to send admin notification: {e}",
                error_code=type(e).__name__,
            )
