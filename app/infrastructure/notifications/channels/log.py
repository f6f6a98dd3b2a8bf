"""Log channel implementation for admin alerts (local development)."""

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import AdminNotifier
from infrastructure.notifications.models import AdminAlert
from infrastructure.operations import OperationResult

logger = get_module_logger()


class LoggingAdminNotifier(AdminNotifier):
    """Admin alert channel that writes alerts to the structured log."""

    @property
    def channel_name(self) -> str:
        """Channel identifier."""
        return "log"

    def send(self, alert: AdminAlert) -> OperationResult:
        logger.warning(
            "admin_alert",
            subject=alert.formatted_subject(self.subject_prefix),
            body=alert.message,
            priority=alert.priority.value,
            metadata=alert.metadata,
        )
        return OperationResult.success(message="Alert logged")
