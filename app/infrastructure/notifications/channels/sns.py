"""SNS channel implementation for admin alerts."""

from infrastructure.clients.aws.sns import SnsClient
from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import AdminNotifier
from infrastructure.notifications.models import AdminAlert
from infrastructure.operations import OperationResult

logger = get_module_logger()


class SnsAdminNotifier(AdminNotifier):
    """Admin alert channel publishing to an SNS topic.

    Subscribers (email, chat webhooks) are managed on the topic itself.
    """

    def __init__(self, sns: SnsClient, topic_arn: str, subject_prefix: str = ""):
        """Initialize the SNS channel.

        Args:
            sns: SnsClient used for publishing
            topic_arn: ARN of the admin alert topic
            subject_prefix: Prefix prepended to every subject
        """
        if not topic_arn:
            raise ValueError("topic_arn is required for the SNS admin notifier")
        super().__init__(subject_prefix=subject_prefix)
        self._sns = sns
        self.topic_arn = topic_arn

    @property
    def channel_name(self) -> str:
        """Channel identifier."""
        return "sns"

    def send(self, alert: AdminAlert) -> OperationResult:
        """Publish the alert; the subject is truncated to the SNS limit by the client."""
        result = self._sns.publish(
            self.topic_arn,
            alert.formatted_subject(self.subject_prefix),
            alert.message,
        )
        if result.is_success:
            logger.info(
                "admin_notification_sent",
                channel=self.channel_name,
                subject=alert.subject,
                priority=alert.priority.value,
                message_id=(result.data or {}).get("MessageId"),
                metadata=alert.metadata,
            )
        else:
            logger.error(
                "admin_notification_failed",
                channel=self.channel_name,
                subject=alert.subject,
                priority=alert.priority.value,
                error=result.message,
                error_code=result.error_code,
            )
        return result
