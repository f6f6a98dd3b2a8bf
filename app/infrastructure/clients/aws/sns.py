"""SNS client for AWS operations."""

import structlog

from infrastructure.clients.aws.executor import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()

# SNS limits email subjects to 100 characters
MAX_SUBJECT_LENGTH = 100


class SnsClient:
    """Client for SNS operations.

    Args:
        session_provider: SessionProvider instance for client management
        max_retries: In-call retries for throttled requests
    """

    def __init__(self, session_provider: SessionProvider, max_retries: int = 2) -> None:
        self._session_provider = session_provider
        self._max_retries = max_retries
        self._service_name = "sns"

    def publish(self, topic_arn: str, subject: str, message: str) -> OperationResult:
        """Publish a message to a topic.

        Args:
            topic_arn: ARN of the SNS topic
            subject: Subject line, truncated to the SNS limit
            message: Message body

        Returns:
            OperationResult with the publish response as data
        """
        if len(subject) > MAX_SUBJECT_LENGTH:
            subject = subject[: MAX_SUBJECT_LENGTH - 3] + "..."
        return execute_aws_api_call(
            self._session_provider.get_client(self._service_name),
            "publish",
            max_retries=self._max_retries,
            TopicArn=topic_arn,
            Subject=subject,
            Message=message,
        )
