"""SQS client for AWS operations.

Send, receive and delete operations returning OperationResult.
"""

from typing import Optional

import structlog

from infrastructure.clients.aws.executor import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()

# SQS rejects DelaySeconds above 15 minutes
MAX_DELAY_SECONDS = 900


class SqsClient:
    """Client for SQS operations.

    Args:
        session_provider: SessionProvider instance for client management
        max_retries: In-call retries for throttled requests
    """

    def __init__(self, session_provider: SessionProvider, max_retries: int = 2) -> None:
        self._session_provider = session_provider
        self._max_retries = max_retries
        self._service_name = "sqs"

    def _client(self):
        return self._session_provider.get_client(self._service_name)

    def send_message(
        self,
        queue_url: str,
        message_body: str,
        delay_seconds: int = 0,
        message_group_id: Optional[str] = None,
    ) -> OperationResult:
        """Send a message to a queue.

        Args:
            queue_url: URL of the SQS queue
            message_body: Message body (JSON string)
            delay_seconds: Delivery delay, clamped to [0, 900]
            message_group_id: Required for FIFO queues only

        Returns:
            OperationResult with the send_message response as data
        """
        params = {
            "QueueUrl": queue_url,
            "MessageBody": message_body,
            "DelaySeconds": max(0, min(int(delay_seconds), MAX_DELAY_SECONDS)),
        }
        if message_group_id:
            params["MessageGroupId"] = message_group_id
        return execute_aws_api_call(
            self._client(), "send_message", max_retries=self._max_retries, **params
        )

    def receive_messages(
        self,
        queue_url: str,
        max_number_of_messages: int = 10,
        wait_time_seconds: int = 10,
    ) -> OperationResult:
        """Receive up to ``max_number_of_messages`` messages (long polling).

        Returns:
            OperationResult whose data is the list of raw SQS messages
        """
        result = execute_aws_api_call(
            self._client(),
            "receive_message",
            max_retries=self._max_retries,
            QueueUrl=queue_url,
            MaxNumberOfMessages=max(1, min(max_number_of_messages, 10)),
            WaitTimeSeconds=wait_time_seconds,
        )
        if not result.is_success:
            return result
        return OperationResult.success(
            data=(result.data or {}).get("Messages", []), message=result.message
        )

    def delete_message(self, queue_url: str, receipt_handle: str) -> OperationResult:
        """Delete (acknowledge) a received message."""
        return execute_aws_api_call(
            self._client(),
            "delete_message",
            max_retries=self._max_retries,
            QueueUrl=queue_url,
            ReceiptHandle=receipt_handle,
        )
