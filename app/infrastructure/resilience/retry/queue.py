"""Retry queue storage.

This module provides queue interfaces and implementations for retry messages.
The protocol-based design allows multiple backends (in-memory, SQS) behind
the same send/receive/delete contract, with per-message delivery delays.
"""

import itertools
import threading
import time
import uuid
from typing import Callable, Dict, List, Optional, Protocol

from infrastructure.clients.aws.sqs import MAX_DELAY_SECONDS, SqsClient
from infrastructure.logging import get_module_logger
from infrastructure.operations.result import OperationResult
from infrastructure.resilience.retry.models import QueueMessage

logger = get_module_logger()


class RetryQueue(Protocol):
    """Queue interface for retry messages.

    Delivery is at-least-once: a received message that is not deleted becomes
    visible again and may be processed twice.

    Methods:
        send: Enqueue a message body with a delivery delay
        receive: Return messages whose delay has elapsed
        delete: Acknowledge a received message
    """

    def send(self, body: str, delay_seconds: int = 0) -> OperationResult:
        """Enqueue a message.

        Args:
            body: Message body (JSON string)
            delay_seconds: Seconds before the message becomes visible

        Returns:
            OperationResult with the message id as data
        """
        ...

    def receive(self, max_messages: int = 10) -> List[QueueMessage]:
        """Return up to ``max_messages`` visible messages.

        Args:
            max_messages: Maximum number of messages to return

        Returns:
            List of received messages (empty when none are due)
        """
        ...

    def delete(self, receipt_handle: str) -> OperationResult:
        """Acknowledge a received message so it is not redelivered.

        Args:
            receipt_handle: Handle from the received QueueMessage
        """
        ...


class InMemoryRetryQueue:
    """In-memory implementation of RetryQueue honoring delivery delays.

    Thread-safe queue with support for:
    - Per-message delay before first delivery
    - Visibility timeout for received but unacknowledged messages
    - Receipt-handle based acknowledgement

    Suitable for local development and tests. State lives in the process, so
    it does not survive restarts and is not shared between instances.

    Attributes:
        name: Queue name used in log events
        visibility_timeout_seconds: Seconds a received message stays hidden
    """

    def __init__(
        self,
        name: str = "retry",
        visibility_timeout_seconds: int = 30,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory queue.

        Args:
            name: Queue name for logging
            visibility_timeout_seconds: Hide duration after receive
            clock: Monotonic time source, injectable for tests
        """
        self.name = name
        self.visibility_timeout_seconds = visibility_timeout_seconds
        self._clock = clock
        self._messages: Dict[str, Dict] = {}
        self._in_flight: Dict[str, str] = {}
        self._lock = threading.Lock()
        self._sequence = itertools.count(1)
        self._deleted = 0

    def send(self, body: str, delay_seconds: int = 0) -> OperationResult:
        """Enqueue a message that becomes visible after ``delay_seconds``."""
        delay = max(0, min(int(delay_seconds), MAX_DELAY_SECONDS))
        with self._lock:
            message_id = str(uuid.uuid4())
            self._messages[message_id] = {
                "body": body,
                "visible_at": self._clock() + delay,
                "sequence": next(self._sequence),
                "receive_count": 0,
                "receipt_handle": None,
            }
        logger.info(
            "retry_message_enqueued",
            queue=self.name,
            message_id=message_id,
            delay_seconds=delay,
        )
        return OperationResult.success(
            data=message_id, message=f"Message enqueued on {self.name}"
        )

    def receive(self, max_messages: int = 10) -> List[QueueMessage]:
        """Return due messages in enqueue order and hide them while in flight."""
        with self._lock:
            now = self._clock()
            due = sorted(
                (
                    (message_id, message)
                    for message_id, message in self._messages.items()
                    if message["visible_at"] <= now
                ),
                key=lambda item: item[1]["sequence"],
            )[:max_messages]

            received = []
            for message_id, message in due:
                if message["receipt_handle"]:
                    self._in_flight.pop(message["receipt_handle"], None)
                receipt_handle = str(uuid.uuid4())
                message["receipt_handle"] = receipt_handle
                message["receive_count"] += 1
                message["visible_at"] = now + self.visibility_timeout_seconds
                self._in_flight[receipt_handle] = message_id
                received.append(
                    QueueMessage(
                        message_id=message_id,
                        body=message["body"],
                        receipt_handle=receipt_handle,
                        receive_count=message["receive_count"],
                    )
                )

        logger.debug("retry_messages_received", queue=self.name, count=len(received))
        return received

    def delete(self, receipt_handle: str) -> OperationResult:
        """Acknowledge a received message."""
        with self._lock:
            message_id = self._in_flight.pop(receipt_handle, None)
            if message_id is None:
                logger.warning(
                    "retry_message_delete_unknown_receipt",
                    queue=self.name,
                )
                return OperationResult.permanent_error(
                    message="Unknown or expired receipt handle",
                    error_code="ReceiptHandleIsInvalid",
                )
            self._messages.pop(message_id, None)
            self._deleted += 1
        return OperationResult.success(message=f"Message deleted from {self.name}")

    def get_bodies(self) -> List[str]:
        """Return every stored body in enqueue order, including delayed ones."""
        with self._lock:
            return [
                message["body"]
                for message in sorted(
                    self._messages.values(), key=lambda m: m["sequence"]
                )
            ]

    def get_stats(self) -> dict:
        """Get queue statistics.

        Returns:
            Dictionary with counts of visible, delayed, in-flight and deleted messages
        """
        with self._lock:
            now = self._clock()
            in_flight = set(self._in_flight.values())
            visible = sum(
                1
                for message in self._messages.values()
                if message["visible_at"] <= now
            )
            return {
                "visible_messages": visible,
                "delayed_messages": sum(
                    1
                    for message_id, message in self._messages.items()
                    if message["visible_at"] > now and message_id not in in_flight
                ),
                "in_flight_messages": sum(
                    1
                    for message_id in in_flight
                    if self._messages[message_id]["visible_at"] > now
                ),
                "deleted_messages": self._deleted,
            }


class SqsRetryQueue:
    """SQS-backed implementation of RetryQueue.

    Attributes:
        queue_url: URL of the SQS queue
    """

    def __init__(
        self,
        sqs_client: SqsClient,
        queue_url: str,
        wait_time_seconds: int = 10,
    ) -> None:
        if not queue_url:
            raise ValueError("queue_url is required for the SQS retry queue")
        self._sqs = sqs_client
        self.queue_url = queue_url
        self._wait_time_seconds = wait_time_seconds

    def send(self, body: str, delay_seconds: int = 0) -> OperationResult:
        """Send a message with SQS ``DelaySeconds``."""
        result = self._sqs.send_message(
            self.queue_url, body, delay_seconds=delay_seconds
        )
        if not result.is_success:
            return result
        return OperationResult.success(
            data=(result.data or {}).get("MessageId"), message=result.message
        )

    def receive(self, max_messages: int = 10) -> List[QueueMessage]:
        """Long-poll the queue; receive errors are logged and yield no messages."""
        result = self._sqs.receive_messages(
            self.queue_url,
            max_number_of_messages=max_messages,
            wait_time_seconds=self._wait_time_seconds,
        )
        if not result.is_success:
            logger.error(
                "retry_queue_receive_failed",
                queue_url=self.queue_url,
                error=result.message,
                error_code=result.error_code,
            )
            return []
        return [QueueMessage.from_sqs_message(m) for m in result.data or []]

    def delete(self, receipt_handle: Optional[str]) -> OperationResult:
        """Delete a received message by receipt handle."""
        if not receipt_handle:
            return OperationResult.permanent_error(
                message="Message has no receipt handle",
                error_code="MissingReceiptHandle",
            )
        return self._sqs.delete_message(self.queue_url, receipt_handle)
