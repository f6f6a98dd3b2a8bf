"""Generic retry models.

This module defines the core data structures for the queue-backed retry
system. Message bodies are opaque strings; feature modules decode them into
their own envelope types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class RetryResult(Enum):
    """Outcome of processing one retry message.

    Values:
        SUCCESS: Operation completed, acknowledge the message
        RETRY: Operation failed and a follow-up attempt was scheduled
        PERMANENT_FAILURE: Attempts exhausted, the message was escalated
        CRITICAL: Failure handling itself failed, leave the message for redelivery
    """

    SUCCESS = "success"
    RETRY = "retry"
    PERMANENT_FAILURE = "permanent_failure"
    CRITICAL = "critical"


@dataclass
class QueueMessage:
    """A message received from a retry queue.

    Fields:
        message_id: Queue-assigned message identifier
        body: Raw message body (JSON string)
        receipt_handle: Handle used to acknowledge (delete) the message;
            None for messages delivered through a Lambda event
        receive_count: Approximate number of times the message was delivered
    """

    message_id: str
    body: str
    receipt_handle: Optional[str] = None
    receive_count: int = 1

    @classmethod
    def from_sqs_message(cls, message: Dict[str, Any]) -> "QueueMessage":
        """Build from a boto3 ``receive_message`` entry."""
        attributes = message.get("Attributes") or {}
        return cls(
            message_id=message["MessageId"],
            body=message.get("Body", ""),
            receipt_handle=message.get("ReceiptHandle"),
            receive_count=int(attributes.get("ApproximateReceiveCount", 1)),
        )

    @classmethod
    def from_lambda_record(cls, record: Dict[str, Any]) -> "QueueMessage":
        """Build from one entry of a Lambda SQS event's ``Records`` list."""
        attributes = record.get("attributes") or {}
        return cls(
            message_id=record["messageId"],
            body=record.get("body", ""),
            receipt_handle=record.get("receiptHandle"),
            receive_count=int(attributes.get("ApproximateReceiveCount", 1)),
        )


@dataclass
class BatchReport:
    """Aggregated outcome of one processed batch.

    ``failed_message_ids`` lists messages that must not be acknowledged and
    are reported back to the queue for redelivery.
    """

    processed: int = 0
    successful: int = 0
    retried: int = 0
    permanent_failures: int = 0
    critical: int = 0
    failed_message_ids: List[str] = field(default_factory=list)

    def record(self, message_id: str, result: RetryResult) -> None:
        """Count one message outcome."""
        self.processed += 1
        if result == RetryResult.SUCCESS:
            self.successful += 1
        elif result == RetryResult.RETRY:
            self.retried += 1
        elif result == RetryResult.PERMANENT_FAILURE:
            self.permanent_failures += 1
        else:
            self.critical += 1
            self.failed_message_ids.append(message_id)

    @property
    def failed(self) -> int:
        """Messages that did not end in success."""
        return self.processed - self.successful

    def to_stats(self) -> Dict[str, int]:
        """Return the counters as a dict for structured logging."""
        return {
            "processed": self.processed,
            "successful": self.successful,
            "retried": self.retried,
            "permanent_failures": self.permanent_failures,
            "critical": self.critical,
        }

    def to_batch_response(self) -> Dict[str, List[Dict[str, str]]]:
        """Return the SQS partial batch response for a Lambda event source."""
        return {
            "batchItemFailures": [
                {"itemIdentifier": message_id}
                for message_id in self.failed_message_ids
            ]
        }
