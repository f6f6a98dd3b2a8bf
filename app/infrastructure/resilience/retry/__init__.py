"""Queue-backed retry system for failed operations.

Architecture:
- RetryConfig: Backoff policy, attempt bound, per-attempt timeout and batching
- RetryQueue: Delayed-delivery queue interface with in-memory and SQS backends
- QueueMessage: A received message (opaque body plus acknowledgement handle)
- RetryResult: Outcome of processing one message
- BatchReport: Aggregated batch outcome, convertible to an SQS partial batch response

Usage:
    from infrastructure.resilience.retry import RetryConfig, create_retry_queue

    config = RetryConfig(max_attempts=3)
    queue = create_retry_queue("memory")

    queue.send(body, delay_seconds=config.calculate_retry_delay(1))
    for message in queue.receive(max_messages=config.batch_size):
        ...
        queue.delete(message.receipt_handle)
"""

from infrastructure.resilience.retry.config import RetryConfig
from infrastructure.resilience.retry.models import BatchReport, QueueMessage, RetryResult
from infrastructure.resilience.retry.queue import (
    InMemoryRetryQueue,
    RetryQueue,
    SqsRetryQueue,
)
from infrastructure.resilience.retry.factory import create_retry_queue

__all__ = [
    # Models
    "QueueMessage",
    "RetryResult",
    "BatchReport",
    # Configuration
    "RetryConfig",
    # Queue
    "RetryQueue",
    "InMemoryRetryQueue",
    "SqsRetryQueue",
    # Factory
    "create_retry_queue",
]
