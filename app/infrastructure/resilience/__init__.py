"""Resilience patterns and implementations.

This module contains resilience-related infrastructure components: the
queue-backed retry system with bounded exponential backoff.
"""

from infrastructure.resilience.retry import (
    BatchReport,
    InMemoryRetryQueue,
    QueueMessage,
    RetryConfig,
    RetryQueue,
    RetryResult,
    SqsRetryQueue,
    create_retry_queue,
)

__all__ = [
    # Retry System
    "BatchReport",
    "QueueMessage",
    "RetryResult",
    "RetryConfig",
    "RetryQueue",
    "InMemoryRetryQueue",
    "SqsRetryQueue",
    "create_retry_queue",
]
