"""Factory for creating retry queues based on configuration."""

from typing import Optional

import structlog

from infrastructure.clients.aws.sqs import SqsClient
from infrastructure.resilience.retry.queue import (
    InMemoryRetryQueue,
    RetryQueue,
    SqsRetryQueue,
)

logger = structlog.get_logger()


def create_retry_queue(
    backend: str,
    queue_url: str = "",
    sqs_client: Optional[SqsClient] = None,
    name: str = "retry",
) -> RetryQueue:
    """Factory to create the appropriate retry queue for a backend.

    Args:
        backend: Queue backend ('memory' or 'sqs')
        queue_url: SQS queue URL (required for 'sqs')
        sqs_client: SqsClient used by the SQS backend (required for 'sqs')
        name: Queue name for in-memory logging

    Returns:
        Appropriate RetryQueue implementation

    Raises:
        ValueError: If the backend is unknown or its configuration is missing

    Examples:
        >>> queue = create_retry_queue("memory")
        >>> queue = create_retry_queue("sqs", queue_url=url, sqs_client=aws.sqs)
    """
    if backend == "memory":
        logger.info("creating_in_memory_retry_queue", name=name)
        return InMemoryRetryQueue(name=name)

    elif backend == "sqs":
        if sqs_client is None:
            raise ValueError("sqs_client is required for the sqs retry backend")
        if not queue_url:
            raise ValueError(f"queue_url is required for the sqs retry queue '{name}'")
        logger.info("creating_sqs_retry_queue", name=name, queue_url=queue_url)
        return SqsRetryQueue(sqs_client=sqs_client, queue_url=queue_url)

    else:
        raise ValueError(f"Unknown retry backend: {backend}. Supported: memory, sqs")
