"""Retry pipeline infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class RetrySettings(InfrastructureSettings):
    """Retry pipeline configuration for failed user record writes.

    Environment Variables:
        RETRY_BACKEND: Queue backend - 'sqs' (default) or 'memory'
        PRIMARY_RETRY_QUEUE_URL: SQS queue URL carrying retry envelopes
        MANUAL_INTERVENTION_QUEUE_URL: SQS queue URL for escalated envelopes
        MAX_RETRY_ATTEMPTS: Retry worker attempts before escalation (default: 3)
        RETRY_BASE_DELAY_SECONDS: Delay of the first retry (default: 30s)
        RETRY_MAX_DELAY_SECONDS: Backoff cap (default: 300s, the SQS
            DelaySeconds limit is 900s)
        RETRY_EXPONENTIAL_ATTEMPTS: Attempts that double the delay before the
            cap applies (default: 3)
        RETRY_ATTEMPT_TIMEOUT_SECONDS: Per-attempt bound on the store write
            (default: 5s)
        RETRY_BATCH_SIZE: Messages received per polling batch (default: 10)
        RETRY_BATCH_CONCURRENCY: Envelopes processed in parallel (default: 5)

    Backoff:
        attempt 1: 30s, attempt 2: 60s, attempt 3: 120s, attempt 4+: 300s

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        max_attempts = settings.retry.max_attempts
        ```
    """

    backend: str = Field(
        default="sqs",
        alias="RETRY_BACKEND",
        description="Retry queue backend: 'sqs' or 'memory'",
    )
    primary_queue_url: str = Field(
        default="",
        alias="PRIMARY_RETRY_QUEUE_URL",
        description="SQS queue URL for retry envelopes",
    )
    manual_intervention_queue_url: str = Field(
        default="",
        alias="MANUAL_INTERVENTION_QUEUE_URL",
        description="SQS queue URL for escalated envelopes",
    )
    max_attempts: int = Field(
        default=3,
        alias="MAX_RETRY_ATTEMPTS",
        description="Maximum retry worker attempts before escalation",
    )
    base_delay_seconds: int = Field(
        default=30,
        alias="RETRY_BASE_DELAY_SECONDS",
        description="Delay before the first retry (seconds)",
    )
    max_delay_seconds: int = Field(
        default=300,
        alias="RETRY_MAX_DELAY_SECONDS",
        description="Maximum delay between retries (seconds)",
    )
    exponential_attempts: int = Field(
        default=3,
        alias="RETRY_EXPONENTIAL_ATTEMPTS",
        description="Number of attempts whose delay doubles before the cap applies",
    )
    attempt_timeout_seconds: float = Field(
        default=5.0,
        alias="RETRY_ATTEMPT_TIMEOUT_SECONDS",
        description="Upper bound on a single store write attempt (seconds)",
    )
    batch_size: int = Field(
        default=10,
        alias="RETRY_BATCH_SIZE",
        description="Number of messages received per polling batch",
    )
    batch_concurrency: int = Field(
        default=5,
        alias="RETRY_BATCH_CONCURRENCY",
        description="Envelopes processed concurrently within one batch",
    )
