"""Retry system configuration.

This module defines configuration for the retry system behavior.
"""

from dataclasses import dataclass


@dataclass
class RetryConfig:
    """Configuration for retry system behavior.

    This dataclass controls backoff timing, max attempts, the per-attempt
    timeout and batch processing.

    Attributes:
        max_attempts: Maximum number of retry attempts before escalation
        base_delay_seconds: Delay before the first retry
        max_delay_seconds: Cap applied to every delay
        exponential_attempts: Attempts whose delay doubles; later attempts
            wait ``max_delay_seconds``
        attempt_timeout_seconds: Upper bound on one write attempt
        batch_size: Number of messages received in a single batch
        batch_concurrency: Messages processed in parallel within a batch

    Example:
        # Default configuration: 30s, 60s, 120s, then 300s
        config = RetryConfig()

        # Custom configuration
        config = RetryConfig(
            max_attempts=5,
            base_delay_seconds=10,
            batch_size=5
        )
    """

    max_attempts: int = 3
    base_delay_seconds: int = 30
    max_delay_seconds: int = 300  # 5 minutes
    exponential_attempts: int = 3
    attempt_timeout_seconds: float = 5.0
    batch_size: int = 10
    batch_concurrency: int = 5

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay_seconds < 0:
            raise ValueError("base_delay_seconds must not be negative")
        if self.max_delay_seconds < self.base_delay_seconds:
            raise ValueError("max_delay_seconds must be >= base_delay_seconds")
        if self.max_delay_seconds > 900:
            raise ValueError("max_delay_seconds must not exceed 900 (SQS limit)")
        if self.exponential_attempts < 0:
            raise ValueError("exponential_attempts must not be negative")
        if self.attempt_timeout_seconds <= 0:
            raise ValueError("attempt_timeout_seconds must be positive")
        if not 1 <= self.batch_size <= 10:
            raise ValueError("batch_size must be between 1 and 10")
        if self.batch_concurrency < 1:
            raise ValueError("batch_concurrency must be at least 1")

    def calculate_retry_delay(self, attempt: int) -> int:
        """Calculate the backoff delay in seconds for a 1-based attempt number.

        Uses ``base_delay * 2 ** (attempt - 1)`` for the first
        ``exponential_attempts`` attempts, capped at ``max_delay_seconds``;
        every later attempt waits ``max_delay_seconds``.

        Args:
            attempt: Attempt number the delay precedes (1 for the first retry)

        Returns:
            Delay in seconds
        """
        if attempt < 1:
            raise ValueError("attempt must be at least 1")
        if attempt > self.exponential_attempts:
            return self.max_delay_seconds
        delay = self.base_delay_seconds * (2 ** (attempt - 1))
        return min(delay, self.max_delay_seconds)
