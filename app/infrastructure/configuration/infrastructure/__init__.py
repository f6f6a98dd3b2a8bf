"""Infrastructure-level settings sections."""

from infrastructure.configuration.infrastructure.retry import RetrySettings

__all__ = [
    "RetrySettings",
]
