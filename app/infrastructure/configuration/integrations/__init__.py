"""Settings sections for external services."""

from infrastructure.configuration.integrations.aws import AwsSettings

__all__ = [
    "AwsSettings",
]
