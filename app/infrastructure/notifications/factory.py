"""Factory for creating the admin notifier based on configuration."""

from typing import Optional

import structlog

from infrastructure.clients.aws.sns import SnsClient
from infrastructure.notifications.channels import (
    AdminNotifier,
    LoggingAdminNotifier,
    SnsAdminNotifier,
)

logger = structlog.get_logger()


def create_admin_notifier(
    backend: str,
    topic_arn: str = "",
    subject_prefix: str = "",
    sns: Optional[SnsClient] = None,
) -> AdminNotifier:
    """Create the admin notifier for a backend.

    Args:
        backend: 'sns' or 'log'
        topic_arn: SNS topic ARN (required for 'sns')
        subject_prefix: Prefix prepended to every alert subject
        sns: SnsClient (required for 'sns')

    Raises:
        ValueError: If the backend is unknown or its configuration is missing
    """
    if backend == "log":
        logger.info("creating_logging_admin_notifier")
        return LoggingAdminNotifier(subject_prefix=subject_prefix)

    elif backend == "sns":
        if sns is None:
            raise ValueError("sns client is required for the sns notifier backend")
        logger.info("creating_sns_admin_notifier", topic_arn=topic_arn)
        return SnsAdminNotifier(sns, topic_arn, subject_prefix=subject_prefix)

    else:
        raise ValueError(f"Unknown notifier backend: {backend}. Supported: sns, log")
