"""Process-wide providers for settings and AWS clients.

Both are cached for the life of the process, so warm Lambda invocations reuse
validated settings and open boto3 connections. Logging setup imports this
module lazily; it must only depend on configuration and the AWS client layer.
Tests that change the environment call ``cache_clear()`` on each provider.
"""

from functools import lru_cache

from infrastructure.clients.aws import AWSClients
from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """Settings loaded from the environment on first use."""
    return Settings()


@lru_cache
def get_aws_clients() -> AWSClients:
    """AWS clients facade configured from ``settings.aws``.

    Usage:
        aws = get_aws_clients()
        result = aws.sqs.send_message(queue_url, body, delay_seconds=30)
    """
    return AWSClients(aws_settings=get_settings().aws)
