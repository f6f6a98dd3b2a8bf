"""Session provider for AWS client operations.

Owns region, endpoint and botocore configuration for all per-service clients
and caches one boto3 client per service for the lifetime of the process, so
warm Lambda invocations reuse connections.
"""

import threading
from typing import Any, Dict, Optional

import structlog
from botocore.config import Config  # type: ignore

from infrastructure.clients.aws.executor import get_boto3_client

logger = structlog.get_logger()


class SessionProvider:
    """Centralized provider for AWS client configuration and caching.

    Args:
        region: AWS region for all clients (e.g., 'us-west-2')
        endpoint_url: Custom endpoint URL (for testing/LocalStack)
        connect_timeout: Seconds to wait for a connection
        read_timeout: Seconds to wait for a response
    """

    def __init__(
        self,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        connect_timeout: float = 2.0,
        read_timeout: float = 5.0,
    ) -> None:
        self.region = region
        self.endpoint_url = endpoint_url
        # In-call retries are handled by execute_aws_api_call
        self.botocore_config = Config(
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={"max_attempts": 1, "mode": "standard"},
        )
        self._clients: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get_client(self, service_name: str) -> Any:
        """Return the cached boto3 client for a service, creating it on first use.

        Args:
            service_name: AWS service name (e.g., 'sqs')

        Returns:
            Configured boto3 client instance
        """
        with self._lock:
            client = self._clients.get(service_name)
            if client is None:
                logger.debug(
                    "creating_aws_client",
                    service_name=service_name,
                    region=self.region,
                    endpoint_url=self.endpoint_url,
                )
                client = get_boto3_client(
                    service_name,
                    region_name=self.region,
                    endpoint_url=self.endpoint_url,
                    config=self.botocore_config,
                )
                self._clients[service_name] = client
            return client
