"""CloudWatch client for custom metric publication."""

from datetime import datetime, timezone
from typing import Dict, List, Optional

import structlog

from infrastructure.clients.aws.executor import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


def build_metric_datum(
    name: str,
    value: float,
    dimensions: Optional[Dict[str, str]] = None,
    unit: str = "Count",
) -> dict:
    """Build one entry of the put_metric_data ``MetricData`` list."""
    datum = {
        "MetricName": name,
        "Value": value,
        "Unit": unit,
        "Timestamp": datetime.now(timezone.utc),
    }
    if dimensions:
        datum["Dimensions"] = [
            {"Name": key, "Value": str(val)} for key, val in dimensions.items()
        ]
    return datum


class CloudWatchClient:
    """Client for CloudWatch metric operations.

    Args:
        session_provider: SessionProvider instance for client management
        max_retries: In-call retries for throttled requests
    """

    def __init__(self, session_provider: SessionProvider, max_retries: int = 1) -> None:
        self._session_provider = session_provider
        self._max_retries = max_retries
        self._service_name = "cloudwatch"

    def put_metric_data(self, namespace: str, metric_data: List[dict]) -> OperationResult:
        """Publish one or more metric data points to a namespace."""
        return execute_aws_api_call(
            self._session_provider.get_client(self._service_name),
            "put_metric_data",
            max_retries=self._max_retries,
            Namespace=namespace,
            MetricData=metric_data,
        )
