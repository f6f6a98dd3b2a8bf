"""Best-effort counter metrics.

Metric publication must never change the outcome of the operation being
measured: every emitter returns an OperationResult and never raises. Call
sites log failed results and move on.

Usage:
    from infrastructure.observability import create_metrics_emitter

    metrics = create_metrics_emitter("cloudwatch", namespace, aws.cloudwatch)
    result = metrics.increment("UserCreationSuccess")
    if not result.is_success:
        logger.warning("metric_emit_failed", error=result.message)
"""

from typing import Dict, Optional, Protocol

from infrastructure.clients.aws.cloudwatch import CloudWatchClient, build_metric_datum
from infrastructure.logging import get_module_logger
from infrastructure.operations.result import OperationResult

logger = get_module_logger()


class MetricsEmitter(Protocol):
    """Protocol for counter metric backends."""

    def increment(
        self,
        name: str,
        count: int = 1,
        dimensions: Optional[Dict[str, str]] = None,
    ) -> OperationResult:
        """Add ``count`` to the named counter.

        Args:
            name: Metric name (e.g., 'UserCreationSuccess')
            count: Value to add
            dimensions: Optional dimension name/value pairs

        Returns:
            OperationResult; failures are reported, never raised
        """
        ...


class CloudWatchMetricsEmitter:
    """Publishes counters to CloudWatch with unit ``Count``.

    Attributes:
        namespace: CloudWatch namespace shared by all pipeline metrics
    """

    def __init__(self, cloudwatch: CloudWatchClient, namespace: str) -> None:
        self._cloudwatch = cloudwatch
        self.namespace = namespace

    def increment(
        self,
        name: str,
        count: int = 1,
        dimensions: Optional[Dict[str, str]] = None,
    ) -> OperationResult:
        """Publish one data point; any failure is returned as an error result."""
        try:
            result = self._cloudwatch.put_metric_data(
                self.namespace,
                [build_metric_datum(name, count, dimensions=dimensions)],
            )
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("metric_emit_exception", metric=name, error=str(e))
            return OperationResult.permanent_error(
                message=f"Failed to emit metric {name}: {e}",
                error_code=type(e).__name__,
            )

        if not result.is_success:
            logger.warning(
                "metric_emit_failed",
                metric=name,
                error=result.message,
                error_code=result.error_code,
            )
        return result


class LoggingMetricsEmitter:
    """Writes counters as structured log events.

    Used for local development and deployments that derive metrics from logs.
    """

    def __init__(self, namespace: str = "") -> None:
        self.namespace = namespace

    def increment(
        self,
        name: str,
        count: int = 1,
        dimensions: Optional[Dict[str, str]] = None,
    ) -> OperationResult:
        logger.info(
            "metric_emitted",
            namespace=self.namespace,
            metric=name,
            value=count,
            dimensions=dimensions or {},
        )
        return OperationResult.success(message=f"Metric {name} logged")


def create_metrics_emitter(
    backend: str,
    namespace: str,
    cloudwatch: Optional[CloudWatchClient] = None,
) -> MetricsEmitter:
    """Factory to create the metrics emitter for a backend.

    Args:
        backend: 'cloudwatch' or 'log'
        namespace: Metrics namespace
        cloudwatch: CloudWatchClient (required for 'cloudwatch')

    Raises:
        ValueError: If the backend is unknown or its client is missing
    """
    if backend == "log":
        return LoggingMetricsEmitter(namespace)

    elif backend == "cloudwatch":
        if cloudwatch is None:
            raise ValueError("cloudwatch client is required for the cloudwatch backend")
        return CloudWatchMetricsEmitter(cloudwatch, namespace)

    else:
        raise ValueError(
            f"Unknown metrics backend: {backend}. Supported: cloudwatch, log"
        )
