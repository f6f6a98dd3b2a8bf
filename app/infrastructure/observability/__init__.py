"""Infrastructure observability module - pipeline metrics.

Exports:
    MetricsEmitter: Protocol for best-effort counter publication
    CloudWatchMetricsEmitter: CloudWatch custom metrics backend
    LoggingMetricsEmitter: Structured-log backend for local development
    create_metrics_emitter: Factory selecting a backend from configuration
"""

from infrastructure.observability.metrics import (
    CloudWatchMetricsEmitter,
    LoggingMetricsEmitter,
    MetricsEmitter,
    create_metrics_emitter,
)

__all__ = [
    "MetricsEmitter",
    "CloudWatchMetricsEmitter",
    "LoggingMetricsEmitter",
    "create_metrics_emitter",
]
