"""Shared fixtures for the signup pipeline test suite."""

from typing import Dict, List, Optional

import pytest
import structlog

from infrastructure.notifications import AdminAlert, AdminNotifier
from infrastructure.operations import OperationResult
from infrastructure.services.providers import get_aws_clients, get_settings
from modules.signup.factory import get_signup_pipeline


class RecordingMetricsEmitter:
    """MetricsEmitter double that records every increment."""

    def __init__(self):
        self.calls: List[Dict] = []
        self.result = OperationResult.success()

    def increment(
        self,
        name: str,
        count: int = 1,
        dimensions: Optional[Dict[str, str]] = None,
    ) -> OperationResult:
        self.calls.append({"name": name, "count": count, "dimensions": dimensions})
        return self.result

    def count(self, name: str) -> int:
        """Sum of values recorded for a metric name."""
        return sum(call["count"] for call in self.calls if call["name"] == name)

    def dimensions_for(self, name: str) -> List[Optional[Dict[str, str]]]:
        return [call["dimensions"] for call in self.calls if call["name"] == name]


class RecordingNotifier(AdminNotifier):
    """AdminNotifier double that records delivered alerts."""

    def __init__(self, subject_prefix: str = "[Acorn Pups]"):
        super().__init__(subject_prefix=subject_prefix)
        self.alerts: List[AdminAlert] = []
        self.result = OperationResult.success()

    @property
    def channel_name(self) -> str:
        return "recording"

    def send(self, alert: AdminAlert) -> OperationResult:
        self.alerts.append(alert)
        return self.result

    def subjects(self) -> List[str]:
        return [alert.subject for alert in self.alerts]


@pytest.fixture
def metrics_emitter():
    """Recording metrics emitter."""
    return RecordingMetricsEmitter()


@pytest.fixture
def notifier():
    """Recording admin notifier."""
    return RecordingNotifier()


@pytest.fixture(autouse=True)
def reset_providers():
    """Clear cached providers and logging context between tests."""
    get_settings.cache_clear()
    get_aws_clients.cache_clear()
    get_signup_pipeline.cache_clear()
    structlog.contextvars.clear_contextvars()
    yield
    get_settings.cache_clear()
    get_aws_clients.cache_clear()
    get_signup_pipeline.cache_clear()
    structlog.contextvars.clear_contextvars()
