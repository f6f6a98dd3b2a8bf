"""Fixtures for retry system tests."""

from unittest.mock import MagicMock

import pytest

from infrastructure.clients.aws.sqs import SqsClient
from infrastructure.resilience.retry import InMemoryRetryQueue


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_queue(clock):
    """In-memory retry queue driven by the fake clock."""
    return InMemoryRetryQueue(name="test", visibility_timeout_seconds=30, clock=clock)


@pytest.fixture
def mock_sqs_client():
    return MagicMock(spec=SqsClient)
