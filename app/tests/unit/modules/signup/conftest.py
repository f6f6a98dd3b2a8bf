"""Fixtures for signup pipeline tests.

Components are wired with in-memory queues driven by a manual clock, a
scripted writer and the recording metrics emitter and notifier.
"""

import pytest

from infrastructure.resilience.retry import InMemoryRetryQueue, RetryConfig
from modules.signup.escalation import EscalationSink
from modules.signup.handler import PostConfirmationHandler
from modules.signup.scheduler import RetryScheduler
from modules.signup.worker import RetryWorker

from tests.factories import FIXED_NOW, ScriptedUserWriter


class ManualClock:
    """Monotonic clock for the in-memory queues."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def queue_clock():
    return ManualClock()


@pytest.fixture
def retry_config():
    return RetryConfig()


@pytest.fixture
def retry_queue(queue_clock):
    return InMemoryRetryQueue(name="primary-retry", clock=queue_clock)


@pytest.fixture
def escalation_queue(queue_clock):
    return InMemoryRetryQueue(name="manual-intervention", clock=queue_clock)


@pytest.fixture
def writer():
    return ScriptedUserWriter()


@pytest.fixture
def scheduler(retry_queue, retry_config, metrics_emitter):
    return RetryScheduler(retry_queue, retry_config, metrics_emitter)


@pytest.fixture
def escalation_sink(escalation_queue):
    return EscalationSink(escalation_queue)


@pytest.fixture
def handler(writer, scheduler, metrics_emitter, notifier):
    return PostConfirmationHandler(
        writer=writer,
        scheduler=scheduler,
        metrics_emitter=metrics_emitter,
        notifier=notifier,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def worker(
    writer,
    scheduler,
    escalation_sink,
    metrics_emitter,
    notifier,
    retry_config,
    retry_queue,
):
    return RetryWorker(
        writer=writer,
        scheduler=scheduler,
        escalation_sink=escalation_sink,
        metrics_emitter=metrics_emitter,
        notifier=notifier,
        config=retry_config,
        queue=retry_queue,
        clock=lambda: FIXED_NOW,
    )
