"""Unit tests for the Lambda entrypoints and the polling loop."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

import main
from infrastructure.resilience.retry import BatchReport

from tests.factories import make_trigger_event


@pytest.fixture
def pipeline(monkeypatch):
    """Stub pipeline returned by get_signup_pipeline."""
    stub = SimpleNamespace(handler=MagicMock(), worker=MagicMock())
    monkeypatch.setattr(main, "get_signup_pipeline", lambda: stub)
    return stub


@pytest.fixture
def broken_pipeline(monkeypatch):
    def _raise():
        raise ValueError("table_name is required for the user writer")

    monkeypatch.setattr(main, "get_signup_pipeline", _raise)


@pytest.mark.unit
class TestPostConfirmationHandler:
    def test_delegates_to_pipeline_handler(self, pipeline):
        event = make_trigger_event()
        context = SimpleNamespace(aws_request_id="req-1")
        pipeline.handler.handle.return_value = event

        assert main.post_confirmation_handler(event, context) is event
        pipeline.handler.handle.assert_called_once_with(event, context)

    def test_unavailable_pipeline_still_returns_event(self, broken_pipeline):
        event = make_trigger_event()

        assert main.post_confirmation_handler(event, None) is event


@pytest.mark.unit
class TestRetryProcessorHandler:
    def test_returns_partial_batch_response(self, pipeline):
        response = {"batchItemFailures": [{"itemIdentifier": "m-1"}]}
        pipeline.worker.handle_sqs_event.return_value = response
        event = {"Records": []}

        assert main.retry_processor_handler(event, None) == response
        pipeline.worker.handle_sqs_event.assert_called_once_with(event)

    def test_unavailable_pipeline_raises(self, broken_pipeline):
        with pytest.raises(ValueError):
            main.retry_processor_handler({"Records": []}, None)


@pytest.mark.unit
class TestMainLoop:
    def test_polls_until_interrupted(self, pipeline, monkeypatch):
        sleeps = []
        monkeypatch.setattr(main.time, "sleep", sleeps.append)
        busy = BatchReport(processed=1, successful=1)
        pipeline.worker.run_once.side_effect = [busy, BatchReport(), KeyboardInterrupt]

        main.main(poll_interval_seconds=0.5)

        assert pipeline.worker.run_once.call_count == 3
        assert sleeps == [0.5]
