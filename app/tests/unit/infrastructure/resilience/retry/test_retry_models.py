"""Unit tests for retry queue messages and batch reports."""

import pytest

from infrastructure.resilience.retry import BatchReport, QueueMessage, RetryResult


@pytest.mark.unit
class TestQueueMessage:
    def test_from_sqs_message(self):
        message = QueueMessage.from_sqs_message(
            {
                "MessageId": "m-1",
                "Body": '{"a": 1}',
                "ReceiptHandle": "r-1",
                "Attributes": {"ApproximateReceiveCount": "3"},
            }
        )

        assert message == QueueMessage("m-1", '{"a": 1}', "r-1", 3)

    def test_from_lambda_record(self):
        message = QueueMessage.from_lambda_record(
            {"messageId": "m-2", "body": "{}", "receiptHandle": "r-2"}
        )

        assert message.message_id == "m-2"
        assert message.receive_count == 1


@pytest.mark.unit
class TestBatchReport:
    def test_records_each_outcome(self):
        report = BatchReport()

        report.record("a", RetryResult.SUCCESS)
        report.record("b", RetryResult.RETRY)
        report.record("c", RetryResult.PERMANENT_FAILURE)
        report.record("d", RetryResult.CRITICAL)

        assert report.to_stats() == {
            "processed": 4,
            "successful": 1,
            "retried": 1,
            "permanent_failures": 1,
            "critical": 1,
        }
        assert report.failed == 3

    def test_only_critical_messages_are_batch_failures(self):
        report = BatchReport()
        report.record("a", RetryResult.RETRY)
        report.record("b", RetryResult.CRITICAL)

        assert report.to_batch_response() == {
            "batchItemFailures": [{"itemIdentifier": "b"}]
        }

    def test_empty_batch_response(self):
        assert BatchReport().to_batch_response() == {"batchItemFailures": []}
