"""Unit tests for the SQS, SNS and CloudWatch clients."""

import pytest

from infrastructure.clients.aws import AWSClients, CloudWatchClient, SnsClient, SqsClient
from infrastructure.clients.aws.cloudwatch import build_metric_datum

QUEUE_URL = "https://sqs.us-west-2.amazonaws.com/123456789012/retry"


@pytest.mark.unit
class TestSqsClient:
    def test_send_message_clamps_delay(
        self, session_provider, make_fake_client, install_fake_client
    ):
        fake = make_fake_client(api_responses={"send_message": {"MessageId": "m-1"}})
        install_fake_client(fake)
        client = SqsClient(session_provider)

        result = client.send_message(QUEUE_URL, "{}", delay_seconds=5000)

        assert result.is_success
        assert fake.calls[0]["DelaySeconds"] == 900
        assert "MessageGroupId" not in fake.calls[0]

    def test_send_message_with_group(
        self, session_provider, make_fake_client, install_fake_client
    ):
        fake = make_fake_client(api_responses={"send_message": {"MessageId": "m-1"}})
        install_fake_client(fake)

        SqsClient(session_provider).send_message(
            QUEUE_URL, "{}", delay_seconds=-3, message_group_id="users"
        )

        assert fake.calls[0]["DelaySeconds"] == 0
        assert fake.calls[0]["MessageGroupId"] == "users"

    def test_receive_messages_returns_list(
        self, session_provider, make_fake_client, install_fake_client
    ):
        messages = [{"MessageId": "m-1", "Body": "{}", "ReceiptHandle": "r-1"}]
        fake = make_fake_client(api_responses={"receive_message": {"Messages": messages}})
        install_fake_client(fake)

        result = SqsClient(session_provider).receive_messages(
            QUEUE_URL, max_number_of_messages=50, wait_time_seconds=0
        )

        assert result.data == messages
        assert fake.calls[0]["MaxNumberOfMessages"] == 10

    def test_receive_messages_empty_queue(
        self, session_provider, make_fake_client, install_fake_client
    ):
        install_fake_client(make_fake_client(api_responses={"receive_message": {}}))

        result = SqsClient(session_provider).receive_messages(QUEUE_URL)

        assert result.is_success
        assert result.data == []

    def test_delete_message(self, session_provider, make_fake_client, install_fake_client):
        fake = make_fake_client(api_responses={"delete_message": {}})
        install_fake_client(fake)

        result = SqsClient(session_provider).delete_message(QUEUE_URL, "r-1")

        assert result.is_success
        assert fake.calls[0]["ReceiptHandle"] == "r-1"


@pytest.mark.unit
class TestSnsClient:
    def test_publish(self, session_provider, make_fake_client, install_fake_client):
        fake = make_fake_client(api_responses={"publish": {"MessageId": "n-1"}})
        install_fake_client(fake)

        result = SnsClient(session_provider).publish("arn:topic", "Subject", "Body")

        assert result.is_success
        assert fake.calls[0] == {
            "method": "publish",
            "TopicArn": "arn:topic",
            "Subject": "Subject",
            "Message": "Body",
        }

    def test_long_subject_is_truncated(
        self, session_provider, make_fake_client, install_fake_client
    ):
        fake = make_fake_client(api_responses={"publish": {}})
        install_fake_client(fake)

        SnsClient(session_provider).publish("arn:topic", "x" * 150, "Body")

        subject = fake.calls[0]["Subject"]
        assert len(subject) == 100
        assert subject.endswith("...")


@pytest.mark.unit
class TestCloudWatchClient:
    def test_build_metric_datum_with_dimensions(self):
        datum = build_metric_datum("RetryFailure", 1, {"AttemptCount": 2})

        assert datum["MetricName"] == "RetryFailure"
        assert datum["Unit"] == "Count"
        assert datum["Dimensions"] == [{"Name": "AttemptCount", "Value": "2"}]

    def test_build_metric_datum_without_dimensions(self):
        assert "Dimensions" not in build_metric_datum("UserCreationSuccess", 1)

    def test_put_metric_data(self, session_provider, make_fake_client, install_fake_client):
        fake = make_fake_client(api_responses={"put_metric_data": {}})
        install_fake_client(fake)

        result = CloudWatchClient(session_provider).put_metric_data(
            "AcornPups/UserRegistration", [build_metric_datum("UserCreationSuccess", 1)]
        )

        assert result.is_success
        assert fake.calls[0]["Namespace"] == "AcornPups/UserRegistration"


@pytest.mark.unit
class TestAWSClientsFacade:
    def test_exposes_service_clients(self, aws_factory):
        assert isinstance(aws_factory.sqs, SqsClient)
        assert isinstance(aws_factory.sns, SnsClient)
        assert isinstance(aws_factory.cloudwatch, CloudWatchClient)
        assert aws_factory.dynamodb is not None

    def test_shares_session_provider(self, mock_aws_settings, session_provider):
        clients = AWSClients(mock_aws_settings, session_provider=session_provider)

        assert clients.sqs._session_provider is session_provider
        assert clients.dynamodb._session_provider is session_provider
