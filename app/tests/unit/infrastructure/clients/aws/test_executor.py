"""Unit tests for execute_aws_api_call error classification and retries."""

import pytest
from botocore.exceptions import EndpointConnectionError

from infrastructure.clients.aws import executor
from infrastructure.clients.aws.executor import execute_aws_api_call
from infrastructure.operations import OperationStatus

from tests.factories.aws import make_client_error


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    """Skip in-call backoff sleeps."""
    sleeps = []
    monkeypatch.setattr(executor.time, "sleep", sleeps.append)
    return sleeps


@pytest.mark.unit
class TestExecuteAwsApiCall:
    def test_success_wraps_response(self, make_fake_client):
        client = make_fake_client(api_responses={"put_item": {"ok": True}})

        result = execute_aws_api_call(client, "put_item", TableName="users")

        assert result.is_success
        assert result.data == {"ok": True}
        assert client.calls == [{"method": "put_item", "TableName": "users"}]

    def test_conditional_check_failure_maps_to_conflict(self, make_fake_client):
        client = make_fake_client(
            api_responses={
                "put_item": make_client_error("ConditionalCheckFailedException")
            }
        )

        result = execute_aws_api_call(client, "put_item")

        assert result.status == OperationStatus.CONFLICT
        assert result.is_conflict
        assert result.error_code == "ConditionalCheckFailedException"
        assert len(client.calls) == 1

    def test_throttling_is_retried_then_reported_transient(
        self, make_fake_client, no_sleep
    ):
        client = make_fake_client(
            api_responses={
                "put_item": make_client_error("ProvisionedThroughputExceededException")
            }
        )

        result = execute_aws_api_call(client, "put_item", max_retries=2)

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "ProvisionedThroughputExceededException"
        assert len(client.calls) == 3
        assert no_sleep == [0.5, 1.0]

    def test_throttling_recovers_within_call(self, make_fake_client):
        responses = iter(
            [make_client_error("ThrottlingException"), {"MessageId": "m-1"}]
        )

        def _send(**_kwargs):
            value = next(responses)
            if isinstance(value, Exception):
                raise value
            return value

        client = make_fake_client(api_responses={"send_message": _send})

        result = execute_aws_api_call(client, "send_message", max_retries=1)

        assert result.is_success
        assert result.data == {"MessageId": "m-1"}

    def test_server_error_is_transient(self, make_fake_client):
        client = make_fake_client(
            api_responses={
                "put_item": make_client_error("InternalServerError", status=500)
            }
        )

        result = execute_aws_api_call(client, "put_item", max_retries=0)

        assert result.status == OperationStatus.TRANSIENT_ERROR

    def test_access_denied_is_unauthorized(self, make_fake_client):
        client = make_fake_client(
            api_responses={"publish": make_client_error("AccessDeniedException")}
        )

        result = execute_aws_api_call(client, "publish")

        assert result.status == OperationStatus.UNAUTHORIZED

    def test_validation_error_is_permanent(self, make_fake_client):
        client = make_fake_client(
            api_responses={"put_item": make_client_error("ValidationException")}
        )

        result = execute_aws_api_call(client, "put_item", max_retries=2)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert len(client.calls) == 1

    def test_connection_error_is_transient(self, make_fake_client):
        client = make_fake_client(
            api_responses={
                "put_item": EndpointConnectionError(endpoint_url="http://localhost")
            }
        )

        result = execute_aws_api_call(client, "put_item")

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "EndpointConnectionError"

    def test_unexpected_exception_is_permanent(self, make_fake_client):
        client = make_fake_client(api_responses={"put_item": RuntimeError("boom")})

        result = execute_aws_api_call(client, "put_item")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.message == "boom"
