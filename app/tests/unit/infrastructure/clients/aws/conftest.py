"""Fixtures for AWS client tests.

Clients are exercised against ``FakeClient`` objects installed in place of
boto3 client creation, so no AWS credentials or network are needed.
"""

from typing import Any, Dict, List, Optional

import pytest

from infrastructure.clients.aws import AWSClients
from infrastructure.clients.aws import session_provider as session_provider_module
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.configuration.integrations.aws import AwsSettings


class FakeClient:
    """Stand-in for a boto3 client.

    ``api_responses`` maps a method name to a response dict, an exception to
    raise, or a callable receiving the call's keyword arguments. Every call
    is recorded in ``calls``.
    """

    def __init__(self, api_responses: Optional[Dict[str, Any]] = None):
        self._api_responses = api_responses or {}
        self.calls: List[Dict[str, Any]] = []

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self._api_responses:
            raise AttributeError(name)
        response = self._api_responses[name]

        def _call(**kwargs):
            self.calls.append({"method": name, **kwargs})
            if isinstance(response, Exception):
                raise response
            if callable(response):
                return response(**kwargs)
            return response

        return _call


@pytest.fixture
def make_fake_client():
    def _factory(api_responses: Optional[Dict[str, Any]] = None) -> FakeClient:
        return FakeClient(api_responses=api_responses)

    return _factory


@pytest.fixture
def install_fake_client(monkeypatch):
    """Make SessionProvider hand out the given fake for every service.

    Returns the list of service names requested from boto3.
    """

    def _install(fake_client: FakeClient) -> List[str]:
        requested: List[str] = []

        def _get_boto3_client(service_name, **kwargs):
            requested.append(service_name)
            return fake_client

        monkeypatch.setattr(
            session_provider_module, "get_boto3_client", _get_boto3_client
        )
        return requested

    return _install


@pytest.fixture
def session_provider():
    return SessionProvider(region="us-east-1")


@pytest.fixture
def mock_aws_settings(monkeypatch):
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    return AwsSettings()


@pytest.fixture
def aws_factory(mock_aws_settings):
    return AWSClients(aws_settings=mock_aws_settings)
