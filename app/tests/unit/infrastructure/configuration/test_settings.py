"""Unit tests for the settings aggregator and its sections."""

import pytest

from infrastructure.configuration import (
    AwsSettings,
    RetrySettings,
    Settings,
    SignupSettings,
)
from infrastructure.services import get_settings

PIPELINE_ENV_VARS = [
    "AWS_REGION",
    "AWS_ENDPOINT_URL",
    "USERS_TABLE_NAME",
    "MAX_RETRY_ATTEMPTS",
    "RETRY_BACKEND",
    "PREFIX",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in PIPELINE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    def test_sections_are_instantiated(self):
        settings = Settings()

        assert isinstance(settings.aws, AwsSettings)
        assert isinstance(settings.signup, SignupSettings)
        assert isinstance(settings.retry, RetrySettings)

    def test_retry_defaults(self):
        retry = RetrySettings()

        assert retry.backend == "sqs"
        assert retry.max_attempts == 3
        assert retry.base_delay_seconds == 30
        assert retry.max_delay_seconds == 300
        assert retry.exponential_attempts == 3
        assert retry.attempt_timeout_seconds == 5.0
        assert retry.batch_size == 10

    def test_signup_defaults(self):
        signup = SignupSettings()

        assert signup.METRICS_NAMESPACE == "AcornPups/UserRegistration"
        assert signup.ALERT_SUBJECT_PREFIX == "[Acorn Pups]"
        assert signup.USER_ID_PREFIX == "usr_"
        assert signup.DEFAULT_TIMEZONE == "America/Los_Angeles"
        assert signup.DEFAULT_LANGUAGE == "en"

    def test_aws_defaults(self):
        aws = AwsSettings()

        assert aws.AWS_REGION == "us-west-2"
        assert aws.ENDPOINT_URL is None

    def test_empty_prefix_is_production(self):
        assert Settings().is_production is True


@pytest.mark.unit
class TestSettingsFromEnvironment:
    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("USERS_TABLE_NAME", "acorn-pups-users-dev")
        monkeypatch.setenv("MAX_RETRY_ATTEMPTS", "5")
        monkeypatch.setenv("RETRY_BACKEND", "memory")
        monkeypatch.setenv("AWS_ENDPOINT_URL", "http://localhost:4566")
        monkeypatch.setenv("PREFIX", "dev-")

        settings = Settings()

        assert settings.signup.USERS_TABLE_NAME == "acorn-pups-users-dev"
        assert settings.retry.max_attempts == 5
        assert settings.retry.backend == "memory"
        assert settings.aws.ENDPOINT_URL == "http://localhost:4566"
        assert settings.is_production is False

    def test_explicit_section_override(self, monkeypatch):
        monkeypatch.setenv("MAX_RETRY_ATTEMPTS", "7")

        settings = Settings(retry=RetrySettings())

        assert settings.retry.max_attempts == 7

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
