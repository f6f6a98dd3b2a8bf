"""Top-level settings object composed of the configuration sections."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.features import SignupSettings
from infrastructure.configuration.infrastructure import RetrySettings
from infrastructure.configuration.integrations import AwsSettings


class Settings(BaseSettings):
    """Application settings.

    Sections:
        aws: region, endpoint override, in-call retries
        signup: users table, alert topic, metrics namespace, record defaults
        retry: queue backend and URLs, backoff policy, batching

    Environment Variables:
        PREFIX: Deployment prefix; empty in production
        LOG_LEVEL: Root log level (default: INFO)
        GIT_SHA: Deployed commit, logged as ``version``

    Sections are built from the environment unless passed explicitly, which
    is how tests override a single section:

        settings = Settings(retry=RetrySettings(MAX_RETRY_ATTEMPTS=5))
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    aws: AwsSettings = Field(default_factory=AwsSettings)
    signup: SignupSettings = Field(default_factory=SignupSettings)
    retry: RetrySettings = Field(default_factory=RetrySettings)

    @property
    def is_production(self) -> bool:
        """Production deployments run without a PREFIX."""
        return not self.PREFIX
