"""Infrastructure configuration module - public API.

Centralized configuration for the signup pipeline using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class
    AwsSettings, SignupSettings, RetrySettings: Section classes (for tests)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    region = settings.aws.AWS_REGION
    queue_url = settings.retry.primary_queue_url
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import AwsSettings
from infrastructure.configuration.features import SignupSettings
from infrastructure.configuration.infrastructure import RetrySettings

__all__ = ["Settings", "AwsSettings", "SignupSettings", "RetrySettings"]
