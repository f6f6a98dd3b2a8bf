"""AWS integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration settings.

    Environment Variables:
        AWS_REGION: AWS region for all service clients (default: us-west-2)
        AWS_ENDPOINT_URL: Custom endpoint URL, e.g. LocalStack (optional)
        AWS_CALL_MAX_RETRIES: In-call retries for throttled requests (default: 2)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        region = settings.aws.AWS_REGION
        ```
    """

    AWS_REGION: str = Field(default="us-west-2", alias="AWS_REGION")
    ENDPOINT_URL: Optional[str] = Field(default=None, alias="AWS_ENDPOINT_URL")
    CALL_MAX_RETRIES: int = Field(default=2, alias="AWS_CALL_MAX_RETRIES")
