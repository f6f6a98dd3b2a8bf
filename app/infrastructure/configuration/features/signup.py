"""Signup record pipeline feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class SignupSettings(FeatureSettings):
    """Signup pipeline configuration.

    Environment Variables:
        USERS_TABLE_NAME: DynamoDB table holding user records (required)
        ADMIN_ALERT_TOPIC_ARN: SNS topic receiving admin alerts
        METRICS_NAMESPACE: CloudWatch namespace for pipeline counters
        METRICS_BACKEND: 'cloudwatch' (default) or 'log'
        NOTIFIER_BACKEND: 'sns' (default) or 'log'
        ALERT_SUBJECT_PREFIX: Prefix prepended to every alert subject
        USER_ID_PREFIX: Fixed prefix of generated user ids
        DEFAULT_TIMEZONE: Timezone stored on new user records
        DEFAULT_LANGUAGE: Preferred language stored on new user records

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        table = settings.signup.USERS_TABLE_NAME
        ```
    """

    USERS_TABLE_NAME: str = Field(default="", alias="USERS_TABLE_NAME")
    ADMIN_ALERT_TOPIC_ARN: str = Field(default="", alias="ADMIN_ALERT_TOPIC_ARN")
    METRICS_NAMESPACE: str = Field(
        default="AcornPups/UserRegistration", alias="METRICS_NAMESPACE"
    )
    METRICS_BACKEND: str = Field(default="cloudwatch", alias="METRICS_BACKEND")
    NOTIFIER_BACKEND: str = Field(default="sns", alias="NOTIFIER_BACKEND")
    ALERT_SUBJECT_PREFIX: str = Field(
        default="[Acorn Pups]", alias="ALERT_SUBJECT_PREFIX"
    )
    USER_ID_PREFIX: str = Field(default="usr_", alias="USER_ID_PREFIX")
    DEFAULT_TIMEZONE: str = Field(
        default="America/Los_Angeles", alias="DEFAULT_TIMEZONE"
    )
    DEFAULT_LANGUAGE: str = Field(default="en", alias="DEFAULT_LANGUAGE")
