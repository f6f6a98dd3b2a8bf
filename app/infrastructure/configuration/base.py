"""Base classes for configuration sections.

Every section reads the process environment (and a local ``.env`` file when
present) with case-sensitive variable names; unknown variables are ignored
so Lambda's own environment does not fail validation.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class IntegrationSettings(BaseSettings):
    """Settings for external services (AWS)."""

    model_config = _SECTION_CONFIG


class FeatureSettings(BaseSettings):
    """Settings owned by a feature module (signup)."""

    model_config = _SECTION_CONFIG


class InfrastructureSettings(BaseSettings):
    """Settings for shared machinery (retry policy, queue backend)."""

    model_config = _SECTION_CONFIG
