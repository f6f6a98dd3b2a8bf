"""Settings sections owned by feature modules."""

from infrastructure.configuration.features.signup import SignupSettings

__all__ = [
    "SignupSettings",
]
