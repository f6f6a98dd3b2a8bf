"""Errors for the signup module."""

from typing import Any


class SignupPipelineError(Exception):
    """Base class for signup pipeline errors."""


class InvalidTriggerEventError(SignupPipelineError):
    """Raised when a signup-confirmation event fails boundary validation.

    Attributes:
        message: human-friendly message
        user_name: identity provider user name, when the event carried one
        errors: validation error details
    """

    def __init__(self, message: str, user_name: Any = None, errors: Any = None):
        super().__init__(message)
        self.user_name = user_name
        self.errors = errors or []


class EnvelopeDecodeError(SignupPipelineError):
    """Raised when a queue message body is not a valid retry envelope."""
