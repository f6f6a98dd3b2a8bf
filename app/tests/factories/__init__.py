"""Test data factories for deterministic test data generation."""

from tests.factories.aws import make_client_error
from tests.factories.writers import ScriptedUserWriter, transient_outcome
from tests.factories.signup import (
    FIXED_NOW,
    FIXED_TIMESTAMP,
    make_envelope,
    make_trigger_event,
    make_user_record,
)

__all__ = [
    "ScriptedUserWriter",
    "transient_outcome",
    "make_client_error",
    "FIXED_NOW",
    "FIXED_TIMESTAMP",
    "make_envelope",
    "make_trigger_event",
    "make_user_record",
]
