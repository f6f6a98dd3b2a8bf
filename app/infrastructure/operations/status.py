"""Outcome classification for OperationResult."""

from enum import Enum


class OperationStatus(Enum):
    """How an operation ended.

    TRANSIENT_ERROR is the only failure the AWS executor retries in-call.
    CONFLICT is not a failure for conditional inserts: the record exists.
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    CONFLICT = "conflict"
