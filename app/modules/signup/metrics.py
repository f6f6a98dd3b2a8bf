"""Metric names and dimensions published by the signup pipeline."""

USER_CREATION_SUCCESS = "UserCreationSuccess"
USER_CREATION_FAILURE = "UserCreationFailure"
USER_CREATION_RETRY_SUCCESS = "UserCreationRetrySuccess"
USER_CREATION_RETRY_FAILURE = "UserCreationRetryFailure"
USER_CREATION_MANUAL_INTERVENTION = "UserCreationManualInterventionRequired"
USER_CREATION_RETRY_SCHEDULING_FAILURE = "UserCreationRetrySchedulingFailure"
USER_CREATION_CRITICAL_FAILURE = "UserCreationCriticalFailure"
RETRY_BATCH_SUCCESSFUL = "RetryBatchSuccessful"
RETRY_BATCH_FAILED = "RetryBatchFailed"

# Dimension names
ATTEMPT_COUNT = "AttemptCount"
ERROR_TYPE = "ErrorType"

# ErrorType values not taken from a write outcome
INVALID_TRIGGER_EVENT = "InvalidTriggerEvent"
RECORD_CONSTRUCTION_ERROR = "RecordConstructionError"
ENVELOPE_DECODE_ERROR = "EnvelopeDecodeError"
