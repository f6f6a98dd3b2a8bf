"""Signup record pipeline.

Creates the durable user record for every confirmed signup without ever
failing the confirmation callback:

    PostConfirmationHandler -> insert OK
                            -> RetryScheduler -> retry queue -> RetryWorker
                                                   -> insert OK (recovery alert)
                                                   -> re-schedule (bounded)
                                                   -> EscalationSink (admin alert)
"""

from modules.signup.errors import (
    EnvelopeDecodeError,
    InvalidTriggerEventError,
    SignupPipelineError,
)
from modules.signup.escalation import EscalationSink
from modules.signup.handler import PostConfirmationHandler
from modules.signup.records import RecordDefaults, build_user_record
from modules.signup.scheduler import RetryScheduler
from modules.signup.schemas import PostConfirmationEvent, RetryEnvelope, UserRecord
from modules.signup.worker import RetryWorker
from modules.signup.writer import (
    DynamoDBUserWriter,
    TimeBoundUserWriter,
    UserWriter,
    WriteOutcome,
    WriteStatus,
)

__all__ = [
    "SignupPipelineError",
    "InvalidTriggerEventError",
    "EnvelopeDecodeError",
    "PostConfirmationEvent",
    "UserRecord",
    "RetryEnvelope",
    "RecordDefaults",
    "build_user_record",
    "UserWriter",
    "DynamoDBUserWriter",
    "TimeBoundUserWriter",
    "WriteOutcome",
    "WriteStatus",
    "RetryScheduler",
    "EscalationSink",
    "PostConfirmationHandler",
    "RetryWorker",
]
