"""Pydantic models for the signup pipeline.

- PostConfirmationEvent: the identity provider's signup-confirmation event,
  validated at the boundary.
- UserRecord: the durable user profile item, in the store's wire layout.
- RetryEnvelope: the unit of work carried on the retry queue (camelCase JSON).

Records and envelopes are frozen; state changes produce new instances.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)

from modules.signup.errors import EnvelopeDecodeError, InvalidTriggerEventError

PROFILE_SORT_KEY = "PROFILE"
USER_KEY_PREFIX = "USER#"


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


class CognitoUserAttributes(BaseModel):
    """User attributes from the confirmation event."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(min_length=1)
    sub: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = None
    phone_number: Optional[str] = None


class CognitoTriggerRequest(BaseModel):
    """The ``request`` section of the confirmation event."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    user_attributes: CognitoUserAttributes = Field(alias="userAttributes")


class PostConfirmationEvent(BaseModel):
    """Signup-confirmation trigger event.

    Only the fields the pipeline reads are declared; the handler returns the
    original event dict untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    request: CognitoTriggerRequest
    user_name: Optional[str] = Field(default=None, alias="userName")
    trigger_source: Optional[str] = Field(default=None, alias="triggerSource")
    user_pool_id: Optional[str] = Field(default=None, alias="userPoolId")
    region: Optional[str] = None

    @model_validator(mode="after")
    def require_subject(self) -> "PostConfirmationEvent":
        """Ensure a stable subject identifier is present."""
        if not (self.request.user_attributes.sub or self.user_name):
            raise ValueError("event carries neither userAttributes.sub nor userName")
        return self

    @property
    def subject(self) -> str:
        """Stable identity provider subject: ``sub``, falling back to ``userName``."""
        return self.request.user_attributes.sub or self.user_name  # type: ignore

    @property
    def email(self) -> str:
        return str(self.request.user_attributes.email)

    @classmethod
    def from_event(cls, event: Any) -> "PostConfirmationEvent":
        """Validate a raw trigger event.

        Raises:
            InvalidTriggerEventError: If the event is malformed
        """
        user_name = event.get("userName") if isinstance(event, dict) else None
        try:
            return cls.model_validate(event)
        except ValidationError as e:
            raise InvalidTriggerEventError(
                f"Invalid signup confirmation event: {e.error_count()} validation error(s)",
                user_name=user_name,
                errors=e.errors(include_url=False, include_input=False),
            ) from e


class UserRecord(BaseModel):
    """Durable user profile item.

    Serialized with ``by_alias=True`` it is exactly the item written to the
    store, including the ``PK``/``SK`` key attributes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pk: str = Field(alias="PK")
    sk: str = Field(default=PROFILE_SORT_KEY, alias="SK")
    user_id: str = Field(min_length=1)
    email: str
    cognito_sub: str
    full_name: str
    phone: Optional[str] = None
    timezone: str
    created_at: str
    updated_at: str
    last_login: Optional[str] = None
    is_active: bool = True
    push_notifications: bool = True
    preferred_language: str = "en"
    sound_alerts: bool = True
    vibration_alerts: bool = True

    @model_validator(mode="after")
    def check_partition_key(self) -> "UserRecord":
        """The partition key must be derived from the user id."""
        if self.pk != f"{USER_KEY_PREFIX}{self.user_id}":
            raise ValueError("PK must equal 'USER#' + user_id")
        return self

    def to_item(self) -> Dict[str, Any]:
        """Return the store item."""
        return self.model_dump(by_alias=True)


class RetryEnvelope(BaseModel):
    """Unit of work on the retry queue.

    Wire format is JSON with camelCase keys. ``user_record`` is carried
    verbatim from the first attempt so retries never create a second key.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_record: UserRecord = Field(alias="userRecord")
    attempt_count: int = Field(ge=1, alias="attemptCount")
    first_attempt_at: str = Field(alias="firstAttemptTimestamp")
    last_error: Optional[str] = Field(default=None, alias="lastError")
    requires_manual_intervention: bool = Field(
        default=False, alias="requiresManualIntervention"
    )
    final_failure_at: Optional[str] = Field(default=None, alias="finalFailureTimestamp")

    @property
    def user_id(self) -> str:
        return self.user_record.user_id

    @classmethod
    def for_failed_write(cls, record: UserRecord, error: str) -> "RetryEnvelope":
        """Envelope for a record whose first write failed (attempt 1)."""
        return cls(
            user_record=record,
            attempt_count=1,
            first_attempt_at=record.created_at,
            last_error=error,
        )

    def next_attempt(self, error: str) -> "RetryEnvelope":
        """Copy for the following attempt with the latest error."""
        return self.model_copy(
            update={"attempt_count": self.attempt_count + 1, "last_error": error}
        )

    def escalate(self, error: str, now: Optional[datetime] = None) -> "RetryEnvelope":
        """Copy marked for manual intervention."""
        return self.model_copy(
            update={
                "last_error": error,
                "requires_manual_intervention": True,
                "final_failure_at": utc_timestamp(now),
            }
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, body: str) -> "RetryEnvelope":
        """Decode a queue message body.

        Raises:
            EnvelopeDecodeError: If the body is not valid JSON or not an envelope
        """
        try:
            return cls.model_validate(json.loads(body))
        except (ValueError, TypeError) as e:
            # ValidationError is a ValueError subclass
            raise EnvelopeDecodeError(f"Invalid retry envelope: {e}") from e
