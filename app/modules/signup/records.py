"""Idempotent user record construction.

The record key is a fixed prefix plus a random UUID and is generated exactly
once per confirmation. Everything downstream (retries, escalation) carries the
built record verbatim, so the store's conditional insert is the only
deduplication point.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from modules.signup.schemas import (
    PROFILE_SORT_KEY,
    USER_KEY_PREFIX,
    PostConfirmationEvent,
    UserRecord,
    utc_timestamp,
)


@dataclass(frozen=True)
class RecordDefaults:
    """Defaults stamped onto every new user record."""

    user_id_prefix: str = "usr_"
    timezone: str = "America/Los_Angeles"
    preferred_language: str = "en"


def generate_user_id(prefix: str = "usr_") -> str:
    """Return a new user id, never derived from user input."""
    return f"{prefix}{uuid.uuid4()}"


def build_user_record(
    trigger: PostConfirmationEvent,
    defaults: Optional[RecordDefaults] = None,
    now: Optional[datetime] = None,
) -> UserRecord:
    """Build the canonical user record for a confirmed signup.

    Args:
        trigger: Validated confirmation event
        defaults: Record defaults (timezone, language, id prefix)
        now: Creation time; captured once for ``created_at`` and ``updated_at``

    Returns:
        UserRecord ready for a conditional insert
    """
    defaults = defaults or RecordDefaults()
    timestamp = utc_timestamp(now)
    user_id = generate_user_id(defaults.user_id_prefix)
    attributes = trigger.request.user_attributes

    return UserRecord(
        pk=f"{USER_KEY_PREFIX}{user_id}",
        sk=PROFILE_SORT_KEY,
        user_id=user_id,
        email=str(attributes.email),
        cognito_sub=trigger.subject,
        full_name=attributes.name or str(attributes.email),
        phone=attributes.phone_number or None,
        timezone=defaults.timezone,
        created_at=timestamp,
        updated_at=timestamp,
        last_login=None,
        is_active=True,
        push_notifications=True,
        preferred_language=defaults.preferred_language,
        sound_alerts=True,
        vibration_alerts=True,
    )
