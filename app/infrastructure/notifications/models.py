"""Notification system core models.

Platform-agnostic alert model. Features define message content,
infrastructure channels handle delivery.

Uses Pydantic BaseModel for runtime input validation and type safety.
"""

from typing import Any, Dict
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class NotificationPriority(Enum):
    """Alert priority levels.

    CRITICAL marks alerts raised when failure handling itself failed.
    """

    NORMAL = "normal"
    HIGH = "high"
    CRITICAL = "critical"


class AdminAlert(BaseModel):
    """Operator-facing alert.

    Attributes:
        subject: Subject line, without the deployment prefix
        message: Plain text body (required)
        priority: NotificationPriority level (default: NORMAL)
        metadata: Additional context logged with the delivery outcome

    Example:
        alert = AdminAlert(
            subject="User Creation Requires Manual Intervention",
            message="User ID: usr_123 ...",
            priority=NotificationPriority.HIGH,
            metadata={"user_id": "usr_123"},
        )
    """

    subject: str
    message: str
    priority: NotificationPriority = NotificationPriority.NORMAL
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("subject", "message")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Ensure subject and message are not empty."""
        if not v or not v.strip():
            raise ValueError("Alert subject and message cannot be empty")
        return v

    def formatted_subject(self, prefix: str = "") -> str:
        """Subject with the deployment prefix applied."""
        return f"{prefix} {self.subject}".strip() if prefix else self.subject
