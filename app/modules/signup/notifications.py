"""Admin alert content for signup pipeline outcomes.

Features format message content; delivery goes through the configured
AdminNotifier. Every helper returns the delivery result and logs failures, so
callers can ignore it.
"""

from typing import Optional

from infrastructure.logging import get_module_logger
from infrastructure.notifications import AdminNotifier, NotificationPriority
from infrastructure.operations import OperationResult
from modules.signup.schemas import RetryEnvelope, UserRecord

logger = get_module_logger()

RECOVERY_SUBJECT = "User Creation Retry Success"
ESCALATION_SUBJECT = "User Creation Requires Manual Intervention"
CRITICAL_SUBJECT = "Critical: Retry Failure Handling Error"
SCHEDULING_CRITICAL_SUBJECT = "Critical: User Creation Retry Scheduling Failed"
INVALID_EVENT_SUBJECT = "User Creation Skipped: Invalid Confirmation Event"


def _deliver(
    notifier: AdminNotifier,
    subject: str,
    message: str,
    priority: NotificationPriority,
    **metadata,
) -> OperationResult:
    result = notifier.notify(subject, message, priority=priority, metadata=metadata)
    if not result.is_success:
        logger.warning(
            "admin_alert_not_delivered",
            subject=subject,
            error=result.message,
            error_code=result.error_code,
        )
    return result


def notify_recovery(notifier: AdminNotifier, envelope: RetryEnvelope) -> OperationResult:
    """Alert that a record was created after earlier failed attempts."""
    message = (
        f"User creation succeeded on retry attempt {envelope.attempt_count} "
        f"for user {envelope.user_id}.\n"
        f"Original failure time: {envelope.first_attempt_at}"
    )
    return _deliver(
        notifier,
        RECOVERY_SUBJECT,
        message,
        NotificationPriority.NORMAL,
        user_id=envelope.user_id,
        attempt=envelope.attempt_count,
    )


def notify_escalation(
    notifier: AdminNotifier, envelope: RetryEnvelope, max_attempts: int
) -> OperationResult:
    """Alert that an envelope was parked for manual intervention."""
    message = (
        f"User creation failed after {max_attempts} retry attempts "
        f"for user {envelope.user_id}.\n"
        f"Original attempt: {envelope.first_attempt_at}\n"
        f"Final error: {envelope.last_error}\n\n"
        "Please check the manual intervention queue for details."
    )
    return _deliver(
        notifier,
        ESCALATION_SUBJECT,
        message,
        NotificationPriority.HIGH,
        user_id=envelope.user_id,
        first_attempt_at=envelope.first_attempt_at,
    )


def notify_critical(
    notifier: AdminNotifier,
    envelope: Optional[RetryEnvelope],
    original_error: Optional[str],
    handling_error: str,
) -> OperationResult:
    """Alert that handling a failed attempt itself failed."""
    user_line = f"User: {envelope.user_id}\n" if envelope else ""
    message = (
        "Failed to handle retry failure properly. "
        "This requires immediate attention.\n"
        f"{user_line}"
        f"Original error: {original_error}\n"
        f"Handling error: {handling_error}"
    )
    return _deliver(
        notifier,
        CRITICAL_SUBJECT,
        message,
        NotificationPriority.CRITICAL,
        user_id=envelope.user_id if envelope else None,
    )


def notify_scheduling_failure(
    notifier: AdminNotifier, record: UserRecord, write_error: Optional[str], error: str
) -> OperationResult:
    """Alert that a failed first write could not be handed to the retry queue.

    The body carries the full record so it can be created manually.
    """
    message = (
        f"User record {record.user_id} could not be written and the retry "
        "could not be scheduled. The record must be created manually.\n"
        f"Write error: {write_error}\n"
        f"Scheduling error: {error}\n\n"
        f"Record: {record.model_dump_json(by_alias=True)}"
    )
    return _deliver(
        notifier,
        SCHEDULING_CRITICAL_SUBJECT,
        message,
        NotificationPriority.CRITICAL,
        user_id=record.user_id,
    )


def notify_invalid_event(
    notifier: AdminNotifier, user_name: Optional[str], error: str
) -> OperationResult:
    """Alert that a confirmation event could not be turned into a record."""
    message = (
        f"A signup confirmation for user name {user_name or '<unknown>'} was "
        "accepted but no user record was created.\n"
        f"Reason: {error}"
    )
    return _deliver(
        notifier,
        INVALID_EVENT_SUBJECT,
        message,
        NotificationPriority.HIGH,
        user_name=user_name,
    )
