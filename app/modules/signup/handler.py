"""Signup-confirmation entry handler.

Runs inside the identity provider's confirmation callback. The callback must
never fail: every path returns the original event, and a failed write is
handed to the retry pipeline instead of being reported to the caller.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from infrastructure.logging import bind_invocation_context, get_module_logger
from infrastructure.notifications import AdminNotifier
from infrastructure.observability import MetricsEmitter
from modules.signup import metrics
from modules.signup.errors import InvalidTriggerEventError
from modules.signup.notifications import (
    notify_invalid_event,
    notify_scheduling_failure,
)
from modules.signup.records import RecordDefaults, build_user_record
from modules.signup.scheduler import RetryScheduler
from modules.signup.schemas import PostConfirmationEvent, RetryEnvelope
from modules.signup.writer import UserWriter

logger = get_module_logger()


class PostConfirmationHandler:
    """Creates the user record for a confirmed signup, best effort.

    Outcomes:
        - record inserted (or already present): success metric
        - write failed: failure metric and a retry envelope (attempt 1)
        - retry hand-off failed: critical metric and critical alert
        - invalid event: failure metric and an admin alert, no envelope

    In every case ``handle`` returns the event unchanged.
    """

    def __init__(
        self,
        writer: UserWriter,
        scheduler: RetryScheduler,
        metrics_emitter: MetricsEmitter,
        notifier: AdminNotifier,
        defaults: Optional[RecordDefaults] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._writer = writer
        self._scheduler = scheduler
        self._metrics = metrics_emitter
        self._notifier = notifier
        self._defaults = defaults or RecordDefaults()
        self._clock = clock

    def handle(self, event: Any, context: Any = None) -> Any:
        """Process a confirmation event and return it unchanged.

        Args:
            event: Raw trigger event
            context: Optional Lambda context (its request id becomes the
                correlation id)

        Returns:
            The same event object
        """
        raw = event if isinstance(event, dict) else {}
        correlation_id = getattr(context, "aws_request_id", None) or str(uuid.uuid4())
        try:
            with bind_invocation_context(
                correlation_id=correlation_id,
                trigger_source=raw.get("triggerSource"),
                user_pool_id=raw.get("userPoolId"),
            ):
                self._process(event)
        except Exception as e:  # pylint: disable=broad-except
            logger.exception("post_confirmation_unhandled_error", error=str(e))
        return event

    def _process(self, event: Any) -> None:
        logger.info("post_confirmation_received")

        try:
            trigger = PostConfirmationEvent.from_event(event)
        except InvalidTriggerEventError as e:
            logger.error(
                "post_confirmation_invalid_event",
                user_name=e.user_name,
                errors=e.errors,
            )
            self._count_failure(metrics.INVALID_TRIGGER_EVENT)
            notify_invalid_event(self._notifier, e.user_name, str(e))
            return

        try:
            record = build_user_record(trigger, self._defaults, now=self._clock())
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "user_record_construction_failed",
                user_name=trigger.user_name,
                error=str(e),
            )
            self._count_failure(metrics.RECORD_CONSTRUCTION_ERROR)
            # No record exists to carry in an envelope, so nothing is scheduled
            notify_invalid_event(self._notifier, trigger.user_name, str(e))
            return

        outcome = self._writer.insert(record)
        if outcome.succeeded:
            logger.info(
                "user_record_created",
                user_id=record.user_id,
                status=outcome.status.value,
            )
            self._emit(metrics.USER_CREATION_SUCCESS)
            return

        logger.warning(
            "user_record_creation_deferred",
            user_id=record.user_id,
            error=outcome.detail,
            error_type=outcome.error_type,
        )
        self._count_failure(outcome.error_type or "Unknown")

        envelope = RetryEnvelope.for_failed_write(record, outcome.detail or "unknown")
        scheduled = self._scheduler.schedule(envelope)
        if not scheduled.is_success:
            logger.critical(
                "user_record_retry_handoff_failed",
                user_id=record.user_id,
                error=scheduled.message,
            )
            self._emit(
                metrics.USER_CREATION_CRITICAL_FAILURE,
                {metrics.ERROR_TYPE: scheduled.error_code or "RetrySchedulingFailure"},
            )
            notify_scheduling_failure(
                self._notifier, record, outcome.detail, scheduled.message
            )

    def _count_failure(self, error_type: str) -> None:
        self._emit(metrics.USER_CREATION_FAILURE, {metrics.ERROR_TYPE: error_type})

    def _emit(self, name: str, dimensions: Optional[dict] = None) -> None:
        result = self._metrics.increment(name, dimensions=dimensions)
        if not result.is_success:
            logger.warning("metric_emit_failed", metric=name, error=result.message)
