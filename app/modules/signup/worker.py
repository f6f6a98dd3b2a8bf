"""Retry worker for deferred user record writes.

Each envelope is re-attempted against the store. Per attempt:

- INSERTED / ALREADY_EXISTS: retry-success metric; a recovery alert when the
  record needed more than one retry attempt
- TRANSIENT_ERROR: retry-failure metric, then either a re-schedule of the next
  attempt (within ``max_attempts``) or escalation to the manual intervention
  queue with an admin alert

A failure while handling a failure (re-schedule or escalation hand-off) is
critical: it raises a critical alert and metric, and the message is left on
the queue for redelivery instead of being acknowledged.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from infrastructure.logging import bind_invocation_context, get_module_logger
from infrastructure.notifications import AdminNotifier
from infrastructure.observability import MetricsEmitter
from infrastructure.resilience.retry import (
    BatchReport,
    QueueMessage,
    RetryConfig,
    RetryQueue,
    RetryResult,
)
from modules.signup import metrics
from modules.signup.errors import EnvelopeDecodeError
from modules.signup.escalation import EscalationSink
from modules.signup.notifications import (
    notify_critical,
    notify_escalation,
    notify_recovery,
)
from modules.signup.scheduler import RetryScheduler
from modules.signup.schemas import RetryEnvelope
from modules.signup.writer import WriteOutcome, UserWriter

logger = get_module_logger()


class RetryWorker:
    """Processes retry envelopes delivered by the retry queue.

    Attributes:
        config: RetryConfig controlling max attempts and batch concurrency
        queue: Optional RetryQueue polled by ``run_once``
    """

    def __init__(
        self,
        writer: UserWriter,
        scheduler: RetryScheduler,
        escalation_sink: EscalationSink,
        metrics_emitter: MetricsEmitter,
        notifier: AdminNotifier,
        config: Optional[RetryConfig] = None,
        queue: Optional[RetryQueue] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._writer = writer
        self._scheduler = scheduler
        self._sink = escalation_sink
        self._metrics = metrics_emitter
        self._notifier = notifier
        self.config = config or RetryConfig()
        self.queue = queue
        self._clock = clock

    def process_envelope(self, envelope: RetryEnvelope) -> RetryResult:
        """Re-attempt the write for one envelope.

        Returns:
            RetryResult: SUCCESS, RETRY (next attempt scheduled),
            PERMANENT_FAILURE (escalated) or CRITICAL
        """
        logger.info(
            "retry_attempt_started",
            user_id=envelope.user_id,
            attempt=envelope.attempt_count,
            max_attempts=self.config.max_attempts,
        )

        outcome = self._writer.insert(envelope.user_record)
        if outcome.succeeded:
            logger.info(
                "retry_attempt_succeeded",
                user_id=envelope.user_id,
                attempt=envelope.attempt_count,
                status=outcome.status.value,
            )
            self._emit(
                metrics.USER_CREATION_RETRY_SUCCESS,
                {metrics.ATTEMPT_COUNT: str(envelope.attempt_count)},
            )
            if envelope.attempt_count > 1:
                notify_recovery(self._notifier, envelope)
            return RetryResult.SUCCESS

        logger.warning(
            "retry_attempt_failed",
            user_id=envelope.user_id,
            attempt=envelope.attempt_count,
            error=outcome.detail,
            error_type=outcome.error_type,
        )
        self._emit(
            metrics.USER_CREATION_RETRY_FAILURE,
            {
                metrics.ATTEMPT_COUNT: str(envelope.attempt_count),
                metrics.ERROR_TYPE: outcome.error_type or "Unknown",
            },
        )

        try:
            return self._handle_failure(envelope, outcome)
        except Exception as e:  # pylint: disable=broad-except
            return self._critical(envelope, outcome.detail, f"{type(e).__name__}: {e}")

    def _handle_failure(
        self, envelope: RetryEnvelope, outcome: WriteOutcome
    ) -> RetryResult:
        error = outcome.detail or "unknown"

        if envelope.attempt_count + 1 <= self.config.max_attempts:
            next_envelope = envelope.next_attempt(error)
            scheduled = self._scheduler.schedule(next_envelope)
            if not scheduled.is_success:
                return self._critical(envelope, error, scheduled.message)
            return RetryResult.RETRY

        escalated = envelope.escalate(error, now=self._clock())
        parked = self._sink.park(escalated)
        if not parked.is_success:
            return self._critical(envelope, error, parked.message)

        logger.error(
            "user_record_escalated",
            user_id=envelope.user_id,
            attempts=envelope.attempt_count,
            first_attempt_at=envelope.first_attempt_at,
            error=error,
        )
        self._emit(metrics.USER_CREATION_MANUAL_INTERVENTION)
        notify_escalation(self._notifier, escalated, self.config.max_attempts)
        return RetryResult.PERMANENT_FAILURE

    def _critical(
        self,
        envelope: Optional[RetryEnvelope],
        original_error: Optional[str],
        handling_error: str,
        error_type: str = "RetryHandlingFailure",
    ) -> RetryResult:
        logger.critical(
            "retry_failure_handling_error",
            user_id=envelope.user_id if envelope else None,
            original_error=original_error,
            handling_error=handling_error,
        )
        self._emit(metrics.USER_CREATION_CRITICAL_FAILURE, {metrics.ERROR_TYPE: error_type})
        notify_critical(self._notifier, envelope, original_error, handling_error)
        return RetryResult.CRITICAL

    def process_message(self, message: QueueMessage) -> RetryResult:
        """Decode and process one queue message; never raises."""
        with bind_invocation_context(
            correlation_id=message.message_id, receive_count=message.receive_count
        ):
            try:
                envelope = RetryEnvelope.from_json(message.body)
            except EnvelopeDecodeError as e:
                return self._critical(
                    None,
                    f"Undecodable message {message.message_id}: {message.body[:500]}",
                    str(e),
                    error_type=metrics.ENVELOPE_DECODE_ERROR,
                )

            try:
                return self.process_envelope(envelope)
            except Exception as e:  # pylint: disable=broad-except
                return self._critical(
                    envelope, envelope.last_error, f"{type(e).__name__}: {e}"
                )

    def process_batch(self, messages: List[QueueMessage]) -> BatchReport:
        """Process messages concurrently, isolating failures per message.

        Publishes batch success/failure counts once every message finished.

        Returns:
            BatchReport; ``failed_message_ids`` lists CRITICAL messages
        """
        report = BatchReport()
        if not messages:
            logger.debug("retry_batch_no_messages")
            return report

        logger.info("retry_batch_start", message_count=len(messages))
        max_workers = min(self.config.batch_concurrency, len(messages))
        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="retry-worker"
        ) as executor:
            futures = {
                executor.submit(self.process_message, message): message
                for message in messages
            }
            for future in as_completed(futures):
                message = futures[future]
                try:
                    result = future.result()
                except Exception as e:  # pylint: disable=broad-except
                    logger.error(
                        "retry_message_processing_exception",
                        message_id=message.message_id,
                        error=str(e),
                        exc_info=True,
                    )
                    result = RetryResult.CRITICAL
                report.record(message.message_id, result)

        self._emit(metrics.RETRY_BATCH_SUCCESSFUL, count=report.successful)
        self._emit(metrics.RETRY_BATCH_FAILED, count=report.failed)
        logger.info("retry_batch_complete", **report.to_stats())
        return report

    def handle_sqs_event(self, event: Dict[str, Any]) -> Dict[str, List[Dict[str, str]]]:
        """Process a Lambda SQS event.

        Returns:
            SQS partial batch response listing only CRITICAL messages
        """
        messages = []
        for record in event.get("Records", []):
            try:
                messages.append(QueueMessage.from_lambda_record(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.error("retry_event_record_malformed", error=str(e))

        report = self.process_batch(messages)
        return report.to_batch_response()

    def run_once(self) -> BatchReport:
        """Receive one batch from the retry queue, process it and acknowledge it.

        Messages reported CRITICAL are not deleted and return after the queue's
        visibility timeout.

        Raises:
            ValueError: If the worker was built without a queue
        """
        if self.queue is None:
            raise ValueError("run_once requires a retry queue")

        messages = self.queue.receive(max_messages=self.config.batch_size)
        report = self.process_batch(messages)

        failed = set(report.failed_message_ids)
        for message in messages:
            if message.message_id in failed:
                continue
            deleted = self.queue.delete(message.receipt_handle)  # type: ignore
            if not deleted.is_success:
                logger.warning(
                    "retry_message_delete_failed",
                    message_id=message.message_id,
                    error=deleted.message,
                )
        return report

    def _emit(
        self, name: str, dimensions: Optional[dict] = None, count: int = 1
    ) -> None:
        result = self._metrics.increment(name, count=count, dimensions=dimensions)
        if not result.is_success:
            logger.warning("metric_emit_failed", metric=name, error=result.message)
