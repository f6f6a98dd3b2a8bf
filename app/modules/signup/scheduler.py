"""Retry scheduling for failed user record writes."""

from infrastructure.logging import get_module_logger
from infrastructure.observability import MetricsEmitter
from infrastructure.operations import OperationResult
from infrastructure.resilience.retry import RetryConfig, RetryQueue
from modules.signup import metrics
from modules.signup.schemas import RetryEnvelope

logger = get_module_logger()


class RetryScheduler:
    """Enqueues retry envelopes on the retry queue with a backoff delay.

    A failed enqueue is logged, counted and returned as an error result. It
    is never retried here; the caller decides what a lost hand-off means.
    """

    def __init__(
        self,
        queue: RetryQueue,
        config: RetryConfig,
        metrics_emitter: MetricsEmitter,
    ) -> None:
        self._queue = queue
        self.config = config
        self._metrics = metrics_emitter

    def compute_delay(self, attempt: int) -> int:
        """Delay in seconds before the given 1-based attempt is delivered."""
        return self.config.calculate_retry_delay(attempt)

    def schedule(self, envelope: RetryEnvelope) -> OperationResult:
        """Enqueue the envelope for its ``attempt_count`` attempt.

        Returns:
            OperationResult with ``{"message_id", "delay_seconds"}`` as data on
            success, or the enqueue error
        """
        delay = self.compute_delay(envelope.attempt_count)
        try:
            result = self._queue.send(envelope.to_json(), delay_seconds=delay)
        except Exception as e:  # pylint: disable=broad-except
            result = OperationResult.permanent_error(
                message=f"Retry enqueue raised: {e}", error_code=type(e).__name__
            )

        if not result.is_success:
            logger.error(
                "retry_scheduling_failed",
                user_id=envelope.user_id,
                attempt=envelope.attempt_count,
                error=result.message,
                error_code=result.error_code,
            )
            emitted = self._metrics.increment(
                metrics.USER_CREATION_RETRY_SCHEDULING_FAILURE,
                dimensions={metrics.ATTEMPT_COUNT: str(envelope.attempt_count)},
            )
            if not emitted.is_success:
                logger.warning("metric_emit_failed", error=emitted.message)
            return result

        logger.info(
            "retry_scheduled",
            user_id=envelope.user_id,
            attempt=envelope.attempt_count,
            delay_seconds=delay,
            message_id=result.data,
        )
        return OperationResult.success(
            data={"message_id": result.data, "delay_seconds": delay},
            message=f"Retry attempt {envelope.attempt_count} scheduled in {delay}s",
        )
