"""Escalation sink for retry envelopes that exhausted their attempts."""

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from infrastructure.resilience.retry import RetryQueue
from modules.signup.schemas import RetryEnvelope

logger = get_module_logger()


class EscalationSink:
    """Parks escalated envelopes on the manual intervention queue.

    Parked envelopes are read-only records for operators; nothing in the
    pipeline consumes them.
    """

    def __init__(self, queue: RetryQueue) -> None:
        self._queue = queue

    def park(self, envelope: RetryEnvelope) -> OperationResult:
        """Enqueue an escalated envelope without delay.

        Raises:
            ValueError: If the envelope is not marked for manual intervention
        """
        if not envelope.requires_manual_intervention:
            raise ValueError("only escalated envelopes can be parked")

        result = self._queue.send(envelope.to_json(), delay_seconds=0)
        if result.is_success:
            logger.warning(
                "envelope_parked_for_manual_intervention",
                user_id=envelope.user_id,
                attempts=envelope.attempt_count,
                first_attempt_at=envelope.first_attempt_at,
                final_failure_at=envelope.final_failure_at,
            )
        else:
            logger.error(
                "envelope_park_failed",
                user_id=envelope.user_id,
                error=result.message,
                error_code=result.error_code,
            )
        return result
