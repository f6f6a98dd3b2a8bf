"""Invocation context binding for structured logging.

Binds invocation-scoped metadata (correlation id, trigger source, queue
message id) so every log entry emitted while handling one Lambda invocation or
one queue message carries it.

Usage:
    from infrastructure.logging import bind_invocation_context

    with bind_invocation_context(correlation_id=context.aws_request_id,
                                 trigger_source=event["triggerSource"]):
        logger.info("post_confirmation_received")
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator

import structlog


@contextmanager
def bind_invocation_context(
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind invocation-scoped context to all logs within the block.

    Args:
        correlation_id: Invocation identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs; None values are skipped.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}
    context.update({k: v for k, v in extra_context.items() if v is not None})

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Return the correlation id bound to the current context, if any."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_invocation_context() -> None:
    """Clear all bound context.

    Warm Lambda containers reuse the process; call at the start of each
    invocation so nothing leaks from the previous one.
    """
    structlog.contextvars.clear_contextvars()
