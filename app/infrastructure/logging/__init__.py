"""Structured logging infrastructure.

Centralized structlog configuration for the signup pipeline.

Public API:
    - configure_logging(): Initialize logging
    - get_module_logger(): Get a logger for the calling module
    - bind_invocation_context(): Context manager for invocation-scoped logging
    - get_correlation_id(): Current correlation id from context
    - clear_invocation_context(): Clear all bound context

Example:
    from infrastructure.logging import get_module_logger, bind_invocation_context

    logger = get_module_logger()

    with bind_invocation_context(correlation_id="req-123"):
        logger.info("processing_envelope")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from infrastructure.logging.context import (
    bind_invocation_context,
    get_correlation_id,
    clear_invocation_context,
)
from infrastructure.logging.formatters import (
    add_lambda_context,
    add_service_info,
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
    PII_PATTERNS,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_invocation_context",
    "get_correlation_id",
    "clear_invocation_context",
    "add_lambda_context",
    "add_service_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
    "PII_PATTERNS",
]
