"""Structlog configuration for the signup pipeline.

Logging is configured once per process when this module is imported, which
for Lambda means once per cold start. Output is JSON in production and inside
Lambda (CloudWatch Logs Insights parses it), and console-rendered elsewhere.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("user_record_inserted", user_id="usr_123")
"""

import inspect
import logging
import os
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    PII_PATTERNS,
    add_lambda_context,
    add_service_info,
    mask_sensitive_data,
    truncate_large_values,
)

SERVICE_NAME = "signup-pipeline"


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def _running_in_lambda() -> bool:
    return "AWS_LAMBDA_FUNCTION_NAME" in os.environ


def _configure_silent() -> BoundLogger:
    # Under pytest nothing is emitted; the chain only has to be valid
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
    logging.root.setLevel(logging.CRITICAL + 1)
    return structlog.stdlib.get_logger()


def build_processors(version: str, json_output: bool) -> list:
    """Processor chain for runtime logging, ending with the renderer."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        add_service_info(SERVICE_NAME, version),
        add_lambda_context(),
        mask_sensitive_data(additional_patterns=PII_PATTERNS),
        truncate_large_values(max_length=2000),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL
        is_production: Overrides settings.is_production; production or a
            Lambda runtime selects JSON output

    Returns:
        The configured root BoundLogger
    """
    if _is_test_environment():
        return _configure_silent()

    # Deferred: providers imports the AWS client layer, which logs
    from infrastructure.services.providers import get_settings

    settings = get_settings()
    production = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=build_processors(
            settings.GIT_SHA, json_output=production or _running_in_lambda()
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    # force replaces the handler the Lambda runtime installs on the root logger
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
        force=True,
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    Binds ``component`` (last dotted segment of the module name) and
    ``module_path``, e.g. ``worker`` / ``modules.signup.worker``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None
    if not module_name:
        return logger.bind(component="unknown")
    return logger.bind(component=module_name.rsplit(".", 1)[-1], module_path=module_name)
