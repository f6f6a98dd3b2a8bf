"""Structlog processors used by the signup pipeline.

- add_service_info: service name and deployed git SHA
- add_lambda_context: function name/version when running inside Lambda
- mask_sensitive_data: redacts credentials and, when enabled, personal data
  copied from the confirmation event (nested dicts included, since alert
  metadata and validation errors are logged as dicts)
- truncate_large_values: bounds queue bodies and boto3 error strings
"""

import os
from typing import Any, Mapping

REDACTED = "***REDACTED***"

# Credential-like keys, always masked
SENSITIVE_PATTERNS = frozenset(
    {"password", "secret", "token", "api_key", "authorization", "credential"}
)

# Personal data carried on user records
PII_PATTERNS = frozenset({"email", "phone", "full_name"})


def add_service_info(service: str, version: str = "unknown"):
    """Processor adding ``service`` and ``version`` to every entry."""

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("version", version)
        return event_dict

    return processor


def add_lambda_context(environ: Mapping[str, str] = os.environ):
    """Processor adding the Lambda function name and version, if any.

    The environment is read once when the processor is built.
    """
    fields = {
        "function_name": environ.get("AWS_LAMBDA_FUNCTION_NAME"),
        "function_version": environ.get("AWS_LAMBDA_FUNCTION_VERSION"),
    }
    fields = {key: value for key, value in fields.items() if value}

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        for key, value in fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    return processor


def _is_sensitive(key: str, patterns: frozenset) -> bool:
    lowered = key.lower()
    return any(pattern in lowered for pattern in patterns)


def _mask(value: Any, patterns: frozenset, mask_value: str) -> Any:
    if isinstance(value, dict):
        return {
            key: (
                mask_value
                if item is not None and _is_sensitive(str(key), patterns)
                else _mask(item, patterns, mask_value)
            )
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_mask(item, patterns, mask_value) for item in value]
    return value


def mask_sensitive_data(
    mask_value: str = REDACTED,
    additional_patterns: frozenset | None = None,
):
    """Processor masking values whose key contains a sensitive pattern.

    Matching is a case-insensitive substring test on the key. ``None`` values
    are kept so absent fields stay distinguishable from redacted ones.

    Args:
        mask_value: Replacement for sensitive values
        additional_patterns: Extra patterns, e.g. PII_PATTERNS
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        return _mask(event_dict, patterns, mask_value)

    return processor


def truncate_large_values(max_length: int = 2000):
    """Processor cutting top-level strings longer than ``max_length``."""

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    f"{value[:max_length]}...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
