"""Base AWS call execution for infrastructure clients.

Provides `get_boto3_client` and `execute_aws_api_call` with the
OperationResult pattern. This module never reads settings at import time;
configuration arrives through parameters.
"""

import time
from typing import Any, Dict, Iterable, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.config import Config  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore
import structlog

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

logger = structlog.get_logger()

DEFAULT_THROTTLING_ERRORS = (
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "ProvisionedThroughputExceededException",
    "RequestThrottled",
)
DEFAULT_CONFLICT_ERRORS = (
    "ConditionalCheckFailedException",
    "ResourceAlreadyExistsException",
    "EntityAlreadyExists",
)
UNAUTHORIZED_ERRORS = (
    "AccessDeniedException",
    "AccessDenied",
    "UnauthorizedOperation",
    "AuthorizationError",
)


def get_boto3_client(
    service_name: str,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    config: Optional[Config] = None,
) -> BaseClient:
    """Create a boto3 client for the given service.

    Args:
        service_name: AWS service name (e.g., 'dynamodb')
        region_name: Optional region override
        endpoint_url: Optional endpoint (LocalStack, VPC endpoint)
        config: Optional botocore Config (timeouts, botocore retries)

    Returns:
        botocore client instance
    """
    session = boto3.Session(region_name=region_name) if region_name else boto3.Session()
    client_kwargs: Dict[str, Any] = {}
    if endpoint_url:
        client_kwargs["endpoint_url"] = endpoint_url
    if config is not None:
        client_kwargs["config"] = config
    return session.client(service_name, **client_kwargs)


def _calculate_retry_delay(attempt: int, backoff_factor: float = 0.5) -> float:
    return backoff_factor * (2**attempt)


def _map_client_error(
    e: ClientError,
    service_name: str,
    method: str,
    throttling_errors: Iterable[str],
    conflict_errors: Iterable[str],
) -> OperationResult:
    error_code = e.response.get("Error", {}).get("Code")
    error_message = e.response.get("Error", {}).get("Message", str(e))

    if error_code in conflict_errors:
        logger.info(
            "aws_api_conflict",
            service=service_name,
            method=method,
            code=error_code,
        )
        return OperationResult.conflict(message=error_message, error_code=error_code)

    if error_code in throttling_errors:
        return OperationResult.transient_error(
            message=error_message, error_code=error_code
        )

    if error_code in UNAUTHORIZED_ERRORS:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message=error_message, error_code=error_code
        )

    status_code = e.response.get("ResponseMetadata", {}).get("HTTPStatusCode") or 0
    if status_code >= 500:
        return OperationResult.transient_error(
            message=error_message, error_code=error_code
        )

    return OperationResult.permanent_error(message=error_message, error_code=error_code)


def execute_aws_api_call(
    client: BaseClient,
    method: str,
    max_retries: int = 2,
    backoff_factor: float = 0.5,
    throttling_errors: Iterable[str] = DEFAULT_THROTTLING_ERRORS,
    conflict_errors: Iterable[str] = DEFAULT_CONFLICT_ERRORS,
    **kwargs,
) -> OperationResult:
    """Execute an AWS API call with short in-call retries and standardized results.

    Only throttling/capacity errors are retried here; everything else is
    returned immediately so the pipeline's own retry policy decides.

    Args:
        client: botocore client instance
        method: API method name (e.g., 'put_item')
        max_retries: In-call retries for transient errors
        backoff_factor: Base seconds for in-call exponential backoff
        throttling_errors: Error codes treated as transient
        conflict_errors: Error codes mapped to CONFLICT
        **kwargs: Parameters passed to the boto3 method

    Returns:
        OperationResult wrapping the boto3 response or the classified error
    """
    service_name = getattr(getattr(client, "meta", None), "service_model", None)
    service_name = getattr(service_name, "service_name", "aws")
    last_exc: Optional[Exception] = None

    for attempt in range(max_retries + 1):
        try:
            response = getattr(client, method)(**kwargs)
            return OperationResult.success(
                data=response, message=f"{service_name}.{method} succeeded"
            )

        except ClientError as e:
            last_exc = e
            mapped = _map_client_error(
                e, service_name, method, throttling_errors, conflict_errors
            )

            if mapped.is_transient and attempt < max_retries:
                delay = _calculate_retry_delay(attempt, backoff_factor)
                logger.warning(
                    "aws_api_retry",
                    service=service_name,
                    method=method,
                    attempt=attempt + 1,
                    error_code=mapped.error_code,
                    delay=delay,
                )
                time.sleep(delay)
                continue

            if not mapped.is_conflict:
                logger.error(
                    "aws_api_error_final",
                    service=service_name,
                    method=method,
                    error_code=mapped.error_code,
                    error=str(e),
                )
            return mapped

        except BotoCoreError as e:
            # Connection failures, read timeouts and endpoint errors
            last_exc = e
            logger.error(
                "aws_api_connection_error",
                service=service_name,
                method=method,
                error=str(e),
            )
            return OperationResult.transient_error(
                message=str(e), error_code=type(e).__name__
            )

        except Exception as e:  # pylint: disable=broad-except
            last_exc = e
            logger.error(
                "aws_api_unexpected_error",
                service=service_name,
                method=method,
                error=str(e),
            )
            return OperationResult.permanent_error(
                message=str(e), error_code=type(e).__name__
            )

    return OperationResult.transient_error(
        message=str(last_exc) if last_exc else "unknown_error"
    )
