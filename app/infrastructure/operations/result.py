"""OperationResult: the value every AWS call and best-effort side call returns.

Store writes, queue hand-offs, metric publication and admin alerts all
report through this type, so a caller decides explicitly what a failure
means for the pipeline instead of catching exceptions from deep inside boto3.
"""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of one operation.

    Attributes:
        status: Classified outcome
        message: Text for logs and alert bodies
        data: Payload on success (boto3 response, message id, item)
        error_code: AWS error code or exception class name on failure
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_conflict(self) -> bool:
        """True when a conditional write found its key already present."""
        return self.status == OperationStatus.CONFLICT

    @property
    def is_transient(self) -> bool:
        return self.status == OperationStatus.TRANSIENT_ERROR

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Failure result with an explicit status."""
        return cls(status=status, message=message, data=data, error_code=error_code)

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Retryable failure: throttling, capacity, timeouts, 5xx responses."""
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Failure that repeating the same call will not fix."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)

    @classmethod
    def conflict(cls, message: str, error_code: Optional[str] = None) -> "OperationResult":
        """Conditional write rejected because the key exists."""
        return cls.error(OperationStatus.CONFLICT, message, error_code)
