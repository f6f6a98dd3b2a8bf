"""Conditional user record writer.

Every write is an insert-if-absent keyed on the record's partition key. The
outcome is one of three values; callers never see exceptions:

- INSERTED: the record was created by this call
- ALREADY_EXISTS: a record with the same key is present (a previous attempt
  won, or a duplicate delivery raced this one); treated as success
- TRANSIENT_ERROR: anything else, retryable by the pipeline
"""

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from infrastructure.clients.aws.dynamodb import DynamoDBClient
from infrastructure.logging import get_module_logger
from modules.signup.schemas import UserRecord

logger = get_module_logger()


class WriteStatus(Enum):
    """Outcome of a conditional insert."""

    INSERTED = "inserted"
    ALREADY_EXISTS = "already_exists"
    TRANSIENT_ERROR = "transient_error"


@dataclass(frozen=True)
class WriteOutcome:
    """Result of one write attempt.

    Attributes:
        status: WriteStatus
        detail: Error message for TRANSIENT_ERROR
        error_type: Coarse error classification used as a metric dimension
    """

    status: WriteStatus
    detail: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        """True when the record exists after this attempt."""
        return self.status in (WriteStatus.INSERTED, WriteStatus.ALREADY_EXISTS)

    @classmethod
    def inserted(cls) -> "WriteOutcome":
        return cls(WriteStatus.INSERTED)

    @classmethod
    def already_exists(cls) -> "WriteOutcome":
        return cls(WriteStatus.ALREADY_EXISTS)

    @classmethod
    def transient(cls, detail: str, error_type: str = "Unknown") -> "WriteOutcome":
        return cls(WriteStatus.TRANSIENT_ERROR, detail=detail, error_type=error_type)


class UserWriter(Protocol):
    """Conditional insert of user records."""

    def insert(self, record: UserRecord) -> WriteOutcome:
        """Insert the record unless one with the same key exists."""
        ...


class DynamoDBUserWriter:
    """UserWriter backed by a DynamoDB table.

    Attributes:
        table_name: Users table name
    """

    def __init__(self, dynamodb: DynamoDBClient, table_name: str) -> None:
        if not table_name:
            raise ValueError("table_name is required for the user writer")
        self._dynamodb = dynamodb
        self.table_name = table_name

    def insert(self, record: UserRecord) -> WriteOutcome:
        try:
            result = self._dynamodb.put_item_if_absent(
                self.table_name, record.to_item(), key_attribute="PK"
            )
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "user_record_write_exception",
                user_id=record.user_id,
                error=str(e),
            )
            return WriteOutcome.transient(str(e), error_type=type(e).__name__)

        if result.is_success:
            logger.info("user_record_inserted", user_id=record.user_id)
            return WriteOutcome.inserted()

        if result.is_conflict:
            logger.info("user_record_already_exists", user_id=record.user_id)
            return WriteOutcome.already_exists()

        logger.warning(
            "user_record_write_failed",
            user_id=record.user_id,
            status=result.status.value,
            error_code=result.error_code,
            error=result.message,
        )
        return WriteOutcome.transient(
            result.message, error_type=result.error_code or result.status.value
        )


class TimeBoundUserWriter:
    """Bounds each insert of a wrapped writer to ``timeout_seconds``.

    An insert that outlives the bound is reported as TRANSIENT_ERROR. If it
    is still queued behind busy threads it is cancelled and never reaches the
    store. One that already started may still complete later; the conditional
    insert turns the following attempt into ALREADY_EXISTS.
    """

    def __init__(
        self,
        writer: UserWriter,
        timeout_seconds: float,
        max_workers: int = 5,
    ) -> None:
        self._writer = writer
        self.timeout_seconds = timeout_seconds
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="user-writer"
        )

    def insert(self, record: UserRecord) -> WriteOutcome:
        future = self._executor.submit(self._writer.insert, record)
        try:
            return future.result(timeout=self.timeout_seconds)
        except FutureTimeoutError:
            started = not future.cancel()
            logger.warning(
                "user_record_write_timeout",
                user_id=record.user_id,
                timeout_seconds=self.timeout_seconds,
                started=started,
            )
            if started:
                detail = f"Write timed out after {self.timeout_seconds}s"
            else:
                detail = (
                    f"Write not started within {self.timeout_seconds}s; "
                    "cancelled while queued"
                )
            return WriteOutcome.transient(detail, error_type="AttemptTimeout")
        except Exception as e:  # pylint: disable=broad-except
            return WriteOutcome.transient(str(e), error_type=type(e).__name__)
