"""Operation result types and status enums.

Standardized result types returned by every side-effecting call in the
pipeline: AWS API calls, queue hand-offs, metric publication and alerts.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
