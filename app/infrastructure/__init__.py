"""Infrastructure modules for the signup pipeline.

Centralized infrastructure components:
- configuration: Settings management (Settings, AwsSettings, SignupSettings, RetrySettings)
- logging: Structured logging (get_module_logger, bind_invocation_context)
- clients: AWS service clients (DynamoDB, SQS, SNS, CloudWatch)
- operations: Operation results and status enums
- observability: Best-effort counter metrics
- notifications: Admin alert channels
- resilience: Queue-backed retry with bounded exponential backoff
- services: Application-scoped providers (get_settings, get_aws_clients)
"""

# Observability
from infrastructure.logging import get_module_logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Dependency Injection Services
from infrastructure.services import get_settings, get_aws_clients

__all__ = [
    # Observability
    "get_module_logger",
    # Operations
    "OperationResult",
    "OperationStatus",
    # Dependency Injection Services
    "get_settings",
    "get_aws_clients",
]
