"""Infrastructure AWS clients public API.

DI-friendly AWS clients with per-service class decomposition. The facade
AWSClients composes the per-service clients and exposes them as attributes:

    from infrastructure.services import get_aws_clients

    aws = get_aws_clients()
    result = aws.sqs.send_message(queue_url, body, delay_seconds=30)
    if not result.is_success:
        ...
"""

from infrastructure.clients.aws.cloudwatch import CloudWatchClient
from infrastructure.clients.aws.dynamodb import DynamoDBClient
from infrastructure.clients.aws.facade import AWSClients
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.sns import SnsClient
from infrastructure.clients.aws.sqs import SqsClient

__all__ = [
    "AWSClients",
    "SessionProvider",
    "DynamoDBClient",
    "SqsClient",
    "SnsClient",
    "CloudWatchClient",
]
