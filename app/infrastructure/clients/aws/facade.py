"""AWS Clients facade for the services used by the signup pipeline.

Composition-based design: each service has a focused client class, composed
together in a lightweight facade sharing one SessionProvider.
"""

import structlog

from infrastructure.clients.aws.cloudwatch import CloudWatchClient
from infrastructure.clients.aws.dynamodb import DynamoDBClient
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.sns import SnsClient
from infrastructure.clients.aws.sqs import SqsClient
from infrastructure.configuration.integrations.aws import AwsSettings

logger = structlog.get_logger()


class AWSClients:
    """Facade for all AWS service clients.

    Exposes per-service clients as attributes (``dynamodb``, ``sqs``, ``sns``,
    ``cloudwatch``).

    Args:
        aws_settings: AWS configuration from settings.aws
        session_provider: Optional pre-built SessionProvider (tests)
    """

    def __init__(
        self,
        aws_settings: AwsSettings,
        session_provider: SessionProvider | None = None,
    ) -> None:
        self._session_provider = session_provider or SessionProvider(
            region=aws_settings.AWS_REGION,
            endpoint_url=aws_settings.ENDPOINT_URL,
        )
        max_retries = aws_settings.CALL_MAX_RETRIES

        self.dynamodb: DynamoDBClient = DynamoDBClient(
            self._session_provider, max_retries=max_retries
        )
        self.sqs: SqsClient = SqsClient(self._session_provider, max_retries=max_retries)
        self.sns: SnsClient = SnsClient(self._session_provider, max_retries=max_retries)
        self.cloudwatch: CloudWatchClient = CloudWatchClient(self._session_provider)

        logger.debug(
            "aws_clients_initialized",
            region=aws_settings.AWS_REGION,
            endpoint_url=aws_settings.ENDPOINT_URL,
        )
