"""DynamoDB client for AWS operations.

Provides the conditional put used for user records, returning
OperationResult. Items are plain Python dicts converted to DynamoDB
attribute values with boto3's TypeSerializer.
"""

from typing import Any, Dict

from boto3.dynamodb.types import TypeSerializer  # type: ignore

from infrastructure.clients.aws.executor import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

_serializer = TypeSerializer()


def serialize_item(item: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a plain dict into DynamoDB attribute-value format."""
    return {key: _serializer.serialize(value) for key, value in item.items()}


class DynamoDBClient:
    """Client for DynamoDB operations.

    All methods return OperationResult for consistent downstream handling.

    Args:
        session_provider: SessionProvider instance for client management
        max_retries: In-call retries for throttled requests
    """

    def __init__(self, session_provider: SessionProvider, max_retries: int = 2) -> None:
        self._session_provider = session_provider
        self._max_retries = max_retries
        self._service_name = "dynamodb"

    def put_item_if_absent(
        self,
        table_name: str,
        item: Dict[str, Any],
        key_attribute: str,
    ) -> OperationResult:
        """Insert an item only if no item with the same key exists.

        Args:
            table_name: Name of the DynamoDB table
            item: Plain dict item to store
            key_attribute: Partition key attribute used in the condition

        Returns:
            OperationResult: SUCCESS when inserted, CONFLICT when the key is
            already present, or a classified error
        """
        return execute_aws_api_call(
            self._session_provider.get_client(self._service_name),
            "put_item",
            max_retries=self._max_retries,
            TableName=table_name,
            Item=serialize_item(item),
            ConditionExpression="attribute_not_exists(#pk)",
            ExpressionAttributeNames={"#pk": key_attribute},
        )
