"""DynamoDB item access for the preference table."""

from typing import Any, Dict

from infrastructure.clients.aws.client import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

SERVICE_NAME = "dynamodb"


class DynamoDBClient:
    """Low-level ``get_item`` / ``put_item`` calls.

    Items use the DynamoDB attribute-value format (``{"S": ...}``,
    ``{"BOOL": ...}``); converting to and from domain objects is the
    caller's job.

    Args:
        session_provider: region, endpoint and credentials for every call
    """

    def __init__(self, session_provider: SessionProvider) -> None:
        self._session_provider = session_provider

    def _call(self, method: str, **kwargs) -> OperationResult:
        return execute_aws_api_call(
            SERVICE_NAME,
            method,
            **self._session_provider.build_client_kwargs(),
            **kwargs,
        )

    def get_item(
        self, table_name: str, Key: Dict[str, Any], **kwargs
    ) -> OperationResult:
        """Read one item. ``data`` is the raw response; ``Item`` is absent
        when the key does not exist.
        """
        return self._call("get_item", TableName=table_name, Key=Key, **kwargs)

    def put_item(
        self, table_name: str, Item: Dict[str, Any], **kwargs
    ) -> OperationResult:
        """Create or replace one item."""
        return self._call("put_item", TableName=table_name, Item=Item, **kwargs)
