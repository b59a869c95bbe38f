"""Infrastructure AWS clients public API.

Per-service clients sharing a SessionProvider:

    from infrastructure.clients.aws import DynamoDBClient, SessionProvider

    dynamodb = DynamoDBClient(SessionProvider(region="ca-central-1"))
    result = dynamodb.get_item("my_table", {"user_id": {"S": "U123"}})
    if result.is_success:
        item = result.data.get("Item")
"""

from infrastructure.clients.aws.dynamodb import DynamoDBClient
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.translate import TranslateClient

__all__ = [
    "SessionProvider",
    "DynamoDBClient",
    "TranslateClient",
]
