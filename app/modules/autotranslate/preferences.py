"""User preference storage.

The event gate only reads preferences; the HTTP API writes them. Both talk
to a ``PreferenceStore``, a key-value store keyed by user id.
"""

import threading
from typing import Any, Dict, Optional, Protocol

from pydantic import ValidationError

from infrastructure.clients.aws import DynamoDBClient
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from modules.autotranslate.models import UserPreference

logger = get_module_logger()


class PreferenceStore(Protocol):
    def get(self, user_id: str) -> Optional[UserPreference]:
        """Return the stored preference, or None when the user has none."""
        ...

    def set(self, preference: UserPreference) -> OperationResult:
        """Create or replace the preference of ``preference.user_id``."""
        ...


class InMemoryPreferenceStore:
    """Process-local store, for development and tests."""

    def __init__(self) -> None:
        self._items: Dict[str, UserPreference] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[UserPreference]:
        with self._lock:
            return self._items.get(user_id)

    def set(self, preference: UserPreference) -> OperationResult:
        with self._lock:
            self._items[preference.user_id] = preference
        return OperationResult.success(data=preference, message="preference saved")


def preference_to_item(preference: UserPreference) -> Dict[str, Any]:
    return {
        "user_id": {"S": preference.user_id},
        "activated": {"BOOL": preference.activated},
        "source_language": {"S": preference.source_language},
        "target_language": {"S": preference.target_language},
    }


def item_to_preference(item: Dict[str, Any]) -> UserPreference:
    return UserPreference(
        user_id=item["user_id"]["S"],
        activated=item.get("activated", {}).get("BOOL", False),
        source_language=item["source_language"]["S"],
        target_language=item["target_language"]["S"],
    )


class DynamoDBPreferenceStore:
    """Preferences kept in a DynamoDB table with ``user_id`` as hash key.

    Args:
        client: DynamoDB client
        table_name: Name of the preferences table
    """

    def __init__(self, client: DynamoDBClient, table_name: str) -> None:
        self._client = client
        self._table_name = table_name

    def get(self, user_id: str) -> Optional[UserPreference]:
        """Read a preference.

        A failed read or an unreadable item is logged and treated as "no
        preference", so a storage problem never produces a translation.
        """
        result = self._client.get_item(
            self._table_name, Key={"user_id": {"S": user_id}}
        )
        if not result.is_success:
            if result.status != OperationStatus.NOT_FOUND:
                logger.error(
                    "preference_read_failed",
                    user_id=user_id,
                    error=result.message,
                    error_code=result.error_code,
                )
            return None

        item = (result.data or {}).get("Item")
        if not item:
            return None

        try:
            return item_to_preference(item)
        except (KeyError, ValidationError) as e:
            logger.warning("preference_item_invalid", user_id=user_id, error=str(e))
            return None

    def set(self, preference: UserPreference) -> OperationResult:
        result = self._client.put_item(
            self._table_name, Item=preference_to_item(preference)
        )
        if not result.is_success:
            logger.error(
                "preference_write_failed",
                user_id=preference.user_id,
                error=result.message,
            )
            return result
        return OperationResult.success(data=preference, message="preference saved")
