"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core services.
"""

from functools import lru_cache
from typing import Optional

from slack_sdk import WebClient

from infrastructure.clients.aws import DynamoDBClient, SessionProvider
from infrastructure.clients.slack import SlackClientFacade
from infrastructure.configuration import Settings
from modules.autotranslate.models import ProviderConfig
from modules.autotranslate.preferences import (
    DynamoDBPreferenceStore,
    InMemoryPreferenceStore,
    PreferenceStore,
)
from modules.autotranslate.providers import TranslationProvider, create_provider


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_provider() -> TranslationProvider:
    """
    Get the process-wide translation provider.

    Built once from ``settings.autotranslate``. A failed build is not cached,
    so the error surfaces again on the next call.

    Raises:
        ConfigurationError: no provider kind is configured or a required
            setting of the selected provider is empty.
    """
    settings = get_settings()
    return create_provider(ProviderConfig.from_settings(settings.autotranslate))


@lru_cache
def get_preference_store() -> PreferenceStore:
    """
    Get the application-scoped preference store.

    ``AUTOTRANSLATE_PREFERENCES_BACKEND=memory`` keeps preferences in
    process memory; anything else uses the DynamoDB table.
    """
    settings = get_settings()
    if settings.autotranslate.PREFERENCES_BACKEND == "memory":
        return InMemoryPreferenceStore()

    session_provider = SessionProvider(
        region=settings.aws.AWS_REGION,
        endpoint_url=settings.aws.ENDPOINT_URL,
    )
    return DynamoDBPreferenceStore(
        DynamoDBClient(session_provider),
        table_name=settings.autotranslate.PREFERENCES_TABLE,
    )


@lru_cache
def get_slack_client() -> Optional[SlackClientFacade]:
    """
    Get the Slack Web API client used outside of Bolt listeners.

    Returns:
        The client, or None when ``SLACK_TOKEN`` is not set.
    """
    settings = get_settings()
    if not settings.slack.SLACK_TOKEN:
        return None
    return SlackClientFacade(WebClient(token=settings.slack.SLACK_TOKEN))
