from unittest.mock import MagicMock

import pytest

from infrastructure.operations import OperationResult
from infrastructure.services import (
    get_preference_store,
    get_settings,
    get_slack_client,
    get_translation_provider,
)
from modules.autotranslate.models import (
    BotIdentity,
    ChatUser,
    MessageEvent,
    ProviderConfig,
    ProviderKind,
    UserPreference,
)
from modules.autotranslate.preferences import InMemoryPreferenceStore
from modules.autotranslate.providers.base import TranslationProvider


@pytest.fixture(autouse=True)
def clear_service_caches():
    """Drop the process-wide singletons between tests."""
    get_settings.cache_clear()
    get_translation_provider.cache_clear()
    get_preference_store.cache_clear()
    get_slack_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_translation_provider.cache_clear()
    get_preference_store.cache_clear()
    get_slack_client.cache_clear()


@pytest.fixture
def vllm_config():
    return ProviderConfig(
        kind=ProviderKind.VLLM,
        api_url="http://vllm.local/v1/completions",
        api_key="sk-vllm",
        model="qwen2.5-7b-instruct",
    )


@pytest.fixture
def litellm_config():
    return ProviderConfig(
        kind=ProviderKind.LITELLM,
        api_url="http://litellm.local/v1/chat/completions",
        api_key="sk-litellm",
        model="gpt-4o-mini",
    )


@pytest.fixture
def aws_config():
    return ProviderConfig(
        kind=ProviderKind.AWS,
        aws_access_key_id="AKIAEXAMPLE",
        aws_secret_access_key="secret",
        aws_region="ca-central-1",
    )


@pytest.fixture
def mock_provider():
    """A provider whose translate() is a MagicMock; answers "Hello"."""
    provider = MagicMock(spec=TranslationProvider)
    provider.get_kind.return_value = "vllm"
    provider.translate.return_value = "Hello"
    return provider


@pytest.fixture
def preference_store():
    return InMemoryPreferenceStore()


@pytest.fixture
def korean_speaker(preference_store):
    """User U123 opted in to ko -> en translation."""
    preference = UserPreference(
        user_id="U123",
        activated=True,
        source_language="ko",
        target_language="en",
    )
    preference_store.set(preference)
    return preference


@pytest.fixture
def user_resolver():
    resolver = MagicMock()
    resolver.side_effect = lambda user_id: ChatUser(user_id=user_id, is_bot=False)
    return resolver


@pytest.fixture
def message_poster():
    poster = MagicMock()
    poster.post.return_value = OperationResult.success(data={"ts": "1700000001.000200"})
    return poster


@pytest.fixture
def bot_identity():
    return BotIdentity(username="autotranslate-bot", icon_url="")


@pytest.fixture
def message_event():
    return MessageEvent(
        message_id="1700000000.000100",
        channel_id="C123",
        user_id="U123",
        text="안녕하세요",
    )
