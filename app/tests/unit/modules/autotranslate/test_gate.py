from unittest.mock import MagicMock, patch

import pytest

from infrastructure.operations import OperationResult
from modules.autotranslate.errors import (
    BackendError,
    ConfigurationError,
    TransportError,
)
from modules.autotranslate.gate import EventGate, format_translation_body
from modules.autotranslate.models import (
    TRANSLATION_EVENT_TYPE,
    BotIdentity,
    ChatUser,
    MessageEvent,
    UserPreference,
)


@pytest.fixture
def gate(preference_store, mock_provider, user_resolver, message_poster, bot_identity):
    return EventGate(
        preferences=preference_store,
        provider_resolver=lambda: mock_provider,
        user_resolver=user_resolver,
        poster=message_poster,
        bot_identity=bot_identity,
    )


@pytest.mark.unit
class TestFormatTranslationBody:
    def test_explicit_source(self):
        assert format_translation_body("ko", "en", "Hello") == "*[ko → en]*\nHello"

    def test_auto_source_shows_detected(self):
        assert (
            format_translation_body("auto", "en", "Hello") == "*[detected → en]*\nHello"
        )


@pytest.mark.unit
class TestEventGateTranslates:
    def test_posts_threaded_marked_reply(
        self, gate, korean_speaker, message_event, mock_provider, message_poster
    ):
        result = gate.on_message(message_event)

        mock_provider.translate.assert_called_once_with("안녕하세요", "ko", "en")
        message_poster.post.assert_called_once()
        posted = message_poster.post.call_args.args[0]
        assert posted is result
        assert posted.channel_id == "C123"
        assert posted.thread_root_id == "1700000000.000100"
        assert posted.author_id == "U123"
        assert posted.marker_flag is True
        assert posted.username == "autotranslate-bot"
        assert posted.body.startswith("*[ko → en]*")
        assert "Hello" in posted.body

    def test_reply_in_thread_goes_to_thread_root(
        self, gate, korean_speaker, message_poster
    ):
        event = MessageEvent(
            message_id="1700000050.000100",
            channel_id="C123",
            user_id="U123",
            text="안녕하세요",
            thread_root_id="1700000000.000100",
        )

        gate.on_message(event)

        posted = message_poster.post.call_args.args[0]
        assert posted.thread_root_id == "1700000000.000100"

    def test_auto_source_is_labelled_detected(
        self, gate, preference_store, message_event, message_poster
    ):
        preference_store.set(
            UserPreference(user_id="U123", activated=True, target_language="en")
        )

        gate.on_message(message_event)

        posted = message_poster.post.call_args.args[0]
        assert posted.body == "*[detected → en]*\nHello"

    def test_icon_url_from_identity(
        self,
        preference_store,
        mock_provider,
        user_resolver,
        message_poster,
        korean_speaker,
        message_event,
    ):
        gate = EventGate(
            preference_store,
            lambda: mock_provider,
            user_resolver,
            message_poster,
            BotIdentity(username="translator", icon_url="https://i/icon.png"),
        )

        gate.on_message(message_event)

        posted = message_poster.post.call_args.args[0]
        assert posted.username == "translator"
        assert posted.icon_url == "https://i/icon.png"


@pytest.mark.unit
class TestEventGateSkips:
    def test_system_message(self, gate, korean_speaker, mock_provider, message_poster):
        event = MessageEvent(
            "1", "C123", "U123", "has joined the channel", subtype="channel_join"
        )

        assert gate.on_message(event) is None
        mock_provider.translate.assert_not_called()
        message_poster.post.assert_not_called()

    def test_own_translation_is_never_translated(
        self, gate, korean_speaker, mock_provider, user_resolver, message_poster
    ):
        event = MessageEvent(
            "2",
            "C123",
            "U123",
            "*[ko → en]*\nHello",
            metadata={"event_type": TRANSLATION_EVENT_TYPE, "event_payload": {}},
        )

        assert gate.on_message(event) is None
        user_resolver.assert_not_called()
        mock_provider.translate.assert_not_called()
        message_poster.post.assert_not_called()

    def test_marker_is_checked_before_bot_traffic(
        self, gate, mock_provider, user_resolver, message_poster
    ):
        event = MessageEvent(
            "2",
            "C123",
            "",
            "*[ko → en]*\nHello",
            subtype="bot_message",
            bot_id="B1",
            metadata={"event_type": TRANSLATION_EVENT_TYPE},
        )

        with patch("modules.autotranslate.gate.logger") as mock_logger:
            assert gate.on_message(event) is None

        mock_logger.debug.assert_called_once_with(
            "message_skipped", reason="own_translation"
        )
        user_resolver.assert_not_called()

    def test_integration_post_without_user(
        self, gate, user_resolver, mock_provider, message_poster
    ):
        event = MessageEvent("3", "C123", "", "deploy done", bot_id="B9")

        assert gate.on_message(event) is None
        user_resolver.assert_not_called()
        mock_provider.translate.assert_not_called()

    def test_bot_user(
        self, gate, korean_speaker, message_event, user_resolver, mock_provider
    ):
        user_resolver.side_effect = lambda user_id: ChatUser(user_id, is_bot=True)

        assert gate.on_message(message_event) is None
        mock_provider.translate.assert_not_called()

    def test_unknown_user_is_logged(
        self, gate, korean_speaker, message_event, user_resolver, mock_provider
    ):
        user_resolver.side_effect = LookupError("user_not_found")

        with patch("modules.autotranslate.gate.logger") as mock_logger:
            assert gate.on_message(message_event) is None

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "user_resolution_failed"
        mock_provider.translate.assert_not_called()

    def test_no_preference(self, gate, message_event, mock_provider, message_poster):
        assert gate.on_message(message_event) is None
        mock_provider.translate.assert_not_called()
        message_poster.post.assert_not_called()

    def test_deactivated_preference(
        self, gate, preference_store, message_event, mock_provider
    ):
        preference_store.set(
            UserPreference(user_id="U123", activated=False, source_language="ko")
        )

        assert gate.on_message(message_event) is None
        mock_provider.translate.assert_not_called()

    def test_translation_equal_to_source_is_not_posted(
        self, gate, korean_speaker, message_event, mock_provider, message_poster
    ):
        mock_provider.translate.return_value = "  안녕하세요 "

        assert gate.on_message(message_event) is None
        message_poster.post.assert_not_called()


@pytest.mark.unit
class TestEventGateFailures:
    @pytest.mark.parametrize(
        "error",
        [
            BackendError("no translation returned from vllm", provider="vllm"),
            TransportError("vllm API request failed", provider="vllm"),
            ConfigurationError("invalid AWS credentials", provider="aws"),
        ],
    )
    def test_provider_error_logs_once_and_posts_nothing(
        self, gate, korean_speaker, message_event, mock_provider, message_poster, error
    ):
        mock_provider.translate.side_effect = error

        with patch("modules.autotranslate.gate.logger") as mock_logger:
            assert gate.on_message(message_event) is None

        message_poster.post.assert_not_called()
        mock_logger.error.assert_called_once()
        args, kwargs = mock_logger.error.call_args
        assert args[0] == "translation_failed"
        assert kwargs["stage"] == "translate"
        assert kwargs["provider"] == "vllm"
        assert kwargs["error_type"] == type(error).__name__

    def test_unconfigured_provider(
        self,
        preference_store,
        user_resolver,
        message_poster,
        bot_identity,
        korean_speaker,
        message_event,
    ):
        resolver = MagicMock(side_effect=ConfigurationError("no provider configured"))
        gate = EventGate(
            preference_store, resolver, user_resolver, message_poster, bot_identity
        )

        with patch("modules.autotranslate.gate.logger") as mock_logger:
            assert gate.on_message(message_event) is None

        assert mock_logger.error.call_args.args[0] == "provider_resolution_failed"
        message_poster.post.assert_not_called()

    def test_post_failure_is_logged(
        self, gate, korean_speaker, message_event, message_poster
    ):
        message_poster.post.return_value = OperationResult.permanent_error(
            "Slack API error: not_in_channel", error_code="SLACK_NOT_IN_CHANNEL"
        )

        with patch("modules.autotranslate.gate.logger") as mock_logger:
            assert gate.on_message(message_event) is None

        args, kwargs = mock_logger.error.call_args
        assert args[0] == "translation_post_failed"
        assert kwargs["error_code"] == "SLACK_NOT_IN_CHANNEL"

    def test_unexpected_exception_does_not_escape(
        self, gate, korean_speaker, message_event, mock_provider
    ):
        mock_provider.translate.side_effect = RuntimeError("bug")

        with patch("modules.autotranslate.gate.logger") as mock_logger:
            assert gate.on_message(message_event) is None

        mock_logger.exception.assert_called_once()
