from unittest.mock import MagicMock

import pytest

from infrastructure.clients.slack import SlackClientFacade
from infrastructure.operations import OperationResult
from modules.autotranslate.models import TRANSLATION_EVENT_TYPE, OutboundMessage
from modules.autotranslate.slack import (
    SlackMessagePoster,
    SlackUserResolver,
    message_event_from_slack,
    neutralize_group_mentions,
    translation_metadata,
)


@pytest.fixture
def facade():
    return MagicMock(spec=SlackClientFacade)


@pytest.fixture
def outbound():
    return OutboundMessage(
        channel_id="C123",
        author_id="U123",
        thread_root_id="1700000000.000100",
        body="*[ko → en]*\nHello",
    )


@pytest.mark.unit
class TestMessageEventFromSlack:
    def test_user_message(self):
        event = message_event_from_slack(
            {
                "type": "message",
                "channel": "C123",
                "user": "U123",
                "text": "안녕하세요",
                "ts": "1700000000.000100",
                "channel_type": "channel",
            }
        )
        assert event.message_id == "1700000000.000100"
        assert event.channel_id == "C123"
        assert event.user_id == "U123"
        assert event.text == "안녕하세요"
        assert event.thread_root_id is None
        assert event.subtype is None
        assert not event.is_system

    def test_thread_reply(self):
        event = message_event_from_slack(
            {"channel": "C1", "user": "U1", "ts": "2.0", "thread_ts": "1.0"}
        )
        assert event.thread_root_id == "1.0"
        assert event.text == ""

    def test_bot_post_with_marker(self):
        event = message_event_from_slack(
            {
                "subtype": "bot_message",
                "bot_id": "B1",
                "channel": "C1",
                "ts": "3.0",
                "text": "*[ko → en]*\nHello",
                "metadata": {"event_type": TRANSLATION_EVENT_TYPE},
            }
        )
        assert event.user_id == ""
        assert event.bot_id == "B1"
        assert event.has_translation_marker

    def test_channel_join_is_system(self):
        event = message_event_from_slack(
            {"subtype": "channel_join", "user": "U1", "channel": "C1", "ts": "4.0"}
        )
        assert event.is_system


@pytest.mark.unit
def test_translation_metadata(outbound):
    assert translation_metadata(outbound) == {
        "event_type": TRANSLATION_EVENT_TYPE,
        "event_payload": {"from_plugin": True, "original_author": "U123"},
    }


@pytest.mark.unit
class TestSlackUserResolver:
    def test_resolves_user(self, facade):
        facade.get_user_info.return_value = OperationResult.success(
            data={"id": "U123", "is_bot": False}
        )
        user = SlackUserResolver(facade)("U123")
        assert user.user_id == "U123"
        assert user.is_bot is False

    def test_resolves_bot_user(self, facade):
        facade.get_user_info.return_value = OperationResult.success(
            data={"id": "U999", "is_bot": True}
        )
        assert SlackUserResolver(facade)("U999").is_bot is True

    def test_failure_raises_lookup_error(self, facade):
        facade.get_user_info.return_value = OperationResult.permanent_error(
            "Slack API error: user_not_found", error_code="SLACK_USER_NOT_FOUND"
        )
        with pytest.raises(LookupError, match="U404"):
            SlackUserResolver(facade)("U404")


@pytest.mark.unit
class TestSlackMessagePoster:
    def test_posts_threaded_reply_as_bot(self, facade, outbound):
        facade.post_message.return_value = OperationResult.success(data={"ts": "5.0"})

        result = SlackMessagePoster(facade).post(outbound)

        assert result.is_success
        facade.post_message.assert_called_once_with(
            channel="C123",
            text="*[ko → en]*\nHello",
            thread_ts="1700000000.000100",
            metadata=translation_metadata(outbound),
            username="autotranslate-bot",
            unfurl_links=False,
            unfurl_media=False,
            link_names=False,
        )

    def test_icon_url_is_sent_when_set(self, facade, outbound):
        message = OutboundMessage(
            channel_id=outbound.channel_id,
            author_id=outbound.author_id,
            thread_root_id=outbound.thread_root_id,
            body=outbound.body,
            icon_url="https://i/icon.png",
        )
        facade.post_message.return_value = OperationResult.success()

        SlackMessagePoster(facade).post(message)

        assert facade.post_message.call_args.kwargs["icon_url"] == "https://i/icon.png"

    def test_channel_broadcast_is_not_repeated(self, facade, outbound):
        message = OutboundMessage(
            channel_id=outbound.channel_id,
            author_id=outbound.author_id,
            thread_root_id=outbound.thread_root_id,
            body="*[ko → en]*\n<!channel> the deploy is done",
        )
        facade.post_message.return_value = OperationResult.success()

        SlackMessagePoster(facade).post(message)

        text = facade.post_message.call_args.kwargs["text"]
        assert "<!channel>" not in text
        assert text == "*[ko → en]*\n@channel the deploy is done"


@pytest.mark.unit
class TestNeutralizeGroupMentions:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("<!channel> hi", "@channel hi"),
            ("<!here> hi", "@here hi"),
            ("<!here|here> hi", "@here hi"),
            ("<!everyone> hi", "@everyone hi"),
            ("<!subteam^S0614TZR7|@sre-team> hi", "@sre-team hi"),
            ("<!subteam^S0614TZR7> hi", "@S0614TZR7 hi"),
        ],
    )
    def test_group_mentions_become_plain_text(self, text, expected):
        assert neutralize_group_mentions(text) == expected

    def test_user_mentions_and_links_are_kept(self):
        text = "<@U123> see <https://example.com|the doc>"
        assert neutralize_group_mentions(text) == text
