"""Slack adapters for the event gate.

Converts Slack ``message`` events into ``MessageEvent`` and implements the
gate's user-resolution and posting collaborators on top of
``SlackClientFacade``.
"""

import re
from typing import Any, Dict

from infrastructure.clients.slack import SlackClientFacade
from infrastructure.operations import OperationResult
from modules.autotranslate.models import (
    TRANSLATION_EVENT_TYPE,
    ChatUser,
    MessageEvent,
    OutboundMessage,
)

BROADCAST_MENTION = re.compile(r"<!(channel|here|everyone)(?:\|[^>]*)?>")
USERGROUP_MENTION = re.compile(r"<!subteam\^([A-Za-z0-9]+)(?:\|([^>]*))?>")


def message_event_from_slack(event: Dict[str, Any]) -> MessageEvent:
    """Build a MessageEvent from the payload of a Slack ``message`` event."""
    return MessageEvent(
        message_id=event.get("ts", ""),
        channel_id=event.get("channel", ""),
        user_id=event.get("user", ""),
        text=event.get("text", ""),
        thread_root_id=event.get("thread_ts"),
        subtype=event.get("subtype"),
        bot_id=event.get("bot_id"),
        metadata=event.get("metadata") or {},
    )


def neutralize_group_mentions(text: str) -> str:
    """Turn channel, here, everyone and user-group mentions into plain text.

    A translation repeats the whole original message, so the notification the
    author already sent must not go out a second time.
    """
    text = BROADCAST_MENTION.sub(lambda m: f"@{m.group(1)}", text)
    return USERGROUP_MENTION.sub(lambda m: m.group(2) or f"@{m.group(1)}", text)


def translation_metadata(message: OutboundMessage) -> Dict[str, Any]:
    """Slack message metadata marking a post as a translation by this bot."""
    return {
        "event_type": TRANSLATION_EVENT_TYPE,
        "event_payload": {
            "from_plugin": message.marker_flag,
            "original_author": message.author_id,
        },
    }


class SlackUserResolver:
    """Resolves Slack users through ``users.info``."""

    def __init__(self, client: SlackClientFacade) -> None:
        self._client = client

    def __call__(self, user_id: str) -> ChatUser:
        result = self._client.get_user_info(user_id)
        if not result.is_success or not result.data:
            raise LookupError(f"could not resolve user {user_id}: {result.message}")
        return ChatUser(
            user_id=result.data.get("id", user_id),
            is_bot=bool(result.data.get("is_bot", False)),
        )


class SlackMessagePoster:
    """Posts translated replies as threaded messages.

    Slack cannot post on behalf of another user, so the original author is
    carried in the message metadata while username and icon show the bot
    identity. Group mentions in the body are posted as plain text.
    """

    def __init__(self, client: SlackClientFacade) -> None:
        self._client = client

    def post(self, message: OutboundMessage) -> OperationResult:
        kwargs: Dict[str, Any] = {
            "username": message.username,
            "unfurl_links": False,
            "unfurl_media": False,
            "link_names": False,
        }
        if message.icon_url:
            kwargs["icon_url"] = message.icon_url

        return self._client.post_message(
            channel=message.channel_id,
            text=neutralize_group_mentions(message.body),
            thread_ts=message.thread_root_id,
            metadata=translation_metadata(message),
            **kwargs,
        )
