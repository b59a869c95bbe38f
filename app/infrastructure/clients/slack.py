"""Slack client facade.

Wraps the Slack SDK (slack_sdk.WebClient) with OperationResult-based APIs
for consistent error handling.
"""

import structlog
from typing import Any, Dict, Optional
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from infrastructure.operations import OperationResult

logger = structlog.get_logger()

TRANSIENT_STATUS_CODES = (429, 500, 502, 503, 504)


def _error_code(error: str) -> str:
    return f"SLACK_{error.upper()}"


class SlackClientFacade:
    """Facade for Slack SDK client with standardized OperationResult returns.

    Args:
        client: An authenticated WebClient (the one Bolt hands to listeners)

    Example:
        >>> client = SlackClientFacade(WebClient(token="xoxb-..."))
        >>> result = client.post_message(channel="C123", text="Hello")
        >>> if result.is_success:
        ...     print(f"Message sent: {result.data['ts']}")
    """

    def __init__(self, client: WebClient):
        self._client = client
        self._log = logger.bind(component="slack_client_facade")

    def _api_error(self, log, e: SlackApiError) -> OperationResult:
        error = e.response.get("error", "unknown_error")
        log.exception("slack_api_error", error=error)
        if e.response.status_code in TRANSIENT_STATUS_CODES:
            return OperationResult.transient_error(
                message=f"Slack API transient error: {error}",
                error_code=_error_code(error),
            )
        return OperationResult.permanent_error(
            message=f"Slack API error: {error}",
            error_code=_error_code(error),
        )

    def post_message(
        self,
        channel: str,
        text: Optional[str] = None,
        thread_ts: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> OperationResult:
        """Post a message to a Slack channel.

        Args:
            channel: Channel ID to post to (e.g., "C1234567890")
            text: Message text (mrkdwn)
            thread_ts: Optional parent message timestamp for threading
            metadata: Optional message metadata ({"event_type", "event_payload"})
            **kwargs: Additional arguments passed to chat.postMessage
                (username, icon_url, ...)

        Returns:
            OperationResult with message data including 'ts' (timestamp)
        """
        log = self._log.bind(channel=channel, thread_ts=thread_ts)

        try:
            response = self._client.chat_postMessage(
                channel=channel,
                text=text,
                thread_ts=thread_ts,
                metadata=metadata,
                **kwargs,
            )
        except SlackApiError as e:
            return self._api_error(log, e)

        if not response.get("ok"):
            error = response.get("error", "unknown_error")
            log.warning("slack_message_failed", error=error)
            return OperationResult.permanent_error(
                message=f"Slack API error: {error}",
                error_code=_error_code(error),
            )

        log.info("slack_message_posted", ts=response.get("ts"))
        return OperationResult.success(
            data=response.data, message="Message posted successfully"
        )

    def get_user_info(self, user_id: str) -> OperationResult:
        """Get information about a Slack user.

        Args:
            user_id: Slack user ID (e.g., "U1234567890")

        Returns:
            OperationResult with the user object
        """
        log = self._log.bind(user_id=user_id)

        try:
            response = self._client.users_info(user=user_id)
        except SlackApiError as e:
            return self._api_error(log, e)

        if not response.get("ok"):
            error = response.get("error", "unknown_error")
            log.warning("slack_user_info_failed", error=error)
            return OperationResult.permanent_error(
                message=f"Slack API error: {error}",
                error_code=_error_code(error),
            )

        log.debug("slack_user_info_retrieved")
        return OperationResult.success(
            data=response.get("user"), message="User info retrieved successfully"
        )

    def get_message(self, channel: str, ts: str) -> OperationResult:
        """Fetch a single message by channel and timestamp.

        Top-level messages come from ``conversations.history``; thread
        replies are not listed there, so ``conversations.replies`` is tried
        next.

        Args:
            channel: Channel ID holding the message
            ts: Message timestamp (its id)

        Returns:
            OperationResult with the message object, or a permanent error
            with code ``SLACK_MESSAGE_NOT_FOUND``
        """
        log = self._log.bind(channel=channel, ts=ts)

        try:
            response = self._client.conversations_history(
                channel=channel, latest=ts, inclusive=True, limit=1
            )
            message = _find_message(response, ts)
            if message is None:
                response = self._client.conversations_replies(channel=channel, ts=ts)
                message = _find_message(response, ts)
        except SlackApiError as e:
            if e.response.get("error") == "thread_not_found":
                message = None
            else:
                return self._api_error(log, e)

        if message is None:
            log.info("slack_message_not_found")
            return OperationResult.permanent_error(
                message=f"Message {ts} not found in {channel}",
                error_code=_error_code("message_not_found"),
            )

        log.debug("slack_message_retrieved")
        return OperationResult.success(
            data=message, message="Message retrieved successfully"
        )


def _find_message(response, ts: str) -> Optional[Dict[str, Any]]:
    for message in response.get("messages") or []:
        if message.get("ts") == ts:
            return message
    return None
