"""Event gate: decides whether an incoming message is translated.

Checks run in a fixed order and stop at the first failure:

1. system messages are skipped
2. messages carrying the translation marker (this bot's own replies) are
   skipped; this runs before anything that looks at bot traffic
3. the author is resolved; unknown authors and bot accounts are skipped
4. authors without an activated preference are skipped
5. the configured provider is resolved
6. the text is translated
7. translations identical to the original are not posted
8. the reply is composed and 9. posted

Nothing raised while handling one message escapes ``on_message``: failures
are logged and the message is dropped. Silence is how auto-translation
fails.
"""

from typing import Callable, Optional, Protocol

from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.operations import OperationResult
from modules.autotranslate.errors import ConfigurationError, TranslationError
from modules.autotranslate.languages import AUTO_DETECT
from modules.autotranslate.models import (
    BotIdentity,
    ChatUser,
    MessageEvent,
    OutboundMessage,
)
from modules.autotranslate.preferences import PreferenceStore
from modules.autotranslate.providers.base import TranslationProvider

logger = get_module_logger()

DETECTED_SOURCE_LABEL = "detected"

# Raises LookupError when the user cannot be resolved.
UserResolver = Callable[[str], ChatUser]

# Raises ConfigurationError when no usable provider is configured.
ProviderResolver = Callable[[], TranslationProvider]


class MessagePoster(Protocol):
    def post(self, message: OutboundMessage) -> OperationResult: ...


def format_translation_body(
    source_language: str, target_language: str, translated_text: str
) -> str:
    """Reply body: a ``[source → target]`` header line, then the translation."""
    source_display = (
        DETECTED_SOURCE_LABEL if source_language == AUTO_DETECT else source_language
    )
    return f"*[{source_display} → {target_language}]*\n{translated_text}"


class EventGate:
    """Translates opted-in users' messages and posts the result as a reply.

    Args:
        preferences: store the opt-in preferences are read from
        provider_resolver: returns the process-wide translation provider
        user_resolver: resolves the author of a message
        poster: delivers the composed reply
        bot_identity: display name and icon used on replies
    """

    def __init__(
        self,
        preferences: PreferenceStore,
        provider_resolver: ProviderResolver,
        user_resolver: UserResolver,
        poster: MessagePoster,
        bot_identity: BotIdentity,
    ) -> None:
        self._preferences = preferences
        self._provider_resolver = provider_resolver
        self._user_resolver = user_resolver
        self._poster = poster
        self._bot_identity = bot_identity

    def on_message(self, event: MessageEvent) -> Optional[OutboundMessage]:
        """Handle one incoming message.

        Returns:
            The posted reply, or None when nothing was posted.
        """
        with bind_request_context(
            correlation_id=event.message_id,
            user_id=event.user_id or None,
            channel_id=event.channel_id,
        ):
            try:
                return self._handle(event)
            except Exception as e:  # pylint: disable=broad-except
                logger.exception("autotranslate_unexpected_error", error=str(e))
                return None

    def _handle(self, event: MessageEvent) -> Optional[OutboundMessage]:
        if event.is_system:
            logger.debug("message_skipped", reason="system_message")
            return None

        if event.has_translation_marker:
            logger.debug("message_skipped", reason="own_translation")
            return None

        if not event.user_id:
            logger.debug("message_skipped", reason="no_author", bot_id=event.bot_id)
            return None

        try:
            user = self._user_resolver(event.user_id)
        except LookupError as e:
            logger.error("user_resolution_failed", error=str(e))
            return None

        if user.is_bot:
            logger.debug("message_skipped", reason="bot_author")
            return None

        preference = self._preferences.get(user.user_id)
        if preference is None or not preference.activated:
            return None

        try:
            provider = self._provider_resolver()
        except ConfigurationError as e:
            logger.error(
                "provider_resolution_failed",
                stage="resolve_provider",
                error=str(e),
            )
            return None

        try:
            translated_text = provider.translate(
                event.text, preference.source_language, preference.target_language
            )
        except TranslationError as e:
            logger.error(
                "translation_failed",
                stage="translate",
                provider=provider.get_kind(),
                error_type=type(e).__name__,
                error=str(e),
            )
            return None

        if translated_text.strip() == event.text.strip():
            logger.debug(
                "message_skipped",
                reason="translation_matches_source",
                provider=provider.get_kind(),
            )
            return None

        message = OutboundMessage(
            channel_id=event.channel_id,
            author_id=event.user_id,
            thread_root_id=event.thread_root_id or event.message_id,
            body=format_translation_body(
                preference.source_language,
                preference.target_language,
                translated_text,
            ),
            marker_flag=True,
            username=self._bot_identity.username,
            icon_url=self._bot_identity.icon_url,
        )

        result = self._poster.post(message)
        if not result.is_success:
            logger.error(
                "translation_post_failed",
                stage="post",
                provider=provider.get_kind(),
                error=result.message,
                error_code=result.error_code,
            )
            return None

        logger.info(
            "translation_posted",
            provider=provider.get_kind(),
            source_language=preference.source_language,
            target_language=preference.target_language,
        )
        return message
