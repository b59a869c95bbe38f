"""Data model of the auto-translate pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from infrastructure.configuration.features import AutoTranslateSettings
from modules.autotranslate.errors import ConfigurationError
from modules.autotranslate.languages import AUTO_DETECT, is_supported_language

# Metadata event type stamped on every message this bot posts. Inbound
# messages carrying it are the bot's own output and are never translated.
TRANSLATION_EVENT_TYPE = "autotranslate_translation"

DEFAULT_BOT_USERNAME = "autotranslate-bot"

# Message subtypes that are channel housekeeping rather than something a
# person wrote. "bot_message" is not listed: bot traffic must reach the
# marker check first and is rejected later by the bot-user check.
SYSTEM_SUBTYPES = frozenset(
    {
        "channel_join",
        "channel_leave",
        "channel_topic",
        "channel_purpose",
        "channel_name",
        "channel_archive",
        "channel_unarchive",
        "channel_convert_to_private",
        "channel_convert_to_public",
        "group_join",
        "group_leave",
        "group_topic",
        "group_purpose",
        "group_name",
        "group_archive",
        "group_unarchive",
        "pinned_item",
        "unpinned_item",
        "message_changed",
        "message_deleted",
        "message_replied",
        "reminder_add",
        "ekm_access_denied",
    }
)


@dataclass(frozen=True)
class TranslationRequest:
    text: str
    source_language: str
    target_language: str

    @property
    def is_auto_detect(self) -> bool:
        return self.source_language == AUTO_DETECT


@dataclass(frozen=True)
class TranslationResult:
    translated_text: str


class UserPreference(BaseModel):
    """A user's auto-translate opt-in, as kept in the preference store.

    ``source_language`` may be "auto"; ``target_language`` must name a
    concrete language.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    activated: bool = False
    source_language: str = AUTO_DETECT
    target_language: str = "en"

    @field_validator("user_id")
    @classmethod
    def user_id_not_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("user_id must not be empty")
        return value

    @field_validator("source_language")
    @classmethod
    def source_language_supported(cls, value: str) -> str:
        if not is_supported_language(value):
            raise ValueError(f"unsupported source language: {value}")
        return value

    @field_validator("target_language")
    @classmethod
    def target_language_supported(cls, value: str) -> str:
        if value == AUTO_DETECT or not is_supported_language(value):
            raise ValueError(f"unsupported target language: {value}")
        return value


class ProviderKind(str, Enum):
    """Translation backend protocols.

    AWS: managed translation API (AWS Translate)
    VLLM: completion-style LLM endpoint (vLLM /v1/completions)
    LITELLM: chat-style LLM endpoint (LiteLLM / OpenAI chat completions)
    """

    AWS = "aws"
    VLLM = "vllm"
    LITELLM = "litellm"


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable settings of the one active translation provider."""

    kind: ProviderKind
    api_url: str = ""
    api_key: str = field(default="", repr=False)
    model: str = ""
    aws_access_key_id: str = field(default="", repr=False)
    aws_secret_access_key: str = field(default="", repr=False)
    aws_region: str = ""
    timeout: int = 30

    @classmethod
    def from_settings(cls, settings: AutoTranslateSettings) -> "ProviderConfig":
        """Build the config of the provider selected by AUTOTRANSLATE_PROVIDER.

        Raises:
            ConfigurationError: no provider kind is set, or it is unknown
        """
        raw_kind = settings.PROVIDER.strip().lower()
        if not raw_kind:
            raise ConfigurationError("no translation provider configured")
        try:
            kind = ProviderKind(raw_kind)
        except ValueError as e:
            raise ConfigurationError(
                f"unknown translation provider: {raw_kind}", cause=e
            ) from e

        if kind == ProviderKind.AWS:
            return cls(
                kind=kind,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                aws_region=settings.AWS_REGION,
                timeout=settings.REQUEST_TIMEOUT,
            )
        if kind == ProviderKind.VLLM:
            return cls(
                kind=kind,
                api_url=settings.VLLM_API_URL,
                api_key=settings.VLLM_API_KEY,
                model=settings.VLLM_MODEL,
                timeout=settings.REQUEST_TIMEOUT,
            )
        return cls(
            kind=kind,
            api_url=settings.LITELLM_API_URL,
            api_key=settings.LITELLM_API_KEY,
            model=settings.LITELLM_MODEL,
            timeout=settings.REQUEST_TIMEOUT,
        )

    def validate(self) -> None:
        """Check that every field the selected provider needs is filled in.

        Raises:
            ConfigurationError: naming the first missing field
        """
        if self.kind == ProviderKind.AWS:
            required = {
                "AWS access key id": self.aws_access_key_id,
                "AWS secret access key": self.aws_secret_access_key,
                "AWS region": self.aws_region,
            }
        else:
            required = {"API URL": self.api_url, "model": self.model}

        for label, value in required.items():
            if not value or not value.strip():
                raise ConfigurationError(
                    f"{self.kind.value} provider: {label} is not configured",
                    provider=self.kind.value,
                )


@dataclass(frozen=True)
class BotIdentity:
    """Display identity used on translated replies."""

    username: str = DEFAULT_BOT_USERNAME
    icon_url: str = ""

    @classmethod
    def from_settings(cls, settings: AutoTranslateSettings) -> "BotIdentity":
        return cls(
            username=settings.BOT_USERNAME or DEFAULT_BOT_USERNAME,
            icon_url=settings.BOT_ICON_URL,
        )


@dataclass(frozen=True)
class ChatUser:
    user_id: str
    is_bot: bool = False


@dataclass(frozen=True)
class MessageEvent:
    """A message posted in a conversation, independent of the chat platform.

    Attributes:
        message_id: id of the message (Slack ``ts``)
        channel_id: conversation the message was posted in
        user_id: author, empty for messages posted by integrations
        text: message text
        thread_root_id: id of the thread root when the message is a reply
        subtype: platform message subtype, None for ordinary messages
        bot_id: set when an integration posted the message
        metadata: platform message metadata ({"event_type", "event_payload"})
    """

    message_id: str
    channel_id: str
    user_id: str
    text: str
    thread_root_id: Optional[str] = None
    subtype: Optional[str] = None
    bot_id: Optional[str] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_system(self) -> bool:
        return self.subtype in SYSTEM_SUBTYPES

    @property
    def has_translation_marker(self) -> bool:
        return (self.metadata or {}).get("event_type") == TRANSLATION_EVENT_TYPE


@dataclass(frozen=True)
class OutboundMessage:
    """A translated reply ready to be posted.

    ``author_id`` is the original poster; ``marker_flag`` is True on every
    message this bot composes.
    """

    channel_id: str
    author_id: str
    thread_root_id: str
    body: str
    marker_flag: bool = True
    username: str = DEFAULT_BOT_USERNAME
    icon_url: str = ""
