"""LiteLLM provider (chat-style LLM endpoint, OpenAI compatible)."""

from modules.autotranslate.errors import DecodeError
from modules.autotranslate.models import (
    ProviderKind,
    TranslationRequest,
    TranslationResult,
)
from modules.autotranslate.prompts import build_chat_messages
from modules.autotranslate.providers import register_provider
from modules.autotranslate.providers.base import HttpLLMProvider
from modules.autotranslate.sanitizer import clean_translation_output

# Chat models are wordier than completion models; the cap stays above the
# vLLM one so long messages are not cut mid-sentence.
MAX_TOKENS = 2048
TEMPERATURE = 0.3


@register_provider(ProviderKind.LITELLM)
class LiteLLMProvider(HttpLLMProvider):
    """Translates through a system + user chat completion request."""

    def _translate(self, request: TranslationRequest) -> TranslationResult:
        payload = {
            "model": self._config.model,
            "messages": build_chat_messages(
                request.text, request.source_language, request.target_language
            ),
            "temperature": TEMPERATURE,
            "max_tokens": MAX_TOKENS,
        }
        choices = self._choices(self._post(payload))

        choice = choices[0]
        message = choice.get("message") if isinstance(choice, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise DecodeError(
                "litellm choice has no message content", provider=self.get_kind()
            )
        return TranslationResult(translated_text=clean_translation_output(content))
