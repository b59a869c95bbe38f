"""vLLM provider (completion-style LLM endpoint)."""

from modules.autotranslate.errors import DecodeError
from modules.autotranslate.models import (
    ProviderKind,
    TranslationRequest,
    TranslationResult,
)
from modules.autotranslate.prompts import build_completion_prompt
from modules.autotranslate.providers import register_provider
from modules.autotranslate.providers.base import HttpLLMProvider
from modules.autotranslate.sanitizer import clean_translation_output

# Sized for chat messages, not documents.
MAX_TOKENS = 512
TEMPERATURE = 0.1

# Cut generation at the first sign of commentary or of the model continuing
# the prompt pattern.
STOP_SEQUENCES = (
    "\n\n",
    "\nNote:",
    "\nExplanation:",
    "\nTranslation:",
    "\n\nInput:",
    "[/INST]",
)


@register_provider(ProviderKind.VLLM)
class VLLMProvider(HttpLLMProvider):
    """Translates through a single-prompt completion request."""

    def _translate(self, request: TranslationRequest) -> TranslationResult:
        payload = {
            "model": self._config.model,
            "prompt": build_completion_prompt(
                request.text, request.source_language, request.target_language
            ),
            "max_tokens": MAX_TOKENS,
            "temperature": TEMPERATURE,
            "stop": list(STOP_SEQUENCES),
        }
        choices = self._choices(self._post(payload))

        choice = choices[0]
        text = choice.get("text") if isinstance(choice, dict) else None
        if not isinstance(text, str):
            raise DecodeError("vllm choice has no text", provider=self.get_kind())
        return TranslationResult(translated_text=clean_translation_output(text))
