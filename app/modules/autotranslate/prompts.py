"""Prompt construction for the LLM-backed providers.

Prompts are imperative and ask for the translation only, so there is as
little as possible for the sanitizer to strip afterwards. Output depends on
nothing but the arguments and the language catalog.
"""

from typing import Dict, List

from modules.autotranslate.languages import (
    AUTO_DETECT,
    get_language_clarification,
    get_language_name,
)

SYSTEM_INSTRUCTION = (
    "You are a translation system. Output ONLY the translated text without "
    "any explanations, notes, or additional commentary."
)


def describe_language(code: str) -> str:
    """Display name followed by the script hint, e.g. "Korean (한국어, ...)"."""
    return f"{get_language_name(code)}{get_language_clarification(code)}"


def _direction(source_language: str, target_language: str) -> str:
    target = describe_language(target_language)
    if source_language == AUTO_DETECT:
        return f"to {target}"
    return f"from {describe_language(source_language)} to {target}"


def build_completion_prompt(
    text: str, source_language: str, target_language: str
) -> str:
    """Free-text prompt for completion-style models."""
    return (
        f"Translate {_direction(source_language, target_language)}. "
        f"Reply with ONLY the translation.\n\n{text}"
    )


def build_user_prompt(text: str, source_language: str, target_language: str) -> str:
    """User turn for chat-style models."""
    return f"Translate {_direction(source_language, target_language)}:\n\n{text}"


def build_chat_messages(
    text: str, source_language: str, target_language: str
) -> List[Dict[str, str]]:
    """System instruction plus user turn for chat-style models."""
    return [
        {"role": "system", "content": SYSTEM_INSTRUCTION},
        {
            "role": "user",
            "content": build_user_prompt(text, source_language, target_language),
        },
    ]
