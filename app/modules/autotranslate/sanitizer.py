"""Cleanup of raw LLM output.

Models asked for "only the translation" still tend to wrap it in a label,
quote it, or append a note. ``clean_translation_output`` strips those
artifacts so LLM providers return text the way a translation API would.
"""

UNWANTED_PREFIXES = (
    "Translation: ",
    "Translated text: ",
    "Here is the translation: ",
    "The translation is: ",
    "Output: ",
    "Answer: ",
    "Result: ",
)

TRAILING_MARKERS = (
    "\n\nNote:",
    "\n\nExplanation:",
)

QUOTE_CHARS = ('"', "'")


def _clean_once(text: str) -> str:
    text = text.strip()

    for prefix in UNWANTED_PREFIXES:
        if text.startswith(prefix):
            text = text[len(prefix) :].strip()

    if len(text) >= 2 and text[0] in QUOTE_CHARS and text[-1] == text[0]:
        text = text[1:-1].strip()

    for marker in TRAILING_MARKERS:
        index = text.find(marker)
        if index != -1:
            text = text[:index]

    return text.strip()


def clean_translation_output(text: str) -> str:
    """Strip conversational artifacts from model output.

    One pass trims whitespace, removes known leading labels, removes one
    layer of matching straight quotes around the whole text and cuts any
    trailing "Note:" or "Explanation:" block. Passes repeat until the text
    stops changing, which makes the function idempotent; every pass that
    changes something makes the text shorter, so the loop terminates.

    >>> clean_translation_output('Translation: "Hello"')
    'Hello'
    """
    cleaned = _clean_once(text)
    while True:
        again = _clean_once(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again
