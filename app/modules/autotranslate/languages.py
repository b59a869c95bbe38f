"""Language catalog.

Static tables mapping language codes to display names, plus a script or
writing-system hint for languages LLMs commonly confuse with each other.
The codes are the ones AWS Translate accepts, so every provider shares one
vocabulary.
"""

from types import MappingProxyType

AUTO_DETECT = "auto"

LANGUAGE_NAMES = MappingProxyType(
    {
        AUTO_DETECT: "Auto-detect",
        "af": "Afrikaans",
        "sq": "Albanian",
        "am": "Amharic",
        "ar": "Arabic",
        "hy": "Armenian",
        "az": "Azerbaijani",
        "bn": "Bengali",
        "bs": "Bosnian",
        "bg": "Bulgarian",
        "ca": "Catalan",
        "zh": "Chinese (Simplified)",
        "zh-TW": "Chinese (Traditional)",
        "hr": "Croatian",
        "cs": "Czech",
        "da": "Danish",
        "fa-AF": "Dari",
        "nl": "Dutch",
        "en": "English",
        "et": "Estonian",
        "fa": "Farsi (Persian)",
        "tl": "Filipino, Tagalog",
        "fi": "Finnish",
        "fr": "French",
        "fr-CA": "French (Canada)",
        "ka": "Georgian",
        "de": "German",
        "el": "Greek",
        "gu": "Gujarati",
        "ht": "Haitian Creole",
        "ha": "Hausa",
        "he": "Hebrew",
        "hi": "Hindi",
        "hu": "Hungarian",
        "is": "Icelandic",
        "id": "Indonesian",
        "it": "Italian",
        "ja": "Japanese",
        "kn": "Kannada",
        "kk": "Kazakh",
        "ko": "Korean",
        "lv": "Latvian",
        "lt": "Lithuanian",
        "mk": "Macedonian",
        "ms": "Malay",
        "ml": "Malayalam",
        "mt": "Maltese",
        "mr": "Marathi",
        "mn": "Mongolian",
        "no": "Norwegian",
        "ps": "Pashto",
        "pl": "Polish",
        "pt": "Portuguese",
        "pa": "Punjabi",
        "ro": "Romanian",
        "ru": "Russian",
        "sr": "Serbian",
        "si": "Sinhala",
        "sk": "Slovak",
        "sl": "Slovenian",
        "so": "Somali",
        "es": "Spanish",
        "es-MX": "Spanish (Mexico)",
        "sw": "Swahili",
        "sv": "Swedish",
        "ta": "Tamil",
        "te": "Telugu",
        "th": "Thai",
        "tr": "Turkish",
        "uk": "Ukrainian",
        "ur": "Urdu",
        "uz": "Uzbek",
        "vi": "Vietnamese",
        "cy": "Welsh",
    }
)

LANGUAGE_CLARIFICATIONS = MappingProxyType(
    {
        "ko": " (한국어, using Hangul script, NOT Chinese)",
        "ja": " (日本語, using Hiragana/Katakana/Kanji, NOT Chinese or Korean)",
        "zh": " (中文简体, Simplified Chinese characters)",
        "zh-TW": " (中文繁體, Traditional Chinese characters)",
        "en": " (English)",
        "ar": " (العربية, Arabic script)",
        "he": " (עברית, Hebrew script)",
        "hi": " (हिन्दी, Devanagari script)",
        "ru": " (Русский, Cyrillic script)",
        "th": " (ไทย, Thai script)",
    }
)


def get_language_name(code: str) -> str:
    """Display name for a code, or the code itself when unknown."""
    return LANGUAGE_NAMES.get(code, code)


def get_language_clarification(code: str) -> str:
    """Script hint for a code (with a leading space), or an empty string."""
    return LANGUAGE_CLARIFICATIONS.get(code, "")


def is_supported_language(code: str) -> bool:
    return code in LANGUAGE_NAMES
