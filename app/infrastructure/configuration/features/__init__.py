"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.autotranslate import AutoTranslateSettings

__all__ = [
    "AutoTranslateSettings",
]
