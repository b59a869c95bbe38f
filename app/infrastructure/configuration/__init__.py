"""Infrastructure configuration module - public API.

Centralized configuration for the auto-translate bot, built on Pydantic
BaseSettings and organized by domain.

Exports:
    settings: Singleton Settings instance (read by logging setup at import)
    Settings: Main settings class (for testing/overrides)
    AutoTranslateSettings: Feature settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    slack_token = settings.slack.SLACK_TOKEN
    provider = settings.autotranslate.PROVIDER
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features import AutoTranslateSettings

__all__ = ["Settings", "settings", "AutoTranslateSettings"]
