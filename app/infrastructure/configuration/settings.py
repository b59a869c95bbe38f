"""Auto-translate bot configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    SlackSettings,
    AwsSettings,
)

# Infrastructure settings
from infrastructure.configuration.infrastructure import ServerSettings

# Feature settings
from infrastructure.configuration.features import AutoTranslateSettings


class Settings(BaseSettings):
    """Auto-translate bot configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object:

    - **Infrastructure**: HTTP server configuration (trusted JWT issuers)
    - **Integrations**: External service configurations (Slack, AWS)
    - **Features**: Feature module configurations (autotranslate)

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        slack_token = settings.slack.SLACK_TOKEN
        provider = settings.autotranslate.PROVIDER

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Infrastructure settings
    server: ServerSettings

    # Integration settings
    slack: SlackSettings
    aws: AwsSettings

    # Feature settings
    autotranslate: AutoTranslateSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings, instantiating every section not passed in.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "server": ServerSettings,
            "slack": SlackSettings,
            "aws": AwsSettings,
            "autotranslate": AutoTranslateSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
