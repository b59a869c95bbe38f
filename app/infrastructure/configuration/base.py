"""Shared base classes for settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class IntegrationSettings(BaseSettings):
    """Base class for settings of an external service the bot talks to
    (Slack, AWS).
    """

    model_config = ENV_SETTINGS_CONFIG


class FeatureSettings(BaseSettings):
    """Base class for settings owned by a feature module."""

    model_config = ENV_SETTINGS_CONFIG


class InfrastructureSettings(BaseSettings):
    """Base class for settings of the bot's own runtime (HTTP server, auth)."""

    model_config = ENV_SETTINGS_CONFIG
