"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.slack import SlackSettings
from infrastructure.configuration.integrations.aws import AwsSettings

__all__ = [
    "SlackSettings",
    "AwsSettings",
]
