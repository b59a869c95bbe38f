"""Slack integration settings."""

from infrastructure.configuration.base import IntegrationSettings


class SlackSettings(IntegrationSettings):
    """Slack API and bot configuration.

    Environment Variables:
        APP_TOKEN: Slack app-level token (xapp-*) used by Socket Mode
        SLACK_TOKEN: Slack bot token (xoxb-*)

    The bot token needs the ``chat:write``, ``chat:write.customize`` and
    ``users:read`` scopes, and the app must subscribe to ``message.channels``
    (plus ``message.groups`` for private channels).

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        slack_token = settings.slack.SLACK_TOKEN
        ```
    """

    APP_TOKEN: str = ""
    SLACK_TOKEN: str = ""
