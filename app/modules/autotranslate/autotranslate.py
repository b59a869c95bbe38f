"""Auto-translate module.

Registers the Slack ``message`` listener that feeds every message posted in
a channel the bot is in through the event gate.
"""

from slack_bolt import App

from infrastructure.clients.slack import SlackClientFacade
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    get_preference_store,
    get_settings,
    get_translation_provider,
)
from modules.autotranslate.gate import EventGate
from modules.autotranslate.models import BotIdentity
from modules.autotranslate.slack import (
    SlackMessagePoster,
    SlackUserResolver,
    message_event_from_slack,
)

logger = get_module_logger()


def build_event_gate(bot: App) -> EventGate:
    """Wire the event gate to Slack and to the configured services."""
    settings = get_settings()
    slack_client = SlackClientFacade(bot.client)
    return EventGate(
        preferences=get_preference_store(),
        provider_resolver=get_translation_provider,
        user_resolver=SlackUserResolver(slack_client),
        poster=SlackMessagePoster(slack_client),
        bot_identity=BotIdentity.from_settings(settings.autotranslate),
    )


def register(bot: App):
    """Auto-translate module registration.

    Args:
        bot (App): The Bolt app the listener is registered on.
    """
    gate = build_event_gate(bot)

    def handle_message_event(event: dict) -> None:
        gate.on_message(message_event_from_slack(event))

    bot.event("message")(handle_message_event)
    logger.info("autotranslate_registered")
