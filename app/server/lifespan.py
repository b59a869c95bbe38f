"""Application lifespan: provider check, Slack listeners and Socket Mode.

Startup builds the translation provider and fails fast on a bad
configuration. When a Slack token is set, the auto-translate listener is
registered and Socket Mode runs on a daemon thread until shutdown.
"""

from contextlib import asynccontextmanager
import sys
import threading
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from slack_bolt import App
from slack_bolt.adapter.socket_mode import SocketModeHandler
from structlog.stdlib import BoundLogger

from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings, get_translation_provider
from modules.autotranslate import autotranslate

logger = get_module_logger()


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _list_configs(settings: Settings, log: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    log.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            log.info("configuration_loaded", config_setting=key, keys=value)


def _activate_provider(app: FastAPI, log: BoundLogger) -> None:
    try:
        provider = get_translation_provider()
    except Exception as exc:
        log.error("translation_provider_activation_failed", error=str(exc))
        raise
    app.state.translation_provider = provider
    log.info("translation_provider_activated", provider=provider.get_kind())


def _get_bot(settings: Settings) -> Optional[App]:
    """Slack App when a token is set; never during tests."""
    if _is_test_environment():
        return None
    if not settings.slack.SLACK_TOKEN:
        return None
    return App(token=settings.slack.SLACK_TOKEN)


def _start_socket_mode(
    bot: App, app_token: str, log: BoundLogger
) -> tuple[SocketModeHandler, threading.Thread]:
    handler = SocketModeHandler(bot, app_token)
    thread = threading.Thread(
        target=handler.connect,
        daemon=True,
        name="slack-socket-mode",
    )
    thread.start()
    log.info("socket_mode_started")
    return handler, thread


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()

    logger.info("application_startup")
    _list_configs(settings, logger)

    # The provider must exist before any listener can use it.
    _activate_provider(app, logger)

    bot = _get_bot(settings)
    app.state.bot = bot

    socket_mode_handler = None
    if bot is not None:
        autotranslate.register(bot)
        socket_mode_handler, _ = _start_socket_mode(
            bot, settings.slack.APP_TOKEN, logger
        )
    else:
        logger.info("api_only_mode", reason="no_slack_token")
    app.state.socket_mode_handler = socket_mode_handler

    yield

    logger.info("application_shutdown")
    if socket_mode_handler is not None:
        socket_mode_handler.close()
        logger.info("socket_mode_stopped")
