"""Auto-translate HTTP endpoints.

Every route requires a bearer token from a trusted issuer. Preferences are
written here and read by the event gate; a caller can only read and write
their own. ``/translate`` and ``/messages`` run the configured provider on
demand.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from api.dependencies.rate_limits import (
    PREFERENCE_READ_LIMIT,
    PREFERENCE_WRITE_LIMIT,
    TRANSLATE_LIMIT,
    get_limiter,
)
from infrastructure.clients.slack import SlackClientFacade
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    CurrentUserDep,
    PreferenceStoreDep,
    get_slack_client,
    get_translation_provider,
)
from modules.autotranslate.errors import ConfigurationError, TranslationError
from modules.autotranslate.languages import AUTO_DETECT, is_supported_language
from modules.autotranslate.models import UserPreference
from modules.autotranslate.providers import TranslationProvider

logger = get_module_logger()

router = APIRouter(prefix="/autotranslate", tags=["AutoTranslate"])
limiter = get_limiter()

MESSAGE_NOT_FOUND = "SLACK_MESSAGE_NOT_FOUND"


class TranslateRequest(BaseModel):
    text: str = Field(min_length=1)
    source_language: str = AUTO_DETECT
    target_language: str


class TranslateResponse(BaseModel):
    source_language: str
    source_text: str
    target_language: str
    translated_text: str


class TranslatedMessage(TranslateResponse):
    """Translation of a posted message.

    ``id`` changes whenever the message is edited, so clients can cache
    translations by it.
    """

    id: str
    channel_id: str
    message_ts: str
    update_at: str


def translation_provider() -> TranslationProvider:
    """Resolve the process-wide provider, reporting bad configuration as a 500."""
    try:
        return get_translation_provider()
    except ConfigurationError as e:
        logger.error("provider_resolution_failed", stage="api", error=str(e))
        raise HTTPException(
            status_code=500, detail="Translation provider is not configured"
        ) from e


def slack_client() -> SlackClientFacade:
    client = get_slack_client()
    if client is None:
        raise HTTPException(status_code=500, detail="Slack client is not configured")
    return client


TranslationProviderDep = Annotated[TranslationProvider, Depends(translation_provider)]
SlackClientDep = Annotated[SlackClientFacade, Depends(slack_client)]


def _require_self(caller: str, user_id: str) -> None:
    if caller != user_id:
        logger.warning("preference_access_denied", caller=caller, user_id=user_id)
        raise HTTPException(
            status_code=403, detail="Not allowed to access another user's preference"
        )


def _run_translation(
    provider: TranslationProvider,
    caller: str,
    text: str,
    source_language: str,
    target_language: str,
) -> str:
    try:
        return provider.translate(text, source_language, target_language)
    except ConfigurationError as e:
        logger.error(
            "translation_failed",
            stage="api",
            provider=provider.get_kind(),
            caller=caller,
            error=str(e),
        )
        raise HTTPException(
            status_code=500, detail="Translation provider is misconfigured"
        ) from e
    except TranslationError as e:
        logger.error(
            "translation_failed",
            stage="api",
            provider=provider.get_kind(),
            caller=caller,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise HTTPException(status_code=502, detail="Translation failed") from e


@router.get("/preferences/{user_id}", response_model=UserPreference)
@limiter.limit(PREFERENCE_READ_LIMIT)
def get_preference(
    request: Request,  # pylint: disable=unused-argument
    user_id: str,
    caller: CurrentUserDep,
    store: PreferenceStoreDep,
):
    """Return the stored preference of the calling user."""
    _require_self(caller, user_id)
    preference = store.get(user_id)
    if preference is None:
        raise HTTPException(status_code=404, detail="Preference not found")
    return preference


@router.put("/preferences/{user_id}", response_model=UserPreference)
@limiter.limit(PREFERENCE_WRITE_LIMIT)
def put_preference(
    request: Request,  # pylint: disable=unused-argument
    user_id: str,
    preference: UserPreference,
    caller: CurrentUserDep,
    store: PreferenceStoreDep,
):
    """Create or replace the preference of the calling user.

    Raises:
        HTTPException: 403 when the path names another user, 400 when the
            body names another user, 500 when the store rejects the write.
    """
    _require_self(caller, user_id)
    if preference.user_id != user_id:
        raise HTTPException(
            status_code=400, detail="user_id in body does not match the path"
        )

    result = store.set(preference)
    if not result.is_success:
        logger.error(
            "preference_save_failed",
            user_id=user_id,
            error=result.message,
            error_code=result.error_code,
        )
        raise HTTPException(status_code=500, detail="Failed to save preference")

    logger.info(
        "preference_saved",
        user_id=user_id,
        activated=preference.activated,
        source_language=preference.source_language,
        target_language=preference.target_language,
    )
    return preference


@router.post("/translate", response_model=TranslateResponse)
@limiter.limit(TRANSLATE_LIMIT)
def translate(
    request: Request,  # pylint: disable=unused-argument
    body: TranslateRequest,
    caller: CurrentUserDep,
    provider: TranslationProviderDep,
):
    """Translate a piece of text with the configured provider."""
    translated_text = _run_translation(
        provider, caller, body.text, body.source_language, body.target_language
    )
    return TranslateResponse(
        source_language=body.source_language,
        source_text=body.text,
        target_language=body.target_language,
        translated_text=translated_text,
    )


@router.get("/messages/{channel_id}/{message_ts}", response_model=TranslatedMessage)
@limiter.limit(TRANSLATE_LIMIT)
def translate_message(
    request: Request,  # pylint: disable=unused-argument
    channel_id: str,
    message_ts: str,
    target_language: str,
    caller: CurrentUserDep,
    slack: SlackClientDep,
    provider: TranslationProviderDep,
    source_language: str = AUTO_DETECT,
):
    """Translate a posted Slack message.

    Raises:
        HTTPException: 400 on an unsupported language or a message without
            text, 404 when the message does not exist, 502 when Slack or the
            provider fails.
    """
    if not is_supported_language(source_language):
        raise HTTPException(status_code=400, detail="Invalid parameter: source_language")
    if target_language == AUTO_DETECT or not is_supported_language(target_language):
        raise HTTPException(status_code=400, detail="Invalid parameter: target_language")

    result = slack.get_message(channel_id, message_ts)
    if not result.is_success:
        if result.error_code == MESSAGE_NOT_FOUND:
            raise HTTPException(status_code=404, detail="No message to translate")
        logger.error(
            "message_fetch_failed",
            channel_id=channel_id,
            message_ts=message_ts,
            error=result.message,
            error_code=result.error_code,
        )
        raise HTTPException(status_code=502, detail="Failed to fetch message")

    message = result.data
    text: Optional[str] = message.get("text")
    if not text:
        raise HTTPException(status_code=400, detail="Message has no text to translate")

    translated_text = _run_translation(
        provider, caller, text, source_language, target_language
    )
    update_at = (message.get("edited") or {}).get("ts") or message_ts
    return TranslatedMessage(
        id=":".join(
            (channel_id, message_ts, source_language, target_language, update_at)
        ),
        channel_id=channel_id,
        message_ts=message_ts,
        source_language=source_language,
        source_text=text,
        target_language=target_language,
        translated_text=translated_text,
        update_at=update_at,
    )
