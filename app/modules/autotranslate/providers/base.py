"""Translation provider abstract classes.

``TranslationProvider`` is the one contract the event gate and the HTTP API
see. ``HttpLLMProvider`` holds what the two LLM variants share: the JSON
HTTP client, bearer-token handling and the mapping of client results to
translation errors.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from infrastructure.clients.http import JsonHttpClient
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from modules.autotranslate.errors import (
    BackendError,
    DecodeError,
    TranslationError,
    TransportError,
)
from modules.autotranslate.models import (
    ProviderConfig,
    ProviderKind,
    TranslationRequest,
    TranslationResult,
)

logger = get_module_logger()

TRANSPORT_ERROR_CODES = ("TIMEOUT", "CONNECTION_ERROR", "REQUEST_ERROR")


class TranslationProvider(ABC):
    """Abstract base class for translation backends.

    Instances hold only their immutable ``ProviderConfig`` and can serve
    concurrent ``translate`` calls.
    """

    kind: ProviderKind

    def __init__(self, config: ProviderConfig):
        self._config = config

    def get_kind(self) -> str:
        return self.kind.value

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Translate ``text`` and return the translated text.

        Args:
            text: Text to translate
            source_language: Source language code or "auto"
            target_language: Target language code

        Raises:
            TranslationError: on any failure
        """
        request = TranslationRequest(
            text=text,
            source_language=source_language,
            target_language=target_language,
        )
        result = self._translate(request)
        logger.debug(
            "translation_completed",
            provider=self.get_kind(),
            source_language=source_language,
            target_language=target_language,
        )
        return result.translated_text

    @abstractmethod
    def _translate(self, request: TranslationRequest) -> TranslationResult:
        """Perform one request/response cycle against the backend."""


class HttpLLMProvider(TranslationProvider):
    """Base class for providers that call an LLM over JSON HTTP."""

    def __init__(
        self, config: ProviderConfig, http_client: Optional[JsonHttpClient] = None
    ):
        super().__init__(config)
        self._http = http_client or JsonHttpClient(timeout=config.timeout)

    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST the payload to the configured endpoint and return the JSON body.

        Raises:
            TransportError: the endpoint could not be reached
            BackendError: the endpoint answered with a non-2xx status
            DecodeError: the answer is not a JSON object
        """
        result = self._http.post_json(
            self._config.api_url,
            payload,
            bearer_token=self._config.api_key or None,
        )
        if not result.is_success:
            raise self._error_from_result(result)
        if not isinstance(result.data, dict):
            raise DecodeError(
                f"{self.get_kind()} response is not a JSON object",
                provider=self.get_kind(),
            )
        return result.data

    def _error_from_result(self, result: OperationResult) -> TranslationError:
        name = self.get_kind()
        if result.error_code in TRANSPORT_ERROR_CODES:
            return TransportError(
                f"{name} API request failed: {result.message}",
                provider=name,
                cause=result.message,
            )
        if result.error_code == "INVALID_JSON":
            return DecodeError(
                f"failed to decode {name} response",
                provider=name,
                cause=result.message,
            )
        status_code = (result.data or {}).get("status_code")
        return BackendError(
            f"{name} API error (status {status_code}): {result.message}",
            provider=name,
            cause=result.message,
            status_code=status_code,
        )

    def _choices(self, body: Dict[str, Any]) -> List[Any]:
        """Return the non-empty ``choices`` list of a completion response.

        Raises:
            DecodeError: ``choices`` is not a list
            BackendError: ``choices`` is empty or missing
        """
        choices = body.get("choices") or []
        if not isinstance(choices, list):
            raise DecodeError(
                f"unexpected choices in {self.get_kind()} response",
                provider=self.get_kind(),
            )
        if not choices:
            raise BackendError(
                f"no translation returned from {self.get_kind()}",
                provider=self.get_kind(),
            )
        return choices
