"""AWS Translate provider (managed translation API)."""

from typing import Optional

from infrastructure.clients.aws import SessionProvider, TranslateClient
from infrastructure.operations import OperationResult, OperationStatus
from modules.autotranslate.errors import (
    BackendError,
    ConfigurationError,
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
from modules.autotranslate.providers import register_provider
from modules.autotranslate.providers.base import TranslationProvider


@register_provider(ProviderKind.AWS)
class AWSTranslateProvider(TranslationProvider):
    """Delegates to AWS Translate with the configured static credentials.

    Language codes pass through unchanged; AWS Translate detects the source
    language itself when given "auto".
    """

    def __init__(
        self, config: ProviderConfig, client: Optional[TranslateClient] = None
    ):
        super().__init__(config)
        self._client = client or TranslateClient(
            SessionProvider(
                region=config.aws_region,
                aws_access_key_id=config.aws_access_key_id,
                aws_secret_access_key=config.aws_secret_access_key,
            )
        )

    def _translate(self, request: TranslationRequest) -> TranslationResult:
        result = self._client.translate_text(
            request.text, request.source_language, request.target_language
        )
        if not result.is_success:
            raise self._error_from_result(result)

        translated = (result.data or {}).get("TranslatedText")
        if not isinstance(translated, str):
            raise DecodeError(
                "AWS translation response has no TranslatedText",
                provider=self.get_kind(),
            )
        return TranslationResult(translated_text=translated)

    def _error_from_result(self, result: OperationResult) -> TranslationError:
        name = self.get_kind()
        if result.status == OperationStatus.UNAUTHORIZED:
            return ConfigurationError(
                f"invalid AWS credentials: {result.message}",
                provider=name,
                cause=result.message,
            )
        if result.error_code == "CONNECTION_ERROR":
            return TransportError(
                f"AWS translation request failed: {result.message}",
                provider=name,
                cause=result.message,
            )
        return BackendError(
            f"AWS translation failed: {result.message}",
            provider=name,
            cause=result.error_code,
        )
