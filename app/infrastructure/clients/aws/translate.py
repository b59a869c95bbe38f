"""AWS Translate client.

Wraps the ``translate.TranslateText`` operation with the OperationResult
pattern. Translation is best effort, so the call is made exactly once.
"""

import structlog

from infrastructure.clients.aws.client import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


class TranslateClient:
    """Client for AWS Translate.

    Args:
        session_provider: SessionProvider carrying region and the static
            credentials used for every call
    """

    def __init__(self, session_provider: SessionProvider) -> None:
        self._session_provider = session_provider
        self._service_name = "translate"

    def translate_text(
        self, text: str, source_language: str, target_language: str
    ) -> OperationResult:
        """Translate text.

        Args:
            text: Text to translate
            source_language: Source language code, or "auto" to let the
                service detect it
            target_language: Target language code

        Returns:
            OperationResult whose data is the raw TranslateText response
            (``TranslatedText``, ``SourceLanguageCode``, ...)
        """
        return execute_aws_api_call(
            self._service_name,
            "translate_text",
            max_retries=0,
            Text=text,
            SourceLanguageCode=source_language,
            TargetLanguageCode=target_language,
            **self._session_provider.build_client_kwargs(),
        )
