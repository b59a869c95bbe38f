from unittest.mock import MagicMock

import pytest

from infrastructure.clients.aws import TranslateClient
from infrastructure.operations import OperationResult, OperationStatus
from modules.autotranslate.errors import (
    BackendError,
    ConfigurationError,
    DecodeError,
    TransportError,
)
from modules.autotranslate.providers.aws_translate import AWSTranslateProvider


@pytest.fixture
def translate_client():
    return MagicMock(spec=TranslateClient)


@pytest.fixture
def provider(aws_config, translate_client):
    return AWSTranslateProvider(aws_config, client=translate_client)


@pytest.mark.unit
class TestAWSTranslateProvider:
    def test_returns_translated_text(self, provider, translate_client):
        translate_client.translate_text.return_value = OperationResult.success(
            data={"TranslatedText": "Hello", "SourceLanguageCode": "ko"}
        )

        assert provider.translate("안녕하세요", "ko", "en") == "Hello"
        translate_client.translate_text.assert_called_once_with(
            "안녕하세요", "ko", "en"
        )

    def test_auto_source_is_passed_through(self, provider, translate_client):
        translate_client.translate_text.return_value = OperationResult.success(
            data={"TranslatedText": "Hello"}
        )
        provider.translate("안녕하세요", "auto", "en")
        translate_client.translate_text.assert_called_once_with(
            "안녕하세요", "auto", "en"
        )

    def test_output_is_not_sanitized(self, provider, translate_client):
        translate_client.translate_text.return_value = OperationResult.success(
            data={"TranslatedText": '"Hello"'}
        )
        assert provider.translate("x", "ko", "en") == '"Hello"'

    def test_unauthorized_is_configuration_error(self, provider, translate_client):
        translate_client.translate_text.return_value = OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            "The security token included in the request is invalid.",
            error_code="UnrecognizedClientException",
        )
        with pytest.raises(ConfigurationError) as exc_info:
            provider.translate("x", "ko", "en")
        assert exc_info.value.provider == "aws"

    def test_connection_error_is_transport_error(self, provider, translate_client):
        translate_client.translate_text.return_value = OperationResult.transient_error(
            "AWS connection error", error_code="CONNECTION_ERROR"
        )
        with pytest.raises(TransportError):
            provider.translate("x", "ko", "en")

    def test_service_error_is_backend_error(self, provider, translate_client):
        translate_client.translate_text.return_value = OperationResult.permanent_error(
            "Unsupported language pair", error_code="UnsupportedLanguagePairException"
        )
        with pytest.raises(BackendError):
            provider.translate("x", "ko", "tlh")

    def test_missing_translated_text_is_decode_error(self, provider, translate_client):
        translate_client.translate_text.return_value = OperationResult.success(data={})
        with pytest.raises(DecodeError):
            provider.translate("x", "ko", "en")

    def test_default_client_uses_config_credentials(self, aws_config):
        provider = AWSTranslateProvider(aws_config)
        kwargs = provider._client._session_provider.build_client_kwargs()
        assert kwargs["session_config"] == {
            "region_name": "ca-central-1",
            "aws_access_key_id": "AKIAEXAMPLE",
            "aws_secret_access_key": "secret",
        }
