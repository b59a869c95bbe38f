import pytest
from pydantic import ValidationError

from infrastructure.configuration.features import AutoTranslateSettings
from modules.autotranslate.errors import ConfigurationError
from modules.autotranslate.models import (
    DEFAULT_BOT_USERNAME,
    TRANSLATION_EVENT_TYPE,
    BotIdentity,
    MessageEvent,
    ProviderConfig,
    ProviderKind,
    TranslationRequest,
    UserPreference,
)


def make_settings(**overrides) -> AutoTranslateSettings:
    return AutoTranslateSettings.model_construct(**overrides)


@pytest.mark.unit
class TestUserPreference:
    def test_defaults(self):
        preference = UserPreference(user_id="U1")
        assert preference.activated is False
        assert preference.source_language == "auto"
        assert preference.target_language == "en"

    def test_target_cannot_be_auto(self):
        with pytest.raises(ValidationError):
            UserPreference(user_id="U1", target_language="auto")

    def test_unsupported_source_rejected(self):
        with pytest.raises(ValidationError):
            UserPreference(user_id="U1", source_language="klingon")

    def test_empty_user_id_rejected(self):
        with pytest.raises(ValidationError):
            UserPreference(user_id="  ")

    def test_is_frozen(self):
        preference = UserPreference(user_id="U1")
        with pytest.raises(ValidationError):
            preference.activated = True


@pytest.mark.unit
def test_translation_request_auto_detect():
    assert TranslationRequest("x", "auto", "en").is_auto_detect
    assert not TranslationRequest("x", "ko", "en").is_auto_detect


@pytest.mark.unit
class TestProviderConfigFromSettings:
    def test_empty_kind_is_configuration_error(self):
        with pytest.raises(ConfigurationError, match="no translation provider"):
            ProviderConfig.from_settings(make_settings(PROVIDER=""))

    def test_unknown_kind_is_configuration_error(self):
        with pytest.raises(ConfigurationError, match="unknown translation provider"):
            ProviderConfig.from_settings(make_settings(PROVIDER="deepl"))

    def test_kind_is_case_insensitive(self):
        config = ProviderConfig.from_settings(
            make_settings(PROVIDER=" VLLM ", VLLM_API_URL="http://v", VLLM_MODEL="m")
        )
        assert config.kind == ProviderKind.VLLM

    def test_aws_fields(self):
        config = ProviderConfig.from_settings(
            make_settings(
                PROVIDER="aws",
                AWS_ACCESS_KEY_ID="AKIA",
                AWS_SECRET_ACCESS_KEY="s3cr3t",
                AWS_REGION="ca-central-1",
                REQUEST_TIMEOUT=10,
            )
        )
        assert config.kind == ProviderKind.AWS
        assert config.aws_access_key_id == "AKIA"
        assert config.aws_secret_access_key == "s3cr3t"
        assert config.aws_region == "ca-central-1"
        assert config.timeout == 10
        assert config.api_url == ""

    def test_litellm_fields(self):
        config = ProviderConfig.from_settings(
            make_settings(
                PROVIDER="litellm",
                LITELLM_API_URL="http://l",
                LITELLM_API_KEY="k",
                LITELLM_MODEL="gpt",
                VLLM_API_URL="http://v",
            )
        )
        assert config.api_url == "http://l"
        assert config.api_key == "k"
        assert config.model == "gpt"

    def test_secrets_are_not_in_repr(self):
        config = ProviderConfig(
            kind=ProviderKind.AWS,
            api_key="sk-hidden",
            aws_secret_access_key="hidden-secret",
        )
        assert "sk-hidden" not in repr(config)
        assert "hidden-secret" not in repr(config)


@pytest.mark.unit
class TestProviderConfigValidate:
    def test_complete_configs_pass(self, aws_config, vllm_config, litellm_config):
        aws_config.validate()
        vllm_config.validate()
        litellm_config.validate()

    @pytest.mark.parametrize(
        "missing", ["aws_access_key_id", "aws_secret_access_key", "aws_region"]
    )
    def test_aws_requires_credentials_and_region(self, missing):
        fields = {
            "aws_access_key_id": "AKIA",
            "aws_secret_access_key": "secret",
            "aws_region": "us-east-1",
        }
        fields[missing] = " "
        config = ProviderConfig(kind=ProviderKind.AWS, **fields)
        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()
        assert exc_info.value.provider == "aws"

    @pytest.mark.parametrize("kind", [ProviderKind.VLLM, ProviderKind.LITELLM])
    def test_llm_requires_url(self, kind):
        with pytest.raises(ConfigurationError, match="API URL"):
            ProviderConfig(kind=kind, model="m").validate()

    @pytest.mark.parametrize("kind", [ProviderKind.VLLM, ProviderKind.LITELLM])
    def test_llm_requires_model(self, kind):
        with pytest.raises(ConfigurationError, match="model"):
            ProviderConfig(kind=kind, api_url="http://x").validate()

    def test_api_key_is_optional(self):
        ProviderConfig(kind=ProviderKind.VLLM, api_url="http://x", model="m").validate()


@pytest.mark.unit
class TestBotIdentity:
    def test_from_settings(self):
        identity = BotIdentity.from_settings(
            make_settings(BOT_USERNAME="translator", BOT_ICON_URL="https://i/x.png")
        )
        assert identity.username == "translator"
        assert identity.icon_url == "https://i/x.png"

    def test_blank_username_falls_back_to_default(self):
        identity = BotIdentity.from_settings(
            make_settings(BOT_USERNAME="", BOT_ICON_URL="")
        )
        assert identity.username == DEFAULT_BOT_USERNAME


@pytest.mark.unit
class TestMessageEvent:
    def test_system_subtype(self):
        event = MessageEvent("1", "C1", "U1", "joined", subtype="channel_join")
        assert event.is_system

    def test_bot_message_is_not_system(self):
        event = MessageEvent("1", "C1", "", "hi", subtype="bot_message", bot_id="B1")
        assert not event.is_system

    def test_ordinary_message(self):
        event = MessageEvent("1", "C1", "U1", "hi")
        assert not event.is_system
        assert not event.has_translation_marker

    def test_translation_marker(self):
        event = MessageEvent(
            "1",
            "C1",
            "",
            "*[ko → en]*\nHello",
            metadata={"event_type": TRANSLATION_EVENT_TYPE, "event_payload": {}},
        )
        assert event.has_translation_marker

    def test_other_metadata_is_not_a_marker(self):
        event = MessageEvent("1", "C1", "U1", "hi", metadata={"event_type": "deploy"})
        assert not event.has_translation_marker
