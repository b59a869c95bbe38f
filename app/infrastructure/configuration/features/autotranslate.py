"""Auto-translate feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class AutoTranslateSettings(FeatureSettings):
    """Auto-translate feature configuration.

    Exactly one translation provider is active per process, selected by
    ``AUTOTRANSLATE_PROVIDER``. Only the fields of the selected provider need
    to be filled in.

    Environment Variables:
        AUTOTRANSLATE_PROVIDER: Active provider: "aws", "vllm" or "litellm"
        AWS_TRANSLATE_ACCESS_KEY_ID: Access key used for AWS Translate calls
        AWS_TRANSLATE_SECRET_ACCESS_KEY: Secret key used for AWS Translate calls
        AWS_TRANSLATE_REGION: Region of the AWS Translate endpoint
        VLLM_API_URL: Full URL of the vLLM completions endpoint
        VLLM_API_KEY: Optional bearer token for vLLM
        VLLM_MODEL: Model served by vLLM
        LITELLM_API_URL: Full URL of the LiteLLM chat completions endpoint
        LITELLM_API_KEY: Optional bearer token for LiteLLM
        LITELLM_MODEL: Model name routed by LiteLLM
        AUTOTRANSLATE_BOT_USERNAME: Display name used on translated replies
        AUTOTRANSLATE_BOT_ICON_URL: Icon used on translated replies
        AUTOTRANSLATE_REQUEST_TIMEOUT: Timeout in seconds for LLM HTTP calls
        AUTOTRANSLATE_PREFERENCES_BACKEND: "dynamodb" (default) or "memory"
        AUTOTRANSLATE_PREFERENCES_TABLE: DynamoDB table holding user preferences

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        provider = settings.autotranslate.PROVIDER
        ```
    """

    PROVIDER: str = Field(default="", alias="AUTOTRANSLATE_PROVIDER")

    AWS_ACCESS_KEY_ID: str = Field(default="", alias="AWS_TRANSLATE_ACCESS_KEY_ID")
    AWS_SECRET_ACCESS_KEY: str = Field(
        default="", alias="AWS_TRANSLATE_SECRET_ACCESS_KEY"
    )
    AWS_REGION: str = Field(default="", alias="AWS_TRANSLATE_REGION")

    VLLM_API_URL: str = Field(default="", alias="VLLM_API_URL")
    VLLM_API_KEY: str = Field(default="", alias="VLLM_API_KEY")
    VLLM_MODEL: str = Field(default="", alias="VLLM_MODEL")

    LITELLM_API_URL: str = Field(default="", alias="LITELLM_API_URL")
    LITELLM_API_KEY: str = Field(default="", alias="LITELLM_API_KEY")
    LITELLM_MODEL: str = Field(default="", alias="LITELLM_MODEL")

    BOT_USERNAME: str = Field(
        default="autotranslate-bot", alias="AUTOTRANSLATE_BOT_USERNAME"
    )
    BOT_ICON_URL: str = Field(default="", alias="AUTOTRANSLATE_BOT_ICON_URL")

    REQUEST_TIMEOUT: int = Field(default=30, alias="AUTOTRANSLATE_REQUEST_TIMEOUT")

    PREFERENCES_BACKEND: str = Field(
        default="dynamodb", alias="AUTOTRANSLATE_PREFERENCES_BACKEND"
    )
    PREFERENCES_TABLE: str = Field(
        default="autotranslate_preferences", alias="AUTOTRANSLATE_PREFERENCES_TABLE"
    )
