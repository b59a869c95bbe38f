"""AWS integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration for the bot's own resources (the preferences table).

    AWS Translate credentials are not read from here: the managed translation
    provider carries its own request-scoped credentials in
    ``settings.autotranslate``.

    Environment Variables:
        AWS_REGION: AWS region for services (default: ca-central-1)
        AWS_ENDPOINT_URL: Optional endpoint override (LocalStack, DynamoDB local)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        region = settings.aws.AWS_REGION
        ```
    """

    AWS_REGION: str = Field(default="ca-central-1", alias="AWS_REGION")
    ENDPOINT_URL: Optional[str] = Field(default=None, alias="AWS_ENDPOINT_URL")
