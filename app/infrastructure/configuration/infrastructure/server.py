"""HTTP server settings."""

from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP API configuration.

    Environment Variables:
        ISSUER_CONFIG: JSON dict of trusted JWT issuers. Each entry holds
            ``jwks_uri``, ``audience``, optional ``algorithms`` (default
            ``["RS256"]``) and optional ``user_id_claim`` (default ``sub``),
            the claim carrying the caller's Slack user id.

    Example:
        ```python
        ISSUER_CONFIG='{"https://auth.example.com": {
            "jwks_uri": "https://auth.example.com/.well-known/jwks.json",
            "audience": "autotranslate",
            "user_id_claim": "slack_user_id"}}'
        ```
    """

    ISSUER_CONFIG: Optional[Dict[str, Dict[str, Any]]] = Field(
        default=None,
        alias="ISSUER_CONFIG",
    )

    @field_validator("ISSUER_CONFIG", mode="before")
    @classmethod
    def validate_issuer_config(cls, v: Any) -> Any:
        """Anything but a mapping means no trusted issuer."""
        if v is None or not isinstance(v, dict):
            return {}
        return v
