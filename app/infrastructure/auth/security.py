"""JWT validation for the HTTP API.

Callers present a bearer token issued by one of the issuers in
``settings.server.ISSUER_CONFIG``. The token is verified against the
issuer's JWKS and the caller's Slack user id is read from the issuer's
``user_id_claim`` (``sub`` by default).
"""

from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import PyJWKClient, PyJWKClientError, PyJWTError, decode

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger

DEFAULT_ALGORITHMS = ["RS256"]
DEFAULT_USER_ID_CLAIM = "sub"

logger = get_module_logger()
# Missing credentials are reported by validate_jwt_token as a 401.
security = HTTPBearer(auto_error=False)


class JWKSManager:
    """Manage JWKS clients for different issuers.

    Clients are created lazily, one per issuer, and keep the key set cached
    for an hour.

    Attributes:
        issuer_config: issuer -> {"jwks_uri", "audience", ...}
        jwks_clients: JWKS clients created so far
    """

    def __init__(self, issuer_config: Optional[Dict[str, Dict[str, Any]]]):
        self.issuer_config = issuer_config
        self.jwks_clients: Dict[str, PyJWKClient] = {}

    def get_issuer_config(self, issuer: str) -> Optional[Dict[str, Any]]:
        if not self.issuer_config:
            return None
        return self.issuer_config.get(issuer)

    def get_jwks_client(self, issuer: str) -> Optional[PyJWKClient]:
        """Return the JWKS client of a trusted issuer, or None."""
        cfg = self.get_issuer_config(issuer)
        if cfg is None:
            return None
        if issuer not in self.jwks_clients:
            try:
                self.jwks_clients[issuer] = PyJWKClient(
                    cfg["jwks_uri"], cache_jwk_set=True, lifespan=3600, timeout=10
                )
            except (KeyError, PyJWKClientError) as e:
                logger.warning(
                    "jwks_client_initialization_failed", error=str(e), issuer=issuer
                )
                return None
        return self.jwks_clients[issuer]


jwks_manager = JWKSManager(settings.server.ISSUER_CONFIG)


def get_issuer_from_token(token: str) -> Optional[str]:
    """Read the ``iss`` claim without verifying the signature."""
    try:
        unverified_payload = decode(token, options={"verify_signature": False})
    except PyJWTError:
        return None
    return unverified_payload.get("iss")


async def validate_jwt_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> Dict[str, Any]:
    """Validate the bearer token and return its claims.

    Raises:
        HTTPException: 401 when the token is missing, comes from an untrusted
            issuer, or fails signature, audience or expiry checks.
    """
    if (
        credentials is None
        or credentials.scheme != "Bearer"
        or not credentials.credentials
    ):
        raise HTTPException(status_code=401, detail="Missing or invalid token")

    token = credentials.credentials
    issuer = get_issuer_from_token(token)
    if not issuer:
        raise HTTPException(status_code=401, detail="Issuer not found in token")

    jwks_client = jwks_manager.get_jwks_client(issuer)
    cfg = jwks_manager.get_issuer_config(issuer)
    if not jwks_client or cfg is None:
        logger.warning("untrusted_token_issuer", issuer=issuer)
        raise HTTPException(status_code=401, detail="Untrusted or missing token issuer")

    try:
        signing_key = jwks_client.get_signing_key_from_jwt(token)
        return decode(
            token,
            signing_key.key,
            algorithms=cfg.get("algorithms", DEFAULT_ALGORITHMS),
            audience=cfg.get("audience"),
            options={"verify_exp": True},
        )
    except (PyJWKClientError, PyJWTError) as e:
        logger.warning("jwt_validation_failed", error=str(e), issuer=issuer)
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}") from e


async def get_current_user_id(
    payload: Dict[str, Any] = Depends(validate_jwt_token),
) -> str:
    """Slack user id of the authenticated caller.

    ``sub`` values shaped like ``issuer/U123`` keep their last segment.

    Raises:
        HTTPException: 401 when the token carries no user id.
    """
    cfg = jwks_manager.get_issuer_config(payload.get("iss", "")) or {}
    claim = cfg.get("user_id_claim", DEFAULT_USER_ID_CLAIM)
    value = payload.get(claim)
    if not isinstance(value, str) or not value:
        raise HTTPException(
            status_code=401, detail="Caller identity not found in token"
        )
    return value.split("/")[-1]
