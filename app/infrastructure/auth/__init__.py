"""Infrastructure auth module - JWT validation of API callers.

Exports:
    validate_jwt_token: FastAPI dependency returning the verified claims
    get_current_user_id: FastAPI dependency returning the caller's Slack user id
    JWKSManager: per-issuer JWKS client cache
"""

from infrastructure.auth.security import (
    JWKSManager,
    get_current_user_id,
    get_issuer_from_token,
    validate_jwt_token,
)

__all__ = [
    "JWKSManager",
    "get_current_user_id",
    "get_issuer_from_token",
    "validate_jwt_token",
]
