"""Per-client rate limiting for the HTTP API.

Limits are keyed on the client address. Health checks get a generous budget;
``/translate`` calls a paid or GPU-backed provider and gets the smallest one.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from infrastructure.logging import get_module_logger

logger = get_module_logger()

HEALTHCHECK_LIMIT = "50/minute"
PREFERENCE_READ_LIMIT = "30/minute"
PREFERENCE_WRITE_LIMIT = "10/minute"
TRANSLATE_LIMIT = "20/minute"

limiter = Limiter(
    key_func=get_remote_address,
)


async def rate_limit_handler(request: Request, exc: Exception):
    """Return 429 with a short message when a client exceeds its limit."""
    if isinstance(exc, RateLimitExceeded):
        logger.warning(
            "rate_limit_exceeded",
            path=request.url.path,
            limit=str(exc.detail),
        )
        return JSONResponse(
            status_code=429,
            content={"message": "Rate limit exceeded"},
        )


def setup_rate_limiter(app: FastAPI):
    """Attach the shared limiter and its 429 handler to an application."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    return limiter
