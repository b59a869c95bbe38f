"""Errors raised by the translation pipeline.

Every failure a provider can hit is a ``TranslationError``. The event gate
logs and drops them; only the HTTP API reports them back to a caller.
A translation identical to its source is not an error and has no class here.
"""

from typing import Optional


class TranslationError(Exception):
    """Base class for translation failures.

    Attributes:
        provider: identifier of the provider that failed, when known
        cause: the underlying exception or result message, when available
    """

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        cause: Optional[object] = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.cause = cause


class ConfigurationError(TranslationError):
    """Provider settings are missing or invalid."""


class TransportError(TranslationError):
    """The backend could not be reached (network failure, timeout)."""


class BackendError(TranslationError):
    """The backend answered but rejected the request or returned no result."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        cause: Optional[object] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, provider=provider, cause=cause)
        self.status_code = status_code


class DecodeError(TranslationError):
    """The backend answer could not be decoded."""
