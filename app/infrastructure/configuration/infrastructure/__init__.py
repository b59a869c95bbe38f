"""Infrastructure settings __init__ - exports runtime settings."""

from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = ["ServerSettings"]
