"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    CurrentUserDep,
    PreferenceStoreDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_preference_store,
    get_slack_client,
    get_translation_provider,
)

__all__ = [
    "CurrentUserDep",
    "PreferenceStoreDep",
    "get_settings",
    "get_preference_store",
    "get_slack_client",
    "get_translation_provider",
]
