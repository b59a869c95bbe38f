"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.auth import get_current_user_id
from infrastructure.services.providers import get_preference_store
from modules.autotranslate.preferences import PreferenceStore

# Preference store dependency
PreferenceStoreDep = Annotated[PreferenceStore, Depends(get_preference_store)]

# Slack user id of the authenticated API caller
CurrentUserDep = Annotated[str, Depends(get_current_user_id)]

__all__ = [
    "CurrentUserDep",
    "PreferenceStoreDep",
]
