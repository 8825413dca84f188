# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import NameSource, UserService

__all__ = [
    "NameSource",
    "UserService",
]
