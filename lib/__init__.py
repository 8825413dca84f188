# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# - database.py: Shared SQLAlchemy handle to the users database
# =============================================================================

from lib.database import UserStore, scan_text

__all__ = [
    "UserStore",
    "scan_text",
]
