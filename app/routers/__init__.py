# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# - users.py: GET /users, the list of user first names
# - health.py: Health check endpoints
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import users

__all__ = [
    "health",
    "users",
]
