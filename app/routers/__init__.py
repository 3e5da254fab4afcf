# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - todos.py: Todo CRUD endpoints
# - summarize.py: AI summary sent to Slack
# - profile.py: Slack webhook settings
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import todos
from . import summarize
from . import profile

__all__ = [
    "health",
    "todos",
    "summarize",
    "profile",
]
