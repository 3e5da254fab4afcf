# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - todo.py: Todo CRUD schemas and the priority enum
# - profile.py: Profile (Slack webhook) schemas
# - summary.py: Summary endpoint responses
#
# These models define the "contract" between API and clients.
# =============================================================================

from .todo import (
    PROTECTED_FIELDS,
    DeleteResponse,
    TodoCreate,
    TodoPriority,
    TodoResponse,
    TodoUpdate,
)
from .profile import (
    ProfileResponse,
    ProfileUpdate,
)
from .summary import (
    NoPendingTodosResponse,
    SummaryResponse,
)

__all__ = [
    # Todo
    "PROTECTED_FIELDS",
    "DeleteResponse",
    "TodoCreate",
    "TodoPriority",
    "TodoResponse",
    "TodoUpdate",
    # Profile
    "ProfileResponse",
    "ProfileUpdate",
    # Summary
    "NoPendingTodosResponse",
    "SummaryResponse",
]
