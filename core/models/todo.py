# =============================================================================
# core/models/todo.py - Todo Schemas
# =============================================================================
# These models define the API contract for todo operations:
# - TodoPriority: low / medium / high
# - TodoCreate: Body of POST /todos
# - TodoUpdate: Body of PATCH /todos/{id} (partial)
# - TodoResponse: A todo row as returned to clients
#
# Server-owned fields (id, user_id, created_at, updated_at) are never
# accepted from clients: unknown and protected keys are silently dropped.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Columns a client may never write, whatever the request body says
PROTECTED_FIELDS = frozenset({"id", "user_id", "created_at"})


class TodoPriority(str, Enum):
    """
    Priority tier of a todo.

    Summaries group todos by tier, highest first.
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Sort key: high=0, medium=1, low=2."""
        return {"high": 0, "medium": 1, "low": 2}[self.value]


def _clean_title(v: str | None) -> str:
    if v is None:
        raise ValueError("title cannot be null")
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty")
    return v


class TodoCreate(BaseModel):
    """
    Schema for creating a todo.

    `completed` is not accepted here; new todos always start open.

    Example:
        {"title": "Buy milk", "priority": "low"}
    """

    model_config = ConfigDict(extra="ignore")

    title: str = Field(
        ...,
        max_length=500,
        description="What needs doing"
    )

    description: str | None = Field(
        default="",
        max_length=5000,
        description="Optional details"
    )

    priority: TodoPriority = Field(
        default=TodoPriority.MEDIUM,
        description="Priority tier"
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Reject empty or whitespace-only titles."""
        return _clean_title(v)

    @field_validator("description")
    @classmethod
    def normalize_description(cls, v: str | None) -> str:
        """Store a missing description as an empty string."""
        return v or ""


class TodoUpdate(BaseModel):
    """
    Schema for a partial todo update.

    Only the fields the client actually sent are applied
    (see `to_update_dict`).

    Example:
        {"completed": true}
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, max_length=500)
    description: str | None = Field(default=None, max_length=5000)
    priority: TodoPriority | None = None
    completed: bool | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str:
        """A title, when sent, must still be non-empty."""
        return _clean_title(v)

    @field_validator("priority", "completed")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("value cannot be null")
        return v

    def to_update_dict(self) -> dict[str, Any]:
        """Fields explicitly set by the client, JSON-ready."""
        updates = self.model_dump(mode="json", exclude_unset=True)
        if "description" in updates and updates["description"] is None:
            updates["description"] = ""
        return updates


class TodoResponse(BaseModel):
    """
    A todo as returned to clients.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "user_id": "660e8400-e29b-41d4-a716-446655440001",
            "title": "Buy milk",
            "description": "",
            "priority": "low",
            "completed": false,
            "created_at": "2024-01-15T10:30:00Z",
            "updated_at": "2024-01-15T10:30:00Z"
        }
    """

    id: UUID
    user_id: UUID
    title: str
    description: str | None = ""
    priority: TodoPriority = TodoPriority.MEDIUM
    completed: bool = False
    created_at: datetime
    updated_at: datetime

    @field_validator("priority", mode="before")
    @classmethod
    def default_missing_priority(cls, v: Any) -> Any:
        # Rows written before priority existed have NULL here
        return TodoPriority.MEDIUM if v is None else v


class DeleteResponse(BaseModel):
    """Acknowledgement for DELETE /todos/{id}."""
    success: bool = True
