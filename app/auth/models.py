# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """
    Authenticated user resolved from the bearer token.

    Only the stable user ID is needed downstream; every query is scoped by it.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None
