# =============================================================================
# core/models/profile.py - Profile Schemas
# =============================================================================
# A profile row is keyed by the auth user ID and holds the user's settings.
# Today that is a single field: the Slack incoming-webhook URL that receives
# todo summaries.
# =============================================================================

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileResponse(BaseModel):
    """Profile as returned by GET/PATCH /profile."""

    id: UUID
    slack_webhook_url: str | None = None
    updated_at: datetime | None = None


class ProfileUpdate(BaseModel):
    """
    Body of PATCH /profile.

    The field must be present. An empty string (or null) clears the
    webhook, so an empty body cannot erase it by accident.
    """

    model_config = ConfigDict(extra="ignore")

    slack_webhook_url: str | None = Field(
        ...,
        max_length=2048,
        description="Slack incoming-webhook URL (https://hooks.slack.com/services/...)"
    )

    @field_validator("slack_webhook_url")
    @classmethod
    def validate_webhook_url(cls, v: str | None) -> str | None:
        """Only http(s) URLs can be delivered to."""
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        if not v.startswith(("https://", "http://")):
            raise ValueError("webhook URL must start with http:// or https://")
        return v
