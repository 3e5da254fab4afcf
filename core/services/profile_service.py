# =============================================================================
# core/services/profile_service.py - Profile Business Logic
# =============================================================================
# Reads and writes the caller's row in `profiles` (keyed by auth user ID).
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient
from app.exceptions import ProfileNotFoundError, StoreError

logger = logging.getLogger(__name__)

PROFILES_TABLE = "profiles"


class ProfileService:
    """Service for the user's profile settings."""

    @staticmethod
    def get_profile(user_id: UUID | str) -> dict[str, Any] | None:
        """
        Fetch the user's profile row.

        Returns:
            Profile dict, or None if the user has no profile yet

        Raises:
            StoreError: If the query fails
        """
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(PROFILES_TABLE)
                .select("id, slack_webhook_url, updated_at")
                .eq("id", str(user_id))
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if SupabaseClient.is_no_rows_error(e):
                return None
            logger.error(f"Failed to fetch profile for user {user_id}: {e}")
            raise StoreError(str(e))

    @staticmethod
    def get_slack_webhook_url(user_id: UUID | str) -> str | None:
        """The user's Slack webhook URL, or None if not configured."""
        profile = ProfileService.get_profile(user_id)
        if not profile:
            return None
        return profile.get("slack_webhook_url") or None

    @staticmethod
    def update_slack_webhook_url(
        user_id: UUID | str,
        webhook_url: str | None,
    ) -> dict[str, Any]:
        """
        Set (or clear, with None) the user's Slack webhook URL.

        Raises:
            ProfileNotFoundError: If the user has no profile row
            StoreError: If the update fails
        """
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(PROFILES_TABLE)
                .update({
                    "slack_webhook_url": webhook_url,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                })
                .eq("id", str(user_id))
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update profile for user {user_id}: {e}")
            raise StoreError(str(e))

        if not response.data:
            raise ProfileNotFoundError()

        logger.info(f"Updated Slack webhook for user: {user_id} (set={webhook_url is not None})")
        return response.data[0]
