# =============================================================================
# app/routers/profile.py - Profile Settings Endpoints
# =============================================================================
# The caller's Slack webhook URL, which POST /summarize delivers to.
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth import get_current_user, AuthUser
from app.exceptions import ProfileNotFoundError
from core.models.profile import ProfileResponse, ProfileUpdate
from core.services.profile_service import ProfileService

router = APIRouter()


@router.get("", response_model=ProfileResponse)
def get_profile(
    user: AuthUser = Depends(get_current_user),
):
    """Get the authenticated user's profile settings."""
    profile = ProfileService.get_profile(user.id)
    if profile is None:
        raise ProfileNotFoundError()
    return profile


@router.patch("", response_model=ProfileResponse)
def update_profile(
    request: ProfileUpdate,
    user: AuthUser = Depends(get_current_user),
):
    """
    Set or clear the Slack webhook URL.

    Send an empty string or null to remove it.
    """
    return ProfileService.update_slack_webhook_url(user.id, request.slack_webhook_url)
