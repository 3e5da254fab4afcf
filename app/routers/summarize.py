# =============================================================================
# app/routers/summarize.py - Slack Summary Endpoint
# =============================================================================
# POST /summarize: summarize the caller's open todos with OpenAI and post the
# result to the caller's Slack webhook.
#
# Steps run strictly in order; each one can end the request:
#   1. webhook lookup      -> 400 if none configured (no LLM call)
#   2. open todos          -> 200 "nothing to summarize" if none (no calls)
#   3. generate summary    -> 500 on LLM failure
#   4. deliver to Slack    -> 500 with Slack's response body on failure
#
# Other methods on /summarize get 405 from routing, before authentication.
# =============================================================================

import logging

from fastapi import APIRouter, Depends

from app.auth import get_current_user, AuthUser
from app.exceptions import WebhookNotConfiguredError
from agents.summarizer import generate_summary
from core.models.summary import NoPendingTodosResponse, SummaryResponse
from core.services.notification_service import NotificationService
from core.services.profile_service import ProfileService
from core.services.todo_service import TodoService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    responses={
        200: {"model": SummaryResponse, "description": "Summary sent, or nothing to summarize"},
        400: {"description": "Slack webhook URL not configured"},
        401: {"description": "Missing or invalid token"},
        500: {"description": "Summary generation or Slack delivery failed"},
    },
)
def summarize_todos(
    user: AuthUser = Depends(get_current_user),
):
    """
    Summarize open todos and send the summary to Slack.

    Returns the generated summary text exactly as the model wrote it.
    """
    webhook_url = ProfileService.get_slack_webhook_url(user.id)
    if not webhook_url:
        raise WebhookNotConfiguredError()

    todos = TodoService.list_open_todos(user.id)
    if not todos:
        logger.info(f"No pending todos for user {user.id}; nothing sent")
        return NoPendingTodosResponse()

    summary = generate_summary(todos)
    NotificationService.send_summary(webhook_url, summary)

    return SummaryResponse(summary=summary)
