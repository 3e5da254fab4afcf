# =============================================================================
# core/services/notification_service.py - Slack Delivery
# =============================================================================
# Posts a generated todo summary to a Slack incoming webhook as a Block Kit
# message: header, mrkdwn section with the summary, and a context footer
# with the generation time.
#
# One POST per summary. A non-2xx answer is surfaced, never retried.
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from app.config import settings
from app.exceptions import DeliveryFailedError

logger = logging.getLogger(__name__)

SUMMARY_TITLE = "📋 Todo List Summary"

# Slack rejects section blocks whose text exceeds 3000 characters
SLACK_SECTION_TEXT_LIMIT = 3000


def _fit_section_text(text: str) -> str:
    if len(text) <= SLACK_SECTION_TEXT_LIMIT:
        return text
    return text[:SLACK_SECTION_TEXT_LIMIT - 1] + "…"


class NotificationService:
    """Delivers summaries to a user's Slack webhook."""

    @staticmethod
    def build_slack_message(
        summary: str,
        generated_at: datetime | None = None,
    ) -> dict[str, Any]:
        """
        Build the Block Kit payload for a summary.

        Args:
            summary: Slack-mrkdwn summary text
            generated_at: Timestamp for the footer (defaults to now, UTC)

        Returns:
            JSON-ready webhook payload
        """
        generated_at = generated_at or datetime.now(timezone.utc)
        timestamp = generated_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip()

        return {
            "text": "📋 *Todo List Summary*",
            "blocks": [
                {
                    "type": "header",
                    "text": {
                        "type": "plain_text",
                        "text": SUMMARY_TITLE,
                        "emoji": True,
                    },
                },
                {
                    "type": "section",
                    "text": {
                        "type": "mrkdwn",
                        "text": _fit_section_text(summary),
                    },
                },
                {
                    "type": "context",
                    "elements": [
                        {
                            "type": "mrkdwn",
                            "text": f"_Generated at {timestamp}_",
                        }
                    ],
                },
            ],
        }

    @staticmethod
    def send_summary(webhook_url: str, summary: str) -> None:
        """
        POST the summary to the webhook.

        Raises:
            DeliveryFailedError: If Slack does not answer 2xx or the
                request cannot be made; carries the response body
        """
        payload = NotificationService.build_slack_message(summary)

        try:
            response = httpx.post(
                webhook_url,
                json=payload,
                timeout=settings.WEBHOOK_TIMEOUT_SECONDS,
            )
        except httpx.HTTPError as e:
            logger.error(f"Slack webhook request failed: {e}")
            raise DeliveryFailedError(str(e))

        if not response.is_success:
            logger.error(f"Slack webhook returned {response.status_code}: {response.text}")
            raise DeliveryFailedError(response.text, status_code=response.status_code)

        logger.info("Todo summary delivered to Slack")
