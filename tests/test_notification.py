# =============================================================================
# tests/test_notification.py - Slack Delivery Tests
# =============================================================================

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import httpx
import pytest

from app.config import settings
from app.exceptions import DeliveryFailedError
from core.services.notification_service import (
    SLACK_SECTION_TEXT_LIMIT,
    NotificationService,
)


class TestBuildSlackMessage:
    """Block Kit payload."""

    def test_structure(self):
        generated_at = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)

        message = NotificationService.build_slack_message("*Key Action Items:*", generated_at)

        assert message["text"] == "📋 *Todo List Summary*"
        header, section, context = message["blocks"]
        assert header == {
            "type": "header",
            "text": {"type": "plain_text", "text": "📋 Todo List Summary", "emoji": True},
        }
        assert section["type"] == "section"
        assert section["text"] == {"type": "mrkdwn", "text": "*Key Action Items:*"}
        assert context["type"] == "context"
        assert context["elements"][0]["text"] == "_Generated at 2024-01-15 10:30:00 UTC_"

    def test_long_summary_fits_section_limit(self):
        message = NotificationService.build_slack_message("x" * 5000)
        text = message["blocks"][1]["text"]["text"]
        assert len(text) == SLACK_SECTION_TEXT_LIMIT
        assert text.endswith("…")


class TestSendSummary:
    """One POST, no retries."""

    def test_posts_json_once(self, mock_webhook):
        NotificationService.send_summary("https://hooks.slack.com/services/x", "hello")

        mock_webhook.assert_called_once()
        args, kwargs = mock_webhook.call_args
        assert args[0] == "https://hooks.slack.com/services/x"
        assert kwargs["json"]["blocks"][1]["text"]["text"] == "hello"
        assert kwargs["timeout"] == settings.WEBHOOK_TIMEOUT_SECONDS

    def test_non_success_raises_with_body(self, mock_webhook):
        mock_webhook.return_value = MagicMock(is_success=False, status_code=403, text="invalid_token")

        with pytest.raises(DeliveryFailedError) as exc_info:
            NotificationService.send_summary("https://hooks.slack.com/services/x", "hello")

        assert exc_info.value.response_body == "invalid_token"
        assert exc_info.value.details["status_code"] == 403
        mock_webhook.assert_called_once()

    def test_transport_error_raises(self):
        with patch(
            "core.services.notification_service.httpx.post",
            side_effect=httpx.ConnectError("connection refused"),
        ):
            with pytest.raises(DeliveryFailedError) as exc_info:
                NotificationService.send_summary("https://hooks.slack.com/services/x", "hello")

        assert "connection refused" in exc_info.value.message
