# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_models.py: Pydantic model validation
# - test_todos_api.py: /todos endpoints, ownership, routing, CORS
# - test_summarize.py: /summarize orchestration
# - test_summarizer.py: prompt formatting and the OpenAI call
# - test_notification.py: Slack payload and delivery
# - test_auth.py: token verification
# - test_profile.py: /profile and /health
#
# Run tests with: pytest
# =============================================================================
