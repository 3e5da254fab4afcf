# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Swaps the Supabase singleton for an in-memory fake
# - Patches the OpenAI client and the Slack webhook POST
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.pop("SUPABASE_JWT_SECRET", None)

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from lib.supabase_client import SupabaseClient
from tests.fakes import FakeSupabase

ALICE_ID = "11111111-1111-4111-8111-111111111111"
BOB_ID = "22222222-2222-4222-8222-222222222222"
CAROL_ID = "33333333-3333-4333-8333-333333333333"

ALICE_WEBHOOK = "https://hooks.slack.com/services/T000/B000/alice"


def make_completion(text: str | None) -> MagicMock:
    """Shape of `client.chat.completions.create(...)`'s return value."""
    completion = MagicMock()
    completion.choices = [MagicMock()]
    completion.choices[0].message.content = text
    return completion


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_supabase():
    """
    Fake Supabase with three users:
    - alice: profile with a Slack webhook
    - bob: profile without a webhook
    - carol: no profile row at all
    """
    fake = FakeSupabase()
    fake.auth.add_user("token-alice", ALICE_ID, "alice@example.com")
    fake.auth.add_user("token-bob", BOB_ID, "bob@example.com")
    fake.auth.add_user("token-carol", CAROL_ID, "carol@example.com")
    fake.add_profile(ALICE_ID, ALICE_WEBHOOK)
    fake.add_profile(BOB_ID, None)

    SupabaseClient._instance = fake
    yield fake
    SupabaseClient.reset()


@pytest.fixture
def client(fake_supabase):
    """TestClient bound to the fake database."""
    from app.main import app
    return TestClient(app)


@pytest.fixture
def alice_headers():
    return {"Authorization": "Bearer token-alice"}


@pytest.fixture
def bob_headers():
    return {"Authorization": "Bearer token-bob"}


@pytest.fixture
def carol_headers():
    return {"Authorization": "Bearer token-carol"}


@pytest.fixture
def mock_openai():
    """Patched OpenAI client; set `.chat.completions.create.return_value` as needed."""
    openai_client = MagicMock()
    openai_client.chat.completions.create.return_value = make_completion(
        "Key Action Items:\n\n🔴 *High Priority*\n• *Task*: details"
    )
    with patch("agents.summarizer.get_openai_client", return_value=openai_client):
        yield openai_client


@pytest.fixture
def mock_webhook():
    """Patched `httpx.post` used for Slack delivery; succeeds by default."""
    response = MagicMock()
    response.is_success = True
    response.status_code = 200
    response.text = "ok"
    with patch("core.services.notification_service.httpx.post", return_value=response) as post:
        yield post
