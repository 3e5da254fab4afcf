# =============================================================================
# tests/test_supabase_client.py - Supabase Wrapper Tests
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from app.config import settings
from lib.supabase_client import SupabaseClient, SupabaseClientError


@pytest.fixture(autouse=True)
def fresh_singleton():
    SupabaseClient.reset()
    yield
    SupabaseClient.reset()


class TestGetClient:
    """Process-wide client creation."""

    def test_created_once_and_reused(self):
        created = MagicMock()
        with patch("lib.supabase_client.create_client", return_value=created) as factory:
            first = SupabaseClient.get_client()
            second = SupabaseClient.get_client()

        assert first is second is created
        factory.assert_called_once_with(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)

    def test_creation_failure(self):
        with patch("lib.supabase_client.create_client", side_effect=ValueError("bad url")):
            with pytest.raises(SupabaseClientError) as exc_info:
                SupabaseClient.get_client()

        assert exc_info.value.code == "CLIENT_INIT_FAILED"
        assert "bad url" in str(exc_info.value)


class TestHelpers:
    """Small query helpers."""

    @pytest.mark.parametrize("value,expected", [
        ("550e8400-e29b-41d4-a716-446655440000", True),
        ("not-a-uuid", False),
        ("", False),
    ])
    def test_is_valid_uuid(self, value, expected):
        assert SupabaseClient.is_valid_uuid(value) is expected

    def test_no_rows_error_by_message(self):
        error = Exception("{'code': 'PGRST116', 'message': 'JSON object requested'}")
        assert SupabaseClient.is_no_rows_error(error)

    def test_no_rows_error_by_code(self):
        error = Exception("no rows")
        error.code = "PGRST116"
        assert SupabaseClient.is_no_rows_error(error)

    def test_other_errors(self):
        assert not SupabaseClient.is_no_rows_error(Exception("permission denied"))
