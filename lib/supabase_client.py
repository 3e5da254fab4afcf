# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module owns the process-wide Supabase client. It is created lazily on
# first use and reused for the lifetime of the process; there is no teardown.
#
# The service_role key bypasses Row Level Security, so every query built on
# this client MUST filter by the caller's user_id itself. The services in
# core/services/ do that.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.get_client()
#   client.table("todos").select("*").eq("user_id", user_id).execute()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error while creating or using the Supabase client.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Singleton holder for the Supabase client.

    All methods are class methods for easy access without instantiation.
    Tests swap the client by assigning `SupabaseClient._instance`.
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used by tests)."""
        cls._instance = None

    @staticmethod
    def is_valid_uuid(value: str) -> bool:
        """True if `value` parses as a UUID (Postgres rejects anything else)."""
        try:
            UUID(str(value))
        except (ValueError, TypeError):
            return False
        return True

    @staticmethod
    def is_no_rows_error(error: Exception) -> bool:
        """PostgREST reports `.single()` on zero rows as PGRST116."""
        return getattr(error, "code", None) == "PGRST116" or "PGRST116" in str(error)
