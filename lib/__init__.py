# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Process-wide Supabase client and query helpers
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError

__all__ = [
    "SupabaseClient",
    "SupabaseClientError",
]
