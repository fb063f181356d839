"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. These implementations can be
injected into use cases and routers for clean separation of concerns and
testability.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseRecordRepository

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repository with injected client
    record_repo = SupabaseRecordRepository(client, table="records")
"""

from infrastructure.db.record_repository import SupabaseRecordRepository

__all__ = [
    # Captured record store
    "SupabaseRecordRepository",
]
