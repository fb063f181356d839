"""
Infrastructure Layer for the Capture Records API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import SupabaseRecordRepository

__all__ = [
    "SupabaseRecordRepository",
]
