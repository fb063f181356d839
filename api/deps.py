"""
FastAPI Dependency Providers for the Capture Records API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake
implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request

Usage in routers:
    from api.deps import get_get_record_use_case
    from application.use_cases import GetRecordUseCase

    @router.get("/records/{record_uuid}")
    def get_record(
        record_uuid: str,
        use_case: GetRecordUseCase = Depends(get_get_record_use_case),
    ):
        return use_case.execute(record_uuid).meta

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_record_repo] = lambda: FakeRecordRepository()
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import RecordRepository

# Use cases
from application.use_cases import (
    GetRecordUseCase,
    ListRecordsUseCase,
    RenderContentUseCase,
)

# Concrete implementations
from infrastructure import SupabaseRecordRepository

from backend.settings import Settings, get_settings as _get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        logger.error("Record store unavailable: Supabase credentials not configured")
        raise HTTPException(status_code=503)
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_record_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> RecordRepository:
    """
    Get RecordRepository implementation.

    Returns a SupabaseRecordRepository instance with injected client.
    The return type is the Protocol to enable easy faking.

    Args:
        client: Supabase client (injected)
        settings: Application settings (injected)

    Returns:
        RecordRepository: Read-only access to captured records
    """
    return SupabaseRecordRepository(client, table=settings.records_table)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_get_record_use_case(
    record_repo: RecordRepository = Depends(get_record_repo),
) -> GetRecordUseCase:
    """Get GetRecordUseCase with injected repository."""
    return GetRecordUseCase(record_repo=record_repo)


def get_list_records_use_case(
    record_repo: RecordRepository = Depends(get_record_repo),
) -> ListRecordsUseCase:
    """Get ListRecordsUseCase with injected repository."""
    return ListRecordsUseCase(record_repo=record_repo)


def get_render_content_use_case() -> RenderContentUseCase:
    """Get RenderContentUseCase (stateless)."""
    return RenderContentUseCase()
