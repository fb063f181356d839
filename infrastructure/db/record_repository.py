"""
Supabase implementation of RecordRepository.

Part of REC-1: Record store access behind a protocol

Reads captured records through PostgREST. Body columns are Postgres
``bytea``, which PostgREST delivers as ``\\x``-prefixed hex text; decoding
is left to the use case.
"""

import logging
from typing import Any, Optional, Sequence

from supabase import Client

from application.exceptions import RecordStoreError
from domain.models import FieldMatch, MatchOp, RecordQuery

logger = logging.getLogger(__name__)

# PostgREST: requested range starts past the last matching row.
RANGE_NOT_SATISFIABLE = "PGRST103"


def or_filter(matches: Sequence[FieldMatch]) -> str:
    """
    Translate OR-combined field matches to a PostgREST ``or`` filter.

    Terms are pre-sanitized to ``[0-9a-zA-Z.]``, so they carry no filter
    delimiters or LIKE wildcards.

    Example:
        >>> or_filter([FieldMatch("host", MatchOp.CONTAINS, "api")])
        'host.like.%api%'
    """
    parts = []
    for match in matches:
        if match.op is MatchOp.CONTAINS:
            parts.append(f"{match.field}.like.%{match.value}%")
        else:
            parts.append(f"{match.field}.eq.{match.value}")
    return ",".join(parts)


class SupabaseRecordRepository:
    """
    Supabase implementation of RecordRepository protocol.

    All Supabase query logic for records is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client, table: str = "records"):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the captured records table
        """
        self._client = client
        self._table = table

    def find(
        self,
        record_uuid: str,
        columns: Sequence[str],
    ) -> Optional[dict[str, Any]]:
        """Fetch a single record row by uuid."""
        try:
            result = (
                self._client.table(self._table)
                .select(",".join(columns))
                .eq("uuid", record_uuid)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get record {record_uuid}: {e}")
            raise RecordStoreError(f"failed to load record {record_uuid!r}") from e

        rows = result.data or []
        return rows[0] if rows else None

    def search(
        self,
        query: RecordQuery,
        columns: Sequence[str],
    ) -> tuple[list[dict[str, Any]], int]:
        """Run a paged search returning rows and the exact match count."""
        builder = self._client.table(self._table).select(",".join(columns), count="exact")
        if query.is_filtered:
            builder = builder.or_(or_filter(query.matches))
        builder = builder.order(query.order_by).range(
            query.offset, query.offset + query.limit - 1
        )

        try:
            result = builder.execute()
        except Exception as e:
            if getattr(e, "code", None) == RANGE_NOT_SATISFIABLE:
                # Page past the end: no rows, but the total is still needed.
                return [], self.count(query)
            logger.error(f"Failed to search records: {e}")
            raise RecordStoreError("failed to search records") from e

        return result.data or [], result.count or 0

    def count(self, query: RecordQuery) -> int:
        """Count rows matching a query, ignoring limit and offset."""
        builder = self._client.table(self._table).select("id", count="exact", head=True)
        if query.is_filtered:
            builder = builder.or_(or_filter(query.matches))

        try:
            result = builder.execute()
        except Exception as e:
            logger.error(f"Failed to count records: {e}")
            raise RecordStoreError("failed to count records") from e

        return result.count or 0
