"""
Record Repository Interface (Port).

Part of REC-1: Record store access behind a protocol

Defines the read-only interface over the captured record store. Adapters
raise RecordStoreError on any store failure and never retry.
"""

from typing import Any, Optional, Protocol, Sequence

from domain.models import RecordQuery


class RecordRepository(Protocol):
    """Abstract interface for read-only record store access."""

    def find(
        self,
        record_uuid: str,
        columns: Sequence[str],
    ) -> Optional[dict[str, Any]]:
        """
        Fetch a single record row.

        Body columns are returned in their hex-encoded text form.

        Args:
            record_uuid: Record identifier
            columns: Column names to select

        Returns:
            Row dict, or None if no record has this identifier

        Raises:
            RecordStoreError: If the store query fails
        """
        ...

    def search(
        self,
        query: RecordQuery,
        columns: Sequence[str],
    ) -> tuple[list[dict[str, Any]], int]:
        """
        Run a filtered, ordered, paged query.

        Args:
            query: Filter, ordering and paging to apply
            columns: Column names to select

        Returns:
            Tuple of (rows for the requested page, total matching rows
            ignoring limit and offset)

        Raises:
            RecordStoreError: If the store query fails
        """
        ...
