"""
ListRecords Use Case.

Part of REC-4: Paginated record search

Turns a free-text query and a page number into a RecordQuery, runs it
through the repository and derives the total page count.

Search is recall-oriented: a record matches when ANY term matches ANY
field. Terms are not AND-combined.
"""

import logging
import math
from typing import Any, Optional, Union

from application.ports import RecordRepository
from domain.models import (
    META_COLUMNS,
    PAGE_SIZE,
    RecordMeta,
    RecordPage,
    RecordQuery,
    term_matches,
)
from domain.sanitization import sanitize_query, split_terms

logger = logging.getLogger(__name__)


def normalize_page(value: Optional[Union[int, str]]) -> int:
    """
    Coerce a requested page number to a valid 1-based page.

    Missing, unparseable, zero or negative values become 1.
    """
    if value is None:
        return 1
    try:
        page = int(str(value).strip())
    except ValueError:
        return 1
    return max(page, 1)


def build_query(q: Optional[str], page: int, page_size: int = PAGE_SIZE) -> RecordQuery:
    """
    Build the store query for a search string and page.

    Args:
        q: Raw free-text query (None or empty means no filter)
        page: 1-based page number, already normalized
        page_size: Rows per page

    Returns:
        RecordQuery ordered by id with limit/offset for the page
    """
    matches = []
    for term in split_terms(sanitize_query(q or "")):
        matches.extend(term_matches(term))
    return RecordQuery(
        matches=tuple(matches),
        limit=page_size,
        offset=page_size * (page - 1),
        order_by="id",
    )


class ListRecordsUseCase:
    """
    Use case for paging and searching the record history.

    Usage:
        >>> use_case = ListRecordsUseCase(record_repo=record_repo)
        >>> result = use_case.execute(q="GET 200", page="2")
        >>> result.page, result.pages
        (2, 3)
    """

    def __init__(self, record_repo: RecordRepository, page_size: int = PAGE_SIZE):
        self._record_repo = record_repo
        self._page_size = page_size

    def execute(self, q: Optional[str] = None, page: Any = None) -> RecordPage:
        """
        Return one page of matching records.

        Raises:
            RecordStoreError: If the store query fails
        """
        current = normalize_page(page)
        query = build_query(q, current, self._page_size)

        rows, total = self._record_repo.search(query, META_COLUMNS)
        logger.debug(
            f"Record search page={current} matches={len(query.matches)} "
            f"rows={len(rows)} total={total}"
        )

        return RecordPage(
            requests=[RecordMeta.model_validate(row) for row in rows],
            page=current,
            pages=math.ceil(total / self._page_size),
        )
