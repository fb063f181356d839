"""
Store-neutral search query model.

Part of REC-4: Paginated record search

A RecordQuery describes which records to return without committing to a
query language. Repositories translate it: the Supabase adapter into a
PostgREST ``or`` filter, the in-memory fake into a row predicate.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class MatchOp(str, Enum):
    """How a single field is compared against a search term."""

    CONTAINS = "contains"  # case-sensitive substring (LIKE %term%)
    EQUALS = "equals"


# Fields matched by substring, then by exact value.
CONTAINS_FIELDS = ("host", "origin", "path", "content_type")
EQUALS_FIELDS = ("method", "scheme", "status")

# Integer columns; only numeric terms can ever equal them.
NUMERIC_FIELDS = frozenset({"status"})

# Largest value a Postgres `integer` column holds.
INT4_MAX = 2**31 - 1


@dataclass(frozen=True)
class FieldMatch:
    """A single field comparison."""

    field: str
    op: MatchOp
    value: str


@dataclass(frozen=True)
class RecordQuery:
    """
    A filtered, ordered, paged query over the record collection.

    ``matches`` are OR-combined: a record is selected when at least one
    comparison holds. An empty ``matches`` tuple selects every record.
    """

    matches: Tuple[FieldMatch, ...] = field(default_factory=tuple)
    limit: int = 50
    offset: int = 0
    order_by: str = "id"

    @property
    def is_filtered(self) -> bool:
        return bool(self.matches)


def _fits_int4(term: str) -> bool:
    return term.isdigit() and int(term) <= INT4_MAX


def term_matches(term: str) -> Tuple[FieldMatch, ...]:
    """Build every field comparison for one search term."""
    matches = [FieldMatch(name, MatchOp.CONTAINS, term) for name in CONTAINS_FIELDS]
    for name in EQUALS_FIELDS:
        if name in NUMERIC_FIELDS and not _fits_int4(term):
            continue
        matches.append(FieldMatch(name, MatchOp.EQUALS, term))
    return tuple(matches)
