"""
Domain models for the Capture Records API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core concepts:
- RecordMeta: Metadata of one captured request/response exchange
- Record: RecordMeta plus decoded request and response bodies
- RecordPage: One page of a record listing
- RecordQuery: Store-neutral, OR-combined search query
- ContentMode / OutputOptions: How a record's content is rendered

Usage:
    >>> from domain.models import Record, ContentMode

    >>> record = Record(uuid="r-1", url="http://a.b/c", body=b"hello")
    >>> ContentMode.RESPONSE_RAW.options().wire
    True
"""

from domain.models.content import (
    EMBED_CONTENT_TYPE,
    ContentMode,
    MessagePart,
    OutputOptions,
    Presentation,
    RenderedContent,
)
from domain.models.query import FieldMatch, MatchOp, RecordQuery, term_matches
from domain.models.record import (
    BODY_COLUMNS,
    META_COLUMNS,
    PAGE_SIZE,
    RECORD_COLUMNS,
    Headers,
    Record,
    RecordMeta,
    RecordPage,
    decode_hex,
)

__all__ = [
    # Records
    "Headers",
    "Record",
    "RecordMeta",
    "RecordPage",
    "BODY_COLUMNS",
    "META_COLUMNS",
    "RECORD_COLUMNS",
    "PAGE_SIZE",
    "decode_hex",
    # Queries
    "FieldMatch",
    "MatchOp",
    "RecordQuery",
    "term_matches",
    # Content
    "EMBED_CONTENT_TYPE",
    "ContentMode",
    "MessagePart",
    "OutputOptions",
    "Presentation",
    "RenderedContent",
]
