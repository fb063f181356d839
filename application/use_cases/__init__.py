"""
Application Use Cases for the Capture Records API.

This package contains application-level use cases that orchestrate domain
logic and the record repository port. Use cases are the entry points for
every read operation the API exposes.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import (
        GetRecordUseCase,
        ListRecordsUseCase,
        RenderContentUseCase,
    )

    # Page through the history
    listing = ListRecordsUseCase(record_repo=record_repo).execute(q="GET", page=1)

    # Load a record and render its response as a wire-format download
    record = GetRecordUseCase(record_repo=record_repo).execute("r-123")
    rendered = RenderContentUseCase().execute(record, ContentMode.RESPONSE_RAW)
"""

from application.use_cases.get_record import GetRecordUseCase
from application.use_cases.list_records import (
    ListRecordsUseCase,
    build_query,
    normalize_page,
)
from application.use_cases.render_content import (
    RenderContentUseCase,
    download_filename,
    wire_headers,
)

__all__ = [
    # GetRecord
    "GetRecordUseCase",
    # ListRecords
    "ListRecordsUseCase",
    "build_query",
    "normalize_page",
    # RenderContent
    "RenderContentUseCase",
    "download_filename",
    "wire_headers",
]
