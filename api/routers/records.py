"""
Records router for captured traffic inspection.

Part of REC-8: Records API routes

This router contains endpoints for:
- GET /records - Page and search captured records
- GET /records/{record_uuid} - Record metadata
- GET /records/{record_uuid}/request[/raw|/embed] - Request content
- GET /records/{record_uuid}/response[/raw|/embed] - Response content

Content variants:
- (bare): body only, as attachment download
- /raw: wire-format headers + body, as attachment download
- /embed: body only, inline text/plain

All endpoints are read-only. Errors are turned into plain status replies
by the exception handlers registered in backend.main.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response

from api.deps import (
    get_get_record_use_case,
    get_list_records_use_case,
    get_render_content_use_case,
)
from api.responses import content_response, json_response
from application.use_cases import (
    GetRecordUseCase,
    ListRecordsUseCase,
    RenderContentUseCase,
)
from domain.models import ContentMode, RecordMeta, RecordPage

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Records"],
)


# =============================================================================
# Listing & Metadata Endpoints
# =============================================================================


@router.get("/records", response_model=RecordPage)
@router.get("/records/", response_model=RecordPage, include_in_schema=False)
def list_records_endpoint(
    q: Optional[str] = Query(default=None, description="Free-text search terms"),
    page: Optional[str] = Query(default=None, description="1-based page number"),
    use_case: ListRecordsUseCase = Depends(get_list_records_use_case),
):
    """
    Page through captured records, optionally filtered.

    Every whitespace-separated term in ``q`` is matched against host,
    origin, path and content type (substring) and method, scheme and status
    (exact). A record matches if any term matches any field.

    Args:
        q: Search terms (absent or empty means no filter)
        page: Page number; missing, invalid or < 1 means page 1

    Returns:
        {requests, page, pages}
    """
    return json_response(use_case.execute(q=q, page=page))


@router.get("/records/{record_uuid}", response_model=RecordMeta)
def get_record_endpoint(
    record_uuid: str,
    use_case: GetRecordUseCase = Depends(get_get_record_use_case),
):
    """
    Get a record's metadata.

    Args:
        record_uuid: Record identifier

    Returns:
        Record metadata without bodies
    """
    return json_response(use_case.execute(record_uuid).meta)


# =============================================================================
# Content Endpoints
# =============================================================================


def _serve_content(
    request: Request,
    record_uuid: str,
    mode: ContentMode,
    get_record: GetRecordUseCase,
    render: RenderContentUseCase,
) -> Response:
    record = get_record.execute(record_uuid)
    return content_response(request, render.execute(record, mode))


@router.get("/records/{record_uuid}/request")
def request_content_endpoint(
    request: Request,
    record_uuid: str,
    get_record: GetRecordUseCase = Depends(get_get_record_use_case),
    render: RenderContentUseCase = Depends(get_render_content_use_case),
):
    """Download the request body."""
    return _serve_content(request, record_uuid, ContentMode.REQUEST_CONTENT, get_record, render)


@router.get("/records/{record_uuid}/request/raw")
def request_raw_endpoint(
    request: Request,
    record_uuid: str,
    get_record: GetRecordUseCase = Depends(get_get_record_use_case),
    render: RenderContentUseCase = Depends(get_render_content_use_case),
):
    """Download request headers in wire format followed by the body."""
    return _serve_content(request, record_uuid, ContentMode.REQUEST_RAW, get_record, render)


@router.get("/records/{record_uuid}/request/embed")
def request_embed_endpoint(
    request: Request,
    record_uuid: str,
    get_record: GetRecordUseCase = Depends(get_get_record_use_case),
    render: RenderContentUseCase = Depends(get_render_content_use_case),
):
    """Show the request body inline as text."""
    return _serve_content(request, record_uuid, ContentMode.REQUEST_EMBED, get_record, render)


@router.get("/records/{record_uuid}/response")
def response_content_endpoint(
    request: Request,
    record_uuid: str,
    get_record: GetRecordUseCase = Depends(get_get_record_use_case),
    render: RenderContentUseCase = Depends(get_render_content_use_case),
):
    """Download the response body."""
    return _serve_content(request, record_uuid, ContentMode.RESPONSE_CONTENT, get_record, render)


@router.get("/records/{record_uuid}/response/raw")
def response_raw_endpoint(
    request: Request,
    record_uuid: str,
    get_record: GetRecordUseCase = Depends(get_get_record_use_case),
    render: RenderContentUseCase = Depends(get_render_content_use_case),
):
    """Download response headers in wire format followed by the body."""
    return _serve_content(request, record_uuid, ContentMode.RESPONSE_RAW, get_record, render)


@router.get("/records/{record_uuid}/response/embed")
def response_embed_endpoint(
    request: Request,
    record_uuid: str,
    get_record: GetRecordUseCase = Depends(get_get_record_use_case),
    render: RenderContentUseCase = Depends(get_render_content_use_case),
):
    """Show the response body inline as text."""
    return _serve_content(request, record_uuid, ContentMode.RESPONSE_EMBED, get_record, render)
