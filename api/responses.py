"""
Response builders for the records API.

Part of REC-7: Attachment downloads with conditional and range requests

- json_response: JSON with an allow-all CORS origin header
- plain_status: bare status code with its standard phrase as body
- content_response: inline or attachment delivery of rendered content

Attachments are served with ``Last-Modified`` taken from the record's end
timestamp and honour ``If-Unmodified-Since``, ``If-Modified-Since``,
``If-Range`` and a single ``Range: bytes=`` spec. Multi-range and
malformed Range headers are ignored and the full body is sent.
"""

import mimetypes
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from http import HTTPStatus
from typing import Any, Optional, Union

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from domain.models import RenderedContent

DEFAULT_MEDIA_TYPE = "application/octet-stream"

# Sentinel returned by parse_range for a syntactically valid but
# unsatisfiable range.
UNSATISFIABLE = "unsatisfiable"

ByteRange = tuple[int, int]


def json_response(payload: Any, status_code: int = 200) -> JSONResponse:
    """Serialize a payload as JSON readable from any origin."""
    return JSONResponse(
        content=jsonable_encoder(payload),
        status_code=status_code,
        headers={"Access-Control-Allow-Origin": "*"},
    )


def plain_status(status_code: int, headers: Optional[dict[str, str]] = None) -> PlainTextResponse:
    """Reply with a bare status code and its standard phrase."""
    return PlainTextResponse(
        HTTPStatus(status_code).phrase,
        status_code=status_code,
        headers=headers,
    )


def guess_media_type(filename: str) -> str:
    """Guess a download's media type from its filename."""
    media_type, _ = mimetypes.guess_type(filename)
    return media_type or DEFAULT_MEDIA_TYPE


def _http_second(value: datetime) -> datetime:
    """Normalize to UTC at HTTP-date (whole second) resolution."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).replace(microsecond=0)


def _header_date(request: Request, name: str) -> Optional[datetime]:
    raw = request.headers.get(name)
    if not raw:
        return None
    try:
        parsed = parsedate_to_datetime(raw)
    except (TypeError, ValueError):
        return None
    return _http_second(parsed)


def _is_int(value: str) -> bool:
    return value.isascii() and value.isdigit()


def parse_range(header: Optional[str], size: int) -> Union[None, str, ByteRange]:
    """
    Parse a single-range ``Range`` header against a body size.

    Returns:
        None to serve the whole body (no header, malformed, multi-range),
        UNSATISFIABLE when the range lies outside the body, or an
        inclusive (start, end) byte range.
    """
    if not header or not header.startswith("bytes="):
        return None

    specs = [s.strip() for s in header[len("bytes="):].split(",") if s.strip()]
    if len(specs) != 1:
        return None

    first, sep, last = specs[0].partition("-")
    if not sep:
        return None
    first, last = first.strip(), last.strip()

    if not first:
        # Suffix range: the final N bytes.
        if not _is_int(last):
            return None
        length = min(int(last), size)
        if length == 0:
            return UNSATISFIABLE
        return size - length, size - 1

    if not _is_int(first) or (last and not _is_int(last)):
        return None
    start = int(first)
    if last and int(last) < start:
        return None
    if start >= size:
        return UNSATISFIABLE
    end = min(int(last), size - 1) if last else size - 1
    return start, end


def attachment_response(request: Request, rendered: RenderedContent) -> Response:
    """
    Serve rendered content as a named attachment.

    Args:
        request: Incoming request, for conditional and Range headers
        rendered: Content with filename and last-modified marker

    Returns:
        200, 206, 304, 412 or 416 response
    """
    content = rendered.content
    size = len(content)
    filename = rendered.filename or "download.txt"

    headers = {
        "Content-Disposition": f'attachment; filename="{filename}"',
        "Accept-Ranges": "bytes",
    }

    modified = _http_second(rendered.last_modified) if rendered.last_modified else None
    if modified is not None:
        headers["Last-Modified"] = format_datetime(modified, usegmt=True)

        unmodified_since = _header_date(request, "if-unmodified-since")
        if unmodified_since is not None and modified > unmodified_since:
            return plain_status(412)

        modified_since = _header_date(request, "if-modified-since")
        if modified_since is not None and modified <= modified_since:
            return Response(status_code=304, headers=headers)

    byte_range = parse_range(request.headers.get("range"), size)
    if byte_range is not None and request.headers.get("if-range"):
        # Only the date form of If-Range applies; there are no ETags here.
        if modified is None or _header_date(request, "if-range") != modified:
            byte_range = None

    if byte_range == UNSATISFIABLE:
        return plain_status(416, headers={"Content-Range": f"bytes */{size}"})

    media_type = rendered.media_type or guess_media_type(filename)
    if byte_range is None:
        return Response(content=content, media_type=media_type, headers=headers)

    start, end = byte_range
    headers["Content-Range"] = f"bytes {start}-{end}/{size}"
    return Response(
        content=content[start:end + 1],
        status_code=206,
        media_type=media_type,
        headers=headers,
    )


def content_response(request: Request, rendered: RenderedContent) -> Response:
    """Serve rendered content inline or as an attachment."""
    if rendered.is_attachment:
        return attachment_response(request, rendered)
    return Response(content=rendered.content, media_type=rendered.media_type)
