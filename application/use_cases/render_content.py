"""
RenderContent Use Case.

Part of REC-5: Request/response content reconstruction

Builds the byte stream served for a record's request or response, either
the bare body or the body prefixed with its header block in HTTP wire
format (``name: value`` lines, CRLF terminated, then a blank line).
"""

import logging
from typing import Optional
from urllib.parse import urlsplit

from application.exceptions import InvalidOptionCombinationError, InvalidRecordURLError
from domain.models import (
    EMBED_CONTENT_TYPE,
    ContentMode,
    Headers,
    OutputOptions,
    Record,
    RenderedContent,
)
from domain.sanitization import safe_filename

logger = logging.getLogger(__name__)

CRLF = b"\r\n"


def wire_headers(headers: Headers) -> bytes:
    """
    Serialize a header collection as an HTTP header block.

    One ``name: value`` line per value, in collection order, followed by
    a blank line. No request or status line is emitted.

    Example:
        >>> wire_headers({"X-Test": ["1", "2"]})
        b'X-Test: 1\\r\\nX-Test: 2\\r\\n\\r\\n'
    """
    buf = bytearray()
    for name, values in headers.items():
        for value in values:
            buf += f"{name}: {value}".encode("utf-8") + CRLF
    buf += CRLF
    return bytes(buf)


def download_filename(url: str) -> str:
    """
    Derive the attachment filename for a record URL.

    Raises:
        InvalidRecordURLError: If the URL cannot be parsed
    """
    try:
        parts = urlsplit(url)
        # Reading the port raises ValueError on a malformed netloc.
        parts.port
    except ValueError as e:
        raise InvalidRecordURLError(url, str(e)) from e
    return safe_filename(parts.netloc.rpartition("@")[2], parts.path)


class RenderContentUseCase:
    """
    Use case for reconstructing a record's presentable content.

    Usage:
        >>> use_case = RenderContentUseCase()
        >>> rendered = use_case.execute(record, ContentMode.RESPONSE_RAW)
        >>> rendered.filename
        'example.com-index.html'
    """

    def execute(self, record: Record, mode: ContentMode) -> RenderedContent:
        """Render one of the six legal content modes."""
        rendered = self.render(record, mode.options())
        if rendered is None:
            raise InvalidOptionCombinationError(f"{mode.name} selects no body")
        return rendered

    def render(self, record: Record, options: OutputOptions) -> Optional[RenderedContent]:
        """
        Render a record according to a raw flag set.

        Args:
            record: Loaded record with decoded bodies
            options: Output flags

        Returns:
            RenderedContent, or None when no body is selected

        Raises:
            InvalidOptionCombinationError: If both bodies are selected
            InvalidRecordURLError: If a download filename cannot be derived
        """
        if options.is_none:
            return None

        if options.request_body and options.response_body:
            logger.error(f"Both request and response body requested for record {record.uuid}")
            raise InvalidOptionCombinationError(
                "request_body and response_body are mutually exclusive"
            )

        if not (options.request_body or options.response_body):
            return None

        if options.request_body:
            headers, body = record.request_header, record.request_body
        else:
            headers, body = record.header, record.body

        content = wire_headers(headers) + body if options.wire else body

        if options.embed:
            return RenderedContent(content=content, media_type=EMBED_CONTENT_TYPE)

        # A wire block is text whatever the URL extension says.
        return RenderedContent(
            content=content,
            media_type=EMBED_CONTENT_TYPE if options.wire else None,
            filename=download_filename(record.url),
            last_modified=record.date_end,
        )
