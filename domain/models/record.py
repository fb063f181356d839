"""
Captured record domain models.

Part of REC-2: Define record metadata and payload models

A record is one request/response exchange written to the store by the
capture engine. This service only ever reads records, so every model here
is frozen.
"""

import binascii
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Header name -> ordered list of values. Value order per name is significant.
Headers = Dict[str, List[str]]

# Fixed listing page size.
PAGE_SIZE = 50

# Columns making up RecordMeta, in store column names.
META_COLUMNS = (
    "uuid",
    "origin",
    "method",
    "status",
    "content_type",
    "content_length",
    "host",
    "url",
    "path",
    "scheme",
    "date_start",
    "date_end",
    "time_taken",
    "header",
    "request_header",
)

# Columns needed to load a full record; bodies arrive hex-encoded.
BODY_COLUMNS = ("body", "request_body")
RECORD_COLUMNS = META_COLUMNS + BODY_COLUMNS


class RecordMeta(BaseModel):
    """Metadata of a captured request/response exchange."""

    model_config = ConfigDict(frozen=True)

    uuid: str
    origin: str = ""
    method: str = ""
    status: int = 0
    content_type: str = ""
    content_length: int = 0
    host: str = ""
    url: str = ""
    path: str = ""
    scheme: str = ""
    date_start: Optional[datetime] = None
    date_end: Optional[datetime] = None
    time_taken: int = 0
    header: Headers = Field(
        default_factory=dict,
        description="Response headers",
    )
    request_header: Headers = Field(
        default_factory=dict,
        description="Request headers",
    )

    @field_validator("header", "request_header", mode="before")
    @classmethod
    def normalize_headers(cls, v: Any) -> Any:
        """Accept null header columns and single string values."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {
                name: [values] if isinstance(values, str) else list(values or [])
                for name, values in v.items()
            }
        return v

    @field_validator("origin", "method", "content_type", "host", "url", "path", "scheme", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("status", "content_length", "time_taken", mode="before")
    @classmethod
    def null_to_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class Record(RecordMeta):
    """A record together with its decoded request and response bodies."""

    request_body: bytes = b""
    body: bytes = Field(
        default=b"",
        description="Response body",
    )

    @property
    def meta(self) -> RecordMeta:
        """Return the metadata part of this record."""
        return RecordMeta.model_validate(self.model_dump(include=set(META_COLUMNS)))


class RecordPage(BaseModel):
    """One page of a record listing."""

    requests: List[RecordMeta] = Field(default_factory=list)
    page: int = 1
    pages: int = 0


def decode_hex(value: Optional[str]) -> bytes:
    """
    Decode a hex-encoded body column to raw bytes.

    Postgres returns bytea columns as hex text prefixed with ``\\x``; the
    prefix is optional here. ``None`` decodes to an empty payload.

    Raises:
        ValueError: If the text has odd length or contains non-hex digits.
    """
    if value is None:
        return b""
    if value.startswith("\\x"):
        value = value[2:]
    try:
        return binascii.unhexlify(value)
    except (ValueError, TypeError) as e:
        raise ValueError(f"invalid hex payload: {e}") from e
