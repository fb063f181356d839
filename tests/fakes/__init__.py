"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Usage:
    from tests.fakes import FakeRecordRepository, make_record_row

    repo = FakeRecordRepository()
    repo.seed([make_record_row(1), make_record_row(2, method="POST")])
"""
from typing import Any, Dict, List

from tests.fakes.record_repository import FakeRecordRepository


def encode_body(data: bytes) -> str:
    """Encode a body the way PostgREST returns a bytea column."""
    return "\\x" + data.hex()


def make_record_row(n: int, **overrides: Any) -> Dict[str, Any]:
    """
    Build a store row for record number ``n``.

    Bodies are given as raw bytes via ``body``/``request_body`` overrides
    and stored hex-encoded.
    """
    row: Dict[str, Any] = {
        "id": n,
        "uuid": f"rec-{n:04d}",
        "origin": "10.0.0.1:51234",
        "method": "GET",
        "status": 200,
        "content_type": "text/html",
        "content_length": 5,
        "host": "example.com",
        "url": f"http://example.com/page{n}",
        "path": f"/page{n}",
        "scheme": "http",
        "date_start": "2024-01-01T00:00:00+00:00",
        "date_end": "2024-01-01T00:00:01+00:00",
        "time_taken": 1000,
        "header": {"Content-Type": ["text/html"]},
        "request_header": {"Accept": ["*/*"]},
        "body": b"hello",
        "request_body": b"",
    }
    row.update(overrides)
    for column in ("body", "request_body"):
        if isinstance(row[column], bytes):
            row[column] = encode_body(row[column])
    return row


def create_record_repo(num_records: int = 0) -> FakeRecordRepository:
    """Create a fake repository pre-populated with numbered records."""
    rows: List[Dict[str, Any]] = [make_record_row(n) for n in range(1, num_records + 1)]
    return FakeRecordRepository(rows)


__all__ = [
    "FakeRecordRepository",
    "create_record_repo",
    "encode_body",
    "make_record_row",
]
