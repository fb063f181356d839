"""
Domain layer for the Capture Records API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ContentMode,
    OutputOptions,
    Record,
    RecordMeta,
    RecordPage,
    RecordQuery,
)

__all__ = [
    "ContentMode",
    "OutputOptions",
    "Record",
    "RecordMeta",
    "RecordPage",
    "RecordQuery",
]
