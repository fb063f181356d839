"""
Application-layer exceptions.

Part of REC-6: Distinct error taxonomy for record retrieval

These exceptions are used across application and infrastructure layers
and mapped to HTTP status codes in backend.main.
"""


class RecordError(Exception):
    """Base class for record retrieval failures."""

    pass


class RecordStoreError(RecordError):
    """Query or load against the record store failed.

    Raised by repository adapters wrapping the underlying client error.
    Never retried.
    """

    pass


class RecordNotFoundError(RecordError):
    """No record exists for the requested identifier."""

    def __init__(self, record_uuid: str):
        super().__init__(f"record {record_uuid!r} not found")
        self.record_uuid = record_uuid


class CorruptRecordError(RecordError):
    """A persisted body column could not be hex-decoded."""

    def __init__(self, record_uuid: str, field: str, reason: str = ""):
        message = f"record {record_uuid!r} has corrupt {field}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.record_uuid = record_uuid
        self.field = field


class InvalidRecordURLError(RecordError):
    """A record's stored URL could not be parsed."""

    def __init__(self, url: str, reason: str = ""):
        super().__init__(f"invalid record URL {url!r}: {reason}")
        self.url = url


class InvalidOptionCombinationError(RecordError):
    """Both request and response bodies were requested at once."""

    pass
