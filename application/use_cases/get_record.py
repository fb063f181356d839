"""
GetRecord Use Case.

Part of REC-2: Load a single record with decoded bodies

Fetches exactly the columns a full record needs and decodes the two
hex-encoded body columns. A record is returned whole or not at all.
"""

import logging

from application.exceptions import CorruptRecordError, RecordNotFoundError
from application.ports import RecordRepository
from domain.models import BODY_COLUMNS, RECORD_COLUMNS, Record, decode_hex

logger = logging.getLogger(__name__)


class GetRecordUseCase:
    """
    Use case for loading one record by identifier.

    No caching: every call reads from the store, which is the sole source
    of truth.

    Usage:
        >>> use_case = GetRecordUseCase(record_repo=record_repo)
        >>> record = use_case.execute("0b6f2c9e-...")
        >>> record.body
        b'...'
    """

    def __init__(self, record_repo: RecordRepository):
        """
        Initialize with required dependencies.

        Args:
            record_repo: Repository for record store access
        """
        self._record_repo = record_repo

    def execute(self, record_uuid: str) -> Record:
        """
        Load a record and decode its bodies.

        Args:
            record_uuid: Record identifier

        Returns:
            Record with raw request and response bodies

        Raises:
            RecordNotFoundError: If no record has this identifier
            RecordStoreError: If the store query fails
            CorruptRecordError: If a body column is not valid hex
        """
        row = self._record_repo.find(record_uuid, RECORD_COLUMNS)
        if row is None:
            raise RecordNotFoundError(record_uuid)

        data = dict(row)
        for column in BODY_COLUMNS:
            try:
                data[column] = decode_hex(row.get(column))
            except ValueError as e:
                logger.error(f"Failed to decode {column} of record {record_uuid}: {e}")
                raise CorruptRecordError(record_uuid, column, str(e)) from e

        return Record.model_validate(data)
