"""
Tests for GetRecordUseCase.
"""
import pytest
from unittest.mock import MagicMock

from application.exceptions import CorruptRecordError, RecordNotFoundError, RecordStoreError
from application.use_cases.get_record import GetRecordUseCase
from domain.models import RECORD_COLUMNS, Record
from tests.fakes import FakeRecordRepository, make_record_row


@pytest.mark.unit
class TestGetRecordUseCase:
    """Tests for GetRecordUseCase."""

    @pytest.fixture
    def repo(self):
        return FakeRecordRepository([
            make_record_row(1, body=b"response", request_body=b"request"),
        ])

    @pytest.fixture
    def use_case(self, repo):
        return GetRecordUseCase(record_repo=repo)

    def test_decodes_bodies(self, use_case):
        record = use_case.execute("rec-0001")

        assert isinstance(record, Record)
        assert record.body == b"response"
        assert record.request_body == b"request"
        assert record.host == "example.com"

    def test_selects_record_columns(self, use_case, repo):
        use_case.execute("rec-0001")

        assert repo.find_calls == [{"record_uuid": "rec-0001", "columns": RECORD_COLUMNS}]

    def test_binary_body_round_trip(self, repo, use_case):
        payload = bytes(range(256)) * 16
        repo.seed([make_record_row(2, body=payload)])

        assert use_case.execute("rec-0002").body == payload

    def test_null_bodies_decode_empty(self, repo, use_case):
        repo.seed([make_record_row(3, body=None, request_body=None)])

        record = use_case.execute("rec-0003")

        assert record.body == b""
        assert record.request_body == b""

    def test_not_found(self, use_case):
        with pytest.raises(RecordNotFoundError) as exc_info:
            use_case.execute("missing")

        assert exc_info.value.record_uuid == "missing"

    def test_store_error_propagates(self, repo, use_case):
        repo.fail_with("connection refused")

        with pytest.raises(RecordStoreError):
            use_case.execute("rec-0001")

    @pytest.mark.parametrize("column", ["body", "request_body"])
    def test_corrupt_body_fails_whole_load(self, repo, use_case, column):
        repo.seed([make_record_row(4, **{column: "\\xabc"})])

        with pytest.raises(CorruptRecordError) as exc_info:
            use_case.execute("rec-0004")

        assert exc_info.value.field == column

    def test_no_caching(self):
        mock_repo = MagicMock()
        mock_repo.find.return_value = make_record_row(1)
        use_case = GetRecordUseCase(record_repo=mock_repo)

        use_case.execute("rec-0001")
        use_case.execute("rec-0001")

        assert mock_repo.find.call_count == 2
