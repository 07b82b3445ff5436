"""Tests for record models."""

from datetime import datetime, UTC

import pytest
from pydantic import ValidationError

from lifecycle_store.models import OperationResult, Record, RecordStats


class TestRecord:
    """Test the Record model."""

    def test_defaults(self):
        record = Record(id=1, label="Fazer compras", status="pending")

        assert record.status_timestamp is None
        assert record.timestamps == {}
        assert record.metadata is None
        assert isinstance(record.created_at, datetime)
        assert record.created_at.tzinfo is not None

    def test_string_and_int_ids_keep_their_type(self):
        assert Record(id=3, label="x", status="pending").id == 3
        assert Record(id="consulta-3", label="x", status="active").id == "consulta-3"

    def test_label_kept_verbatim(self):
        assert Record(id=1, label="", status="pending").label == ""
        assert Record(id=1, label="  Ana \n", status="pending").label == "  Ana \n"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            Record(id=1, label="x", status="pending", priority="high")

    def test_stamp_and_meta_helpers(self):
        when = datetime(2025, 9, 21, tzinfo=UTC)
        record = Record(
            id=1,
            label="1984",
            status="loaned",
            timestamps={"loaned_at": when},
            metadata={"author": "George Orwell"},
        )

        assert record.stamp("loaned_at") == when
        assert record.stamp("returned_at") is None
        assert record.meta("author") == "George Orwell"
        assert record.meta("isbn", "unknown") == "unknown"

    def test_serialization(self):
        record = Record(id="consulta-1", label="Ana Paula", status="active")

        data = record.model_dump(mode="json")

        assert data["id"] == "consulta-1"
        assert data["status_timestamp"] is None
        assert Record.model_validate(record.model_dump()).model_dump() == record.model_dump()


class TestSupportingModels:
    """Test stats and result models."""

    def test_stats_requires_non_negative_counts(self):
        with pytest.raises(ValidationError):
            RecordStats(store="s", total_records=-1, records_by_status={}, terminal_records=0)

    def test_operation_result(self):
        ok = OperationResult[Record](success=True, data=Record(id=1, label="x", status="pending"))
        failed = OperationResult[Record](success=False, message="nope", error_code="RECORD_NOT_FOUND")

        assert not ok.failed
        assert ok.data.label == "x"
        assert failed.failed
        assert failed.data is None
