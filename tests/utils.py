"""Test utilities and helper functions for lifecycle store tests."""

from datetime import datetime, timedelta, UTC
from typing import Dict, List, Optional

from lifecycle_store.models.record import Record
from lifecycle_store.store import RecordStore


class FrozenClock:
    """Deterministic clock for stores; call it to read, ``advance`` to move it."""

    def __init__(self, start: Optional[datetime] = None) -> None:
        self.now = start or datetime(2025, 9, 21, 12, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 60) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


class RecordTestHelper:
    """Helper class for record-related testing."""

    @staticmethod
    def create_batch(store: RecordStore, count: int = 5, label_prefix: str = "record") -> List[Record]:
        """Create ``count`` records with distinct labels."""
        return [store.create(f"{label_prefix} {i}") for i in range(count)]

    @staticmethod
    def partitions(store: RecordStore) -> Dict[str, List[Record]]:
        """Records grouped by every status of the store's graph."""
        return {state: list(store.list_by_status(state)) for state in store.graph.states}


class AssertionHelpers:
    """Common assertions for records."""

    @staticmethod
    def assert_untouched(record: Record, initial: str) -> None:
        assert record.status == initial
        assert record.status_timestamp is None
        assert record.timestamps == {}

    @staticmethod
    def assert_ids(records, expected: List) -> None:
        assert [r.id for r in records] == expected
