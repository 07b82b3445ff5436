"""In-memory record storage."""

from typing import Dict, Iterator, List, Optional, Tuple

from ..config.logging import LoggerMixin
from ..core.exceptions import RecordError
from ..models.record import Record, RecordId


def _key(record_id: RecordId) -> Tuple[type, RecordId]:
    # Ids match on type as well as value, so True never finds record 1.
    return (type(record_id), record_id)


class InMemoryRecordStorage(LoggerMixin):
    """Ordered, process-local record storage.

    Insertion order is preserved and never changes; ``replace`` swaps a record
    in place. Nothing is ever deleted.
    """

    def __init__(self) -> None:
        self._records: List[Record] = []
        self._positions: Dict[Tuple[type, RecordId], int] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: RecordId) -> bool:
        return _key(record_id) in self._positions

    def append(self, record: Record) -> None:
        """Store a new record at the end of the sequence."""
        if _key(record.id) in self._positions:
            raise RecordError(f"Record id already in use: {record.id}", record.id)
        self._positions[_key(record.id)] = len(self._records)
        self._records.append(record)

    def retrieve(self, record_id: RecordId) -> Optional[Record]:
        position = self._positions.get(_key(record_id))
        if position is None:
            return None
        return self._records[position]

    def replace(self, record: Record) -> None:
        """Swap the stored record with the same id for ``record``."""
        position = self._positions.get(_key(record.id))
        if position is None:
            raise RecordError(f"Cannot replace unknown record: {record.id}", record.id)
        self._records[position] = record

    def scan(self) -> Iterator[Record]:
        """Walk the live sequence in insertion order.

        Records appended while the scan is running are included.
        """
        index = 0
        while index < len(self._records):
            yield self._records[index]
            index += 1
