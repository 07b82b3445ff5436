"""Record query operations handler."""

from typing import Any, Callable, Iterator, Optional

from ..core.exceptions import RecordNotFoundError
from ..models.record import Record, RecordId, RecordStats
from ..utils.validation import validate_label
from .storage import InMemoryRecordStorage

RecordPredicate = Callable[[Record], bool]


class RecordView:
    """Lazy, restartable sequence over a store's live records.

    Each iteration starts a fresh scan in insertion order, so a view created
    before a transition reflects it when iterated afterwards.
    """

    def __init__(self, storage: InMemoryRecordStorage, predicate: Optional[RecordPredicate] = None) -> None:
        self._storage = storage
        self._predicate = predicate

    def __iter__(self) -> Iterator[Record]:
        for record in self._storage.scan():
            if self._predicate is None or self._predicate(record):
                yield record.model_copy(deep=True)

    def __len__(self) -> int:
        return sum(1 for _ in self._matching())

    def __bool__(self) -> bool:
        return any(True for _ in self._matching())

    def _matching(self) -> Iterator[Record]:
        for record in self._storage.scan():
            if self._predicate is None or self._predicate(record):
                yield record

    def first(self) -> Optional[Record]:
        return next(iter(self), None)

    def ids(self) -> list:
        return [record.id for record in self._matching()]


class RecordQueries:
    """Handles read-only lookups, listings and statistics."""

    def __init__(self, storage: InMemoryRecordStorage, config, logger):
        self.storage = storage
        self.config = config
        self.logger = logger

    def label_key(self, label: str) -> str:
        """Comparison key for a label under the store's case policy."""
        if self.config.case_sensitive_labels:
            return label
        return label.casefold()

    def match_label(self, label: str) -> Optional[Record]:
        """First stored record whose label matches, without copying."""
        key = self.label_key(validate_label(label))
        for record in self.storage.scan():
            if self.label_key(record.label) == key:
                return record
        return None

    def get(self, record_id: RecordId) -> Optional[Record]:
        record = self.storage.retrieve(record_id)
        return record.model_copy(deep=True) if record is not None else None

    def find_by_id(self, record_id: RecordId) -> Record:
        """Retrieve a record by id."""
        record = self.get(record_id)
        if record is None:
            self.logger.debug("Record not found", store=self.config.name, record_id=record_id)
            raise RecordNotFoundError(record_id)
        return record

    def find_by_label(self, label: str) -> Record:
        """Retrieve the first record, in insertion order, with a matching label."""
        record = self.match_label(label)
        if record is None:
            self.logger.debug("Record not found", store=self.config.name, label=label)
            raise RecordNotFoundError(label, lookup="label")
        return record.model_copy(deep=True)

    def list_all(self) -> RecordView:
        return RecordView(self.storage)

    def list_by_status(self, status: Any) -> RecordView:
        """Records currently in ``status``, in insertion order.

        A status outside the store's graph matches nothing.
        """
        if status not in self.config.graph:
            self.logger.debug("Listing unknown status", store=self.config.name, status=str(status))
            return RecordView(self.storage, lambda record: False)
        status = self.config.graph.coerce(status)
        return RecordView(self.storage, lambda record: record.status == status)

    def get_stats(self) -> RecordStats:
        """Summarize the store's contents."""
        graph = self.config.graph
        by_status = {state: 0 for state in graph.states}
        terminal = set(graph.terminal_states)
        oldest = newest = None

        for record in self.storage.scan():
            by_status[record.status] += 1
            if oldest is None or record.created_at < oldest:
                oldest = record.created_at
            if newest is None or record.created_at > newest:
                newest = record.created_at

        stats = RecordStats(
            store=self.config.name,
            total_records=len(self.storage),
            records_by_status=by_status,
            terminal_records=sum(count for state, count in by_status.items() if state in terminal),
            oldest_record=oldest,
            newest_record=newest,
        )
        self.logger.debug("Record stats computed", store=self.config.name, total=stats.total_records)
        return stats
