"""Record store coordinator: owns one collection and delegates to operation handlers."""

from typing import Any, Callable, Dict, Optional

from pydantic import ConfigDict, Field

from ..config.logging import LoggerMixin
from ..core.exceptions import StoreError
from ..lifecycle.graph import TransitionGraph
from ..models.base import OperationResult, StoreBaseModel
from ..models.record import Record, RecordId, RecordStats
from ..utils.date_utils import Clock, utcnow
from .ids import IdGenerator
from .operations import RecordOperations
from .queries import RecordQueries, RecordView
from .storage import InMemoryRecordStorage


class StoreConfig(StoreBaseModel):
    """Per-store configuration: lifecycle graph, label policy and id scheme."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(min_length=1, description="Store name used in logs and stats")
    graph: TransitionGraph = Field(description="Allowed status moves for this store")
    unique_labels: bool = Field(
        default=False,
        description="Reject creates whose label matches an existing record"
    )
    case_sensitive_labels: bool = Field(
        default=True,
        description="Whether label comparison is case-sensitive"
    )
    id_prefix: Optional[str] = Field(
        default=None,
        description="Prefix for string ids; integer ids when null"
    )
    id_start: int = Field(default=1, ge=0, description="First id handed out")


class RecordStore(LoggerMixin):
    """Owns a collection of records and performs lifecycle mutations and queries.

    Each instance is independent: callers hold the store handle explicitly,
    and two stores never share records or id counters.
    """

    def __init__(self, config: StoreConfig, clock: Clock = utcnow) -> None:
        self.config = config
        self.clock = clock
        self.storage = InMemoryRecordStorage()
        self.ids = IdGenerator(prefix=config.id_prefix, start=config.id_start)

        # Delegate operation handlers
        self._queries = RecordQueries(self.storage, config, self.logger)
        self._operations = RecordOperations(
            self.storage, config, self.ids, self._queries, clock, self.logger
        )

        self.logger.debug(
            "Record store created",
            store=config.name,
            graph=config.graph.name,
            unique_labels=config.unique_labels,
        )

    def __repr__(self) -> str:
        return f"RecordStore(name={self.config.name!r}, records={len(self)})"

    def __len__(self) -> int:
        return len(self.storage)

    def __contains__(self, record_id: RecordId) -> bool:
        return record_id in self.storage

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def graph(self) -> TransitionGraph:
        return self.config.graph

    # Mutations - delegated to RecordOperations
    def create(self, label: str, metadata: Optional[Dict[str, Any]] = None) -> Record:
        """Create a record in the initial status and return it."""
        return self._operations.create(label, metadata)

    def transition(self, record_id: RecordId, target: Any) -> Record:
        """Move a record to ``target`` and return the updated record."""
        return self._operations.transition(record_id, target)

    def transition_by_label(self, label: str, target: Any) -> Record:
        return self._operations.transition_by_label(label, target)

    # Queries - delegated to RecordQueries
    def get(self, record_id: RecordId) -> Optional[Record]:
        return self._queries.get(record_id)

    def find_by_id(self, record_id: RecordId) -> Record:
        return self._queries.find_by_id(record_id)

    def find_by_label(self, label: str) -> Record:
        return self._queries.find_by_label(label)

    def list_all(self) -> RecordView:
        """All records in insertion order."""
        return self._queries.list_all()

    def list_by_status(self, status: Any) -> RecordView:
        """Records currently in ``status``, in insertion order."""
        return self._queries.list_by_status(status)

    def count(self) -> int:
        return len(self.storage)

    def get_stats(self) -> RecordStats:
        return self._queries.get_stats()

    def attempt(self, operation: Callable[..., Record], *args: Any, **kwargs: Any) -> OperationResult[Record]:
        """Run a store operation, reporting store errors as a failed result instead of raising."""
        try:
            record = operation(*args, **kwargs)
        except StoreError as e:
            return OperationResult[Record](
                success=False,
                message=e.message,
                error_code=e.error_code,
            )
        return OperationResult[Record](success=True, data=record)
