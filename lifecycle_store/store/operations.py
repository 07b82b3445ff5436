"""Record mutation operations handler."""

from typing import Any, Dict, Optional

from ..core.exceptions import (
    DuplicateRecordError,
    InvalidStatusError,
    InvalidTransitionError,
    RecordNotFoundError,
)
from ..lifecycle.graph import Transition
from ..models.record import Record, RecordId
from ..utils.date_utils import Clock, latest
from ..utils.validation import validate_label, validate_metadata
from .ids import IdGenerator
from .queries import RecordQueries
from .storage import InMemoryRecordStorage


class RecordOperations:
    """Handles create and status-transition operations for a record store."""

    def __init__(
        self,
        storage: InMemoryRecordStorage,
        config,
        ids: IdGenerator,
        queries: RecordQueries,
        clock: Clock,
        logger,
    ):
        self.storage = storage
        self.config = config
        self.ids = ids
        self.queries = queries
        self.clock = clock
        self.logger = logger

    def create(self, label: str, metadata: Optional[Dict[str, Any]] = None) -> Record:
        """Create a record in the graph's initial status."""
        label = validate_label(label)
        metadata = validate_metadata(metadata)

        if self.config.unique_labels:
            existing = self.queries.match_label(label)
            if existing is not None:
                self.logger.warning(
                    "Duplicate label rejected",
                    store=self.config.name,
                    label=label,
                    existing_id=existing.id,
                )
                raise DuplicateRecordError(label, existing.id)

        # The id is only consumed once the record is safely stored.
        record = Record(
            id=self.ids.peek(),
            label=label,
            status=self.config.graph.initial,
            metadata=metadata,
            created_at=self.clock(),
        )
        self.storage.append(record)
        self.ids.advance()

        self.logger.info(
            "Record created",
            store=self.config.name,
            record_id=record.id,
            label=label,
            status=record.status,
        )
        return record.model_copy(deep=True)

    def transition(self, record_id: RecordId, target: Any) -> Record:
        """Move a record to ``target`` if the graph allows it."""
        record = self.storage.retrieve(record_id)
        if record is None:
            self.logger.warning(
                "Transition on unknown record", store=self.config.name, record_id=record_id
            )
            raise RecordNotFoundError(record_id)
        return self._apply(record, target)

    def transition_by_label(self, label: str, target: Any) -> Record:
        """Move the first record matching ``label`` to ``target``."""
        record = self.queries.match_label(label)
        if record is None:
            self.logger.warning(
                "Transition on unknown label", store=self.config.name, label=label
            )
            raise RecordNotFoundError(label, lookup="label")
        return self._apply(record, target)

    def _apply(self, record: Record, target: Any) -> Record:
        graph = self.config.graph
        if target not in graph:
            self.logger.warning(
                "Transition to unknown status",
                store=self.config.name,
                record_id=record.id,
                status=record.status,
                target=str(target),
            )
            raise InvalidStatusError(target, graph.name, record.id, record.status)
        target = graph.coerce(target)

        rule = graph.get(record.status, target)
        if rule is None:
            self.logger.warning(
                "Transition rejected",
                store=self.config.name,
                record_id=record.id,
                status=record.status,
                target=target,
            )
            raise InvalidTransitionError(record.id, record.status, target)

        updated = record.model_copy(
            deep=True,
            update=self._effects(record, rule),
        )
        self.storage.replace(updated)

        self.logger.info(
            "Record transitioned",
            store=self.config.name,
            record_id=record.id,
            source=rule.source,
            target=rule.target,
            stamp=rule.stamp,
        )
        return updated.model_copy(deep=True)

    def _effects(self, record: Record, rule: Transition) -> Dict[str, Any]:
        """Field updates for applying ``rule`` to ``record``."""
        timestamps = {
            name: value
            for name, value in record.timestamps.items()
            if name not in rule.clears
        }
        if rule.stamp is not None:
            now = self.clock()
            timestamps[rule.stamp] = now
            status_timestamp = now
        else:
            status_timestamp = latest(*timestamps.values())

        return {
            "status": rule.target,
            "timestamps": timestamps,
            "status_timestamp": status_timestamp,
        }
