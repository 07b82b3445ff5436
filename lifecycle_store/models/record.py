"""Record domain models."""

from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import Field

from .base import StatsModel, TimestampedModel

RecordId = Union[int, str]


class Record(TimestampedModel):
    """One managed entity (appointment, book, task) held by a store.

    Records are only created by ``RecordStore.create`` and only changed by
    ``RecordStore.transition``; the store hands out copies.
    """

    id: RecordId = Field(description="Store-assigned identifier, never reused")
    label: str = Field(description="Human-identifying field")
    status: str = Field(description="Current position in the lifecycle graph")
    status_timestamp: Optional[datetime] = Field(
        default=None,
        description="Time of the latest timestamped transition (null while untouched)"
    )
    timestamps: Dict[str, datetime] = Field(
        default_factory=dict,
        description="Named stamps written by transitions, e.g. loaned_at"
    )
    metadata: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Free-form annotation, not interpreted by the store"
    )

    def stamp(self, name: str) -> Optional[datetime]:
        """Return the named timestamp, if the record carries it."""
        return self.timestamps.get(name)

    def meta(self, key: str, default: Any = None) -> Any:
        """Read one metadata entry, tolerating absent metadata."""
        if self.metadata is None:
            return default
        return self.metadata.get(key, default)


class RecordStats(StatsModel):
    """Statistics about the records held by a store."""

    store: str = Field(description="Name of the store")
    total_records: int = Field(ge=0, description="Total number of records")
    records_by_status: Dict[str, int] = Field(
        description="Count of records per status, zero-filled for every state"
    )
    terminal_records: int = Field(ge=0, description="Records in a terminal status")
    oldest_record: Optional[datetime] = Field(
        default=None,
        description="Creation time of oldest record"
    )
    newest_record: Optional[datetime] = Field(
        default=None,
        description="Creation time of newest record"
    )
