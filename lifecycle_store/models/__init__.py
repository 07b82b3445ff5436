"""Record store domain models."""

from .base import (
    OperationResult,
    StatsModel,
    StoreBaseModel,
    TimestampedModel,
)
from .record import Record, RecordId, RecordStats

__all__ = [
    # Base models
    "StoreBaseModel",
    "TimestampedModel",
    "OperationResult",
    "StatsModel",

    # Record models
    "Record",
    "RecordId",
    "RecordStats",
]
