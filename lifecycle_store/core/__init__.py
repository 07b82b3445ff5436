"""Core error types for the lifecycle record store."""

from .exceptions import (
    ConfigurationError,
    DuplicateRecordError,
    InvalidStatusError,
    InvalidTransitionError,
    RecordError,
    RecordNotFoundError,
    StoreError,
    TransitionError,
    ValidationError,
)

__all__ = [
    "StoreError",
    "ConfigurationError",
    "ValidationError",
    "RecordError",
    "RecordNotFoundError",
    "DuplicateRecordError",
    "TransitionError",
    "InvalidTransitionError",
    "InvalidStatusError",
]
