"""Utility functions and helpers."""

from .date_utils import Clock, format_timestamp, latest, utcnow
from .validation import validate_label, validate_metadata

__all__ = [
    "Clock",
    "utcnow",
    "format_timestamp",
    "latest",
    "validate_label",
    "validate_metadata",
]
