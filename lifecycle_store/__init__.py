"""
Lifecycle Store - generic in-memory record stores with status lifecycles.

This package provides:
- A record store parameterized by a transition graph
- Appointment, library loan and task instantiations
- Typed errors for missing records, rejected transitions and duplicates
- Rich console rendering and scripted demos
"""

__version__ = "0.1.0"

from .config.settings import Settings
from .core.exceptions import (
    DuplicateRecordError,
    InvalidTransitionError,
    RecordNotFoundError,
    StoreError,
)
from .lifecycle import AppointmentStatus, LoanStatus, TaskStatus, Transition, TransitionGraph
from .models.record import Record
from .store import RecordStore, StoreConfig, appointment_book, library_catalog, task_list

__all__ = [
    "Settings",
    "Record",
    "RecordStore",
    "StoreConfig",
    "Transition",
    "TransitionGraph",
    "AppointmentStatus",
    "LoanStatus",
    "TaskStatus",
    "appointment_book",
    "library_catalog",
    "task_list",
    "StoreError",
    "RecordNotFoundError",
    "InvalidTransitionError",
    "DuplicateRecordError",
]
