"""
Generic status-lifecycle record store.

- **Core**: ``RecordStore`` coordinator and its ``StoreConfig``
- **Operations**: create and transition, the only mutations
- **Queries**: lookups, lazy listings and statistics
- **Factories**: the appointment, library and task instantiations
"""

from .core import RecordStore, StoreConfig
from .factories import appointment_book, library_catalog, task_list
from .ids import IdGenerator
from .queries import RecordView

__all__ = [
    "RecordStore",
    "StoreConfig",
    "RecordView",
    "IdGenerator",
    "appointment_book",
    "library_catalog",
    "task_list",
]
