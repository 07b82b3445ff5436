"""Ready-made stores for the appointment, library and task domains."""

from typing import Optional

from ..config.settings import Settings
from ..lifecycle.domains import APPOINTMENT_GRAPH, LOAN_GRAPH, TASK_GRAPH
from ..utils.date_utils import Clock, utcnow
from .core import RecordStore, StoreConfig


def appointment_book(settings: Optional[Settings] = None, clock: Clock = utcnow) -> RecordStore:
    """Appointments keyed ``<prefix>-<n>``; patient names may repeat."""
    settings = settings or Settings()
    return RecordStore(
        StoreConfig(
            name="appointments",
            graph=APPOINTMENT_GRAPH,
            id_prefix=settings.APPOINTMENT_ID_PREFIX,
            id_start=settings.ID_START,
        ),
        clock=clock,
    )


def library_catalog(settings: Optional[Settings] = None, clock: Clock = utcnow) -> RecordStore:
    """Books with unique titles, compared case-insensitively."""
    settings = settings or Settings()
    return RecordStore(
        StoreConfig(
            name="library",
            graph=LOAN_GRAPH,
            unique_labels=True,
            case_sensitive_labels=False,
            id_start=settings.ID_START,
        ),
        clock=clock,
    )


def task_list(settings: Optional[Settings] = None, clock: Clock = utcnow) -> RecordStore:
    """To-do items with integer ids."""
    settings = settings or Settings()
    return RecordStore(
        StoreConfig(name="tasks", graph=TASK_GRAPH, id_start=settings.ID_START),
        clock=clock,
    )
