"""Scripted walkthroughs of the appointment, library and task stores."""

from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.rule import Rule

from ..config.settings import Settings
from ..lifecycle.domains import AppointmentStatus, LoanStatus, TaskStatus
from ..store.core import RecordStore
from ..store.factories import appointment_book, library_catalog, task_list
from ..utils.date_utils import Clock, format_timestamp, utcnow
from .render import RecordRenderer


def run_appointments(console: Console, settings: Optional[Settings] = None, clock: Clock = utcnow) -> RecordStore:
    """Schedule, cancel and complete appointments, then list them by status."""
    settings = settings or Settings()
    store = appointment_book(settings, clock=clock)
    render = RecordRenderer(
        console,
        label_title="Patient",
        metadata_titles={"scheduled_for": "Scheduled for", "observations": "Observations"},
        timestamp_format=settings.TIMESTAMP_FORMAT,
    )
    console.print(Rule("Appointment scheduling"))

    schedule = [
        ("João da Silva", datetime(2025, 10, 20, 10, 0), "Exame de rotina"),
        ("Maria Oliveira", datetime(2025, 10, 21, 14, 30), None),
        ("Pedro Santos", datetime(2025, 10, 22, 9, 0), "Avaliação inicial"),
        ("Ana Paula", datetime(2025, 10, 23, 11, 0), None),
    ]
    for patient, when, observations in schedule:
        metadata = {"scheduled_for": when}
        if observations:
            metadata["observations"] = observations
        record = store.create(patient, metadata)
        console.print(f"[green]> Appointment for \"{patient}\" scheduled (ID: {record.id})[/green]")

    render.table(store.list_all(), "All appointments", "No appointments found.")

    prefix = settings.APPOINTMENT_ID_PREFIX
    start = settings.ID_START
    steps = [
        (f"{prefix}-{start + 1}", AppointmentStatus.CANCELLED),
        (f"{prefix}-{start}", AppointmentStatus.COMPLETED),
        (f"{prefix}-{start + 3}", AppointmentStatus.CANCELLED),
        # Rejected: already completed, then an id that was never issued
        (f"{prefix}-{start}", AppointmentStatus.COMPLETED),
        (f"{prefix}-99", AppointmentStatus.CANCELLED),
    ]
    for record_id, target in steps:
        result = store.attempt(store.transition, record_id, target)
        render.outcome(result, f"Appointment \"{record_id}\" is now {target.value}")

    render.table(store.list_all(), "All appointments", "No appointments found.")
    for status in AppointmentStatus:
        render.table(
            store.list_by_status(status),
            f"Appointments with status \"{status.value}\"",
            f"No appointments with status \"{status.value}\".",
        )
    return store


def run_library(console: Console, settings: Optional[Settings] = None, clock: Clock = utcnow) -> RecordStore:
    """Register books, loan and return one, and show availability along the way."""
    settings = settings or Settings()
    store = library_catalog(settings, clock=clock)
    render = RecordRenderer(
        console,
        label_title="Title",
        metadata_titles={"author": "Author"},
        timestamp_format=settings.TIMESTAMP_FORMAT,
    )
    console.print(Rule("Library catalog"))

    for title, author in [
        ("O Hobbit", "J.R.R. Tolkien"),
        ("1984", "George Orwell"),
        ("O Código Da Vinci", "Dan Brown"),
    ]:
        result = store.attempt(store.create, title, {"author": author})
        render.outcome(result, f"Book \"{title}\" by {author} registered")

    render.table(store.list_all(), "Full catalog", "The catalog is empty.")
    render.table(store.list_by_status(LoanStatus.AVAILABLE), "Available books", "No books available.")

    def loan(title: str, target: LoanStatus, verb: str) -> None:
        result = store.attempt(store.transition_by_label, title, target)
        if result.success:
            when = format_timestamp(result.data.status_timestamp, settings.TIMESTAMP_FORMAT)
            render.outcome(result, f"Book \"{title}\" {verb} at {when}")
        else:
            render.outcome(result, "")

    loan("1984", LoanStatus.LOANED, "loaned")
    loan("1984", LoanStatus.LOANED, "loaned")
    render.table(store.list_by_status(LoanStatus.AVAILABLE), "Available books", "No books available.")
    loan("1984", LoanStatus.AVAILABLE, "returned")
    loan("O Hobbit", LoanStatus.AVAILABLE, "returned")

    render.table(store.list_all(), "Full catalog", "The catalog is empty.")
    return store


def run_tasks(console: Console, settings: Optional[Settings] = None, clock: Clock = utcnow) -> RecordStore:
    """Add tasks, complete some of them and list pending and done work."""
    settings = settings or Settings()
    store = task_list(settings, clock=clock)
    render = RecordRenderer(
        console,
        label_title="Description",
        metadata_titles={"category": "Category"},
        timestamp_format=settings.TIMESTAMP_FORMAT,
    )
    console.print(Rule("Task list"))

    for description, category in [
        ("Fazer compras", "Pessoal"),
        ("Responder e-mails do trabalho", None),
        ("Ligar para o dentista", "Saúde"),
        ("Finalizar relatório do projeto", None),
    ]:
        record = store.create(description, {"category": category} if category else None)
        console.print(f"[green]> Task \"{record.label}\" added (ID: {record.id})[/green]")

    render.table(store.list_by_status(TaskStatus.PENDING), "Pending tasks", "No pending tasks. Good job!")

    start = settings.ID_START
    for task_id in (start, start + 3, start, 99):
        result = store.attempt(store.transition, task_id, TaskStatus.DONE)
        render.outcome(result, f"Task {task_id} done")

    render.table(store.list_by_status(TaskStatus.PENDING), "Pending tasks", "No pending tasks. Good job!")
    render.table(store.list_by_status(TaskStatus.DONE), "Completed tasks", "No task has been completed yet.")
    return store


DEMOS = {
    "appointments": run_appointments,
    "library": run_library,
    "tasks": run_tasks,
}
