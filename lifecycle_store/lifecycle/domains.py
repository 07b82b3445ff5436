"""Status enums and transition graphs for the three record domains."""

from enum import Enum

from .graph import Transition, TransitionGraph


class AppointmentStatus(str, Enum):
    """Lifecycle of a scheduled appointment."""

    ACTIVE = "active"          # Scheduled, not yet attended
    COMPLETED = "completed"    # Attended (terminal)
    CANCELLED = "cancelled"    # Called off (terminal)


class LoanStatus(str, Enum):
    """Loan state of a catalogued book."""

    AVAILABLE = "available"
    LOANED = "loaned"


class TaskStatus(str, Enum):
    """Lifecycle of a to-do item."""

    PENDING = "pending"
    DONE = "done"              # Terminal


APPOINTMENT_GRAPH = TransitionGraph(
    name="appointment",
    states=AppointmentStatus,
    initial=AppointmentStatus.ACTIVE,
    transitions=[
        Transition.of(AppointmentStatus.ACTIVE, AppointmentStatus.COMPLETED, stamp="completed_at"),
        Transition.of(AppointmentStatus.ACTIVE, AppointmentStatus.CANCELLED, stamp="cancelled_at"),
    ],
)

# Cyclic: a book can be loaned and returned any number of times.
LOAN_GRAPH = TransitionGraph(
    name="loan",
    states=LoanStatus,
    initial=LoanStatus.AVAILABLE,
    transitions=[
        Transition.of(
            LoanStatus.AVAILABLE, LoanStatus.LOANED, stamp="loaned_at", clears=["returned_at"]
        ),
        Transition.of(LoanStatus.LOANED, LoanStatus.AVAILABLE, stamp="returned_at"),
    ],
)

TASK_GRAPH = TransitionGraph(
    name="task",
    states=TaskStatus,
    initial=TaskStatus.PENDING,
    transitions=[
        Transition.of(TaskStatus.PENDING, TaskStatus.DONE, stamp="completed_at"),
    ],
)
