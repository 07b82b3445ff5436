"""Status lifecycles: transition graphs and the concrete domain instances."""

from .domains import (
    APPOINTMENT_GRAPH,
    LOAN_GRAPH,
    TASK_GRAPH,
    AppointmentStatus,
    LoanStatus,
    TaskStatus,
)
from .graph import Transition, TransitionGraph

__all__ = [
    "Transition",
    "TransitionGraph",
    "AppointmentStatus",
    "LoanStatus",
    "TaskStatus",
    "APPOINTMENT_GRAPH",
    "LOAN_GRAPH",
    "TASK_GRAPH",
]
