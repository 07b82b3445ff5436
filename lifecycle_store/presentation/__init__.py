"""Console presentation of store contents and the scripted demos."""

from .demo import DEMOS, run_appointments, run_library, run_tasks
from .render import RecordRenderer

__all__ = ["RecordRenderer", "DEMOS", "run_appointments", "run_library", "run_tasks"]
