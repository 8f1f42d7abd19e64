"""
SJF scheduler package.

Simulates non-preemptive Shortest-Job-First CPU scheduling over a static
batch of processes and reports per-process timing metrics.
"""

from .errors import InvalidInputError, SchedulerError
from .models import Process, ScheduleResult
from .scheduler import run_batch, schedule_sjf, validate_processes

__all__ = [
    "InvalidInputError",
    "Process",
    "ScheduleResult",
    "SchedulerError",
    "run_batch",
    "schedule_sjf",
    "validate_processes",
]
