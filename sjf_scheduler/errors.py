from __future__ import annotations


class SchedulerError(Exception):
    """Base class for errors raised by the scheduler package."""


class InvalidInputError(SchedulerError, ValueError):
    """
    A process record or workload entry is malformed.

    Raised before any scheduling is attempted.
    """
