from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import InvalidInputError
from .metrics import apply_metrics
from .models import Process, ScheduleResult, ScheduledSlice

logger = logging.getLogger(__name__)

ALGORITHM_NAME = "SJF (non-preemptive)"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_processes(processes: Sequence[Process]) -> None:
    """
    Reject malformed process records before any scheduling happens.

    Every record needs an integer pid > 0, arrival_time >= 0 and
    burst_time > 0, pids must be unique, and no record may already carry
    a start or completion time.
    """
    seen: set[int] = set()

    for p in processes:
        for name in ("pid", "arrival_time", "burst_time"):
            if not _is_int(getattr(p, name)):
                raise InvalidInputError(f"Process {p.pid!r}: {name} must be an integer, got {getattr(p, name)!r}")

        if p.pid <= 0:
            raise InvalidInputError(f"Process {p.pid}: pid must be positive")
        if p.arrival_time < 0:
            raise InvalidInputError(f"Process {p.pid}: arrival_time must be >= 0, got {p.arrival_time}")
        if p.burst_time <= 0:
            raise InvalidInputError(f"Process {p.pid}: burst_time must be > 0, got {p.burst_time}")
        if p.start_time is not None or p.completion_time is not None:
            raise InvalidInputError(f"Process {p.pid}: already scheduled")
        if p.pid in seen:
            raise InvalidInputError(f"Duplicate process id: {p.pid}")

        seen.add(p.pid)


def schedule_sjf(processes: List[Process], *, jump_idle: bool = True) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    At each decision point, among processes that have arrived and are not yet
    completed, choose the one with the smallest burst time. Ties go to the
    process that comes first in the input list.

    When nothing is ready the clock either jumps straight to the next arrival
    (``jump_idle=True``) or advances one unit at a time, recording every idle
    instant in ``ScheduleResult.idle_ticks``. Start and completion times are
    identical either way.

    The supplied Process objects are updated in place and returned in the
    order they were dispatched.
    """
    time = 0
    timeline: List[ScheduledSlice] = []
    dispatched: List[Process] = []
    idle_ticks: List[int] = []
    completed = [False] * len(processes)

    while len(dispatched) < len(processes):
        # Ready queue in input order, so min() keeps the lowest index on ties.
        ready = [
            (idx, p)
            for idx, p in enumerate(processes)
            if not completed[idx] and p.arrival_time <= time
        ]

        if not ready:
            if jump_idle:
                next_arrival = min(p.arrival_time for idx, p in enumerate(processes) if not completed[idx])
                logger.debug("t=%d: CPU idle, jumping to next arrival at t=%d", time, next_arrival)
                time = next_arrival
            else:
                logger.debug("t=%d: CPU idle", time)
                idle_ticks.append(time)
                time += 1
            continue

        idx, p = min(ready, key=lambda item: (item[1].burst_time, item[0]))

        p.start_time = time
        time += p.burst_time
        p.completion_time = time

        completed[idx] = True
        dispatched.append(p)
        timeline.append(ScheduledSlice(pid=p.pid, start_time=p.start_time, end_time=p.completion_time))

        logger.debug(
            "t=%d: dispatch %s (burst=%d, ready=%d), completes at t=%d",
            p.start_time,
            p.label,
            p.burst_time,
            len(ready),
            p.completion_time,
        )

    result = ScheduleResult(
        algorithm=ALGORITHM_NAME,
        processes=dispatched,
        timeline=timeline,
        idle_ticks=idle_ticks,
    )
    apply_metrics(result)

    logger.info("Scheduled %d process(es), makespan %d", len(dispatched), result.system.makespan)
    return result


def run_batch(processes: List[Process], *, jump_idle: bool = True) -> ScheduleResult:
    """
    Validate a batch and schedule it.
    """
    validate_processes(processes)
    return schedule_sjf(processes, jump_idle=jump_idle)
