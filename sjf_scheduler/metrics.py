from __future__ import annotations

from typing import List, Sequence

from .errors import SchedulerError
from .models import Process, ProcessMetrics, ScheduleResult, SystemMetrics


def compute_process_metrics(processes: Sequence[Process]) -> List[ProcessMetrics]:
    """
    Derive turnaround and waiting time for every scheduled process.

    Pure reduction over the schedule; the processes are not modified.
    """
    metrics: List[ProcessMetrics] = []

    for p in processes:
        if not p.is_scheduled:
            raise SchedulerError(f"Process {p.label} has not been scheduled")

        turnaround_time = p.completion_time - p.arrival_time
        waiting_time = turnaround_time - p.burst_time

        metrics.append(
            ProcessMetrics(
                pid=p.pid,
                arrival_time=p.arrival_time,
                burst_time=p.burst_time,
                start_time=p.start_time,
                completion_time=p.completion_time,
                turnaround_time=turnaround_time,
                waiting_time=waiting_time,
            )
        )

    return metrics


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute makespan, idle time, throughput and CPU utilization from the
    timeline slices.
    """
    if not result.timeline:
        system = SystemMetrics(cpu_busy_time=0, idle_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)
        result.system = system
        return system

    makespan = max(slice_.end_time for slice_ in result.timeline)
    cpu_busy_time = sum(slice_.end_time - slice_.start_time for slice_ in result.timeline)

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        idle_time=makespan - cpu_busy_time,
        makespan=makespan,
        throughput=len(result.timeline) / makespan,
        cpu_utilization=cpu_busy_time / makespan,
    )
    result.system = system
    return system


def summarize_process_metrics(processes: List[ProcessMetrics]) -> dict:
    """
    Return the average turnaround and waiting time.

    An empty list reports zero averages instead of dividing by zero.
    """
    if not processes:
        return {"count": 0, "avg_waiting": 0.0, "avg_turnaround": 0.0}

    n = len(processes)
    return {
        "count": n,
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
    }


def apply_metrics(result: ScheduleResult) -> ScheduleResult:
    result.metrics = compute_process_metrics(result.processes)
    compute_system_metrics(result)
    return result
