from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Process:
    pid: int
    arrival_time: int
    burst_time: int
    start_time: Optional[int] = None
    completion_time: Optional[int] = None

    @property
    def label(self) -> str:
        return f"P{self.pid}"

    @property
    def is_scheduled(self) -> bool:
        return self.start_time is not None and self.completion_time is not None


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    end_time: int

    @property
    def label(self) -> str:
        return f"P{self.pid}"


@dataclass
class ProcessMetrics:
    pid: int
    arrival_time: int
    burst_time: int
    start_time: int
    completion_time: int
    turnaround_time: int
    waiting_time: int


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    idle_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


@dataclass
class ScheduleResult:
    algorithm: str
    processes: List[Process] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    # Only filled when the clock is advanced one unit at a time.
    idle_ticks: List[int] = field(default_factory=list)
    metrics: List[ProcessMetrics] = field(default_factory=list)
    system: Optional[SystemMetrics] = None
