import pytest

from sjf_scheduler.errors import SchedulerError
from sjf_scheduler.metrics import (
    compute_process_metrics,
    compute_system_metrics,
    summarize_process_metrics,
)
from sjf_scheduler.models import Process, ScheduleResult, ScheduledSlice
from sjf_scheduler.scheduler import run_batch


def _scheduled():
    return [
        Process(1, arrival_time=0, burst_time=6, start_time=0, completion_time=6),
        Process(4, arrival_time=3, burst_time=3, start_time=6, completion_time=9),
        Process(3, arrival_time=2, burst_time=7, start_time=9, completion_time=16),
        Process(2, arrival_time=1, burst_time=8, start_time=16, completion_time=24),
    ]


def test_process_metrics_are_derived():
    metrics = compute_process_metrics(_scheduled())
    for m in metrics:
        assert m.turnaround_time == m.completion_time - m.arrival_time
        assert m.waiting_time == m.turnaround_time - m.burst_time
        assert m.waiting_time >= 0
    assert [m.waiting_time for m in metrics] == [0, 3, 7, 15]


def test_process_metrics_do_not_mutate_inputs():
    procs = _scheduled()
    compute_process_metrics(procs)
    assert [(p.pid, p.arrival_time, p.burst_time) for p in procs] == [(1, 0, 6), (4, 3, 3), (3, 2, 7), (2, 1, 8)]


def test_unscheduled_process_rejected():
    with pytest.raises(SchedulerError):
        compute_process_metrics([Process(1, 0, 3)])


def test_summary_averages():
    summary = summarize_process_metrics(compute_process_metrics(_scheduled()))
    assert summary["count"] == 4
    assert summary["avg_waiting"] == pytest.approx(6.25)
    assert summary["avg_turnaround"] == pytest.approx(12.25)


def test_summary_of_nothing_is_zero():
    assert summarize_process_metrics([]) == {"count": 0, "avg_waiting": 0.0, "avg_turnaround": 0.0}


def test_system_metrics_with_idle_gap():
    result = ScheduleResult(
        algorithm="SJF (non-preemptive)",
        timeline=[ScheduledSlice(1, 2, 5), ScheduledSlice(2, 10, 12)],
    )
    system = compute_system_metrics(result)
    assert result.system is system
    assert system.makespan == 12
    assert system.cpu_busy_time == 5
    assert system.idle_time == 7
    assert system.throughput == pytest.approx(2 / 12)
    assert system.cpu_utilization == pytest.approx(5 / 12)


def test_busy_time_equals_total_burst():
    procs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 8), Process(4, 3, 6), Process(5, 4, 2)]
    res = run_batch(procs)
    assert res.system.cpu_busy_time == sum(p.burst_time for p in procs)
    assert res.system.idle_time == 0
    assert res.system.cpu_utilization == pytest.approx(1.0)
