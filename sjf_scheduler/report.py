from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from .gantt import build_rich_gantt
from .metrics import summarize_process_metrics
from .models import Process, ProcessMetrics, ScheduleResult, SystemMetrics

RESULT_HEADERS = ["Process", "Arrival", "Burst", "Start", "Complete", "TAT", "WT"]


def _pid_label(pid: int) -> str:
    return f"P{pid}"


def build_input_table(processes: Sequence[Process]) -> Table:
    table = Table(title="Input processes", box=box.SIMPLE_HEAVY)
    table.add_column("Process", justify="center")
    table.add_column("Arrival Time", justify="right")
    table.add_column("Burst Time", justify="right")

    for p in processes:
        table.add_row(_pid_label(p.pid), str(p.arrival_time), str(p.burst_time))

    return table


def build_results_table(metrics: Sequence[ProcessMetrics]) -> Table:
    table = Table(title="Scheduling results", box=box.SIMPLE_HEAVY)
    for h in RESULT_HEADERS:
        justify = "center" if h == "Process" else "right"
        table.add_column(h, justify=justify)

    for m in metrics:
        table.add_row(
            _pid_label(m.pid),
            str(m.arrival_time),
            str(m.burst_time),
            str(m.start_time),
            str(m.completion_time),
            str(m.turnaround_time),
            str(m.waiting_time),
        )

    return table


def build_averages_table(summary: dict, system: Optional[SystemMetrics] = None) -> Table:
    """
    Averages are always shown to two decimal places; system metrics are
    appended when available.
    """
    table = Table(title="Averages", box=box.SIMPLE_HEAVY)
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    table.add_row("Processes", str(summary["count"]))
    table.add_row("Average Turnaround Time", f"{summary['avg_turnaround']:.2f}")
    table.add_row("Average Waiting Time", f"{summary['avg_waiting']:.2f}")

    if system is not None:
        table.add_row("Makespan", str(system.makespan))
        table.add_row("CPU idle time", str(system.idle_time))
        table.add_row("Throughput (proc/time)", f"{system.throughput:.3f}")
        table.add_row("CPU utilization", f"{system.cpu_utilization*100:.1f}%")

    return table


def print_report(
    result: ScheduleResult,
    inputs: Sequence[Process],
    console: Optional[Console] = None,
    title: Optional[str] = None,
) -> None:
    """
    Print the full report for one scheduled batch.

    ``inputs`` is the batch in the order the caller supplied it. Both the input
    echo and the results table list rows in that order; dispatch order is
    shown by the Gantt chart.
    """
    console = console or Console()

    if title:
        console.rule(f"[bold]{title}[/bold]")
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm}")
    console.print()

    if not result.processes:
        console.print("0 processes supplied; nothing to schedule.")

    console.print(build_input_table(inputs))

    if result.processes:
        by_pid = {m.pid: m for m in result.metrics}
        rows = [by_pid[p.pid] for p in inputs if p.pid in by_pid]
        console.print(build_results_table(rows))

    summary = summarize_process_metrics(result.metrics)
    console.print(build_averages_table(summary, result.system))

    panel, time_marks = build_rich_gantt(result.timeline)
    console.print(panel)
    if time_marks:
        console.print(time_marks)

    console.print()
