from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice

IDLE_LABEL = "idle"


def _segments(slices: Sequence[ScheduledSlice]) -> List[Tuple[str, int, int]]:
    """
    Order slices by start time and fill CPU idle gaps with idle segments.
    """
    segments: List[Tuple[str, int, int]] = []
    last_time = 0

    # sorted() is stable, so equal start times keep dispatch order.
    for sl in sorted(slices, key=lambda s: s.start_time):
        if sl.start_time > last_time:
            segments.append((IDLE_LABEL, last_time, sl.start_time))
        segments.append((sl.label, sl.start_time, sl.end_time))
        last_time = sl.end_time

    return segments


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart: one cell per process in start order, with each
    completion boundary printed under the cell's closing bar.

        | P1 | P4 | P3 | P2 |
        0    6    9   16   24
    """
    if not slices:
        return "(no execution)"

    line = "|"
    time_marks = "0"

    for label, _start, end in _segments(slices):
        cell = f" {label} |"
        line += cell
        time_marks += str(end).rjust(len(cell))

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            time_marks,
        ]
    )


def build_rich_gantt(slices: List[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not slices:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    pid_to_color: Dict[str, str] = {}

    def pid_color(label: str) -> str:
        if label not in pid_to_color:
            idx = len(pid_to_color) % len(colors)
            pid_to_color[label] = colors[idx]
        return pid_to_color[label]

    timeline = Text()
    labels = Text()
    time_marks = "0"

    for label, start, end in _segments(slices):
        # Wide enough for the label, otherwise one column per time unit.
        width = max(len(label) + 1, end - start)

        if label == IDLE_LABEL:
            timeline.append("." * width, style="dim")
            labels.append(label.ljust(width), style="dim")
        else:
            timeline.append(" " * width, style=f"on {pid_color(label)}")
            labels.append(label.ljust(width), style="bold")

        time_marks += str(end).rjust(width)

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, time_marks
