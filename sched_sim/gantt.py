from __future__ import annotations

from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import TimelineRun


def render_gantt(runs: List[TimelineRun]) -> str:
    """
    Plain-text Gantt chart: "=" for execution, "." for idle time.
    """
    if not runs:
        return "(no execution)"

    line = "|"
    labels = ""
    time_marks = "0"

    for run in runs:
        width = max(1, run.length)
        line += ("." if run.is_idle else "=") * width
        labels += run.label[:width].ljust(width)
        time_marks += f"{run.end_time:>3}"

    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            labels,
            time_marks,
        ]
    )


def build_rich_gantt(runs: List[TimelineRun]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not runs:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    pid_to_color: Dict[str, str] = {}

    def pid_color(pid: str) -> str:
        if pid not in pid_to_color:
            idx = len(pid_to_color) % len(colors)
            pid_to_color[pid] = colors[idx]
        return pid_to_color[pid]

    timeline = Text()
    labels = Text()
    time_marks = "0"

    for run in runs:
        width = max(1, run.length)
        if run.is_idle:
            timeline.append("." * width, style="dim")
            labels.append(run.label[:width].ljust(width), style="dim")
        else:
            timeline.append(" " * width, style=f"on {pid_color(run.label)}")
            labels.append(run.label[:width].ljust(width), style="bold")
        time_marks += f"{run.end_time:>3}"

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, time_marks
