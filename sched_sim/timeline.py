from __future__ import annotations

from typing import List

from .config import IDLE
from .models import Process, ProcessResult, TimelineRun


def emit(units: List[str], label: str, count: int) -> None:
    """
    Append `count` time units labelled `label` to the unit-resolution log.
    """
    units.extend([label] * count)


def emit_idle_until(units: List[str], time: int, next_arrival: int) -> int:
    """
    Fill the gap before `next_arrival` with idle units and return the new time.
    """
    if next_arrival > time:
        emit(units, IDLE, next_arrival - time)
        return next_arrival
    return time


def finish_process(process: Process, completion_time: int) -> ProcessResult:
    turnaround_time = completion_time - process.arrival_time
    return ProcessResult(
        pid=process.pid,
        arrival_time=process.arrival_time,
        burst_time=process.burst_time,
        completion_time=completion_time,
        turnaround_time=turnaround_time,
        waiting_time=turnaround_time - process.burst_time,
    )


def compress_timeline(units: List[str]) -> List[TimelineRun]:
    """
    Merge contiguous identical labels into runs with start/end times.
    """
    runs: List[TimelineRun] = []
    for t, label in enumerate(units):
        if runs and runs[-1].label == label:
            runs[-1].end_time = t + 1
        else:
            runs.append(TimelineRun(label=label, start_time=t, end_time=t + 1))
    return runs
