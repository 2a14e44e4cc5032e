from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .config import IDLE


@dataclass
class Process:
    pid: str
    arrival_time: int
    burst_time: int


@dataclass
class ProcessResult:
    pid: str
    arrival_time: int
    burst_time: int
    completion_time: int
    turnaround_time: int
    waiting_time: int


@dataclass
class TimelineRun:
    """
    One contiguous run of identical labels in the timeline. The label is a
    process id or the IDLE marker.
    """

    label: str
    start_time: int
    end_time: int

    @property
    def length(self) -> int:
        return self.end_time - self.start_time

    @property
    def is_idle(self) -> bool:
        return self.label == IDLE


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    idle_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


@dataclass
class SimulationResult:
    algorithm: str
    preemptive: bool
    processes: List[ProcessResult] = field(default_factory=list)
    # One label per simulated time unit.
    units: List[str] = field(default_factory=list)
    timeline: List[TimelineRun] = field(default_factory=list)
    system: Optional[SystemMetrics] = None

    def results_by_pid(self) -> List[ProcessResult]:
        return sorted(self.processes, key=lambda p: p.pid)
