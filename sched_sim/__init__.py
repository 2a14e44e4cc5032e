"""
CPU scheduling simulator package.

Computes execution timelines and per-process metrics for FCFS and SJF
(non-preemptive and preemptive / SRTF) scheduling, with a small rich-based
command-line front end.
"""

from .algorithms import run_algorithm, simulate_fcfs, simulate_sjf
from .models import Process, ProcessResult, SimulationResult, TimelineRun

__all__ = [
    "Process",
    "ProcessResult",
    "SimulationResult",
    "TimelineRun",
    "run_algorithm",
    "simulate_fcfs",
    "simulate_sjf",
]
