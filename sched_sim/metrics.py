from __future__ import annotations

from typing import List

from .config import IDLE
from .models import ProcessResult, SimulationResult, SystemMetrics


def compute_system_metrics(result: SimulationResult) -> SystemMetrics:
    """
    Compute busy/idle time, throughput and CPU utilization from populated
    per-process results and the unit-resolution timeline.
    """
    if not result.processes:
        system = SystemMetrics(cpu_busy_time=0, idle_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)
        result.system = system
        return system

    makespan = max(p.completion_time for p in result.processes)
    idle_time = sum(1 for label in result.units if label == IDLE)
    cpu_busy_time = len(result.units) - idle_time

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        idle_time=idle_time,
        makespan=makespan,
        throughput=len(result.processes) / makespan if makespan > 0 else 0.0,
        cpu_utilization=cpu_busy_time / makespan if makespan > 0 else 0.0,
    )
    result.system = system
    return system


def summarize_process_metrics(processes: List[ProcessResult]) -> dict:
    """
    Return averages of waiting and turnaround time for quick comparison.
    """
    if not processes:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0}

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
    }
