from __future__ import annotations

import heapq
import logging
from typing import List, NamedTuple, Sequence

from .metrics import compute_system_metrics
from .models import Process, ProcessResult, SimulationResult
from .timeline import compress_timeline, emit, emit_idle_until, finish_process

logger = logging.getLogger(__name__)


def _build_result(
    algorithm: str,
    preemptive: bool,
    results: List[ProcessResult],
    units: List[str],
) -> SimulationResult:
    result = SimulationResult(
        algorithm=algorithm,
        preemptive=preemptive,
        processes=results,
        units=units,
        timeline=compress_timeline(units),
    )
    compute_system_metrics(result)
    return result


def simulate_fcfs(processes: Sequence[Process]) -> SimulationResult:
    """
    First-Come First-Served (non-preemptive) scheduling.

    Processes run to completion in order of arrival; ties go to the
    lexicographically smaller pid. Results are returned in completion order.
    """
    processes_sorted = sorted(processes, key=lambda p: (p.arrival_time, p.pid))

    time = 0
    units: List[str] = []
    results: List[ProcessResult] = []

    for p in processes_sorted:
        time = emit_idle_until(units, time, p.arrival_time)

        emit(units, p.pid, p.burst_time)
        time += p.burst_time

        results.append(finish_process(p, time))
        logger.debug("FCFS: %s completed at t=%d", p.pid, time)

    return _build_result("FCFS", False, results, units)


class _ReadyEntry(NamedTuple):
    # Field order is the selection key: shortest remaining, then earliest
    # arrival, then input position.
    remaining: int
    arrival_time: int
    index: int


def _sjf_non_preemptive(processes: Sequence[Process]) -> SimulationResult:
    pending = list(range(len(processes)))

    time = 0
    units: List[str] = []
    results: List[ProcessResult] = []

    while pending:
        ready = [i for i in pending if processes[i].arrival_time <= time]

        if not ready:
            next_arrival = min(processes[i].arrival_time for i in pending)
            time = emit_idle_until(units, time, next_arrival)
            continue

        chosen = min(ready, key=lambda i: (processes[i].burst_time, processes[i].arrival_time, i))
        p = processes[chosen]

        emit(units, p.pid, p.burst_time)
        time = max(time, p.arrival_time) + p.burst_time

        results.append(finish_process(p, time))
        logger.debug("SJF: %s completed at t=%d", p.pid, time)

        pending = [i for i in pending if i != chosen]

    return _build_result("SJF (non-preemptive)", False, results, units)


def _sjf_preemptive(processes: Sequence[Process]) -> SimulationResult:
    by_arrival = sorted(range(len(processes)), key=lambda i: (processes[i].arrival_time, i))
    next_arrival = 0

    ready: List[_ReadyEntry] = []

    time = 0
    units: List[str] = []
    results: List[ProcessResult] = []

    while next_arrival < len(by_arrival) or ready:
        # Admit everything that has arrived by now.
        while next_arrival < len(by_arrival) and processes[by_arrival[next_arrival]].arrival_time <= time:
            i = by_arrival[next_arrival]
            heapq.heappush(ready, _ReadyEntry(processes[i].burst_time, processes[i].arrival_time, i))
            next_arrival += 1

        if not ready:
            time = emit_idle_until(units, time, processes[by_arrival[next_arrival]].arrival_time)
            continue

        current = heapq.heappop(ready)
        p = processes[current.index]

        # Run exactly one unit, then re-evaluate.
        emit(units, p.pid, 1)
        time += 1
        remaining = current.remaining - 1

        if remaining == 0:
            results.append(finish_process(p, time))
            logger.debug("SRTF: %s completed at t=%d", p.pid, time)
        else:
            heapq.heappush(ready, current._replace(remaining=remaining))

    return _build_result("SJF (preemptive)", True, results, units)


def simulate_sjf(processes: Sequence[Process], preemptive: bool = False) -> SimulationResult:
    """
    Shortest Job First.

    Non-preemptive: at each decision point, among processes that have arrived
    and are not yet completed, run the one with the smallest burst time to
    completion (tie-breaker: earlier arrival, then input order).

    Preemptive (SRTF): every time unit, run the arrived process with the
    smallest remaining time (same tie-breakers) for one unit.
    """
    if preemptive:
        return _sjf_preemptive(processes)
    return _sjf_non_preemptive(processes)


def simulate_srtf(processes: Sequence[Process]) -> SimulationResult:
    return simulate_sjf(processes, preemptive=True)


ALGORITHMS = {
    "fcfs": simulate_fcfs,
    "sjf": simulate_sjf,
    "srtf": simulate_srtf,
}


def run_algorithm(name: str, processes: Sequence[Process], preemptive: bool = False) -> SimulationResult:
    """
    Dispatch to the requested algorithm. The preemptive flag only applies to
    SJF; "srtf" is always preemptive and FCFS never is.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (use one of: {', '.join(ALGORITHMS)})")

    logger.info("Running %s on %d processes", name, len(processes))
    if name == "sjf":
        return simulate_sjf(processes, preemptive=preemptive)
    return ALGORITHMS[name](processes)
