from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .algorithms import ALGORITHMS, run_algorithm
from .config import DEFAULT_ALGORITHMS, DEFAULT_LOG_LEVEL, LOG_FORMAT, MAX_TIME_UNIT
from .gantt import build_rich_gantt
from .metrics import summarize_process_metrics
from .models import Process, SimulationResult
from .validation import WorkloadError
from .workload_io import load_workload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sched-sim",
        description="CPU scheduling simulator (FCFS, SJF, SRTF).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every scheduling decision (DEBUG level).",
    )
    parser.add_argument(
        "--max-time",
        type=int,
        default=MAX_TIME_UNIT,
        help=f"Largest accepted arrival or burst time (default: {MAX_TIME_UNIT}).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run a scheduling algorithm on a workload file.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        required=True,
        choices=sorted(ALGORITHMS),
        help="Algorithm to use (fcfs, sjf, srtf).",
    )
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    run_parser.add_argument(
        "--preemptive",
        "-p",
        action="store_true",
        help="Use preemptive SJF (shortest remaining time first). Ignored by FCFS.",
    )
    run_parser.add_argument(
        "--sort-by",
        choices=["pid", "completion"],
        default="pid",
        help="Order of the per-process table (default: pid).",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run multiple algorithms on the same workload and compare average metrics.",
    )
    compare_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    compare_parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        choices=sorted(ALGORITHMS),
        default=DEFAULT_ALGORITHMS,
        help=f"Algorithms to compare (default: {' '.join(DEFAULT_ALGORITHMS)}).",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else DEFAULT_LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[RichHandler(show_time=False, show_path=False)],
        force=True,
    )


def _print_result(result: SimulationResult, console: Console, sort_by: str = "pid") -> None:
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm}")
    console.print()

    panel, time_marks = build_rich_gantt(result.timeline)
    console.print(panel)
    if time_marks:
        console.print(time_marks)

    console.print()

    headers = ["PID", "Arrive", "Burst", "Complete", "Turnaround", "Wait"]

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        justify = "center" if h == "PID" else "right"
        proc_table.add_column(h, justify=justify)

    rows = result.results_by_pid() if sort_by == "pid" else result.processes
    for p in rows:
        proc_table.add_row(
            p.pid,
            str(p.arrival_time),
            str(p.burst_time),
            str(p.completion_time),
            str(p.turnaround_time),
            str(p.waiting_time),
        )

    console.print(proc_table)
    console.print()

    summary = summarize_process_metrics(result.processes)
    if result.system:
        sys = result.system
        sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
        sys_table.add_column("Metric")
        sys_table.add_column("Value", justify="right")

        sys_table.add_row("Avg waiting", f"{summary['avg_waiting']:.2f}")
        sys_table.add_row("Avg turnaround", f"{summary['avg_turnaround']:.2f}")
        sys_table.add_row("Makespan", str(sys.makespan))
        sys_table.add_row("Idle time", str(sys.idle_time))
        sys_table.add_row("Throughput (proc/time)", f"{sys.throughput:.3f}")
        sys_table.add_row("CPU utilization", f"{sys.cpu_utilization*100:.1f}%")

        console.print(sys_table)


def _print_compare(processes: List[Process], algorithms: List[str], console: Console) -> None:
    summary_table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Makespan", justify="right")

    for alg in algorithms:
        result = run_algorithm(alg, processes)
        summary = summarize_process_metrics(result.processes)
        summary_table.add_row(
            result.algorithm,
            f"{summary['avg_waiting']:.2f}",
            f"{summary['avg_turnaround']:.2f}",
            str(result.system.makespan if result.system else 0),
        )

    console.print(summary_table)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    try:
        processes = load_workload(Path(args.workload), max_time_unit=args.max_time)
    except WorkloadError as exc:
        logger.error("Rejected workload %s: %s", args.workload, exc)
        console.print(f"[red]Error: {exc}[/red]")
        return 2
    except OSError as exc:
        logger.error("Cannot read workload %s: %s", args.workload, exc)
        console.print(f"[red]Error: {exc}[/red]")
        return 2

    if args.command == "run":
        result = run_algorithm(args.algorithm, processes, preemptive=args.preemptive)
        _print_result(result, console, sort_by=args.sort_by)
        return 0

    if args.command == "compare":
        _print_compare(processes, args.algorithms, console)
        return 0

    parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
