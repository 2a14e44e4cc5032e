from rich.panel import Panel

from sched_sim.algorithms import simulate_fcfs
from sched_sim.gantt import build_rich_gantt, render_gantt
from sched_sim.models import Process
from sched_sim.timeline import compress_timeline


def test_compress_timeline():
    runs = compress_timeline(["IDLE", "IDLE", "P1", "P1", "P2", "P1"])
    assert [(r.label, r.start_time, r.end_time) for r in runs] == [
        ("IDLE", 0, 2),
        ("P1", 2, 4),
        ("P2", 4, 5),
        ("P1", 5, 6),
    ]
    assert runs[0].is_idle
    assert not runs[1].is_idle


def test_render_gantt_with_idle():
    res = simulate_fcfs([Process("P1", 2, 2)])
    assert render_gantt(res.timeline).splitlines() == [
        "Gantt Chart:",
        "|..==|",
        "IDP1",
        "0  2  4",
    ]


def test_render_gantt_empty():
    assert render_gantt([]) == "(no execution)"


def test_build_rich_gantt():
    res = simulate_fcfs([Process("P1", 0, 4), Process("P2", 1, 3)])
    panel, marks = build_rich_gantt(res.timeline)
    assert isinstance(panel, Panel)
    assert marks == "0  4  7"


def test_build_rich_gantt_empty():
    panel, marks = build_rich_gantt([])
    assert isinstance(panel, Panel)
    assert marks == ""
