"""
Workload validation.

The simulation engines assume well-formed input; everything a user can get
wrong is rejected here before any engine is invoked.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Tuple

from .config import IDLE, MAX_TIME_UNIT
from .models import Process

logger = logging.getLogger(__name__)


class WorkloadError(ValueError):
    """Base class for every rejected workload."""


class EmptyPidError(WorkloadError):
    pass


class MissingFieldError(WorkloadError):
    pass


class NonNumericFieldError(WorkloadError):
    pass


class OutOfRangeError(WorkloadError):
    pass


class DuplicatePidError(WorkloadError):
    pass


class EmptyWorkloadError(WorkloadError):
    pass


# Accepted spellings for each numeric field, preferred name first.
_FIELD_ALIASES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("arrival", ("arrival", "arrival_time")),
    ("burst", ("burst", "burst_time")),
)


def _lookup(mapping: Mapping[str, Any], names: Tuple[str, ...]) -> Any:
    for name in names:
        value = mapping.get(name)
        if value is not None and value != "":
            return value
    return None


def _to_int(value: Any) -> int:
    # bool is an int subclass; "True" is not a time.
    if isinstance(value, bool):
        raise TypeError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(value)
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        # Plain ASCII digits only: no sign, no underscores, no other scripts.
        if not (text.isascii() and text.isdigit()):
            raise ValueError(value)
        return int(text)
    raise TypeError(value)


def validate_entry(mapping: Mapping[str, Any], max_time_unit: int = MAX_TIME_UNIT) -> Process:
    """
    Turn one raw workload entry into a Process, or raise a WorkloadError.
    """
    raw_pid = mapping.get("pid")
    pid = "" if raw_pid is None else str(raw_pid).strip()
    if not pid:
        raise EmptyPidError("PID cannot be empty.")
    if pid == IDLE:
        raise EmptyPidError(f"{pid}: PID is reserved for idle time.")

    values = {}
    for name, aliases in _FIELD_ALIASES:
        raw = _lookup(mapping, aliases)
        if raw is None:
            raise MissingFieldError(f"{pid}: Arrival & Burst required.")
        try:
            values[name] = _to_int(raw)
        except (TypeError, ValueError) as exc:
            raise NonNumericFieldError(f"{pid}: Invalid number for {name}: {raw!r}.") from exc

    arrival, burst = values["arrival"], values["burst"]
    if arrival < 0 or burst <= 0:
        raise OutOfRangeError(f"{pid}: Arrival >= 0, Burst >= 1.")
    if arrival > max_time_unit or burst > max_time_unit:
        raise OutOfRangeError(f"{pid}: Max {max_time_unit}.")

    return Process(pid=pid, arrival_time=arrival, burst_time=burst)


def validate_workload(entries: Iterable[Mapping[str, Any]], max_time_unit: int = MAX_TIME_UNIT) -> List[Process]:
    """
    Validate every entry, then the workload as a whole (non-empty, unique pids).
    """
    processes: List[Process] = []
    seen = set()
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise WorkloadError(f"Invalid process entry: {entry!r}")
        process = validate_entry(entry, max_time_unit=max_time_unit)
        if process.pid in seen:
            raise DuplicatePidError(f"{process.pid}: Duplicate PID.")
        seen.add(process.pid)
        processes.append(process)

    if not processes:
        raise EmptyWorkloadError("Define at least one process.")

    logger.debug("Validated %d processes (max time unit %d)", len(processes), max_time_unit)
    return processes
