from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, List, Mapping

from .config import MAX_TIME_UNIT
from .models import Process
from .validation import WorkloadError, validate_workload


def load_workload(path: str | Path, max_time_unit: int = MAX_TIME_UNIT) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a validated list of Process
    objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        entries = _load_json(path)
    elif suffix == ".csv":
        entries = _load_csv(path)
    else:
        raise WorkloadError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    return validate_workload(entries, max_time_unit=max_time_unit)


def _load_json(path: Path) -> List[Mapping[str, Any]]:
    with path.open("r", encoding="utf-8-sig") as f:
        try:
            raw = json.load(f)
        except UnicodeDecodeError as exc:
            raise WorkloadError(f"Cannot decode workload {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise WorkloadError(f"Malformed JSON workload {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise WorkloadError("JSON workload must be a list of process objects")

    return raw


def _load_csv(path: Path) -> List[Mapping[str, Any]]:
    # utf-8-sig drops the byte-order mark spreadsheet exports put before the header.
    with path.open("r", encoding="utf-8-sig", newline="") as f:
        try:
            return list(csv.DictReader(f))
        except UnicodeDecodeError as exc:
            raise WorkloadError(f"Cannot decode workload {path}: {exc}") from exc
