import pytest

from sched_sim.config import MAX_TIME_UNIT
from sched_sim.models import Process
from sched_sim.validation import (
    DuplicatePidError,
    EmptyPidError,
    EmptyWorkloadError,
    MissingFieldError,
    NonNumericFieldError,
    OutOfRangeError,
    WorkloadError,
    validate_entry,
    validate_workload,
)


def test_valid_entry_accepts_strings_and_integral_floats():
    assert validate_entry({"pid": " P1 ", "arrival": "2", "burst": 3.0}) == Process("P1", 2, 3)


def test_numeric_pid_is_kept_as_string():
    assert validate_entry({"pid": 0, "arrival": 0, "burst": 1}).pid == "0"


@pytest.mark.parametrize(
    "entry, error",
    [
        ({"pid": "", "arrival": 0, "burst": 1}, EmptyPidError),
        ({"pid": "   ", "arrival": 0, "burst": 1}, EmptyPidError),
        ({"arrival": 0, "burst": 1}, EmptyPidError),
        ({"pid": "IDLE", "arrival": 0, "burst": 1}, EmptyPidError),
        ({"pid": "P1", "burst": 1}, MissingFieldError),
        ({"pid": "P1", "arrival": 0, "burst": ""}, MissingFieldError),
        ({"pid": "P1", "arrival": "abc", "burst": 1}, NonNumericFieldError),
        ({"pid": "P1", "arrival": "+5", "burst": 1}, NonNumericFieldError),
        ({"pid": "P1", "arrival": "-1", "burst": 1}, NonNumericFieldError),
        ({"pid": "P1", "arrival": "1_0", "burst": 1}, NonNumericFieldError),
        ({"pid": "P1", "arrival": "\u0661\u0662", "burst": 1}, NonNumericFieldError),
        ({"pid": "P1", "arrival": 0, "burst": 1.5}, NonNumericFieldError),
        ({"pid": "P1", "arrival": True, "burst": 1}, NonNumericFieldError),
        ({"pid": "P1", "arrival": [0], "burst": 1}, NonNumericFieldError),
        ({"pid": "P1", "arrival": -1, "burst": 1}, OutOfRangeError),
        ({"pid": "P1", "arrival": 0, "burst": 0}, OutOfRangeError),
        ({"pid": "P1", "arrival": MAX_TIME_UNIT + 1, "burst": 1}, OutOfRangeError),
        ({"pid": "P1", "arrival": 0, "burst": MAX_TIME_UNIT + 1}, OutOfRangeError),
    ],
)
def test_invalid_entries(entry, error):
    with pytest.raises(error):
        validate_entry(entry)


def test_bounds_are_inclusive():
    p = validate_entry({"pid": "P1", "arrival": MAX_TIME_UNIT, "burst": MAX_TIME_UNIT})
    assert (p.arrival_time, p.burst_time) == (MAX_TIME_UNIT, MAX_TIME_UNIT)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        validate_entry({"pid": "P1", "arrival": 0, "burst": 0})


def test_out_of_range_message_names_pid_and_limit():
    with pytest.raises(OutOfRangeError, match="P3: Max 10"):
        validate_entry({"pid": "P3", "arrival": 11, "burst": 1}, max_time_unit=10)


def test_workload_rejects_duplicates():
    entries = [{"pid": "P1", "arrival": 0, "burst": 1}, {"pid": "P1", "arrival": 2, "burst": 1}]
    with pytest.raises(DuplicatePidError):
        validate_workload(entries)


def test_workload_rejects_empty():
    with pytest.raises(EmptyWorkloadError):
        validate_workload([])


def test_workload_rejects_non_mapping_entries():
    with pytest.raises(WorkloadError):
        validate_workload([["P1", 0, 1]])


def test_workload_preserves_order():
    entries = [{"pid": "B", "arrival": 1, "burst": 1}, {"pid": "A", "arrival": 0, "burst": 2}]
    assert [p.pid for p in validate_workload(entries)] == ["B", "A"]
