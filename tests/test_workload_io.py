from pathlib import Path

import pytest

from sjf_scheduler.cli import EXAMPLES_DIR
from sjf_scheduler.errors import InvalidInputError
from sjf_scheduler.models import Process
from sjf_scheduler.workload_io import load_workload


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":1,"arrival_time":0,"burst_time":3},'
                 '{"id":"P2","arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[1].pid == 2
    assert procs[1].arrival_time == 1
    assert procs[1].start_time is None


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time\n1,0,3\n2,1,2\n")
    procs = load_workload(p)
    assert [(x.pid, x.arrival_time, x.burst_time) for x in procs] == [(1, 0, 3), (2, 1, 2)]


def test_bundled_examples_load():
    procs = load_workload(EXAMPLES_DIR / "scenario_a.json")
    assert [(x.pid, x.arrival_time, x.burst_time) for x in procs] == [(1, 0, 6), (2, 1, 8), (3, 2, 7), (4, 3, 3)]


def test_unsupported_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("")
    with pytest.raises(InvalidInputError, match="Unsupported"):
        load_workload(p)


def test_missing_field(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time\n1,0\n")
    with pytest.raises(InvalidInputError, match="Invalid process entry"):
        load_workload(p)


def test_json_must_be_list(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('{"pid": 1}')
    with pytest.raises(InvalidInputError):
        load_workload(p)


def test_malformed_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text("[{")
    with pytest.raises(InvalidInputError, match="Invalid JSON"):
        load_workload(p)


@pytest.mark.parametrize(
    "entry",
    [
        '{"pid": 1, "arrival_time": 0.9, "burst_time": 2}',
        '{"pid": 1, "arrival_time": 0, "burst_time": 2.7}',
        '{"pid": 1.5, "arrival_time": 0, "burst_time": 2}',
        '{"pid": 1, "arrival_time": true, "burst_time": 2}',
        '{"pid": 1, "arrival_time": "2.5", "burst_time": 2}',
    ],
)
def test_non_integral_json_values_rejected(tmp_path: Path, entry):
    p = tmp_path / "w.json"
    p.write_text(f"[{entry}]")
    with pytest.raises(InvalidInputError, match="Invalid process entry"):
        load_workload(p)


def test_non_integral_csv_value_rejected(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time\n1,0,2.7\n")
    with pytest.raises(InvalidInputError, match="Invalid process entry"):
        load_workload(p)


def test_string_integers_accepted(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid": "P3", "arrival_time": " 4 ", "burst_time": "2"}]')
    procs = load_workload(p)
    assert [(x.pid, x.arrival_time, x.burst_time) for x in procs] == [(3, 4, 2)]


@pytest.mark.parametrize("name", ["w.csv", "w.json"])
def test_invalid_utf8_rejected(tmp_path: Path, name):
    p = tmp_path / name
    p.write_bytes(b"pid,arrival_time,burst_time\n1,0,\xff\n")
    with pytest.raises(InvalidInputError, match="UTF-8"):
        load_workload(p)
