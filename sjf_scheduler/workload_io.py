from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import List, Mapping

from .errors import InvalidInputError
from .models import Process

logger = logging.getLogger(__name__)


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.

    Entries keep their file order, which is the order ties are broken in.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        processes = _load_json(path)
    elif suffix == ".csv":
        processes = _load_csv(path)
    else:
        raise InvalidInputError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    logger.info("Loaded %d process(es) from %s", len(processes), path)
    return processes


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except UnicodeDecodeError as exc:
            raise InvalidInputError(f"{path} is not valid UTF-8: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise InvalidInputError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise InvalidInputError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        try:
            for row in reader:
                processes.append(_process_from_mapping(row))
        except UnicodeDecodeError as exc:
            raise InvalidInputError(f"{path} is not valid UTF-8: {exc}") from exc
    return processes


def _parse_int(value) -> int:
    # int() would truncate 2.7 to 2; only whole integers are accepted.
    if isinstance(value, bool) or isinstance(value, float):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, str):
        value = value.strip()
        if not value.lstrip("+-").isdigit():
            raise ValueError(f"not an integer: {value!r}")
    return int(value)


def _process_from_mapping(mapping: Mapping) -> Process:
    try:
        pid_val = mapping["pid"] if "pid" in mapping else mapping["id"]
        if isinstance(pid_val, str):
            pid_val = pid_val.strip().lstrip("Pp")
        pid = _parse_int(pid_val)
        arrival_time = _parse_int(mapping["arrival_time"])
        burst_time = _parse_int(mapping["burst_time"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidInputError(f"Invalid process entry: {mapping!r}") from exc

    return Process(
        pid=pid,
        arrival_time=arrival_time,
        burst_time=burst_time,
    )
