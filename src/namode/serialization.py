"""
Serialization helpers for namode objects (results, frequency tables, reports).

Provides JSON/YAML round-trip via an intermediate dict representation.
Values must themselves be JSON/YAML representable (numbers, strings, bools).
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from namode.frequency import FrequencyTable
from namode.report import ModeReport
from namode.result import UNKNOWN, Known, KnownSet, ModeResult, Unknown


def result_to_dict(result: ModeResult) -> Dict[str, Any]:
    if isinstance(result, Known):
        return {"type": "known", "value": result.value}
    if isinstance(result, KnownSet):
        return {"type": "set", "values": list(result.values)}
    if isinstance(result, Unknown):
        return {"type": "unknown"}
    raise TypeError(f"Unsupported ModeResult type: {type(result)}")


def result_from_dict(d: Dict[str, Any]) -> ModeResult:
    t = d.get("type")
    if t == "known":
        return Known(d["value"])
    if t == "set":
        return KnownSet(tuple(d["values"]))
    if t == "unknown":
        return UNKNOWN
    raise TypeError(f"Unsupported result dict type: {t}")


def table_to_dict(table: FrequencyTable) -> Dict[str, Any]:
    return {
        "values": list(table.values),
        "counts": list(table.counts),
        "first_index": list(table.first_index),
        "missing_count": table.missing_count,
        "first_missing_index": table.first_missing_index,
        "length": table.length,
    }


def table_from_dict(d: Dict[str, Any]) -> FrequencyTable:
    return FrequencyTable(
        values=tuple(d.get("values", [])),
        counts=tuple(d.get("counts", [])),
        first_index=tuple(d.get("first_index", [])),
        missing_count=d.get("missing_count", 0),
        first_missing_index=d.get("first_missing_index"),
        length=d.get("length", 0),
    )


def report_to_dict(r: ModeReport) -> Dict[str, Any]:
    return {
        "length": r.length,
        "missing_count": r.missing_count,
        "distinct_values": r.distinct_values,
        "remove_missing": r.remove_missing,
        "first_known": r.first_known,
        "frequencies": [{"value": v, "count": c} for v, c in r.frequencies],
        "max_count": r.max_count,
        "first_mode": result_to_dict(r.first_mode),
        "all_modes": result_to_dict(r.all_modes),
        "single_mode": result_to_dict(r.single_mode),
        "warnings": list(r.warnings),
    }


def report_from_dict(d: Dict[str, Any]) -> ModeReport:
    r = ModeReport(
        length=d.get("length", 0),
        missing_count=d.get("missing_count", 0),
        distinct_values=d.get("distinct_values", 0),
        remove_missing=d.get("remove_missing", False),
        first_known=d.get("first_known", True),
    )
    r.frequencies = [(f["value"], f["count"]) for f in d.get("frequencies", [])]
    r.max_count = d.get("max_count", 0)
    r.first_mode = result_from_dict(d.get("first_mode", {"type": "unknown"}))
    r.all_modes = result_from_dict(d.get("all_modes", {"type": "unknown"}))
    r.single_mode = result_from_dict(d.get("single_mode", {"type": "unknown"}))
    r.warnings = list(d.get("warnings", []))
    return r


def report_to_json(r: ModeReport) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True)


def report_from_json(s: str) -> ModeReport:
    d = json.loads(s)
    return report_from_dict(d)


def report_to_yaml(r: ModeReport) -> str:
    return yaml.safe_dump(report_to_dict(r))


def report_from_yaml(s: str) -> ModeReport:
    d = yaml.safe_load(s)
    return report_from_dict(d)
