"""Storage helpers for category benchmark overrides."""
from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict
from pathlib import Path
from typing import Any, Mapping

from nav_metrics.domain.benchmarks import DEFAULT_BENCHMARK, DEFAULT_BENCHMARKS, DEFAULT_CATEGORY, BenchmarkTable
from nav_metrics.domain.models import BenchmarkRecord, ReturnSet

LOGGER = logging.getLogger(__name__)

RECORD_FIELDS = (
    "avg_risk_adjusted_ratio",
    "avg_upside_capture",
    "avg_downside_capture",
    "avg_expense_ratio",
    "avg_standard_deviation",
)


def _finite(value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Benchmark value {value!r} is not finite")
    return number


def record_from_dict(raw: Mapping[str, Any]) -> BenchmarkRecord:
    returns = raw.get("avg_returns") or {}
    return BenchmarkRecord(
        category=str(raw["category"]).strip(),
        avg_returns=ReturnSet(
            one_year=_finite(returns.get("1y", 0.0)),
            three_year=_finite(returns.get("3y", 0.0)),
            five_year=_finite(returns.get("5y", 0.0)),
            ten_year=_finite(returns.get("10y", 0.0)),
        ),
        **{name: _finite(raw[name]) for name in RECORD_FIELDS},
    )


def record_to_dict(record: BenchmarkRecord) -> dict[str, Any]:
    data = asdict(record)
    data["avg_returns"] = record.avg_returns.as_dict()
    return data


def _normalize_benchmarks(raw: Any) -> dict[str, BenchmarkRecord]:
    normalized: dict[str, BenchmarkRecord] = {}
    if not isinstance(raw, dict):
        return normalized
    for key, value in raw.items():
        if key is None or not isinstance(value, dict):
            continue
        key_str = str(key).strip()
        if not key_str:
            continue
        try:
            normalized[key_str] = record_from_dict(value)
        except (KeyError, TypeError, ValueError) as exc:
            LOGGER.warning("Skipping benchmark override %r: %s", key_str, exc)
    return normalized


def load_benchmarks(path: Path | None = None) -> BenchmarkTable:
    """Default table merged with the JSON override at ``path`` (override wins).

    An override entry keyed ``Mixed`` replaces the default fallback record.
    """
    merged = dict(DEFAULT_BENCHMARKS)
    if path is None or not path.exists():
        return BenchmarkTable(merged)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        LOGGER.warning("Benchmark override %s is not valid JSON; using defaults", path)
        return BenchmarkTable(merged)
    override = _normalize_benchmarks(data)
    default = override.pop(DEFAULT_CATEGORY, DEFAULT_BENCHMARK)
    merged.update(override)
    return BenchmarkTable(merged, default=default)


def save_benchmarks(benchmarks: Mapping[str, BenchmarkRecord], path: Path) -> BenchmarkTable:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(
            {key: record_to_dict(record) for key, record in benchmarks.items()},
            ensure_ascii=False,
            indent=2,
            sort_keys=True,
        ),
        encoding="utf-8",
    )
    return load_benchmarks(path)
