import json
from pathlib import Path

from nav_metrics.domain.benchmarks import DEFAULT_BENCHMARK
from nav_metrics.domain.models import BenchmarkRecord, ReturnSet
from nav_metrics.infrastructure.storage.benchmark_store import load_benchmarks, save_benchmarks


def make_record(category: str) -> BenchmarkRecord:
    return BenchmarkRecord(
        category=category,
        avg_returns=ReturnSet(8.0, 9.0, 10.0, 11.0),
        avg_risk_adjusted_ratio=0.9,
        avg_upside_capture=95.0,
        avg_downside_capture=90.0,
        avg_expense_ratio=1.5,
        avg_standard_deviation=12.0,
    )


def test_save_and_load_benchmarks(tmp_path: Path):
    path = tmp_path / "benchmark_override.json"
    table = save_benchmarks({"Equity Scheme - ELSS": make_record("ELSS")}, path=path)

    assert table.resolve("Equity Scheme - ELSS").avg_returns.ten_year == 11.0
    assert json.loads(path.read_text())["Equity Scheme - ELSS"]["avg_returns"]["3y"] == 9.0

    loaded = load_benchmarks(path=path)
    assert loaded.resolve("Equity Scheme - ELSS") == make_record("ELSS")
    assert loaded.resolve("Equity Scheme - Large Cap Fund").category == "Large Cap"


def test_override_can_replace_mixed_default(tmp_path: Path):
    path = tmp_path / "benchmark_override.json"
    save_benchmarks({"Mixed": make_record("Everything else")}, path=path)

    table = load_benchmarks(path)

    assert table.resolve("Unknown").category == "Everything else"


def test_missing_or_invalid_file_uses_defaults(tmp_path: Path):
    assert load_benchmarks(tmp_path / "absent.json").resolve("x") == DEFAULT_BENCHMARK

    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert len(load_benchmarks(path)) == 3


def test_invalid_entries_are_skipped(tmp_path: Path):
    path = tmp_path / "benchmark_override.json"
    path.write_text(json.dumps({"Bad": {"category": "Bad"}, "": {}}))

    table = load_benchmarks(path)

    assert "Bad" not in table
