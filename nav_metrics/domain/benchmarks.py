"""Static category benchmark table."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from .models import BenchmarkRecord, ReturnSet

DEFAULT_CATEGORY = "Mixed"

DEFAULT_BENCHMARK = BenchmarkRecord(
    category=DEFAULT_CATEGORY,
    avg_returns=ReturnSet(one_year=14.0, three_year=16.5, five_year=15.2, ten_year=14.8),
    avg_risk_adjusted_ratio=1.05,
    avg_upside_capture=100.0,
    avg_downside_capture=98.5,
    avg_expense_ratio=2.0,
    avg_standard_deviation=20.0,
)

DEFAULT_BENCHMARKS: Mapping[str, BenchmarkRecord] = MappingProxyType(
    {
        "Equity Scheme - Large Cap Fund": BenchmarkRecord(
            category="Large Cap",
            avg_returns=ReturnSet(one_year=11.2, three_year=13.8, five_year=12.5, ten_year=13.1),
            avg_risk_adjusted_ratio=1.12,
            avg_upside_capture=92.3,
            avg_downside_capture=91.7,
            avg_expense_ratio=1.95,
            avg_standard_deviation=17.2,
        ),
        "Equity Scheme - Mid Cap Fund": BenchmarkRecord(
            category="Mid Cap",
            avg_returns=ReturnSet(one_year=16.5, three_year=19.8, five_year=17.9, ten_year=16.2),
            avg_risk_adjusted_ratio=1.08,
            avg_upside_capture=108.5,
            avg_downside_capture=102.3,
            avg_expense_ratio=2.25,
            avg_standard_deviation=23.5,
        ),
        "Equity Scheme - Small Cap Fund": BenchmarkRecord(
            category="Small Cap",
            avg_returns=ReturnSet(one_year=22.1, three_year=25.3, five_year=21.8, ten_year=19.5),
            avg_risk_adjusted_ratio=0.98,
            avg_upside_capture=118.2,
            avg_downside_capture=115.6,
            avg_expense_ratio=2.55,
            avg_standard_deviation=31.2,
        ),
    }
)


class BenchmarkTable:
    """Read-only lookup from scheme category to category averages.

    Unknown categories resolve to ``default`` instead of failing.
    """

    def __init__(
        self,
        records: Mapping[str, BenchmarkRecord] | None = None,
        default: BenchmarkRecord = DEFAULT_BENCHMARK,
    ) -> None:
        self._records = MappingProxyType(dict(DEFAULT_BENCHMARKS if records is None else records))
        self._default = default

    @property
    def default(self) -> BenchmarkRecord:
        return self._default

    def resolve(self, category: str | None) -> BenchmarkRecord:
        if category is None:
            return self._default
        record = self._records.get(category)
        if record is None:
            record = self._records.get(category.strip())
        return record or self._default

    def categories(self) -> list[str]:
        return sorted(self._records)

    def __contains__(self, category: object) -> bool:
        return category in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
