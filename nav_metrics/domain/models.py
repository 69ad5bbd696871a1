"""Domain models for the fund performance metrics engine.

A NAV history is any sequence of ``NavObservation`` ordered most-recent-first:
index 0 is the latest observation. Horizon lookups count trading days back
from index 0, so every component relies on that ordering.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence

TRADING_DAYS_PER_YEAR = 252
DEFAULT_VOLATILITY = 15.0


class Horizon(Enum):
    """Fixed lookback windows, each mapped to a trading-day offset."""

    ONE_YEAR = "1y"
    THREE_YEAR = "3y"
    FIVE_YEAR = "5y"
    TEN_YEAR = "10y"

    @property
    def years(self) -> int:
        return int(self.value[:-1])

    @property
    def offset(self) -> int:
        return self.years * TRADING_DAYS_PER_YEAR

    @classmethod
    def from_label(cls, label: str) -> "Horizon":
        normalized = str(label).strip().lower()
        for horizon in cls:
            if horizon.value == normalized:
                return horizon
        raise ValueError(f"Unknown horizon: {label!r}")


@dataclass(frozen=True)
class NavObservation:
    """Per-unit valuation of a fund on one calendar date."""

    date: date
    nav: Decimal

    @property
    def value(self) -> float:
        """NAV as a float; non-finite NAVs (including signaling NaN) read as 0."""
        if isinstance(self.nav, Decimal):
            if not self.nav.is_finite():
                return 0.0
        number = float(self.nav)
        return number if math.isfinite(number) else 0.0


NavHistory = Sequence[NavObservation]


@dataclass(frozen=True)
class ReturnSet:
    """Annualized percentage return per horizon; never partially populated."""

    one_year: float = 0.0
    three_year: float = 0.0
    five_year: float = 0.0
    ten_year: float = 0.0

    @classmethod
    def from_mapping(cls, values: Mapping[Horizon, float]) -> "ReturnSet":
        return cls(
            one_year=float(values.get(Horizon.ONE_YEAR, 0.0)),
            three_year=float(values.get(Horizon.THREE_YEAR, 0.0)),
            five_year=float(values.get(Horizon.FIVE_YEAR, 0.0)),
            ten_year=float(values.get(Horizon.TEN_YEAR, 0.0)),
        )

    def get(self, horizon: Horizon) -> float:
        return {
            Horizon.ONE_YEAR: self.one_year,
            Horizon.THREE_YEAR: self.three_year,
            Horizon.FIVE_YEAR: self.five_year,
            Horizon.TEN_YEAR: self.ten_year,
        }[horizon]

    def as_dict(self) -> dict[str, float]:
        return {horizon.value: self.get(horizon) for horizon in Horizon}


def _finite_or_none(value: object) -> float | None:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True)
class ExternalFields:
    """Fields that cannot be derived from a NAV history.

    ``None`` means the value is unavailable and needs external enrichment.
    Non-finite inputs are normalised to ``None``.
    """

    aum: float | None = None
    expense_ratio: float | None = None
    upside_capture: float | None = None
    downside_capture: float | None = None
    beta: float | None = None
    alpha: float | None = None

    def __post_init__(self) -> None:
        for name in ("aum", "expense_ratio", "upside_capture", "downside_capture", "beta", "alpha"):
            object.__setattr__(self, name, _finite_or_none(getattr(self, name)))


@dataclass(frozen=True)
class SchemeSummary:
    scheme_code: int
    scheme_name: str


@dataclass(frozen=True)
class SchemeDetail:
    """Scheme metadata plus its NAV history (most-recent-first)."""

    scheme_code: int
    scheme_name: str
    category: str
    history: NavHistory = field(default_factory=tuple)
    scheme_type: str = ""


@dataclass(frozen=True)
class MetricsRecord:
    """Complete metrics for one fund, built once per analysis."""

    scheme_code: int
    name: str
    category: str
    nav: float
    returns: ReturnSet
    volatility: float
    risk_adjusted_ratio: float
    external: ExternalFields = field(default_factory=ExternalFields)
    coverage: Mapping[Horizon, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "coverage", MappingProxyType(dict(self.coverage)))

    def is_genuine(self, horizon: Horizon) -> bool:
        """Whether the horizon's return was measured over its full lookback."""
        return bool(self.coverage.get(horizon, False))


@dataclass(frozen=True)
class BenchmarkRecord:
    """Category averages keyed by category name in a ``BenchmarkTable``."""

    category: str
    avg_returns: ReturnSet
    avg_risk_adjusted_ratio: float
    avg_upside_capture: float
    avg_downside_capture: float
    avg_expense_ratio: float
    avg_standard_deviation: float
