"""Domain service assembling metrics records from computed and external values."""
from __future__ import annotations

from typing import Sequence

from .benchmarks import BenchmarkTable
from .models import (
    DEFAULT_VOLATILITY,
    TRADING_DAYS_PER_YEAR,
    BenchmarkRecord,
    ExternalFields,
    Horizon,
    MetricsRecord,
    SchemeDetail,
)
from .returns import AnnualizationMode, compute_returns, horizon_coverage
from .risk import compute_risk_adjusted_ratio, compute_volatility

COMPARISON_HORIZONS = (Horizon.ONE_YEAR, Horizon.THREE_YEAR, Horizon.FIVE_YEAR)


class MetricsAssembler:
    """Builds one ``MetricsRecord`` per scheme and resolves its category benchmark."""

    def __init__(
        self,
        risk_free_rate: float,
        benchmarks: BenchmarkTable | None = None,
        ratio_horizon: Horizon = Horizon.THREE_YEAR,
        mode: AnnualizationMode = AnnualizationMode.SIMPLE,
        volatility_window: int = TRADING_DAYS_PER_YEAR,
        default_volatility: float = DEFAULT_VOLATILITY,
    ) -> None:
        self._risk_free_rate = risk_free_rate
        self._benchmarks = benchmarks if benchmarks is not None else BenchmarkTable()
        self._ratio_horizon = ratio_horizon
        self._mode = mode
        self._volatility_window = volatility_window
        self._default_volatility = default_volatility

    @property
    def risk_free_rate(self) -> float:
        return self._risk_free_rate

    def assemble(self, detail: SchemeDetail, external: ExternalFields | None = None) -> MetricsRecord:
        history = detail.history
        returns = compute_returns(history, mode=self._mode)
        volatility = compute_volatility(
            history,
            window=self._volatility_window,
            default=self._default_volatility,
        )
        ratio = compute_risk_adjusted_ratio(
            returns.get(self._ratio_horizon),
            self._risk_free_rate,
            volatility,
        )
        current_nav = history[0].value if history else 0.0
        return MetricsRecord(
            scheme_code=detail.scheme_code,
            name=detail.scheme_name,
            category=detail.category,
            nav=current_nav,
            returns=returns,
            volatility=volatility,
            risk_adjusted_ratio=ratio,
            external=external or ExternalFields(),
            coverage=horizon_coverage(history),
        )

    def benchmark_for(self, category: str | None) -> BenchmarkRecord:
        return self._benchmarks.resolve(category)

    def risk_adjusted_ratios(
        self,
        record: MetricsRecord,
        benchmark: BenchmarkRecord,
        horizons: Sequence[Horizon] = COMPARISON_HORIZONS,
    ) -> dict[Horizon, tuple[float, float]]:
        """Fund and category ratio per horizon, each over its own volatility.

        A benchmark with zero average standard deviation yields 0.0.
        """
        return {
            horizon: (
                compute_risk_adjusted_ratio(record.returns.get(horizon), self._risk_free_rate, record.volatility),
                compute_risk_adjusted_ratio(
                    benchmark.avg_returns.get(horizon),
                    self._risk_free_rate,
                    benchmark.avg_standard_deviation,
                ),
            )
            for horizon in horizons
        }
