"""Application-level DTOs for fund analysis."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from nav_metrics.domain.models import BenchmarkRecord, Horizon, MetricsRecord


@dataclass(slots=True, frozen=True)
class AnalysisResponse:
    """Outcome of one fund analysis.

    ``metrics`` is ``None`` and ``error`` is set when the scheme source failed.
    ``ratios`` maps a horizon to the (fund, category) risk-adjusted ratios.
    """

    scheme_code: int
    metrics: MetricsRecord | None
    benchmark: BenchmarkRecord | None
    error: str | None = None
    ratios: Mapping[Horizon, tuple[float, float]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.metrics is not None and self.error is None


@dataclass(slots=True, frozen=True)
class ComparisonResponse:
    responses: Sequence[AnalysisResponse]

    @property
    def succeeded(self) -> Sequence[AnalysisResponse]:
        return tuple(response for response in self.responses if response.ok)

    @property
    def failed(self) -> Sequence[AnalysisResponse]:
        return tuple(response for response in self.responses if not response.ok)
