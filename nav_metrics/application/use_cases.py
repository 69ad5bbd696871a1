"""Application services orchestrating scheme retrieval and metrics assembly."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Mapping, Sequence

from nav_metrics.application.dto import AnalysisResponse, ComparisonResponse
from nav_metrics.domain.errors import SchemeSourceError
from nav_metrics.domain.models import ExternalFields, SchemeDetail, SchemeSummary
from nav_metrics.domain.repositories import NavHistoryRepository, SchemeCatalogRepository
from nav_metrics.domain.services import MetricsAssembler

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class MetricsContext:
    catalog: SchemeCatalogRepository
    assembler: MetricsAssembler


class ListSchemesUseCase:
    def __init__(self, context: MetricsContext) -> None:
        self._context = context

    def execute(self) -> Sequence[SchemeSummary]:
        try:
            return self._context.catalog.list_schemes()
        except SchemeSourceError as exc:
            LOGGER.error("Error fetching schemes: %s", exc)
            return []


class AnalyzeSchemeUseCase:
    def __init__(self, context: MetricsContext) -> None:
        self._context = context

    def execute(self, scheme_code: int, external: ExternalFields | None = None) -> AnalysisResponse:
        try:
            detail = self._context.catalog.get_scheme_detail(scheme_code)
        except SchemeSourceError as exc:
            LOGGER.error("Error fetching scheme %s: %s", scheme_code, exc)
            return AnalysisResponse(scheme_code=scheme_code, metrics=None, benchmark=None, error=str(exc))
        return analyze_detail(self._context.assembler, detail, external)


class CompareSchemesUseCase:
    """Analyses several schemes independently; results keep the input order."""

    def __init__(self, context: MetricsContext, max_workers: int = 4) -> None:
        self._analyze = AnalyzeSchemeUseCase(context)
        self._max_workers = max(1, max_workers)

    def execute(
        self,
        scheme_codes: Sequence[int],
        external: Mapping[int, ExternalFields] | None = None,
    ) -> ComparisonResponse:
        external = external or {}
        if not scheme_codes:
            return ComparisonResponse(responses=())
        workers = min(self._max_workers, len(scheme_codes))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            responses = list(
                executor.map(lambda code: self._analyze.execute(code, external.get(code)), scheme_codes)
            )
        return ComparisonResponse(responses=tuple(responses))


class AnalyzeHistoryUseCase:
    """Analyses a history that was loaded outside the scheme catalog, e.g. from a file."""

    def __init__(self, repository: NavHistoryRepository, assembler: MetricsAssembler) -> None:
        self._repository = repository
        self._assembler = assembler

    def execute(
        self,
        name: str,
        category: str = "",
        scheme_code: int = 0,
        external: ExternalFields | None = None,
    ) -> AnalysisResponse:
        try:
            history = self._repository.load_history()
        except SchemeSourceError as exc:
            LOGGER.error("Error loading NAV history for %s: %s", name, exc)
            return AnalysisResponse(scheme_code=scheme_code, metrics=None, benchmark=None, error=str(exc))
        detail = SchemeDetail(scheme_code=scheme_code, scheme_name=name, category=category, history=history)
        return analyze_detail(self._assembler, detail, external)


def analyze_detail(
    assembler: MetricsAssembler,
    detail: SchemeDetail,
    external: ExternalFields | None = None,
) -> AnalysisResponse:
    metrics = assembler.assemble(detail, external)
    benchmark = assembler.benchmark_for(detail.category)
    return AnalysisResponse(
        scheme_code=detail.scheme_code,
        metrics=metrics,
        benchmark=benchmark,
        ratios=assembler.risk_adjusted_ratios(metrics, benchmark),
    )
