"""Fund performance metrics from NAV histories."""
from nav_metrics.application.use_cases import (
    AnalyzeHistoryUseCase,
    AnalyzeSchemeUseCase,
    CompareSchemesUseCase,
    ListSchemesUseCase,
    MetricsContext,
)
from nav_metrics.domain.benchmarks import BenchmarkTable
from nav_metrics.domain.returns import AnnualizationMode, compute_cagr_returns, compute_returns
from nav_metrics.domain.risk import compute_risk_adjusted_ratio, compute_volatility
from nav_metrics.domain.services import MetricsAssembler
from nav_metrics.infrastructure.repositories.file_repositories import FileNavHistoryRepository
from nav_metrics.infrastructure.repositories.mfapi_repository import MfApiSchemeRepository

__all__ = [
    "AnalyzeHistoryUseCase",
    "AnalyzeSchemeUseCase",
    "AnnualizationMode",
    "BenchmarkTable",
    "CompareSchemesUseCase",
    "FileNavHistoryRepository",
    "ListSchemesUseCase",
    "MetricsAssembler",
    "MetricsContext",
    "MfApiSchemeRepository",
    "compute_cagr_returns",
    "compute_returns",
    "compute_risk_adjusted_ratio",
    "compute_volatility",
]
