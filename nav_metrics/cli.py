"""Command-line entrypoint for fund metrics analysis."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from nav_metrics.application.dto import AnalysisResponse
from nav_metrics.application.use_cases import (
    AnalyzeHistoryUseCase,
    AnalyzeSchemeUseCase,
    CompareSchemesUseCase,
    ListSchemesUseCase,
    MetricsContext,
)
from nav_metrics.config import SETTINGS
from nav_metrics.domain.models import ExternalFields
from nav_metrics.domain.returns import AnnualizationMode
from nav_metrics.domain.services import MetricsAssembler
from nav_metrics.infrastructure.repositories.file_repositories import FileNavHistoryRepository
from nav_metrics.infrastructure.repositories.mfapi_repository import MfApiSchemeRepository
from nav_metrics.infrastructure.storage.benchmark_store import load_benchmarks
from nav_metrics.presentation.metrics_report import comparison_rows, records_to_dataframe, render_csv


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute fund performance metrics from NAV history")
    parser.add_argument("--risk-free-rate", type=float, default=SETTINGS.risk_free_rate, help="Risk-free rate in percent")
    parser.add_argument("--cagr", action="store_true", help="Compound multi-year returns instead of simple division")
    parser.add_argument("--benchmarks", type=Path, default=SETTINGS.benchmark_path, help="Benchmark override JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List available schemes")

    analyze = sub.add_parser("analyze", help="Analyze one scheme")
    analyze.add_argument("scheme_code", type=int)
    analyze.add_argument("--csv", type=Path, help="Write the comparison table to this CSV file")
    analyze.add_argument("--expense-ratio", type=float)
    analyze.add_argument("--aum", type=float)

    compare = sub.add_parser("compare", help="Compare several schemes")
    compare.add_argument("scheme_codes", type=int, nargs="+")

    from_file = sub.add_parser("file", help="Analyze a NAV history stored in a CSV or Excel file")
    from_file.add_argument("path", type=Path)
    from_file.add_argument("--name", type=str, default="")
    from_file.add_argument("--category", type=str, default="")
    return parser.parse_args(argv)


def build_assembler(args: argparse.Namespace) -> MetricsAssembler:
    return MetricsAssembler(
        risk_free_rate=args.risk_free_rate,
        benchmarks=load_benchmarks(args.benchmarks),
        ratio_horizon=SETTINGS.ratio_horizon,
        mode=AnnualizationMode.CAGR if args.cagr else AnnualizationMode.SIMPLE,
        volatility_window=SETTINGS.volatility_window,
        default_volatility=SETTINGS.default_volatility,
    )


def build_context(args: argparse.Namespace) -> MetricsContext:
    catalog = MfApiSchemeRepository(
        SETTINGS.api_url,
        timeout=SETTINGS.request_timeout,
        limit=SETTINGS.scheme_list_limit,
    )
    return MetricsContext(catalog=catalog, assembler=build_assembler(args))


def print_response(response: AnalysisResponse) -> None:
    if not response.ok:
        print(f"Scheme {response.scheme_code}: no data available ({response.error})")
        return
    metrics = response.metrics
    print(f"{metrics.name} [{metrics.category or 'uncategorised'}]")
    print(f"Benchmark category: {response.benchmark.category}")
    print(f"Current NAV: {metrics.nav:.4f}")
    for row in comparison_rows(metrics, response.benchmark, response.ratios):
        print(f"  {row['metric']:<24} {row['fund']:>10} {row['category_average']:>10} {row['difference']:>10}")
    if not all(metrics.coverage.values()):
        print("  * history shorter than the horizon; the oldest available NAV was used")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "file":
        use_case = AnalyzeHistoryUseCase(FileNavHistoryRepository(args.path), build_assembler(args))
        response = use_case.execute(name=args.name or args.path.stem, category=args.category)
        print_response(response)
        return 0 if response.ok else 1

    context = build_context(args)

    if args.command == "list":
        schemes = ListSchemesUseCase(context).execute()
        if not schemes:
            print("No schemes available.")
            return 1
        for scheme in schemes:
            print(f"{scheme.scheme_code}\t{scheme.scheme_name}")
        return 0

    if args.command == "analyze":
        external = ExternalFields(expense_ratio=args.expense_ratio, aum=args.aum)
        response = AnalyzeSchemeUseCase(context).execute(args.scheme_code, external)
        print_response(response)
        if response.ok and args.csv:
            args.csv.write_bytes(render_csv(comparison_rows(response.metrics, response.benchmark, response.ratios)))
        return 0 if response.ok else 1

    comparison = CompareSchemesUseCase(context, max_workers=SETTINGS.compare_workers).execute(args.scheme_codes)
    frame = records_to_dataframe([response.metrics for response in comparison.succeeded])
    if not frame.empty:
        print(frame.to_string(index=False))
    for response in comparison.failed:
        print(f"Scheme {response.scheme_code}: no data available ({response.error})")
    return 0 if not comparison.failed else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
