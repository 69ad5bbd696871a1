"""Fund-versus-category comparison reports."""
from __future__ import annotations

import csv
import html
import io
from typing import Mapping, Sequence

import pandas as pd

from nav_metrics.application.dto import AnalysisResponse
from nav_metrics.domain.models import BenchmarkRecord, Horizon, MetricsRecord

FIELDNAMES = ["metric", "fund", "category_average", "difference"]


def _row(metric: str, fund: float | None, average: float | None) -> dict[str, str]:
    difference = fund - average if fund is not None and average is not None else None
    return {
        "metric": metric,
        "fund": "" if fund is None else f"{fund:.2f}",
        "category_average": "" if average is None else f"{average:.2f}",
        "difference": "" if difference is None else f"{difference:+.2f}",
    }


def comparison_rows(
    metrics: MetricsRecord,
    benchmark: BenchmarkRecord,
    ratios: Mapping[Horizon, tuple[float, float]] | None = None,
) -> list[dict[str, str]]:
    """Fund vs category rows; ``ratios`` adds one Sharpe row per horizon."""
    rows: list[dict[str, str]] = []
    for horizon in Horizon:
        label = f"Return {horizon.value} (%)"
        if not metrics.is_genuine(horizon):
            label += " *"
        rows.append(_row(label, metrics.returns.get(horizon), benchmark.avg_returns.get(horizon)))
    external = metrics.external
    rows.extend(
        [
            _row("Standard deviation (%)", metrics.volatility, benchmark.avg_standard_deviation),
            _row("Sharpe ratio", metrics.risk_adjusted_ratio, benchmark.avg_risk_adjusted_ratio),
            _row("Upside capture (%)", external.upside_capture, benchmark.avg_upside_capture),
            _row("Downside capture (%)", external.downside_capture, benchmark.avg_downside_capture),
            _row("Expense ratio (%)", external.expense_ratio, benchmark.avg_expense_ratio),
            _row("Beta", external.beta, None),
            _row("Alpha", external.alpha, None),
            _row("AUM (Cr)", external.aum, None),
        ]
    )
    for horizon, (fund_ratio, category_ratio) in (ratios or {}).items():
        rows.append(_row(f"Sharpe ratio {horizon.value}", fund_ratio, category_ratio))
    return rows


def render_csv(rows: Sequence[dict[str, str]]) -> bytes:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=FIELDNAMES)
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(response: AnalysisResponse) -> str:
    if not response.ok or response.benchmark is None:
        return f"<p>No data available for scheme {response.scheme_code}.</p>"
    rows = comparison_rows(response.metrics, response.benchmark, response.ratios)
    header = "".join(f"<th>{col}</th>" for col in FIELDNAMES)
    body_html = "".join(
        "<tr>" + "".join(f"<td>{html.escape(row[col])}</td>" for col in FIELDNAMES) + "</tr>" for row in rows
    )
    title = f"<h3>{html.escape(response.metrics.name)} vs {html.escape(response.benchmark.category)}</h3>"
    return f"{title}<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>"


def records_to_dataframe(records: Sequence[MetricsRecord]) -> pd.DataFrame:
    """One row per fund, suitable for side-by-side comparison."""
    return pd.DataFrame(
        [
            {
                "scheme_code": r.scheme_code,
                "name": r.name,
                "category": r.category,
                "nav": r.nav,
                **{f"return_{h.value}": r.returns.get(h) for h in Horizon},
                "std_dev": r.volatility,
                "sharpe_ratio": r.risk_adjusted_ratio,
                "expense_ratio": r.external.expense_ratio,
                "aum": r.external.aum,
                "upside_capture": r.external.upside_capture,
                "downside_capture": r.external.downside_capture,
                "beta": r.external.beta,
                "alpha": r.external.alpha,
            }
            for r in records
        ]
    )
