"""File-backed NAV history repositories (CSV and Excel)."""
from __future__ import annotations

import zipfile
from io import BytesIO
from pathlib import Path

import pandas as pd

from nav_metrics.domain.errors import SchemeSourceError
from nav_metrics.domain.models import NavHistory
from nav_metrics.domain.repositories import NavHistoryRepository
from nav_metrics.infrastructure.parsing.utils import (
    build_history,
    ensure_bytes,
    sort_most_recent_first,
)

KNOWN_DATE_COLUMNS = ["date", "nav date", "nav_date", "valuation date"]
KNOWN_NAV_COLUMNS = ["nav", "net asset value", "price"]
EXCEL_ENGINES = {".xls": "xlrd", ".xlsx": "openpyxl", ".xlsm": "openpyxl"}


def _pick_column(df: pd.DataFrame, candidates: list[str]) -> str:
    lower_map = {str(column).strip().lower(): column for column in df.columns}
    for candidate in candidates:
        if candidate in lower_map:
            return lower_map[candidate]
    raise ValueError(f"None of the columns {candidates} found in {list(df.columns)}")


def read_history_frame(source: BytesIO | Path | bytes, engine: str | None = None) -> pd.DataFrame:
    """Read a CSV, or an Excel workbook when an Excel ``engine`` is given."""
    raw = BytesIO(ensure_bytes(source))
    if engine:
        return pd.read_excel(raw, engine=engine, dtype=str)
    return pd.read_csv(raw, dtype=str, keep_default_na=False)


def frame_to_history(df: pd.DataFrame) -> NavHistory:
    date_col = _pick_column(df, KNOWN_DATE_COLUMNS)
    nav_col = _pick_column(df, KNOWN_NAV_COLUMNS)
    rows = ({"date": row[date_col], "nav": row[nav_col]} for _, row in df.iterrows())
    return sort_most_recent_first(build_history(rows))


class FileNavHistoryRepository(NavHistoryRepository):
    """Loads a ``date``/``nav`` table and orders it most-recent-first.

    The source is read on ``load_history``; unreadable files, empty files and
    tables without date/NAV columns raise ``SchemeSourceError``.
    """

    def __init__(self, source: BytesIO | Path | bytes, engine: str | None = None) -> None:
        if engine is None and isinstance(source, Path):
            engine = EXCEL_ENGINES.get(source.suffix.lower())
        self._source = source
        self._engine = engine

    def load_history(self) -> NavHistory:
        try:
            return frame_to_history(read_history_frame(self._source, engine=self._engine))
        except (OSError, ValueError, pd.errors.ParserError, zipfile.BadZipFile) as exc:
            raise SchemeSourceError(f"Cannot read NAV history from {self._describe()}: {exc}") from exc

    def _describe(self) -> str:
        return str(self._source) if isinstance(self._source, Path) else "in-memory source"
