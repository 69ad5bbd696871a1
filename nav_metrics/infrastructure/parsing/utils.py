"""Shared parsing utilities for NAV history ingestion."""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from io import BytesIO
from pathlib import Path
from typing import Iterable, Mapping

import pandas as pd

from nav_metrics.domain.models import NavObservation

NAV_DATE_FORMATS = ("%d-%m-%Y", "%d/%m/%Y")


def ensure_bytes(source: BytesIO | Path | bytes) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, Path):
        return source.read_bytes()
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def parse_decimal(value: object) -> Decimal:
    """Parse a NAV value as text; anything unparseable or non-finite becomes 0."""
    if value is None:
        return Decimal("0")
    s = str(value).strip()
    if not s:
        return Decimal("0")
    if s.upper() in {"NAN", "N.A.", "N/A", "NONE"}:
        return Decimal("0")
    negative = False
    if s.startswith("(") and s.endswith(")"):
        negative = True
        s = s[1:-1]
    for ch in [",", "₹", "$", " "]:
        s = s.replace(ch, "")
    try:
        result = Decimal(s)
    except InvalidOperation:
        return Decimal("0")
    if not result.is_finite():
        return Decimal("0")
    if negative:
        result = -result
    return result.normalize()


def parse_nav_date(value: object) -> date | None:
    """Parse ISO-8601 or day-first (``DD-MM-YYYY``) dates; ``None`` if unparseable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, pd.Timestamp):
        return None if pd.isna(value) else value.date()
    s = str(value).strip()
    if not s:
        return None
    try:
        return date.fromisoformat(s[:10])
    except ValueError:
        pass
    for fmt in NAV_DATE_FORMATS:
        parsed = pd.to_datetime(s, format=fmt, errors="coerce")
        if not pd.isna(parsed):
            return parsed.date()
    return None


def build_history(rows: Iterable[Mapping[str, object]]) -> tuple[NavObservation, ...]:
    """Convert raw ``{date, nav}`` rows into observations, keeping their order.

    Rows whose date cannot be parsed are dropped; unparseable NAVs are kept
    as 0.
    """
    history: list[NavObservation] = []
    for row in rows:
        nav_date = parse_nav_date(row.get("date"))
        if nav_date is None:
            continue
        history.append(NavObservation(date=nav_date, nav=parse_decimal(row.get("nav"))))
    return tuple(history)


def sort_most_recent_first(history: Iterable[NavObservation]) -> tuple[NavObservation, ...]:
    return tuple(sorted(history, key=lambda observation: observation.date, reverse=True))
