"""Parsers for the mfapi.in scheme catalog payloads."""
from __future__ import annotations

from typing import Any, Sequence

from nav_metrics.domain.errors import SchemeNotFoundError, SchemeSourceError
from nav_metrics.domain.models import SchemeDetail, SchemeSummary
from nav_metrics.infrastructure.parsing.utils import build_history


def _parse_scheme_code(value: object) -> int | None:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def parse_scheme_list(payload: Any, limit: int | None = None) -> Sequence[SchemeSummary]:
    if not isinstance(payload, list):
        raise SchemeSourceError("Scheme list payload is not a JSON array")
    schemes: list[SchemeSummary] = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        code = _parse_scheme_code(entry.get("schemeCode"))
        if code is None:
            continue
        schemes.append(SchemeSummary(scheme_code=code, scheme_name=str(entry.get("schemeName", "")).strip()))
        if limit is not None and len(schemes) >= limit:
            break
    return schemes


def parse_scheme_detail(payload: Any, scheme_code: int) -> SchemeDetail:
    """Build a ``SchemeDetail``; the API already lists NAVs most-recent-first."""
    if not isinstance(payload, dict):
        raise SchemeSourceError(f"Scheme {scheme_code} payload is not a JSON object")
    meta = payload.get("meta")
    data = payload.get("data")
    if not isinstance(meta, dict) or not isinstance(data, list):
        raise SchemeSourceError(f"Scheme {scheme_code} payload is missing meta or data")

    history = build_history(row for row in data if isinstance(row, dict))
    if not history:
        raise SchemeNotFoundError(f"Scheme {scheme_code} has no NAV data")

    return SchemeDetail(
        scheme_code=_parse_scheme_code(meta.get("scheme_code")) or scheme_code,
        scheme_name=str(meta.get("scheme_name", "")).strip(),
        category=str(meta.get("scheme_category", "")).strip(),
        scheme_type=str(meta.get("scheme_type", "")).strip(),
        history=history,
    )
