"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import NavHistory, SchemeDetail, SchemeSummary


class SchemeCatalogRepository(Protocol):
    """Lists schemes and fetches scheme metadata with NAV history.

    Implementations raise ``SchemeSourceError`` when the source fails.
    """

    def list_schemes(self) -> Sequence[SchemeSummary]:
        ...

    def get_scheme_detail(self, scheme_code: int) -> SchemeDetail:
        ...


class NavHistoryRepository(Protocol):
    """Provides a NAV history ordered most-recent-first."""

    def load_history(self) -> NavHistory:
        ...
