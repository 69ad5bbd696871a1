"""HTTP repository for the public mfapi.in scheme catalog."""
from __future__ import annotations

import logging
from typing import Any, Sequence

import requests
from requests import RequestException

from nav_metrics.domain.errors import SchemeNotFoundError, SchemeSourceError
from nav_metrics.domain.models import SchemeDetail, SchemeSummary
from nav_metrics.domain.repositories import SchemeCatalogRepository
from nav_metrics.infrastructure.parsing.mfapi import parse_scheme_detail, parse_scheme_list

LOGGER = logging.getLogger(__name__)


class MfApiSchemeRepository(SchemeCatalogRepository):
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        limit: int | None = 50,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._limit = limit
        self._session = session or requests.Session()

    def _get_json(self, url: str) -> Any:
        try:
            response = self._session.get(url, timeout=self._timeout)
        except RequestException as exc:
            raise SchemeSourceError(f"Request to {url} failed: {exc}") from exc
        if response.status_code == 404:
            raise SchemeNotFoundError(f"{url} returned 404")
        try:
            response.raise_for_status()
        except RequestException as exc:
            raise SchemeSourceError(f"Request to {url} failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise SchemeSourceError(f"Response from {url} is not valid JSON") from exc

    def list_schemes(self) -> Sequence[SchemeSummary]:
        LOGGER.debug("Fetching scheme list from %s", self._base_url)
        payload = self._get_json(self._base_url)
        schemes = parse_scheme_list(payload, limit=self._limit)
        LOGGER.info("Fetched %d schemes", len(schemes))
        return schemes

    def get_scheme_detail(self, scheme_code: int) -> SchemeDetail:
        url = f"{self._base_url}/{scheme_code}"
        LOGGER.debug("Fetching scheme detail from %s", url)
        payload = self._get_json(url)
        if isinstance(payload, dict) and str(payload.get("status", "")).upper() == "FAIL":
            raise SchemeNotFoundError(f"Scheme {scheme_code} not found")
        detail = parse_scheme_detail(payload, scheme_code)
        LOGGER.info("Fetched %d NAV observations for scheme %s", len(detail.history), scheme_code)
        return detail
