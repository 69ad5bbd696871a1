"""Exceptions raised at the retrieval boundary.

The metrics engine itself never raises for numeric degeneracy; these are only
used by scheme sources that fail to deliver a history.
"""
from __future__ import annotations


class NavMetricsError(Exception):
    """Base class for package errors."""


class SchemeSourceError(NavMetricsError):
    """The scheme catalog source was unreachable or returned a malformed payload."""


class SchemeNotFoundError(SchemeSourceError):
    """The scheme exists nowhere in the source, or has no NAV data."""
