"""Multi-horizon return computation over a most-recent-first NAV history."""
from __future__ import annotations

import math
from enum import Enum

from .models import Horizon, NavHistory, NavObservation, ReturnSet


class AnnualizationMode(Enum):
    """How multi-year raw returns are turned into a yearly rate.

    SIMPLE divides the period return by the year count and is the default
    output format. CAGR compounds: ``(1 + r) ** (1 / years) - 1``.
    """

    SIMPLE = "simple"
    CAGR = "cagr"


def reference_observation(history: NavHistory, horizon: Horizon) -> NavObservation | None:
    """Observation ``horizon.offset`` trading days back, else the oldest one."""
    if not history:
        return None
    if horizon.offset < len(history):
        return history[horizon.offset]
    return history[-1]


def horizon_coverage(history: NavHistory) -> dict[Horizon, bool]:
    """Map each horizon to whether the history actually reaches its offset.

    ``False`` marks a horizon whose return falls back to the oldest
    observation and so spans less time than its label says.
    """
    return {horizon: horizon.offset < len(history) for horizon in Horizon}


def raw_return(current_nav: float, reference_nav: float) -> float:
    """Percentage change from ``reference_nav`` to ``current_nav``."""
    if reference_nav <= 0:
        return 0.0
    return (current_nav - reference_nav) / reference_nav * 100


def annualize(raw: float, years: int, mode: AnnualizationMode = AnnualizationMode.SIMPLE) -> float:
    if years <= 1:
        return raw
    if mode is AnnualizationMode.CAGR:
        growth = 1 + raw / 100
        if growth <= 0:
            return -100.0
        return (growth ** (1 / years) - 1) * 100
    return raw / years


def compute_returns(history: NavHistory, mode: AnnualizationMode = AnnualizationMode.SIMPLE) -> ReturnSet:
    """Annualized return for every horizon; all zero for an empty history."""
    if not history:
        return ReturnSet()

    current_nav = history[0].value
    values: dict[Horizon, float] = {}
    for horizon in Horizon:
        reference = reference_observation(history, horizon)
        reference_nav = reference.value if reference is not None else 0.0
        value = annualize(raw_return(current_nav, reference_nav), horizon.years, mode)
        values[horizon] = value if math.isfinite(value) else 0.0
    return ReturnSet.from_mapping(values)


def compute_cagr_returns(history: NavHistory) -> ReturnSet:
    """Same lookups as ``compute_returns`` but compounded for multi-year horizons."""
    return compute_returns(history, mode=AnnualizationMode.CAGR)
