"""Volatility and risk-adjusted ratio calculations."""
from __future__ import annotations

import math

import pandas as pd

from .models import DEFAULT_VOLATILITY, TRADING_DAYS_PER_YEAR, NavHistory


def daily_returns(history: NavHistory, window: int = TRADING_DAYS_PER_YEAR) -> list[float]:
    """Simple day-over-day returns for the most recent ``window`` adjacent pairs.

    Pairs where either NAV is non-positive are skipped.
    """
    returns: list[float] = []
    for index in range(min(len(history) - 1, window)):
        current_nav = history[index].value
        previous_nav = history[index + 1].value
        if current_nav > 0 and previous_nav > 0:
            returns.append((current_nav - previous_nav) / previous_nav)
    return returns


def compute_volatility(
    history: NavHistory,
    window: int = TRADING_DAYS_PER_YEAR,
    trading_days: int = TRADING_DAYS_PER_YEAR,
    default: float = DEFAULT_VOLATILITY,
) -> float:
    """Annualized population standard deviation of daily returns, in percent.

    Falls back to ``default`` when fewer than two observations or no valid
    daily return is available.
    """
    if len(history) < 2:
        return default

    sample = daily_returns(history, window=window)
    if not sample:
        return default

    std = float(pd.Series(sample, dtype="float64").std(ddof=0))
    volatility = std * math.sqrt(trading_days) * 100
    return volatility if math.isfinite(volatility) else default


def compute_risk_adjusted_ratio(period_return: float, risk_free_rate: float, volatility: float) -> float:
    """Excess return over the risk-free rate per unit of volatility.

    Zero volatility yields 0.0. The result is not clamped.
    """
    if volatility == 0:
        return 0.0
    ratio = (period_return - risk_free_rate) / volatility
    return ratio if math.isfinite(ratio) else 0.0
