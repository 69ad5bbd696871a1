"""Central configuration for the NAV metrics package."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from nav_metrics.domain.models import (
    DEFAULT_VOLATILITY,
    TRADING_DAYS_PER_YEAR,
    Horizon,
)

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"

DEFAULT_API_URL = "https://api.mfapi.in/mf"
DEFAULT_RISK_FREE_RATE = 6.5
DEFAULT_BENCHMARK_PATH = DATA_DIR / "benchmark_override.json"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(slots=True, frozen=True)
class Settings:
    risk_free_rate: float
    volatility_window: int
    default_volatility: float
    ratio_horizon: Horizon
    api_url: str
    request_timeout: float
    scheme_list_limit: int
    compare_workers: int
    benchmark_path: Path


SETTINGS = Settings(
    risk_free_rate=_env_float("NAV_METRICS_RISK_FREE_RATE", DEFAULT_RISK_FREE_RATE),
    volatility_window=TRADING_DAYS_PER_YEAR,
    default_volatility=DEFAULT_VOLATILITY,
    ratio_horizon=Horizon.THREE_YEAR,
    api_url=os.getenv("NAV_METRICS_API_URL", DEFAULT_API_URL).rstrip("/"),
    request_timeout=_env_float("NAV_METRICS_TIMEOUT", 10.0),
    scheme_list_limit=50,
    compare_workers=4,
    benchmark_path=Path(os.getenv("NAV_METRICS_BENCHMARKS", str(DEFAULT_BENCHMARK_PATH))),
)
