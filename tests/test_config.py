from nav_metrics import config
from nav_metrics.domain.models import Horizon


def test_env_float(monkeypatch):
    monkeypatch.setenv("NAV_METRICS_RISK_FREE_RATE", "7.25")
    assert config._env_float("NAV_METRICS_RISK_FREE_RATE", 6.5) == 7.25

    monkeypatch.setenv("NAV_METRICS_RISK_FREE_RATE", "seven")
    assert config._env_float("NAV_METRICS_RISK_FREE_RATE", 6.5) == 6.5

    monkeypatch.delenv("NAV_METRICS_RISK_FREE_RATE")
    assert config._env_float("NAV_METRICS_RISK_FREE_RATE", 6.5) == 6.5


def test_default_settings():
    settings = config.SETTINGS

    assert settings.volatility_window == 252
    assert settings.default_volatility == 15.0
    assert settings.ratio_horizon is Horizon.THREE_YEAR
    assert settings.scheme_list_limit == 50
