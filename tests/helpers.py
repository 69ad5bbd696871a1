from datetime import date, timedelta
from decimal import Decimal

from nav_metrics.domain.models import NavObservation


def make_history(navs, latest=date(2024, 6, 28)):
    """Most-recent-first history, one calendar day apart."""
    return tuple(
        NavObservation(date=latest - timedelta(days=i), nav=Decimal(str(nav)))
        for i, nav in enumerate(navs)
    )
