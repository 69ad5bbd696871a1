from datetime import date
from decimal import Decimal

import pytest

from nav_metrics.domain.errors import SchemeNotFoundError, SchemeSourceError
from nav_metrics.infrastructure.parsing.mfapi import parse_scheme_detail, parse_scheme_list
from nav_metrics.infrastructure.parsing.utils import (
    build_history,
    parse_decimal,
    parse_nav_date,
    sort_most_recent_first,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("45.2310", Decimal("45.231")),
        ("1,234.5", Decimal("1234.5")),
        ("(12.5)", Decimal("-12.5")),
        ("", Decimal("0")),
        (None, Decimal("0")),
        ("N.A.", Decimal("0")),
        ("abc", Decimal("0")),
        ("Infinity", Decimal("0")),
    ],
)
def test_parse_decimal(raw, expected):
    assert parse_decimal(raw) == expected


def test_parse_nav_date_formats():
    assert parse_nav_date("28-06-2024") == date(2024, 6, 28)
    assert parse_nav_date("2024-06-28") == date(2024, 6, 28)
    assert parse_nav_date("28/06/2024") == date(2024, 6, 28)
    assert parse_nav_date(date(2024, 6, 28)) == date(2024, 6, 28)
    assert parse_nav_date("not a date") is None
    assert parse_nav_date(None) is None


def test_build_history_keeps_order_and_drops_bad_dates():
    rows = [
        {"date": "28-06-2024", "nav": "110.5"},
        {"date": "garbage", "nav": "109"},
        {"date": "26-06-2024", "nav": "oops"},
    ]

    history = build_history(rows)

    assert [obs.date for obs in history] == [date(2024, 6, 28), date(2024, 6, 26)]
    assert history[1].nav == Decimal("0")


def test_sort_most_recent_first():
    history = build_history([{"date": "2024-01-01", "nav": "1"}, {"date": "2024-01-03", "nav": "3"}])

    assert [obs.nav for obs in sort_most_recent_first(history)] == [Decimal("3"), Decimal("1")]


def test_parse_scheme_list_limits_and_skips_bad_entries():
    payload = [
        {"schemeCode": 100027, "schemeName": "Fund A"},
        {"schemeCode": "bad", "schemeName": "Broken"},
        {"schemeCode": "100028", "schemeName": " Fund B "},
        {"schemeCode": 100029, "schemeName": "Fund C"},
    ]

    schemes = parse_scheme_list(payload, limit=2)

    assert [(s.scheme_code, s.scheme_name) for s in schemes] == [(100027, "Fund A"), (100028, "Fund B")]


def test_parse_scheme_list_rejects_non_list():
    with pytest.raises(SchemeSourceError):
        parse_scheme_list({"status": "FAIL"})


def test_parse_scheme_detail():
    payload = {
        "meta": {
            "scheme_code": 100027,
            "scheme_name": "Fund A",
            "scheme_category": "Equity Scheme - Large Cap Fund",
            "scheme_type": "Open Ended Schemes",
        },
        "data": [{"date": "28-06-2024", "nav": "110.0"}, {"date": "27-06-2024", "nav": "108.0"}],
        "status": "SUCCESS",
    }

    detail = parse_scheme_detail(payload, 100027)

    assert detail.category == "Equity Scheme - Large Cap Fund"
    assert detail.scheme_type == "Open Ended Schemes"
    assert [obs.nav for obs in detail.history] == [Decimal("110"), Decimal("108")]


def test_parse_scheme_detail_without_data():
    with pytest.raises(SchemeNotFoundError):
        parse_scheme_detail({"meta": {}, "data": []}, 1)
    with pytest.raises(SchemeSourceError):
        parse_scheme_detail({"data": []}, 1)
