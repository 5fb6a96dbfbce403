from datetime import datetime

import pytest

from utils.helpers import (
    date_sort_key,
    format_currency,
    format_field_label,
    format_percentage,
    parse_date,
    to_naive_datetimes,
)


@pytest.mark.parametrize("value, decimals, expected", [
    (1_500_000_000, 1, "$1.5B"),
    (-2_500_000, 1, "$-2.5M"),
    (12_345, 0, "$12K"),
    (999, 2, "$999.00"),
    (None, 0, "N/A"),
])
def test_format_currency(value, decimals, expected):
    assert format_currency(value, decimals) == expected


def test_format_percentage():
    assert format_percentage(12.345) == "12.35%"
    assert format_percentage(5, decimals=0) == "5%"
    assert format_percentage(None) == "N/A"


@pytest.mark.parametrize("field_name, label", [
    ("totalRevenue", "Total Revenue"),
    ("eps", "Eps"),
    ("cashAndCashEquivalentsAtCarryingValue", "Cash And Cash Equivalents At Carrying Value"),
    ("cash_flow", "Cash Flow"),
])
def test_format_field_label(field_name, label):
    assert format_field_label(field_name) == label


def test_parse_date():
    assert parse_date("2024-09-30") == datetime(2024, 9, 30)
    assert parse_date("2024-03-05 16:00:00") == datetime(2024, 3, 5, 16, 0)
    assert parse_date("not a date") is None
    assert parse_date(None) is None


def test_unparseable_dates_sort_first():
    dates = ["2024-12-31", "garbage", "2023-12-31"]
    assert sorted(dates, key=date_sort_key) == ["garbage", "2023-12-31", "2024-12-31"]


def test_offset_dates_parse_naive():
    assert parse_date("2023-12-31T00:00:00Z") == datetime(2023, 12, 31)
    assert parse_date("2024-01-01T02:00:00+02:00") == datetime(2024, 1, 1)


def test_mixed_naive_and_offset_dates_sort():
    dates = ["2024-12-31", "2023-12-31T00:00:00Z", "2024-06-30T12:00:00-04:00"]
    assert sorted(dates, key=date_sort_key) == [
        "2023-12-31T00:00:00Z", "2024-06-30T12:00:00-04:00", "2024-12-31"
    ]


def test_to_naive_datetimes_column():
    parsed = to_naive_datetimes(["2024-03-04", "2024-03-05T14:30:00Z", "garbage"])

    assert parsed.dt.tz is None
    assert parsed.iloc[0] == datetime(2024, 3, 4)
    assert parsed.iloc[1] == datetime(2024, 3, 5, 14, 30)
    assert parsed.isna().tolist() == [False, False, True]
