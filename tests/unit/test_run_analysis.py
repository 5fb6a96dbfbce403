import pytest

from run_analysis import format_signed_currency, format_signed_percent


@pytest.mark.parametrize("value, expected", [
    (1.5, '+$1.50'),
    (-1.5, '-$1.50'),
    (0.0, '+$0.00'),
    (-2_500_000, '-$2.50M'),
])
def test_format_signed_currency(value, expected):
    assert format_signed_currency(value) == expected


def test_format_signed_percent():
    assert format_signed_percent(-0.5) == '-0.50%'
    assert format_signed_percent(12.345, 1) == '+12.3%'
