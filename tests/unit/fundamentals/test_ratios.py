import pytest

from fundamentals.financial_data.ratios import (
    asset_turnover,
    cagr,
    eps,
    margin,
    percent_of_assets,
    percent_of_operating_cash_flow,
    percent_of_revenue,
    roa,
    roe,
    working_capital_efficiency,
    yoy_growth,
)


class TestYoYGrowth:

    @pytest.mark.parametrize("current, previous", [(110, 100), (-5, 20), (0, 3.5), (7, -14)])
    def test_formula(self, current, previous):
        assert yoy_growth(current, previous) == pytest.approx((current - previous) / previous * 100)

    @pytest.mark.parametrize("current, previous", [(5, 0), (None, 10), (10, None), (0, 0)])
    def test_null_cases(self, current, previous):
        assert yoy_growth(current, previous) is None


class TestCAGR:

    def test_flat(self):
        assert cagr(100, 100, 3) == 0

    def test_doubling_in_one_year(self):
        assert cagr(100, 200, 1) == pytest.approx(100)

    def test_zero_start(self):
        assert cagr(0, 100, 5) is None

    def test_zero_years(self):
        assert cagr(100, 120, 0) is None

    def test_missing_values(self):
        assert cagr(None, 100, 3) is None
        assert cagr(100, None, 3) is None

    def test_sign_flip_with_fractional_root_is_none(self):
        assert cagr(100, -50, 3) is None

    def test_three_year(self):
        assert cagr(90, 120, 3) == pytest.approx(((120 / 90) ** (1 / 3) - 1) * 100)


def test_margin():
    assert margin(25, 100) == 25.0
    assert margin(25, 0) is None
    assert margin(None, 100) is None
    assert margin(25, None) is None


def test_returns():
    assert roe(12, 60) == pytest.approx(20.0)
    assert roa(12, 400) == pytest.approx(3.0)
    assert roe(12, 0) is None
    assert roa(None, 400) is None


def test_asset_turnover_requires_positive_assets():
    assert asset_turnover(120, 400) == pytest.approx(0.3)
    assert asset_turnover(120, 0) is None
    assert asset_turnover(120, -10) is None
    assert asset_turnover(None, 400) is None


def test_working_capital_efficiency():
    assert working_capital_efficiency(120, 150, 90) == pytest.approx(2.0)
    assert working_capital_efficiency(120, 90, 90) is None
    assert working_capital_efficiency(120, None, 90) is None
    # Negative working capital is still a defined ratio
    assert working_capital_efficiency(120, 90, 150) == pytest.approx(-2.0)


def test_eps():
    assert eps(12, 4) == 3.0
    assert eps(12, 0) is None
    assert eps(None, 4) is None


def test_percent_of_base():
    assert percent_of_revenue(30, 120) == pytest.approx(25.0)
    assert percent_of_assets(100, 400) == pytest.approx(25.0)
    assert percent_of_operating_cash_flow(-10, 50) == pytest.approx(-20.0)
    assert percent_of_revenue(30, 0) is None
    assert percent_of_assets(None, 400) is None
