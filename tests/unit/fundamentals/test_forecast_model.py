import pytest

from fundamentals.valuation.forecast_model import default_inputs, project, upside
from utils.unified_schema import CompanyOverview, ForecastInputs, IncomeStatement, StatementReport


@pytest.fixture
def income_statement(normalizer, income_payload):
    return normalizer.income_statement(income_payload)


class TestDefaultInputs:

    def test_from_latest_annual_report(self, income_statement, normalizer, overview_payload):
        inputs = default_inputs(income_statement, normalizer.overview(overview_payload))

        assert inputs.base_revenue == 120.0
        assert inputs.revenue_growth == 0
        assert inputs.gross_margin == pytest.approx(50.0)
        assert inputs.operating_margin == pytest.approx(25.0)
        assert inputs.net_margin == pytest.approx(10.0)
        assert inputs.tax_rate == pytest.approx(25.0)
        assert inputs.pe_multiple == 22.5
        assert inputs.shares_outstanding == 918_000_000

    def test_fallbacks(self):
        statement = IncomeStatement(symbol='IBM', annual_reports=(
            StatementReport(fiscal_date_ending='2024-12-31', total_revenue=0, income_before_tax=-5),
        ))
        overview = CompanyOverview(symbol='IBM')

        inputs = default_inputs(statement, overview)

        assert inputs.gross_margin == 0
        assert inputs.net_margin == 0
        assert inputs.tax_rate == 25.0
        assert inputs.pe_multiple == 20.0
        assert inputs.shares_outstanding == 1e9

    def test_pe_falls_back_to_trailing_then_forward(self, income_statement):
        assert default_inputs(income_statement, CompanyOverview(symbol='IBM', trailing_pe=18)).pe_multiple == 18
        assert default_inputs(income_statement, CompanyOverview(symbol='IBM', forward_pe=15)).pe_multiple == 15

    def test_no_reports(self):
        inputs = default_inputs(IncomeStatement(symbol='IBM'), None)

        assert inputs.base_revenue == 0
        assert inputs.pe_multiple == 20.0


class TestProject:

    def test_zero_growth_keeps_base_revenue(self):
        inputs = ForecastInputs(base_revenue=123_456_789.01, gross_margin=40, operating_margin=20,
                                tax_rate=21, pe_multiple=15, shares_outstanding=1000)

        assert project(inputs).projected_revenue == inputs.base_revenue

    def test_projection(self):
        inputs = ForecastInputs(
            revenue_growth=10, gross_margin=50, operating_margin=20,
            tax_rate=25, pe_multiple=20, shares_outstanding=10, base_revenue=1000
        )
        outputs = project(inputs)

        assert outputs.projected_revenue == pytest.approx(1100)
        assert outputs.projected_gross_profit == pytest.approx(550)
        assert outputs.projected_cogs == pytest.approx(550)
        assert outputs.projected_operating_income == pytest.approx(220)
        assert outputs.projected_income_before_tax == pytest.approx(220)
        assert outputs.projected_income_tax == pytest.approx(55)
        assert outputs.projected_net_income == pytest.approx(165)
        assert outputs.projected_eps == pytest.approx(16.5)
        assert outputs.implied_price == pytest.approx(330)

    def test_zero_shares_gives_zero_eps(self):
        outputs = project(ForecastInputs(base_revenue=1000, operating_margin=20, pe_multiple=20))

        assert outputs.projected_eps == 0
        assert outputs.implied_price == 0


def test_upside():
    assert upside(120, 100) == pytest.approx(20.0)
    assert upside(80, 100) == pytest.approx(-20.0)
    assert upside(120, 0) is None
    assert upside(120, None) is None
