import pytest
from pydantic import ValidationError

from utils.field_registry import PeriodType, get_unified_name
from utils.unified_schema import ForecastInputs, IncomeStatement, StatementReport


def test_report_value_resolves_provider_and_schema_names():
    report = StatementReport(fiscal_date_ending='2024-12-31', total_revenue=120.0)

    assert report.value('totalRevenue') == 120.0
    assert report.value('total_revenue') == 120.0
    assert report.value('grossProfit') is None


def test_report_value_reads_additional_fields():
    report = StatementReport(
        fiscal_date_ending='2024-12-31',
        additional_fields={'someNewProviderField': '42', 'brokenField': 'None'}
    )

    assert report.value('someNewProviderField') == 42.0
    assert report.value('brokenField') is None
    assert report.value('neverSent') is None


def test_records_are_immutable():
    report = StatementReport(fiscal_date_ending='2024-12-31', total_revenue=1.0)
    with pytest.raises(ValidationError):
        report.total_revenue = 2.0


def test_document_reports_by_period():
    annual = StatementReport(fiscal_date_ending='2024-12-31')
    quarterly = StatementReport(fiscal_date_ending='2024-09-30')
    statement = IncomeStatement(symbol='IBM', annual_reports=(annual,), quarterly_reports=(quarterly,))

    assert statement.reports() == (annual,)
    assert statement.reports('quarterly') == (quarterly,)
    assert statement.reports(PeriodType.QUARTERLY) == (quarterly,)


def test_forecast_inputs_are_editable():
    inputs = ForecastInputs(base_revenue=100.0)
    inputs.revenue_growth = 10
    assert inputs.revenue_growth == 10.0


def test_get_unified_name():
    assert get_unified_name('operatingCashflow') == 'operating_cashflow'
    assert get_unified_name('operating_cashflow') == 'operating_cashflow'
    assert get_unified_name('mystery') is None
