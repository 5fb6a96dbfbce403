"""
Forecast Model
One-period income statement projection and the implied share price.

Flow:
    default_inputs(income_statement, overview) -> ForecastInputs (user-editable)
    project(inputs) -> ForecastOutputs
    upside(implied_price, current_price) -> percent or None

Unlike the metric calculators, defaults here never propagate None: missing
statement values count as 0 and fallbacks come from FORECAST_DEFAULTS.
"""

from typing import Optional

from config.analysis_config import FORECAST_DEFAULTS
from fundamentals.financial_data.ratios import eps
from fundamentals.financial_data.series import latest_value
from utils.field_registry import PeriodType
from utils.logger import setup_logger
from utils.unified_schema import CompanyOverview, ForecastInputs, ForecastOutputs, IncomeStatement

logger = setup_logger('forecast_model')


def _latest(income_statement: IncomeStatement, field_name: str) -> float:
    return latest_value(income_statement, field_name, PeriodType.ANNUAL) or 0.0


def _percent_of_revenue(value: float, revenue: float) -> float:
    return value / revenue * 100 if revenue > 0 else 0.0


def default_inputs(income_statement: IncomeStatement, overview: Optional[CompanyOverview]) -> ForecastInputs:
    """
    Baseline assumptions from the latest annual report and the overview.

    - Margins: share of latest revenue (0 when revenue <= 0)
    - Tax rate: tax expense / pre-tax income, 25% when pre-tax income <= 0
    - P/E: overview P/E, then trailing, then forward, then 20
    - Shares: overview shares outstanding, then 1e9
    - Revenue growth: 0 (current snapshot)
    """
    revenue = _latest(income_statement, 'totalRevenue')
    gross_profit = _latest(income_statement, 'grossProfit')
    operating_income = _latest(income_statement, 'operatingIncome')
    net_income = _latest(income_statement, 'netIncome')
    income_before_tax = _latest(income_statement, 'incomeBeforeTax')
    income_tax_expense = _latest(income_statement, 'incomeTaxExpense')

    if income_before_tax > 0:
        tax_rate = income_tax_expense / income_before_tax * 100
    else:
        tax_rate = FORECAST_DEFAULTS["TAX_RATE"]

    pe_multiple = FORECAST_DEFAULTS["PE_MULTIPLE"]
    shares_outstanding = FORECAST_DEFAULTS["SHARES_OUTSTANDING"]
    if overview is not None:
        pe_multiple = overview.pe_ratio or overview.trailing_pe or overview.forward_pe or pe_multiple
        shares_outstanding = overview.shares_outstanding or shares_outstanding
    else:
        logger.warning(f"{income_statement.symbol}: No overview, using default P/E and share count")

    return ForecastInputs(
        revenue_growth=FORECAST_DEFAULTS["REVENUE_GROWTH"],
        gross_margin=_percent_of_revenue(gross_profit, revenue),
        operating_margin=_percent_of_revenue(operating_income, revenue),
        net_margin=_percent_of_revenue(net_income, revenue),
        tax_rate=tax_rate,
        pe_multiple=pe_multiple,
        shares_outstanding=shares_outstanding,
        base_revenue=revenue,
    )


def project(inputs: ForecastInputs) -> ForecastOutputs:
    """
    Project one period forward.

    Income before tax equals operating income (no other income/expense modelled).
    EPS is 0 when the share count is 0.
    """
    projected_revenue = inputs.base_revenue * (1 + inputs.revenue_growth / 100)

    projected_gross_profit = projected_revenue * inputs.gross_margin / 100
    projected_cogs = projected_revenue - projected_gross_profit

    projected_operating_income = projected_revenue * inputs.operating_margin / 100
    projected_income_before_tax = projected_operating_income

    projected_income_tax = projected_income_before_tax * inputs.tax_rate / 100
    projected_net_income = projected_income_before_tax - projected_income_tax

    projected_eps = eps(projected_net_income, inputs.shares_outstanding) or 0.0

    return ForecastOutputs(
        projected_revenue=projected_revenue,
        projected_cogs=projected_cogs,
        projected_gross_profit=projected_gross_profit,
        projected_operating_income=projected_operating_income,
        projected_income_before_tax=projected_income_before_tax,
        projected_income_tax=projected_income_tax,
        projected_net_income=projected_net_income,
        projected_eps=projected_eps,
        implied_price=projected_eps * inputs.pe_multiple,
    )


def upside(implied_price: float, current_price: Optional[float]) -> Optional[float]:
    """Upside (+) or downside (-) of the implied price versus the current price, in percent."""
    if current_price is None or current_price == 0:
        return None
    return (implied_price - current_price) / current_price * 100
