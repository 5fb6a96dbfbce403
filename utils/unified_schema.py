"""
Unified Data Schema - Typed records for everything fetched from the provider.
===========================================================================

Unit Conventions
----------------
- **Monetary Values** (revenue, net_income, debt, etc.): raw reporting-currency value
  (NOT in millions). $1.5 billion = 1_500_000_000.0
- **Ratios from the overview** (P/E, P/B, EV/EBITDA): pure ratio, as reported.
- **Forecast assumptions**: percentages (15% = 15.0, not 0.15).

Null Semantics
--------------
Every provider numeric is Optional[float]. None means "unknown" and is never
coerced to 0 at this layer.

Lifecycle
---------
Provider records are frozen snapshots, rebuilt on every fetch. Report collections
are tuples so normalized statements cannot be mutated downstream. ForecastInputs is
the only user-editable model.
"""

from typing import ClassVar, Dict, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field

from utils.field_registry import PeriodType, StatementType, get_unified_name
from utils.numeric_utils import parse_numeric


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)


# =============================================================================
# COMPANY OVERVIEW
# =============================================================================

class CompanyOverview(_Snapshot):
    """Company profile plus TTM ratios and valuations."""
    symbol: str
    name: str = ''
    description: str = ''
    sector: str = ''
    industry: str = ''

    market_cap: Optional[float] = Field(None, description="Market capitalization")
    pe_ratio: Optional[float] = Field(None, description="Trailing P/E as reported (PERatio)")
    price_to_book: Optional[float] = Field(None, description="Price to book")
    price_to_sales: Optional[float] = Field(None, description="Price to sales (TTM)")
    dividend_yield: Optional[float] = Field(None, description="Dividend yield (decimal)")
    shares_outstanding: Optional[float] = Field(None, description="Shares outstanding")
    roe: Optional[float] = Field(None, description="Return on equity (TTM)")
    roa: Optional[float] = Field(None, description="Return on assets (TTM)")
    revenue_ttm: Optional[float] = Field(None, description="Revenue (TTM)")
    gross_profit_ttm: Optional[float] = Field(None, description="Gross profit (TTM)")
    ebitda: Optional[float] = Field(None, description="EBITDA")
    ev_to_sales: Optional[float] = Field(None, description="Enterprise value / sales")
    ev_to_ebitda: Optional[float] = Field(None, description="Enterprise value / EBITDA")
    forward_pe: Optional[float] = Field(None, description="Forward P/E")
    trailing_pe: Optional[float] = Field(None, description="Trailing P/E")


# =============================================================================
# FINANCIAL STATEMENTS
# =============================================================================

class StatementReport(_Snapshot):
    """
    One fiscal-period row of an income statement, balance sheet or cash flow.

    Known line items (see utils.field_registry) are typed attributes; every other
    provider key is kept verbatim in additional_fields.
    """
    fiscal_date_ending: str
    reported_currency: Optional[str] = None

    # Income statement
    gross_profit: Optional[float] = None
    total_revenue: Optional[float] = None
    cost_of_revenue: Optional[float] = None
    cost_of_goods_and_services_sold: Optional[float] = None
    operating_income: Optional[float] = None
    selling_general_and_administrative: Optional[float] = None
    research_and_development: Optional[float] = None
    operating_expenses: Optional[float] = None
    interest_expense: Optional[float] = None
    depreciation_and_amortization: Optional[float] = None
    income_before_tax: Optional[float] = None
    income_tax_expense: Optional[float] = None
    net_income_from_continuing_operations: Optional[float] = None
    ebit: Optional[float] = None
    ebitda: Optional[float] = None
    net_income: Optional[float] = None
    eps: Optional[float] = None
    shares_outstanding: Optional[float] = None

    # Balance sheet
    total_assets: Optional[float] = None
    total_current_assets: Optional[float] = None
    cash_and_cash_equivalents_at_carrying_value: Optional[float] = None
    inventory: Optional[float] = None
    current_net_receivables: Optional[float] = None
    total_non_current_assets: Optional[float] = None
    short_term_investments: Optional[float] = None
    long_term_investments: Optional[float] = None
    total_liabilities: Optional[float] = None
    total_current_liabilities: Optional[float] = None
    total_non_current_liabilities: Optional[float] = None
    short_long_term_debt_total: Optional[float] = None
    total_debt: Optional[float] = None
    total_shareholder_equity: Optional[float] = None
    retained_earnings: Optional[float] = None
    common_stock_shares_outstanding: Optional[float] = None

    # Cash flow
    operating_cashflow: Optional[float] = None
    capital_expenditures: Optional[float] = None
    free_cash_flow: Optional[float] = None
    cashflow_from_investment: Optional[float] = None
    cashflow_from_financing: Optional[float] = None
    dividend_payout: Optional[float] = None
    payments_for_repurchase_of_common_stock: Optional[float] = None
    net_cashflow: Optional[float] = None
    change_in_cash_and_cash_equivalents: Optional[float] = None

    additional_fields: Dict[str, Optional[str]] = Field(default_factory=dict)

    def value(self, field_name: str) -> Optional[float]:
        """
        Numeric value of a line item by provider key ('totalRevenue') or attribute
        name ('total_revenue'). Unknown keys are parsed from additional_fields.
        """
        unified = get_unified_name(field_name)
        if unified is not None:
            return getattr(self, unified)
        return parse_numeric(self.additional_fields.get(field_name))


# Annual and quarterly rows share shape and semantics
AnnualReport = StatementReport
QuarterlyReport = StatementReport


class StatementDocument(_Snapshot):
    """{symbol, annual_reports, quarterly_reports} for one statement family."""
    statement_type: ClassVar[StatementType]

    symbol: str
    annual_reports: Tuple[StatementReport, ...] = ()
    quarterly_reports: Tuple[StatementReport, ...] = ()

    def reports(self, period: Union[PeriodType, str] = PeriodType.ANNUAL) -> Tuple[StatementReport, ...]:
        """Reports for the given period type, in provider order."""
        if PeriodType(period) is PeriodType.QUARTERLY:
            return self.quarterly_reports
        return self.annual_reports


class IncomeStatement(StatementDocument):
    statement_type: ClassVar[StatementType] = StatementType.INCOME


class BalanceSheet(StatementDocument):
    statement_type: ClassVar[StatementType] = StatementType.BALANCE


class CashFlow(StatementDocument):
    statement_type: ClassVar[StatementType] = StatementType.CASHFLOW


# =============================================================================
# PRICES
# =============================================================================

class PricePoint(_Snapshot):
    """One trading session (or intraday bar)."""
    date: str
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    adjusted_close: Optional[float] = None
    volume: Optional[int] = None


# =============================================================================
# EARNINGS
# =============================================================================

class AnnualEarning(_Snapshot):
    fiscal_date_ending: str
    reported_eps: Optional[float] = None


class QuarterlyEarning(_Snapshot):
    fiscal_date_ending: str
    reported_date: Optional[str] = None
    reported_eps: Optional[float] = None
    estimated_eps: Optional[float] = None
    surprise: Optional[float] = None
    surprise_percentage: Optional[float] = None


class Earnings(_Snapshot):
    symbol: str
    annual_earnings: Tuple[AnnualEarning, ...] = ()
    quarterly_earnings: Tuple[QuarterlyEarning, ...] = ()


# =============================================================================
# SERIES / TABLE ROWS
# =============================================================================

class SeriesPoint(_Snapshot):
    date: str
    value: Optional[float] = None


class TrendPoint(SeriesPoint):
    """Series point with YoY % change versus the previous point."""
    yoy: Optional[float] = None


class StatementRow(_Snapshot):
    label: str
    value: Optional[float] = None
    date: str


# =============================================================================
# FORECAST
# =============================================================================

class ForecastInputs(BaseModel):
    """User-editable forecast assumptions. Percent fields are in percent (25.0 = 25%)."""
    model_config = ConfigDict(validate_assignment=True)

    revenue_growth: float = 0.0
    gross_margin: float = 0.0
    operating_margin: float = 0.0
    net_margin: float = 0.0
    tax_rate: float = 0.0
    pe_multiple: float = 0.0
    shares_outstanding: float = 0.0
    base_revenue: float = 0.0


class ForecastOutputs(_Snapshot):
    """Projected one-period income statement. Pure function of ForecastInputs."""
    projected_revenue: float
    projected_cogs: float
    projected_gross_profit: float
    projected_operating_income: float
    projected_income_before_tax: float
    projected_income_tax: float
    projected_net_income: float
    projected_eps: float
    implied_price: float


# =============================================================================
# AGGREGATE
# =============================================================================

class StockData(_Snapshot):
    """Overview plus the three statements for one symbol."""
    symbol: str
    overview: Optional[CompanyOverview] = None
    income_statement: Optional[IncomeStatement] = None
    balance_sheet: Optional[BalanceSheet] = None
    cash_flow: Optional[CashFlow] = None
