"""
Profitability Calculators.

Calculates:
1. Gross Margin
2. Operating Margin
3. Net Margin
4. ROE / ROA (when a balance sheet is supplied)

Only the latest report of the selected period is used.
"""

from typing import Optional, Union
from dataclasses import dataclass, field
from datetime import datetime

from fundamentals.financial_data.calculator_base import CalculatorBase, MetricWarning
from fundamentals.financial_data.ratios import margin, roa, roe
from utils.field_registry import PeriodType
from utils.unified_schema import BalanceSheet, IncomeStatement


@dataclass
class ProfitabilityMetrics:
    """Container for profitability metrics (percent)."""
    gross_margin: Optional[float] = None
    operating_margin: Optional[float] = None
    net_margin: Optional[float] = None
    roe: Optional[float] = None
    roa: Optional[float] = None

    # Metadata
    calculation_date: datetime = field(default_factory=datetime.now)
    warnings: list[MetricWarning] = field(default_factory=list)


class ProfitabilityCalculator(CalculatorBase):
    """Calculates margin and return metrics."""

    def calculate_all(
        self,
        income_statement: IncomeStatement,
        balance_sheet: Optional[BalanceSheet] = None,
        period: Union[PeriodType, str] = PeriodType.ANNUAL
    ) -> ProfitabilityMetrics:
        metrics = ProfitabilityMetrics()

        latest = self.latest_report(income_statement, period)
        if latest is None:
            self.warn(metrics.warnings, 'profitability', 'data_missing', 'No income statement reports')
            return metrics

        revenue = latest.total_revenue
        net_income = latest.net_income

        metrics.gross_margin = margin(latest.gross_profit, revenue)
        metrics.operating_margin = margin(latest.operating_income, revenue)
        metrics.net_margin = margin(net_income, revenue)

        if balance_sheet is None:
            return metrics

        latest_balance = self.latest_report(balance_sheet, period)
        if latest_balance is None:
            self.warn(
                metrics.warnings, 'roe_roa', 'data_missing',
                'No balance sheet reports, ROE/ROA skipped', 'info'
            )
            return metrics

        metrics.roe = roe(net_income, latest_balance.total_shareholder_equity)
        metrics.roa = roa(net_income, latest_balance.total_assets)

        return metrics
