"""
Efficiency Calculators.

Calculates:
1. Asset Turnover = Revenue / Total Assets
2. Working Capital Efficiency = Revenue / (Current Assets - Current Liabilities)
"""

from typing import Optional, Union
from dataclasses import dataclass, field
from datetime import datetime

from fundamentals.financial_data.calculator_base import CalculatorBase, MetricWarning
from fundamentals.financial_data.ratios import asset_turnover, working_capital_efficiency
from utils.field_registry import PeriodType
from utils.unified_schema import BalanceSheet, IncomeStatement


@dataclass
class EfficiencyMetrics:
    """Container for efficiency metrics (times, not percent)."""
    asset_turnover: Optional[float] = None
    working_capital_efficiency: Optional[float] = None

    calculation_date: datetime = field(default_factory=datetime.now)
    warnings: list[MetricWarning] = field(default_factory=list)


class EfficiencyCalculator(CalculatorBase):
    """Calculates asset and working capital efficiency from the latest reports."""

    def calculate_all(
        self,
        income_statement: IncomeStatement,
        balance_sheet: BalanceSheet,
        period: Union[PeriodType, str] = PeriodType.ANNUAL
    ) -> EfficiencyMetrics:
        metrics = EfficiencyMetrics()

        latest_income = self.latest_report(income_statement, period)
        latest_balance = self.latest_report(balance_sheet, period)

        if latest_income is None or latest_balance is None:
            self.warn(
                metrics.warnings, 'efficiency', 'data_missing',
                'Need both income statement and balance sheet reports'
            )
            return metrics

        revenue = latest_income.total_revenue

        metrics.asset_turnover = asset_turnover(revenue, latest_balance.total_assets)
        metrics.working_capital_efficiency = working_capital_efficiency(
            revenue,
            latest_balance.total_current_assets,
            latest_balance.total_current_liabilities
        )

        return metrics
