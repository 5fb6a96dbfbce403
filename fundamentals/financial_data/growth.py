"""
Growth Calculators.

Calculates:
1. Revenue YoY
2. Net Income YoY
3. EPS YoY
4. Revenue CAGR (3 and 5 periods)

Lookback is positional: reports are sorted newest-first and index 1/3/5 stands in
for "1/3/5 periods ago". A missing fiscal year silently widens the true interval.
"""

from typing import Optional, Union
from dataclasses import dataclass, field
from datetime import datetime

from config.analysis_config import GROWTH_LOOKBACK
from fundamentals.financial_data.calculator_base import CalculatorBase, MetricWarning
from fundamentals.financial_data.ratios import cagr, yoy_growth
from fundamentals.financial_data.series import sort_reports_by_date
from utils.field_registry import PeriodType
from utils.unified_schema import IncomeStatement, StatementReport


@dataclass
class GrowthMetrics:
    """Container for growth metrics (percent)."""
    revenue_yoy: Optional[float] = None
    net_income_yoy: Optional[float] = None
    eps_yoy: Optional[float] = None
    revenue_cagr_3y: Optional[float] = None
    revenue_cagr_5y: Optional[float] = None

    calculation_date: datetime = field(default_factory=datetime.now)
    warnings: list[MetricWarning] = field(default_factory=list)


def _value_at(reports, index: int, field_name: str) -> Optional[float]:
    if index >= len(reports):
        return None
    report: StatementReport = reports[index]
    return report.value(field_name)


class GrowthCalculator(CalculatorBase):
    """Calculates period-over-period growth from an income statement."""

    def calculate_revenue_cagr(self, reports, periods_back: int) -> Optional[float]:
        """
        Revenue CAGR from the report `periods_back` positions behind the latest.

        Args:
            reports: Income reports sorted newest-first
            periods_back: Position of the start report, also used as the year count

        Returns:
            CAGR in percent, or None when the start revenue is missing or zero
        """
        start = _value_at(reports, periods_back, 'totalRevenue')
        # A zero/absent start revenue skips CAGR entirely
        if not start:
            return None
        return cagr(start, _value_at(reports, 0, 'totalRevenue'), periods_back)

    def calculate_all(
        self,
        income_statement: IncomeStatement,
        period: Union[PeriodType, str] = PeriodType.ANNUAL
    ) -> GrowthMetrics:
        """
        Calculate all growth metrics from an income statement.

        Args:
            income_statement: IncomeStatement with annual/quarterly reports
            period: 'annual' or 'quarterly'

        Returns:
            GrowthMetrics with all calculated values
        """
        metrics = GrowthMetrics()
        reports = sort_reports_by_date(self.select_reports(income_statement, period))

        if not reports:
            self.warn(
                metrics.warnings, 'growth_general', 'data_missing',
                f"No {PeriodType(period).value} income statements"
            )
            return metrics

        five_back = GROWTH_LOOKBACK["FIVE_PERIODS_BACK"]
        if len(reports) <= five_back:
            msg = f"Insufficient {PeriodType(period).value} income statements: {len(reports)} (Preferred {five_back + 1})"
            self.logger.info(msg)
            metrics.warnings.append(MetricWarning(
                metric_name='growth_general',
                warning_type='data_insufficient',
                message=msg,
                severity='info'
            ))

        previous = GROWTH_LOOKBACK["PREVIOUS"]
        metrics.revenue_yoy = yoy_growth(
            _value_at(reports, 0, 'totalRevenue'),
            _value_at(reports, previous, 'totalRevenue')
        )
        metrics.net_income_yoy = yoy_growth(
            _value_at(reports, 0, 'netIncome'),
            _value_at(reports, previous, 'netIncome')
        )
        metrics.eps_yoy = yoy_growth(
            _value_at(reports, 0, 'eps'),
            _value_at(reports, previous, 'eps')
        )
        metrics.revenue_cagr_3y = self.calculate_revenue_cagr(reports, GROWTH_LOOKBACK["THREE_PERIODS_BACK"])
        metrics.revenue_cagr_5y = self.calculate_revenue_cagr(reports, five_back)

        return metrics
