"""
Fundamentals calculators package.

Process statement data into financial metrics (Growth, Profitability, Efficiency, Valuation).
Basic Principle: Raw Data -> Calculation -> Logic/Formulas -> Metrics
"""

from .calculator_base import CalculatorBase, MetricWarning
from .growth import GrowthCalculator, GrowthMetrics
from .profitability import ProfitabilityCalculator, ProfitabilityMetrics
from .efficiency import EfficiencyCalculator, EfficiencyMetrics
from .valuation_ratios import ValuationMetrics, valuation_metrics
from .series import (
    build_series,
    free_cash_flow,
    trend_series,
    statement_rows,
    document_rows,
    latest_value,
    field_values_over_time,
    report_dates,
    sort_reports_by_date,
)

__all__ = [
    'CalculatorBase',
    'MetricWarning',
    'GrowthCalculator',
    'GrowthMetrics',
    'ProfitabilityCalculator',
    'ProfitabilityMetrics',
    'EfficiencyCalculator',
    'EfficiencyMetrics',
    'ValuationMetrics',
    'valuation_metrics',
    'build_series',
    'free_cash_flow',
    'trend_series',
    'statement_rows',
    'document_rows',
    'latest_value',
    'field_values_over_time',
    'report_dates',
    'sort_reports_by_date',
]
