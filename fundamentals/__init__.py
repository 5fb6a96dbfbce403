"""
Fundamentals module - Financial metrics and forecast.
Consumes the typed statement records produced by data_acquisition.
"""

from .financial_data import (
    GrowthCalculator,
    ProfitabilityCalculator,
    EfficiencyCalculator,
    GrowthMetrics,
    ProfitabilityMetrics,
    EfficiencyMetrics,
    ValuationMetrics,
    valuation_metrics,
)
from .valuation import default_inputs, project, upside

__all__ = [
    'GrowthCalculator',
    'ProfitabilityCalculator',
    'EfficiencyCalculator',
    'GrowthMetrics',
    'ProfitabilityMetrics',
    'EfficiencyMetrics',
    'ValuationMetrics',
    'valuation_metrics',
    'default_inputs',
    'project',
    'upside',
]
