"""
Valuation Module
Forecast-based implied price from the latest annual income statement.
"""

from .forecast_model import default_inputs, project, upside

__all__ = ['default_inputs', 'project', 'upside']
