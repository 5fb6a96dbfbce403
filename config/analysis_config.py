"""
Analysis Configuration
Centralized configuration for metric lookbacks, forecast fallbacks and chart ranges.
"""

from typing import Dict, Optional

# --- Growth Lookback (positional) ---
# Index into reports sorted newest-first. Assumes one report per period with no gaps.
GROWTH_LOOKBACK = {
    "PREVIOUS": 1,
    "THREE_PERIODS_BACK": 3,
    "FIVE_PERIODS_BACK": 5,
}

# --- Forecast Fallbacks ---
# Used in forecast_model.py when the latest statement/overview lacks a value
FORECAST_DEFAULTS = {
    "PE_MULTIPLE": 20.0,
    "SHARES_OUTSTANDING": 1e9,
    "TAX_RATE": 25.0,           # percent
    "REVENUE_GROWTH": 0.0,      # percent, current-snapshot baseline
}

# --- Price Chart Ranges ---
# Days of history kept per range; None = no cutoff
PRICE_TIME_RANGES: Dict[str, Optional[int]] = {
    '1D': 1,
    '5D': 5,
    '1M': 30,
    '6M': 180,
    '1Y': 365,
    '5Y': 1825,
    'Max': None,
}
