"""
Ratio Primitives - total, null-safe arithmetic for financial metrics.

Every function returns None (never raises, never NaN/Inf) when an input is None,
a denominator is zero, or the result is not a finite number.
Percent results are in percent (12.5 = 12.5%).
"""

import math
from typing import Optional

from utils.numeric_utils import clean_numeric, safe_divide


def _percent_of(value: Optional[float], base: Optional[float]) -> Optional[float]:
    ratio = safe_divide(value, base)
    if ratio is None:
        return None
    return clean_numeric(ratio * 100)


def yoy_growth(current: Optional[float], previous: Optional[float]) -> Optional[float]:
    """
    Year-over-Year growth percentage.

    Formula:
        YoY = (current - previous) / previous * 100

    Examples:
        >>> yoy_growth(110, 100)
        10.0
        >>> yoy_growth(5, 0) is None
        True
    """
    if current is None or previous is None or previous == 0:
        return None
    return clean_numeric((current - previous) / previous * 100)


def margin(numerator: Optional[float], base: Optional[float]) -> Optional[float]:
    """Margin percentage: numerator / base * 100."""
    return _percent_of(numerator, base)


def cagr(start: Optional[float], end: Optional[float], years: float) -> Optional[float]:
    """
    Compound Annual Growth Rate.

    Formula:
        CAGR = ((end / start) ^ (1 / years) - 1) * 100

    A negative end/start ratio with a fractional root has no real value and
    yields None.

    Examples:
        >>> cagr(100, 200, 1)
        100.0
        >>> cagr(0, 100, 5) is None
        True
    """
    if start is None or end is None or start == 0 or not years:
        return None

    try:
        growth = (math.pow(end / start, 1 / years) - 1) * 100
    except (ValueError, OverflowError):
        return None
    return clean_numeric(growth)


def roe(net_income: Optional[float], shareholder_equity: Optional[float]) -> Optional[float]:
    """Return on Equity (%) = net income / shareholder equity * 100."""
    return _percent_of(net_income, shareholder_equity)


def roa(net_income: Optional[float], total_assets: Optional[float]) -> Optional[float]:
    """Return on Assets (%) = net income / total assets * 100."""
    return _percent_of(net_income, total_assets)


def asset_turnover(revenue: Optional[float], total_assets: Optional[float]) -> Optional[float]:
    """Revenue / total assets, only defined for positive total assets."""
    if revenue is None or total_assets is None or total_assets <= 0:
        return None
    return clean_numeric(revenue / total_assets)


def working_capital_efficiency(
    revenue: Optional[float],
    current_assets: Optional[float],
    current_liabilities: Optional[float]
) -> Optional[float]:
    """Revenue / (current assets - current liabilities), None when working capital is zero."""
    if current_assets is None or current_liabilities is None:
        return None
    return safe_divide(revenue, current_assets - current_liabilities)


def eps(net_income: Optional[float], shares_outstanding: Optional[float]) -> Optional[float]:
    """Earnings per share = net income / shares outstanding."""
    return safe_divide(net_income, shares_outstanding)


def percent_of_revenue(value: Optional[float], revenue: Optional[float]) -> Optional[float]:
    # Common-size income statement
    return _percent_of(value, revenue)


def percent_of_assets(value: Optional[float], total_assets: Optional[float]) -> Optional[float]:
    # Common-size balance sheet
    return _percent_of(value, total_assets)


def percent_of_operating_cash_flow(
    value: Optional[float],
    operating_cashflow: Optional[float]
) -> Optional[float]:
    return _percent_of(value, operating_cashflow)
