"""
Common helper utilities for the application.
"""

import re
from datetime import datetime
from typing import Optional
import pandas as pd


def format_currency(value: Optional[float], decimals: int = 0) -> str:
    """
    Format a dollar amount with a magnitude suffix.

    Args:
        value: Amount in raw dollars
        decimals: Number of decimal places

    Returns:
        Formatted string (e.g., '$1B', '$2.5M') or 'N/A'
    """
    if value is None:
        return "N/A"

    if abs(value) >= 1e9:
        return f"${value / 1e9:.{decimals}f}B"
    elif abs(value) >= 1e6:
        return f"${value / 1e6:.{decimals}f}M"
    elif abs(value) >= 1e3:
        return f"${value / 1e3:.{decimals}f}K"
    return f"${value:.{decimals}f}"


def format_percentage(value: Optional[float], decimals: int = 2) -> str:
    """Format an already-percent value (12.345 -> '12.35%')."""
    if value is None:
        return "N/A"
    return f"{value:.{decimals}f}%"


def format_field_label(field_name: str) -> str:
    """
    Turn a provider field name into a display label.

    Examples:
        >>> format_field_label('totalRevenue')
        'Total Revenue'
        >>> format_field_label('cash_flow')
        'Cash Flow'
    """
    spaced = re.sub(r'([A-Z])', r' \1', field_name).replace('_', ' ').strip()
    return ' '.join(word[:1].upper() + word[1:] for word in spaced.split())


def parse_date(date_str: Optional[str]) -> Optional[datetime]:
    """
    Parse date string to datetime object.

    Args:
        date_str: Date string to parse (e.g., '2024-09-30' or '2024-09-30 16:00:00')

    Returns:
        Datetime object or None if parsing fails
    """
    if not date_str:
        return None

    try:
        parsed = pd.to_datetime(date_str)
    except (ValueError, TypeError):
        return None

    if pd.isna(parsed):
        return None
    # Offset-suffixed strings ("...Z") parse tz-aware; keep everything naive UTC
    if parsed.tzinfo is not None:
        parsed = parsed.tz_convert(None)
    return parsed.to_pydatetime()


def date_sort_key(date_str: Optional[str]) -> datetime:
    """Sort key for fiscal/trading dates; unparseable dates sort first."""
    return parse_date(date_str) or datetime.min


def to_naive_datetimes(values) -> pd.Series:
    """Parse a column of date strings; offsets are converted to naive UTC, failures to NaT."""
    # Element-wise so one format per column is not assumed
    return pd.to_datetime(pd.Series([parse_date(v) for v in values], dtype=object))
