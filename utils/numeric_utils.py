"""
Numeric Utilities - Centralized numeric value handling.

Provides standardized functions for:
1. Parsing provider-supplied numeric strings ("None", "", garbage -> None)
2. Cleaning numeric values (handling NaN/Inf/None)
3. Safe division and formatting

Every provider numeric string goes through parse_numeric(). None always means
"unknown" and is kept distinct from zero.
"""

import math
from typing import Any, Optional

# Provider placeholder for a missing line item
NONE_SENTINEL = 'None'


def parse_numeric(raw: Optional[str]) -> Optional[float]:
    """
    Parse a provider numeric string. Never raises.

    Rules, in order: missing/empty -> None; "None" -> None; float parse; failure
    or non-finite result -> None.

    Examples:
        >>> parse_numeric("-12.5")
        -12.5
        >>> parse_numeric("None") is None
        True
        >>> parse_numeric("n/a") is None
        True
    """
    if raw is None or raw == '':
        return None
    if raw == NONE_SENTINEL:
        return None

    try:
        parsed = float(raw)
    except (ValueError, TypeError):
        return None

    # "nan"/"inf" parse in Python but are not usable numbers
    if math.isnan(parsed) or math.isinf(parsed):
        return None
    return parsed


def clean_numeric(value: Any) -> Optional[float]:
    """
    Clean a computed value, returning None for NaN/Inf/None.

    Use on the result of any arithmetic that can go non-finite.
    """
    if value is None:
        return None

    try:
        float_value = float(value)
        if math.isnan(float_value) or math.isinf(float_value):
            return None
        return float_value
    except (ValueError, TypeError):
        return None


def safe_divide(
    numerator: Optional[float],
    denominator: Optional[float],
    default: Optional[float] = None
) -> Optional[float]:
    """
    Safely perform division, handling None/NaN/zero denominators.

    Examples:
        >>> safe_divide(10, 2)
        5.0
        >>> safe_divide(10, 0) is None
        True
        >>> safe_divide(None, 5) is None
        True
    """
    clean_num = clean_numeric(numerator)
    clean_den = clean_numeric(denominator)

    if clean_num is None or clean_den is None or clean_den == 0:
        return default

    return clean_numeric(clean_num / clean_den)


def safe_format(
    value: Any,
    format_spec: str = ".2f",
    default: str = "N/A"
) -> str:
    """
    Safely format a numeric value for display/reporting.

    Examples:
        >>> safe_format(1234.5, ",.0f")
        '1,234'
        >>> safe_format(None)
        'N/A'
    """
    cleaned = clean_numeric(value)
    if cleaned is None:
        return default

    try:
        return format(cleaned, format_spec)
    except (ValueError, TypeError):
        return str(cleaned)
