"""
Utilities module for the ticker analysis system.

--- Quick Reference ---

1. Numeric handling (numeric_utils.py) ★ most used
   from utils.numeric_utils import parse_numeric, clean_numeric, safe_divide, safe_format
   - parse_numeric(raw)          Provider string -> float or None ("None"/""/garbage -> None)
   - clean_numeric(value)        NaN/Inf/None -> None
   - safe_divide(a, b)           Division with zero/None protection
   - safe_format(val, ".2f")     Invalid values -> "N/A"

2. Formatting and dates (helpers.py)
   from utils.helpers import format_currency, format_percentage, parse_date
   - format_currency(1.5e9, 1)   "$1.5B"
   - format_percentage(12.3)     "12.30%"
   - parse_date(date_str)        Date parsing (None on failure)

3. Logging (logger.py)
   from utils.logger import setup_logger
   - logger = setup_logger('module_name')
   - LoggingContext: per-run logging modes (standalone / orchestrated / silent)

--- Data architecture ---

4. unified_schema.py    Data models (CompanyOverview, StatementDocument, PricePoint, ...)
5. field_registry.py    Provider field name <-> unified field name mapping

=== Notes ===
- For arithmetic on statement values use safe_divide()/clean_numeric(), never bare division
- New statement fields go into field_registry.py; unified_schema.py picks them up
- Log through setup_logger(), never print() for debugging
"""

from .logger import setup_logger, LoggingContext, set_logging_mode, get_logging_mode
from .helpers import (
    format_currency,
    format_percentage,
    format_field_label,
    parse_date,
)
from .numeric_utils import parse_numeric, clean_numeric, safe_divide, safe_format

__all__ = [
    'setup_logger',
    'LoggingContext',
    'set_logging_mode',
    'get_logging_mode',
    'format_currency',
    'format_percentage',
    'format_field_label',
    'parse_date',
    'parse_numeric',
    'clean_numeric',
    'safe_divide',
    'safe_format',
]
