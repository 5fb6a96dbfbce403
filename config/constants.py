"""
Centralized constants for the application.
Stores API base URLs, timeouts, provider field names and other magic numbers.
"""

from typing import Dict, Tuple

# --- API Configuration ---

# Alpha Vantage
ALPHAVANTAGE_BASE_URL = "https://www.alphavantage.co/query"
ALPHAVANTAGE_TIMEOUT_SECONDS = 30

ALPHAVANTAGE_FUNCTIONS: Dict[str, str] = {
    'overview': 'OVERVIEW',
    'income_statement': 'INCOME_STATEMENT',
    'balance_sheet': 'BALANCE_SHEET',
    'cash_flow': 'CASH_FLOW',
    'daily_prices': 'TIME_SERIES_DAILY_ADJUSTED',
    'intraday_prices': 'TIME_SERIES_INTRADAY',
    'earnings': 'EARNINGS',
}

ALPHAVANTAGE_INTRADAY_INTERVALS: Tuple[str, ...] = ('1min', '5min', '15min', '30min', '60min')
ALPHAVANTAGE_DEFAULT_INTERVAL = '5min'

# --- Response Classification ---

# Explicit rejection of the request; never retried
ERROR_MESSAGE_FIELD = 'Error Message'

# Advisory notes, checked in this order
ADVISORY_FIELDS: Tuple[str, ...] = ('Note', 'Information')

# Case-insensitive substrings that mark an advisory as a quota/rate-limit notice
QUOTA_KEYWORDS: Tuple[str, ...] = ('frequency', 'call limit', 'api call')

# --- Price Series ---

DAILY_SERIES_KEY = 'Time Series (Daily)'
INTRADAY_SERIES_KEY = 'Time Series ({interval})'

PRICE_OPEN_KEY = '1. open'
PRICE_HIGH_KEY = '2. high'
PRICE_LOW_KEY = '3. low'
PRICE_CLOSE_KEY = '4. close'
PRICE_ADJUSTED_CLOSE_KEY = '5. adjusted close'
# Adjusted endpoints shift volume to slot 6; raw endpoints keep it in slot 5
PRICE_VOLUME_KEYS: Tuple[str, ...] = ('6. volume', '5. volume')

# --- Caching hints (seconds) ---
# Suggested lifetimes for callers; nothing in this package caches.
CACHE_TTL_SECONDS: Dict[str, int] = {
    'overview': 3600,
    'income_statement': 3600,
    'balance_sheet': 3600,
    'cash_flow': 3600,
    'earnings': 3600,
    'daily_prices': 900,
    'intraday_prices': 300,
}
