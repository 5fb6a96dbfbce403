"""
Base Fetcher - Common protocol for provider fetchers.

Provides:
1. Symbol validation before any request is built
2. The resource interface every fetcher implements
"""

from abc import ABC, abstractmethod
from typing import Tuple

from data_acquisition.stock_data.symbol_validator import normalize_symbol
from utils.unified_schema import (
    BalanceSheet,
    CashFlow,
    CompanyOverview,
    Earnings,
    IncomeStatement,
    PricePoint,
)


class BaseFetcher(ABC):
    """
    Abstract base class for provider fetchers.
    Construction fails fast with InvalidSymbolError, before any network call.
    """

    def __init__(self, symbol: str):
        self.symbol = normalize_symbol(symbol)

    @abstractmethod
    def fetch_overview(self) -> CompanyOverview:
        """Fetch company overview."""

    @abstractmethod
    def fetch_income_statement(self) -> IncomeStatement:
        """Fetch annual and quarterly income statements."""

    @abstractmethod
    def fetch_balance_sheet(self) -> BalanceSheet:
        """Fetch annual and quarterly balance sheets."""

    @abstractmethod
    def fetch_cash_flow(self) -> CashFlow:
        """Fetch annual and quarterly cash flow statements."""

    @abstractmethod
    def fetch_daily_prices(self) -> Tuple[PricePoint, ...]:
        """Fetch daily price history, ascending by date."""

    @abstractmethod
    def fetch_intraday_prices(self, interval: str) -> Tuple[PricePoint, ...]:
        """Fetch intraday bars, ascending by timestamp."""

    @abstractmethod
    def fetch_earnings(self) -> Earnings:
        """Fetch annual and quarterly earnings."""
