"""
Data Loader Module - Unified External Entry Point for Data Acquisition

One call per resource kind. Each call:
1. Validates the symbol (InvalidSymbolError, no network call).
2. Runs the provider request through the credential rotation client.
3. Returns a normalized, immutable record or raises one AcquisitionError.

Each resource carries a suggested cache lifetime (cache_ttl) for callers that cache;
this module holds no cache state.
"""

import threading
from typing import Optional, Tuple

from config import constants
from data_acquisition.stock_data.alphavantage_fetcher import AlphaVantageFetcher
from data_acquisition.stock_data.key_rotation_client import KeyRotationClient
from data_acquisition.stock_data.symbol_validator import normalize_symbol
from utils.logger import setup_logger
from utils.unified_schema import (
    BalanceSheet,
    CashFlow,
    CompanyOverview,
    Earnings,
    IncomeStatement,
    PricePoint,
    StockData,
)

logger = setup_logger('data_loader')


def cache_ttl(resource: str) -> int:
    """Suggested cache lifetime in seconds for a resource kind (e.g. 'daily_prices')."""
    return constants.CACHE_TTL_SECONDS[resource]


class StockDataLoader:
    """
    Stock Data Loader - Main entry point class for the Data Acquisition Layer.
    Shares one KeyRotationClient (and its HTTP session) across calls.
    """

    def __init__(
        self,
        client: Optional[KeyRotationClient] = None,
        cancel_event: Optional[threading.Event] = None
    ):
        """
        Args:
            client: Rotation client; built from settings on first use if omitted
            cancel_event: Optional event that aborts in-flight rotations when set
        """
        self._client = client
        self.cancel_event = cancel_event

    @property
    def client(self) -> KeyRotationClient:
        if self._client is None:
            self._client = KeyRotationClient.from_settings()
        return self._client

    def _fetcher(self, symbol: str) -> AlphaVantageFetcher:
        # Validate before the client (and its credentials) is touched
        symbol = normalize_symbol(symbol)
        return AlphaVantageFetcher(symbol, client=self.client, cancel_event=self.cancel_event)

    def get_overview(self, symbol: str) -> CompanyOverview:
        return self._fetcher(symbol).fetch_overview()

    def get_income_statement(self, symbol: str) -> IncomeStatement:
        return self._fetcher(symbol).fetch_income_statement()

    def get_balance_sheet(self, symbol: str) -> BalanceSheet:
        return self._fetcher(symbol).fetch_balance_sheet()

    def get_cash_flow(self, symbol: str) -> CashFlow:
        return self._fetcher(symbol).fetch_cash_flow()

    def get_daily_prices(self, symbol: str) -> Tuple[PricePoint, ...]:
        return self._fetcher(symbol).fetch_daily_prices()

    def get_intraday_prices(
        self,
        symbol: str,
        interval: str = constants.ALPHAVANTAGE_DEFAULT_INTERVAL
    ) -> Tuple[PricePoint, ...]:
        return self._fetcher(symbol).fetch_intraday_prices(interval)

    def get_earnings(self, symbol: str) -> Earnings:
        return self._fetcher(symbol).fetch_earnings()

    def load_stock_data(self, symbol: str) -> StockData:
        """
        Fetch overview and the three statements, one after another.

        Any failure aborts the bundle with that resource's AcquisitionError.
        """
        fetcher = self._fetcher(symbol)
        logger.info(f"Loading overview and statements for {fetcher.symbol}")

        return StockData(
            symbol=fetcher.symbol,
            overview=fetcher.fetch_overview(),
            income_statement=fetcher.fetch_income_statement(),
            balance_sheet=fetcher.fetch_balance_sheet(),
            cash_flow=fetcher.fetch_cash_flow(),
        )
