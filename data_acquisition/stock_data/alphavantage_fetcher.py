"""
Alpha Vantage Data Fetcher - one method per provider resource.

API Functions:
- OVERVIEW: Company profile and key ratios
- INCOME_STATEMENT / BALANCE_SHEET / CASH_FLOW: Annual and quarterly statements
- TIME_SERIES_DAILY_ADJUSTED / TIME_SERIES_INTRADAY: Price series
- EARNINGS: Reported vs estimated EPS

Rate Limits (Free Tier):
- 25 requests/day
- 5 requests/minute
Quota is spread across the credential pool by KeyRotationClient.
"""

import threading
from typing import Any, Callable, Dict, Optional, Tuple

from config import constants
from data_acquisition.stock_data.base_fetcher import BaseFetcher
from data_acquisition.stock_data.key_rotation_client import KeyRotationClient
from data_acquisition.stock_data.normalizer import Normalizer
from utils.logger import setup_logger
from utils.unified_schema import (
    BalanceSheet,
    CashFlow,
    CompanyOverview,
    Earnings,
    IncomeStatement,
    PricePoint,
)

logger = setup_logger('alphavantage_fetcher')


class AlphaVantageFetcher(BaseFetcher):
    """Fetches and normalizes Alpha Vantage resources for one symbol."""

    def __init__(
        self,
        symbol: str,
        client: Optional[KeyRotationClient] = None,
        cancel_event: Optional[threading.Event] = None
    ):
        super().__init__(symbol)
        self.client = client or KeyRotationClient.from_settings()
        self.cancel_event = cancel_event
        self.normalizer = Normalizer(self.symbol)

    def _request(
        self,
        resource: str,
        parse: Callable[[Dict[str, Any]], Any],
        **extra_params
    ):
        function = constants.ALPHAVANTAGE_FUNCTIONS[resource]

        def build(token: str) -> Dict[str, Any]:
            params = {
                'function': function,
                'symbol': self.symbol,
                'apikey': token,
            }
            params.update(extra_params)
            return params

        return self.client.execute(
            build,
            parse,
            context=f"{function} {self.symbol}",
            symbol=self.symbol,
            cancel_event=self.cancel_event
        )

    def fetch_overview(self) -> CompanyOverview:
        return self._request('overview', self.normalizer.overview)

    def fetch_income_statement(self) -> IncomeStatement:
        return self._request('income_statement', self.normalizer.income_statement)

    def fetch_balance_sheet(self) -> BalanceSheet:
        return self._request('balance_sheet', self.normalizer.balance_sheet)

    def fetch_cash_flow(self) -> CashFlow:
        return self._request('cash_flow', self.normalizer.cash_flow)

    def fetch_daily_prices(self, outputsize: str = 'full') -> Tuple[PricePoint, ...]:
        return self._request(
            'daily_prices',
            self.normalizer.daily_prices,
            outputsize=outputsize,
            datatype='json'
        )

    def fetch_intraday_prices(self, interval: str = constants.ALPHAVANTAGE_DEFAULT_INTERVAL) -> Tuple[PricePoint, ...]:
        if interval not in constants.ALPHAVANTAGE_INTRADAY_INTERVALS:
            raise ValueError(
                f"Unsupported intraday interval '{interval}'. "
                f"Expected one of {', '.join(constants.ALPHAVANTAGE_INTRADAY_INTERVALS)}"
            )

        return self._request(
            'intraday_prices',
            lambda data: self.normalizer.intraday_prices(data, interval),
            interval=interval,
            datatype='json'
        )

    def fetch_earnings(self) -> Earnings:
        return self._request('earnings', self.normalizer.earnings)
