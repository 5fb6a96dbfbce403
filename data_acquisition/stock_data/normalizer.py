"""
Normalizer - maps classified Alpha Vantage payloads into unified_schema records.

Rules shared by every resource:
- every numeric string goes through parse_numeric()
- missing report/earnings collections become empty tuples, never None
- a payload with no identifying symbol/name AND no data rows is an EmptyResultError
"""

from typing import Any, Dict, List, Optional, Tuple, Type

from config import constants
from data_acquisition.errors import EmptyResultError
from utils.field_registry import PROVIDER_TO_UNIFIED
from utils.helpers import date_sort_key
from utils.logger import setup_logger
from utils.numeric_utils import parse_numeric
from utils.unified_schema import (
    AnnualEarning,
    BalanceSheet,
    CashFlow,
    CompanyOverview,
    Earnings,
    IncomeStatement,
    PricePoint,
    QuarterlyEarning,
    StatementDocument,
    StatementReport,
)

logger = setup_logger('normalizer')

# Overview payload key -> CompanyOverview attribute (numeric)
OVERVIEW_NUMERIC_FIELDS = {
    'market_cap': 'MarketCapitalization',
    'pe_ratio': 'PERatio',
    'price_to_book': 'PriceToBookRatio',
    'price_to_sales': 'PriceToSalesRatioTTM',
    'dividend_yield': 'DividendYield',
    'shares_outstanding': 'SharesOutstanding',
    'roe': 'ReturnOnEquityTTM',
    'roa': 'ReturnOnAssetsTTM',
    'revenue_ttm': 'RevenueTTM',
    'gross_profit_ttm': 'GrossProfitTTM',
    'ebitda': 'EBITDA',
    'ev_to_ebitda': 'EVToEBITDA',
    'forward_pe': 'ForwardPE',
    'trailing_pe': 'TrailingPE',
}

_REPORT_META_KEYS = ('fiscalDateEnding', 'reportedCurrency')


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


class Normalizer:
    """Per-symbol payload normalizer. Stateless apart from the requested symbol."""

    def __init__(self, symbol: str):
        self.symbol = symbol.upper()

    # ------------------------------------------------------------------
    # Overview
    # ------------------------------------------------------------------

    def overview(self, data: Dict[str, Any]) -> CompanyOverview:
        if not data.get('Symbol') and not data.get('Name') and not data:
            raise EmptyResultError(
                f"No data returned for symbol {self.symbol}. "
                "The symbol may be invalid or data may not be available.",
                symbol=self.symbol, context='overview'
            )

        numeric = {attr: parse_numeric(data.get(key)) for attr, key in OVERVIEW_NUMERIC_FIELDS.items()}
        # Some listings only publish EVToRevenue
        numeric['ev_to_sales'] = parse_numeric(data.get('EVToSales'))
        if numeric['ev_to_sales'] is None:
            numeric['ev_to_sales'] = parse_numeric(data.get('EVToRevenue'))

        return CompanyOverview(
            symbol=data.get('Symbol') or self.symbol,
            name=data.get('Name') or '',
            description=data.get('Description') or '',
            sector=data.get('Sector') or '',
            industry=data.get('Industry') or '',
            **numeric
        )

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    @staticmethod
    def statement_report(row: Dict[str, Any]) -> StatementReport:
        """Split one provider row into typed known line items and raw extras."""
        known = {}
        additional = {}
        for key, raw in row.items():
            if key in _REPORT_META_KEYS:
                continue
            unified = PROVIDER_TO_UNIFIED.get(key)
            if unified is not None:
                known[unified] = parse_numeric(raw)
            else:
                additional[key] = None if raw is None else str(raw)

        return StatementReport(
            fiscal_date_ending=str(row.get('fiscalDateEnding') or ''),
            reported_currency=row.get('reportedCurrency'),
            additional_fields=additional,
            **known
        )

    def _statement(self, data: Dict[str, Any], model: Type[StatementDocument], label: str) -> StatementDocument:
        annual = _as_list(data.get('annualReports'))
        quarterly = _as_list(data.get('quarterlyReports'))

        if not data.get('symbol') and not annual and not quarterly:
            raise EmptyResultError(
                f"No data returned for {label} of {self.symbol}. "
                "The symbol may be invalid or data may not be available.",
                symbol=self.symbol, context=label
            )

        logger.info(f"Normalized {label} for {self.symbol}: {len(annual)} annual, {len(quarterly)} quarterly")

        return model(
            symbol=data.get('symbol') or self.symbol,
            annual_reports=tuple(self.statement_report(r) for r in annual if isinstance(r, dict)),
            quarterly_reports=tuple(self.statement_report(r) for r in quarterly if isinstance(r, dict)),
        )

    def income_statement(self, data: Dict[str, Any]) -> IncomeStatement:
        return self._statement(data, IncomeStatement, 'income statement')

    def balance_sheet(self, data: Dict[str, Any]) -> BalanceSheet:
        return self._statement(data, BalanceSheet, 'balance sheet')

    def cash_flow(self, data: Dict[str, Any]) -> CashFlow:
        return self._statement(data, CashFlow, 'cash flow')

    # ------------------------------------------------------------------
    # Prices
    # ------------------------------------------------------------------

    @staticmethod
    def _volume(values: Dict[str, Any]) -> Optional[int]:
        for key in constants.PRICE_VOLUME_KEYS:
            parsed = parse_numeric(values.get(key))
            if parsed is not None:
                return int(parsed)
        return None

    @classmethod
    def price_point(cls, date: str, values: Dict[str, Any]) -> PricePoint:
        close = parse_numeric(values.get(constants.PRICE_CLOSE_KEY))
        adjusted_close = parse_numeric(values.get(constants.PRICE_ADJUSTED_CLOSE_KEY))

        return PricePoint(
            date=date,
            open=parse_numeric(values.get(constants.PRICE_OPEN_KEY)),
            high=parse_numeric(values.get(constants.PRICE_HIGH_KEY)),
            low=parse_numeric(values.get(constants.PRICE_LOW_KEY)),
            close=close,
            adjusted_close=adjusted_close if adjusted_close is not None else close,
            volume=cls._volume(values),
        )

    def prices(self, data: Dict[str, Any], series_key: str) -> Tuple[PricePoint, ...]:
        """Build an ascending-by-date price series from a date-keyed mapping."""
        series = data.get(series_key)

        if not isinstance(series, dict) or not series:
            raise EmptyResultError(
                f"No time series data available for {self.symbol} ({series_key})",
                symbol=self.symbol, context=series_key
            )

        points = [
            self.price_point(date, values)
            for date, values in series.items()
            if isinstance(values, dict)
        ]
        return tuple(sorted(points, key=lambda p: date_sort_key(p.date)))

    def daily_prices(self, data: Dict[str, Any]) -> Tuple[PricePoint, ...]:
        return self.prices(data, constants.DAILY_SERIES_KEY)

    def intraday_prices(self, data: Dict[str, Any], interval: str) -> Tuple[PricePoint, ...]:
        return self.prices(data, constants.INTRADAY_SERIES_KEY.format(interval=interval))

    # ------------------------------------------------------------------
    # Earnings
    # ------------------------------------------------------------------

    def earnings(self, data: Dict[str, Any]) -> Earnings:
        annual = [r for r in _as_list(data.get('annualEarnings')) if isinstance(r, dict)]
        quarterly = [r for r in _as_list(data.get('quarterlyEarnings')) if isinstance(r, dict)]

        if not data.get('symbol') and not annual and not quarterly:
            raise EmptyResultError(
                f"No earnings data returned for {self.symbol}. "
                "The symbol may be invalid or data may not be available.",
                symbol=self.symbol, context='earnings'
            )

        return Earnings(
            symbol=data.get('symbol') or self.symbol,
            annual_earnings=tuple(
                AnnualEarning(
                    fiscal_date_ending=str(r.get('fiscalDateEnding') or ''),
                    reported_eps=parse_numeric(r.get('reportedEPS')),
                )
                for r in annual
            ),
            quarterly_earnings=tuple(
                QuarterlyEarning(
                    fiscal_date_ending=str(r.get('fiscalDateEnding') or ''),
                    reported_date=r.get('reportedDate'),
                    reported_eps=parse_numeric(r.get('reportedEPS')),
                    estimated_eps=parse_numeric(r.get('estimatedEPS')),
                    surprise=parse_numeric(r.get('surprise')),
                    surprise_percentage=parse_numeric(r.get('surprisePercentage')),
                )
                for r in quarterly
            ),
        )
