"""
Shared fixtures: raw Alpha Vantage payload builders and a fake HTTP session.
"""

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from config.api_key_manager import CredentialPool
from data_acquisition.stock_data.key_rotation_client import KeyRotationClient
from data_acquisition.stock_data.normalizer import Normalizer


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(
        self,
        json_data: Any = None,
        status_code: int = 200,
        text: Optional[str] = None,
        reason: str = 'OK'
    ):
        self._json_data = json_data
        self.status_code = status_code
        self.reason = reason
        self.text = text if text is not None else ''

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_data is None:
            raise ValueError("No JSON object could be decoded")
        return self._json_data


def make_session(*responses) -> MagicMock:
    """Session whose get() returns (or raises) each item of `responses` in turn."""
    session = MagicMock()
    session.headers = {}
    session.get.side_effect = list(responses)
    return session


def make_client(session: MagicMock, *tokens: str) -> KeyRotationClient:
    return KeyRotationClient(
        CredentialPool(tuple(tokens)),
        base_url='https://example.test/query',
        timeout=5,
        session=session
    )


def called_tokens(session: MagicMock) -> List[str]:
    return [c.kwargs['params']['apikey'] for c in session.get.call_args_list]


def income_report(date: str, revenue: Optional[str], **extra) -> Dict[str, Any]:
    row = {
        'fiscalDateEnding': date,
        'reportedCurrency': 'USD',
        'totalRevenue': revenue,
    }
    row.update(extra)
    return row


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def session_factory():
    return make_session


@pytest.fixture
def client_factory():
    return make_client


@pytest.fixture
def tokens_called():
    return called_tokens


@pytest.fixture
def overview_payload() -> Dict[str, Any]:
    return {
        'Symbol': 'IBM',
        'Name': 'International Business Machines',
        'Description': 'IBM is an American multinational technology company.',
        'Sector': 'TECHNOLOGY',
        'Industry': 'COMPUTER & OFFICE EQUIPMENT',
        'MarketCapitalization': '175000000000',
        'PERatio': '22.5',
        'PriceToBookRatio': '7.1',
        'PriceToSalesRatioTTM': '2.8',
        'DividendYield': '0.035',
        'SharesOutstanding': '918000000',
        'ReturnOnEquityTTM': '0.32',
        'ReturnOnAssetsTTM': '0.045',
        'RevenueTTM': '62000000000',
        'GrossProfitTTM': '34000000000',
        'EBITDA': '14600000000',
        'EVToRevenue': '3.5',
        'EVToEBITDA': '15.2',
        'ForwardPE': '19.3',
        'TrailingPE': '22.5',
    }


@pytest.fixture
def income_payload() -> Dict[str, Any]:
    """Six annual reports, newest first, revenue 120..70."""
    revenues = ['120', '110', '100', '90', '80', '70']
    years = ['2024', '2023', '2022', '2021', '2020', '2019']
    return {
        'symbol': 'IBM',
        'annualReports': [
            income_report(
                f'{year}-12-31', revenue,
                grossProfit=str(int(revenue) // 2),
                operatingIncome=str(int(revenue) // 4),
                incomeBeforeTax=str(int(revenue) // 5),
                incomeTaxExpense=str(int(revenue) // 20),
                netIncome=str(int(revenue) // 10),
                eps='None',
                commonStockSharesOutstanding='abc',
                someNewProviderField='42',
            )
            for year, revenue in zip(years, revenues)
        ],
        'quarterlyReports': [
            income_report('2024-12-31', '32', netIncome='3'),
            income_report('2024-09-30', '30', netIncome='2'),
        ],
    }


@pytest.fixture
def balance_payload() -> Dict[str, Any]:
    return {
        'symbol': 'IBM',
        'annualReports': [
            {
                'fiscalDateEnding': '2024-12-31',
                'reportedCurrency': 'USD',
                'totalAssets': '400',
                'totalCurrentAssets': '150',
                'totalCurrentLiabilities': '90',
                'totalShareholderEquity': '60',
            },
        ],
        'quarterlyReports': [],
    }


@pytest.fixture
def cash_flow_payload() -> Dict[str, Any]:
    return {
        'symbol': 'IBM',
        'annualReports': [
            {'fiscalDateEnding': '2024-12-31', 'operatingCashflow': '50', 'capitalExpenditures': 'None'},
            {'fiscalDateEnding': '2022-12-31', 'operatingCashflow': '100', 'capitalExpenditures': '40'},
            {'fiscalDateEnding': '2023-12-31', 'operatingCashflow': 'None', 'capitalExpenditures': '10'},
        ],
        'quarterlyReports': [],
    }


@pytest.fixture
def daily_payload() -> Dict[str, Any]:
    return {
        'Meta Data': {'2. Symbol': 'IBM'},
        'Time Series (Daily)': {
            '2024-03-05': {
                '1. open': '101.0', '2. high': '103.0', '3. low': '100.0',
                '4. close': '102.0', '5. adjusted close': '101.5', '6. volume': '1200',
            },
            '2024-03-04': {
                '1. open': '99.0', '2. high': '101.0', '3. low': '98.0',
                '4. close': '100.0', '5. adjusted close': '99.5', '6. volume': '1000',
            },
        },
    }


@pytest.fixture
def intraday_payload() -> Dict[str, Any]:
    return {
        'Meta Data': {'2. Symbol': 'IBM'},
        'Time Series (5min)': {
            '2024-03-05 16:00:00': {
                '1. open': '102.0', '2. high': '102.5', '3. low': '101.8',
                '4. close': '102.2', '5. volume': '300',
            },
            '2024-03-05 15:55:00': {
                '1. open': '101.9', '2. high': '102.1', '3. low': '101.7',
                '4. close': '102.0', '5. volume': '250',
            },
        },
    }


@pytest.fixture
def earnings_payload() -> Dict[str, Any]:
    return {
        'symbol': 'IBM',
        'annualEarnings': [
            {'fiscalDateEnding': '2024-12-31', 'reportedEPS': '10.33'},
        ],
        'quarterlyEarnings': [
            {
                'fiscalDateEnding': '2024-12-31',
                'reportedDate': '2025-01-29',
                'reportedEPS': '3.92',
                'estimatedEPS': '3.78',
                'surprise': '0.14',
                'surprisePercentage': '3.7037',
            },
        ],
    }


@pytest.fixture
def normalizer() -> Normalizer:
    return Normalizer('IBM')
