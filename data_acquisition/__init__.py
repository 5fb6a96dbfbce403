"""
Data Acquisition Module

Fetches stock data from Alpha Vantage through a rotating credential pool and
normalizes it into the unified schema.

Main Entry Point:
    - StockDataLoader: Unified data loader class

Main Data Models:
    - StockData: Overview plus the three financial statements
    - AcquisitionError: Base of every classified acquisition failure
"""

from .stock_data.initial_data_loader import StockDataLoader, cache_ttl
from .errors import (
    AcquisitionError,
    AcquisitionFailedError,
    AllKeysRateLimitedError,
    AllKeysSkippedError,
    ConfigurationError,
    EmptyResultError,
    InvalidSymbolError,
    ProviderError,
    RequestCancelledError,
    TransportError,
)
from utils.unified_schema import StockData

__all__ = [
    'StockDataLoader',
    'cache_ttl',
    'StockData',
    'AcquisitionError',
    'AcquisitionFailedError',
    'AllKeysRateLimitedError',
    'AllKeysSkippedError',
    'ConfigurationError',
    'EmptyResultError',
    'InvalidSymbolError',
    'ProviderError',
    'RequestCancelledError',
    'TransportError',
]
