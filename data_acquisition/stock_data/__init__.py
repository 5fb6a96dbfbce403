from .initial_data_loader import StockDataLoader
from .base_fetcher import BaseFetcher
from .alphavantage_fetcher import AlphaVantageFetcher
from .key_rotation_client import KeyRotationClient, RotationRun, RotationState
from .response_classifier import Classification, ResponseClassifier, ResponseKind
from .normalizer import Normalizer
from .symbol_validator import is_valid_symbol, normalize_symbol

__all__ = [
    'StockDataLoader',
    'BaseFetcher',
    'AlphaVantageFetcher',
    'KeyRotationClient',
    'RotationRun',
    'RotationState',
    'Classification',
    'ResponseClassifier',
    'ResponseKind',
    'Normalizer',
    'is_valid_symbol',
    'normalize_symbol',
]
