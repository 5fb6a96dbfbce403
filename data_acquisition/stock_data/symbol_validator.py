"""
Symbol Validator - syntactic gate for ticker symbols.
"""

import re
from typing import Optional

from data_acquisition.errors import InvalidSymbolError

_SYMBOL_PATTERN = re.compile(r'[A-Z]{1,5}')


def is_valid_symbol(symbol: Optional[str]) -> bool:
    """
    1-5 Latin letters after uppercasing.

    Examples:
        >>> is_valid_symbol('aapl')
        True
        >>> is_valid_symbol('BRK.B')
        False
    """
    if not isinstance(symbol, str):
        return False
    return _SYMBOL_PATTERN.fullmatch(symbol.upper()) is not None


def normalize_symbol(symbol: Optional[str]) -> str:
    """
    Validate and uppercase a symbol.

    Raises:
        InvalidSymbolError: if the symbol is not 1-5 letters
    """
    if not is_valid_symbol(symbol):
        raise InvalidSymbolError(f"Invalid ticker symbol: {symbol}", symbol=symbol)
    return symbol.upper()
