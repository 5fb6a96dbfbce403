import pytest

from data_acquisition.errors import InvalidSymbolError
from data_acquisition.stock_data.symbol_validator import is_valid_symbol, normalize_symbol


@pytest.mark.parametrize("symbol", ["A", "IBM", "aapl", "GOOGL", "msFt"])
def test_valid_symbols(symbol):
    assert is_valid_symbol(symbol)


@pytest.mark.parametrize("symbol", ["", "TOOLONG", "BRK.B", "123", "AB1", " IBM", "IBM\n", None, 42])
def test_invalid_symbols(symbol):
    assert not is_valid_symbol(symbol)


def test_normalize_uppercases():
    assert normalize_symbol("ibm") == "IBM"


def test_normalize_rejects_invalid():
    with pytest.raises(InvalidSymbolError) as exc_info:
        normalize_symbol("BRK.B")

    assert exc_info.value.error_category == "invalid_symbol"
    assert "BRK.B" in exc_info.value.message
