import pytest

from utils.numeric_utils import clean_numeric, parse_numeric, safe_divide, safe_format


class TestParseNumeric:

    @pytest.mark.parametrize("raw", [None, "", "None", "n/a", "-", "12abc", "nan", "inf", "-Infinity"])
    def test_unusable_input_is_none(self, raw):
        assert parse_numeric(raw) is None

    @pytest.mark.parametrize("raw, expected", [
        ("42", 42.0),
        ("-12.5", -12.5),
        ("0", 0.0),
        ("0.035", 0.035),
        ("1.5e3", 1500.0),
    ])
    def test_numeric_strings(self, raw, expected):
        assert parse_numeric(raw) == expected

    def test_idempotent_on_none(self):
        assert parse_numeric(parse_numeric("None")) is None

    def test_zero_is_not_none(self):
        # Zero is a real value, distinct from "unknown"
        assert parse_numeric("0") == 0.0
        assert parse_numeric("0") is not None


def test_clean_numeric_filters_non_finite():
    assert clean_numeric(float('nan')) is None
    assert clean_numeric(float('inf')) is None
    assert clean_numeric("3.5") == 3.5
    assert clean_numeric(None) is None


def test_safe_divide():
    assert safe_divide(10, 4) == 2.5
    assert safe_divide(10, 0) is None
    assert safe_divide(None, 2) is None
    assert safe_divide(1, None, default=0.0) == 0.0


def test_safe_format():
    assert safe_format(1234.5, ",.0f") == "1,234"
    assert safe_format(None) == "N/A"
    assert safe_format(float('nan')) == "N/A"
