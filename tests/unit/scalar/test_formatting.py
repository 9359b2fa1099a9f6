"""Unit tests for locale-aware number formatting."""

import pytest

from datatypes.exceptions import InvalidArgumentError
from datatypes.scalar import (
    ImmutableFloat,
    ImmutableString,
    MutableInteger,
    MutableString,
    NumberFormatter,
    ReadonlyInteger,
    ReadonlyString,
)


class TestNumberFormatter:
    """Test the Babel-backed formatter."""

    def test_default_locale(self):
        """Test the default locale is en_US."""
        formatter = NumberFormatter()
        assert str(formatter.locale) == "en_US"
        assert formatter.format(1234567.891) == "1,234,567.891"

    def test_locale_from_environment(self, monkeypatch):
        """Test DATATYPES_LOCALE selects the default locale."""
        monkeypatch.setenv("DATATYPES_LOCALE", "de_DE")
        assert NumberFormatter().format(1234.5) == "1.234,5"

    def test_explicit_locale_and_pattern(self):
        """Test an explicit locale and pattern."""
        assert NumberFormatter("en_US", "#,##0.00").format(1234.5) == "1,234.50"

    def test_currency_and_percent(self):
        """Test currency and percent helpers."""
        formatter = NumberFormatter("en_US")
        assert formatter.format_currency(12.5, "USD") == "$12.50"
        assert formatter.format_percent(0.25) == "25%"

    def test_unknown_locale(self):
        """Test an unknown locale is rejected."""
        with pytest.raises(InvalidArgumentError, match="Unknown locale"):
            NumberFormatter("xx_YY")


class TestNumericFormat:
    """Test format() on numeric wrappers."""

    @pytest.mark.parametrize(
        "number,expected_type",
        [
            (ReadonlyInteger(1000), ReadonlyString),
            (MutableInteger(1000), MutableString),
        ],
    )
    def test_format_returns_matching_string_variant(self, number, expected_type):
        """Test the formatted string shares the number's variant."""
        result = number.format(NumberFormatter("en_US"))
        assert type(result) is expected_type
        assert result == "1,000"

    def test_format_with_default_formatter(self):
        """Test a default formatter is created when none is given."""
        result = ImmutableFloat(0.5).format()
        assert isinstance(result, ImmutableString)
        assert result == "0.5"
