"""Locale-aware number formatting backed by Babel."""

from decimal import Decimal

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency, format_decimal, format_percent

from datatypes.config import get_config
from datatypes.exceptions import InvalidArgumentError


class NumberFormatter:
    """
    Formats numbers for a locale.

    Injected into the numeric wrappers' ``format()``; the default locale
    comes from ``DATATYPES_LOCALE``.
    """

    def __init__(self, locale: str | None = None, pattern: str | None = None) -> None:
        name = locale or get_config().locale
        try:
            self.locale = Locale.parse(name)
        except (UnknownLocaleError, ValueError) as e:
            raise InvalidArgumentError(f"Unknown locale '{name}'", {"locale": name}) from e
        self.pattern = pattern

    def format(self, number: int | float | Decimal) -> str:
        return format_decimal(number, format=self.pattern, locale=self.locale)

    def format_currency(self, number: int | float | Decimal, currency: str) -> str:
        return format_currency(number, currency, locale=self.locale)

    def format_percent(self, number: int | float | Decimal) -> str:
        return format_percent(number, locale=self.locale)

    def __repr__(self) -> str:
        return f"NumberFormatter(locale={str(self.locale)!r})"
