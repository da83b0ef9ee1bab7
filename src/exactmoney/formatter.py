"""
formatter.py — Decimal strings in and out

Both directions only move the separator: the amount is already an int of
minor units, so formatting is digit-string surgery and parsing is exact.
Neither consults the host locale.

    DecimalMoneyFormatter(ISOCurrencies()).format(Money(-5, "EUR"))   -> "-0.05"
    DecimalMoneyParser(ISOCurrencies()).parse("1.05", Currency("EUR")) -> Money(105, 'EUR')
"""

from __future__ import annotations

from . import config
from .core import Money
from .currencies import Currencies
from .currency import Currency
from .errors import InvalidAmount
from .number import Number


class DecimalMoneyFormatter:
    """Formats Money as a plain decimal string (no symbol, no grouping)."""

    def __init__(self, currencies: Currencies):
        self._currencies = currencies

    def format(self, money: Money) -> str:
        digits = money.amount_string
        negative = digits.startswith("-")
        if negative:
            digits = digits[1:]

        subunit = self._currencies.subunit_for(money.currency)
        if subunit == 0:
            formatted = digits
        elif len(digits) > subunit:
            formatted = digits[:-subunit] + config.DECIMAL_SEPARATOR + digits[-subunit:]
        else:
            formatted = "0" + config.DECIMAL_SEPARATOR + digits.rjust(subunit, "0")

        return f"-{formatted}" if negative else formatted


class DecimalMoneyParser:
    """Parses a plain decimal string into Money of the given currency."""

    def __init__(self, currencies: Currencies):
        self._currencies = currencies

    def parse(self, text: str, currency: Currency | str) -> Money:
        """
        Raises:
            InvalidAmount: malformed text, or more fractional digits than
                the currency has (after dropping trailing zeros)
            UnknownCurrency: currency missing from the list
        """
        currency = Currency.of(currency)
        subunit = self._currencies.subunit_for(currency)
        parsed = Number.from_string(text)

        if len(parsed.fractional_part) > subunit:
            raise InvalidAmount(
                f"{text!r} has more than {subunit} fractional digits for {currency.code}"
            )

        minor = int(parsed.integer_part + parsed.fractional_part.ljust(subunit, "0"))
        return Money(-minor if parsed.negative else minor, currency)
