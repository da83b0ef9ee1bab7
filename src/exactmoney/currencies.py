"""
currencies.py — Currency metadata lookup

The arithmetic never needs to know how many decimals a currency has. This
module answers that question for the decimal formatter and parser only.

A currency list is anything that provides:

    contains(currency) -> bool
    subunit_for(currency) -> int        # UnknownCurrency if absent
    iteration over Currency values
"""

from __future__ import annotations
from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol
import logging

from .currency import Currency
from .errors import InvalidArgument, UnknownCurrency

logger = logging.getLogger(__name__)


class Currencies(Protocol):
    def contains(self, currency: Currency) -> bool: ...

    def subunit_for(self, currency: Currency) -> int: ...

    def __iter__(self) -> Iterator[Currency]: ...


class CurrencyList:
    """A custom list of currencies: code -> subunit digits."""

    def __init__(self, currencies: Mapping[str, int]):
        subunits: dict[str, int] = {}
        for code, subunit in currencies.items():
            if isinstance(subunit, bool) or not isinstance(subunit, int) or subunit < 0:
                raise InvalidArgument(
                    f"Subunit for {code!r} must be a non-negative int, got {subunit!r}"
                )
            subunits[Currency(code).code] = subunit
        self._currencies = subunits
        logger.debug(f"CurrencyList built with {len(subunits)} currencies")

    def contains(self, currency: Currency) -> bool:
        return currency.code in self._currencies

    def subunit_for(self, currency: Currency) -> int:
        if not self.contains(currency):
            raise UnknownCurrency(f"Cannot find currency {currency.code}")
        return self._currencies[currency.code]

    def __contains__(self, currency: object) -> bool:
        return isinstance(currency, Currency) and self.contains(currency)

    def __iter__(self) -> Iterator[Currency]:
        return (Currency(code) for code in self._currencies)

    def __len__(self) -> int:
        return len(self._currencies)


# ISO 4217 minor units for commonly traded currencies.
ISO_4217_SUBUNITS: dict[str, int] = {
    "AED": 2, "ARS": 2, "AUD": 2, "BHD": 3, "BRL": 2, "CAD": 2, "CHF": 2,
    "CLF": 4, "CLP": 0, "CNY": 2, "COP": 2, "CZK": 2, "DKK": 2, "EGP": 2,
    "EUR": 2, "GBP": 2, "HKD": 2, "HUF": 2, "IDR": 2, "ILS": 2, "INR": 2,
    "IQD": 3, "ISK": 0, "JOD": 3, "JPY": 0, "KRW": 0, "KWD": 3, "LYD": 3,
    "MXN": 2, "MYR": 2, "NOK": 2, "NZD": 2, "OMR": 3, "PHP": 2, "PLN": 2,
    "RON": 2, "SAR": 2, "SEK": 2, "SGD": 2, "THB": 2, "TND": 3, "TRY": 2,
    "TWD": 2, "UAH": 2, "UGX": 0, "USD": 2, "UYW": 4, "VND": 0, "XAF": 0,
    "XOF": 0, "ZAR": 2,
}


class ISOCurrencies(CurrencyList):
    """The built-in ISO 4217 table."""

    def __init__(self) -> None:
        super().__init__(ISO_4217_SUBUNITS)


class AggregateCurrencies:
    """Several currency lists searched in order; the first match wins."""

    def __init__(self, currencies: Iterable[Currencies]):
        self._lists = list(currencies)

    def contains(self, currency: Currency) -> bool:
        return any(currencies.contains(currency) for currencies in self._lists)

    def subunit_for(self, currency: Currency) -> int:
        for currencies in self._lists:
            if currencies.contains(currency):
                return currencies.subunit_for(currency)
        raise UnknownCurrency(f"Cannot find currency {currency.code}")

    def __iter__(self) -> Iterator[Currency]:
        seen: set[Currency] = set()
        for currencies in self._lists:
            for currency in currencies:
                if currency not in seen:
                    seen.add(currency)
                    yield currency
