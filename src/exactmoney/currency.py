"""
currency.py — Currency identifier

A Currency is nothing more than a normalized code. It carries no precision
and no metadata: the arithmetic never needs them. Subunit digits live in a
currency list (see currencies.py) and are only consulted by the decimal
formatter and parser.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import cache

from .errors import InvalidArgument


@dataclass(frozen=True, slots=True)
class Currency:
    """
    Currency code value object.

    INVARIANTS:
    1. code is a non-empty, upper-case string
    2. two Currency are equal iff their codes are equal ("eur" == "EUR")
    """
    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise TypeError(f"Currency code must be str, got {type(self.code).__name__}")
        normalized = self.code.strip().upper()
        if not normalized:
            raise InvalidArgument("Currency code cannot be empty")
        object.__setattr__(self, "code", normalized)

    @classmethod
    def of(cls, code: str | Currency) -> Currency:
        if isinstance(code, Currency):
            return code
        return cls(code)

    def is_(self, other: Currency) -> bool:
        """Same currency as other."""
        return self.code == other.code

    @property
    def default_fraction_digits(self) -> int:
        """Subunit digits from the ISO 4217 table (UnknownCurrency if absent)."""
        return _iso_currencies().subunit_for(self)

    def to_json(self) -> str:
        return self.code

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency({self.code!r})"


@cache
def _iso_currencies():
    # currencies.py imports this module
    from .currencies import ISOCurrencies

    return ISOCurrencies()
