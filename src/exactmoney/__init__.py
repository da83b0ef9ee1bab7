"""
exactmoney — Exact, currency-tagged money arithmetic

Amounts are ints of minor units tagged with a Currency. Nothing is ever a
float: arithmetic is exact, rounding happens only where a rounding mode is
requested, and allocation always conserves the total.

================================================================================
QUICK START
================================================================================

Basic usage:

    from exactmoney import Money, Currency, RoundingMode

    # 100.00 EUR, in cents
    bill = Money(10_000, Currency("EUR"))

    # Split three ways (sum ALWAYS equals the bill)
    bill.allocate_to(3)            # [3334, 3333, 3333]
    bill.allocate([70, 20, 10])    # [7000, 2000, 1000]

    # Exact decimal factors, one rounding step
    bill.multiplied_by("0.075")                        # 750
    Money.euro(1).divided_by(3, RoundingMode.UP)       # 1

    # Aggregates
    Money.avg(Money.euro(100), Money.euro(101))        # 101 (HALF_UP)

Decimal strings (outside the arithmetic core):

    from exactmoney import DecimalMoneyFormatter, DecimalMoneyParser, ISOCurrencies

    DecimalMoneyFormatter(ISOCurrencies()).format(bill)            # "100.00"
    DecimalMoneyParser(ISOCurrencies()).parse("19.99", "EUR")      # Money(1999, 'EUR')

================================================================================
"""

from .core import (
    Money,
    Allocation,
)
from .currency import Currency
from .rounding import RoundingMode
from .currencies import (
    Currencies,
    CurrencyList,
    ISOCurrencies,
    AggregateCurrencies,
)
from .formatter import DecimalMoneyFormatter, DecimalMoneyParser
from .errors import (
    MoneyError,
    InvalidAmount,
    CurrencyMismatch,
    DivisionByZero,
    InvalidArgument,
    EmptyInput,
    UnknownCurrency,
)

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Core
    "Money",
    "Currency",
    "RoundingMode",
    "Allocation",
    # Currency lists and decimal strings
    "Currencies",
    "CurrencyList",
    "ISOCurrencies",
    "AggregateCurrencies",
    "DecimalMoneyFormatter",
    "DecimalMoneyParser",
    # Errors
    "MoneyError",
    "InvalidAmount",
    "CurrencyMismatch",
    "DivisionByZero",
    "InvalidArgument",
    "EmptyInput",
    "UnknownCurrency",
]
