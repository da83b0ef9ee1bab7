"""
errors.py — Domain exceptions for exact money arithmetic.

Every failure in this package is a deterministic validation failure: it is
raised synchronously at the call that broke a precondition and is never
retried, defaulted or swallowed.

Each exception also derives from the closest builtin so that callers who
only know Python's vocabulary (ValueError, TypeError, ZeroDivisionError)
still catch them.
"""


class MoneyError(Exception):
    """Base class for all errors raised by exactmoney."""


class InvalidAmount(MoneyError, ValueError):
    """
    Raised when an amount cannot be parsed:
    - characters other than an optional sign, ASCII digits and one '.'
    - more than one separator
    - no digits at all
    - a non-zero fractional part where a whole number of minor units is required
    """


class CurrencyMismatch(MoneyError, TypeError):
    """Raised when arithmetic or ordering is attempted across currencies."""


class DivisionByZero(MoneyError, ZeroDivisionError):
    """Raised by division, modulus and rounding with a zero divisor."""


class InvalidArgument(MoneyError, ValueError):
    """
    Raised when an argument is out of its domain:
    - negative allocation ratio, or all ratios zero
    - non-positive (or too large) allocation target count
    - ratio_of() against a zero amount
    """


class EmptyInput(MoneyError, ValueError):
    """Raised when sum/min/max/avg are called without any Money."""


class UnknownCurrency(MoneyError, LookupError):
    """Raised when a currency list has no entry for the requested code."""
