"""
number.py — Exact integer primitive and locale-blind decimal parsing

================================================================================
REPRESENTATION
================================================================================

Every amount is a Python int: arbitrary precision, no fixed width, no silent
wrap-around. There is exactly one backend. The helpers below exist so that
the rest of the package speaks one small vocabulary (add, divide with
remainder, compare, ...) and so that division by zero always surfaces as
DivisionByZero.

Decimal inputs ("0.1", "-12.50", "10.000") are parsed by hand with an ASCII
grammar:

    [+-]? DIGITS? ( "." DIGITS )?        with at least one digit overall

The host locale is never consulted. float is never accepted: the caller
must say what they mean with an int, a str, a Decimal or a Fraction.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Union
import re

from .config import DECIMAL_SEPARATOR
from .errors import DivisionByZero, InvalidAmount


NumericInput = Union[int, str, Decimal, Fraction]

_NUMBER_PATTERN = re.compile(
    r"(?P<sign>[+-]?)(?P<integer>[0-9]*)(?:"
    + re.escape(DECIMAL_SEPARATOR)
    + r"(?P<fraction>[0-9]+))?"
)


# ==============================================================================
# INTEGER PRIMITIVE
# ==============================================================================

def add(a: int, b: int) -> int:
    return a + b


def subtract(a: int, b: int) -> int:
    return a - b


def multiply(a: int, b: int) -> int:
    return a * b


def divide_with_remainder(a: int, b: int, floor: bool = False) -> tuple[int, int]:
    """
    Integer division returning (quotient, remainder) with a == q * b + r.

    floor=False: quotient truncated toward zero, remainder has the sign of a.
                 Used where the rounding policy handles the remainder.
    floor=True:  quotient floored toward -inf, remainder has the sign of b.
                 Used by the allocation engine.
    """
    if b == 0:
        raise DivisionByZero(f"Cannot divide {a} by zero")
    if floor:
        return divmod(a, b)

    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def compare(a: int, b: int) -> int:
    """Three-way comparison: -1, 0 or 1."""
    return (a > b) - (a < b)


def is_zero(a: int) -> bool:
    return a == 0


def is_positive(a: int) -> bool:
    return a > 0


def is_negative(a: int) -> bool:
    return a < 0


def absolute(a: int) -> int:
    return -a if a < 0 else a


def negate(a: int) -> int:
    return -a


def sign(a: int) -> int:
    return compare(a, 0)


def to_digit_string(a: int) -> str:
    """Sign and ASCII digits, no separator, no grouping."""
    return str(a)


# ==============================================================================
# DECIMAL NUMBER
# ==============================================================================

@dataclass(frozen=True, slots=True)
class Number:
    """
    A parsed decimal number, kept as digit strings.

    INVARIANTS:
    1. integer_part has no leading zeros ("0" for zero)
    2. fractional_part has no trailing zeros ("" when the number is whole)
    3. zero is never negative
    """
    integer_part: str
    fractional_part: str = ""
    negative: bool = False

    @classmethod
    def from_string(cls, text: str) -> Number:
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        match = _NUMBER_PATTERN.fullmatch(text)
        if match is None or not (match["integer"] or match["fraction"]):
            raise InvalidAmount(f"Invalid amount: {text!r}")

        integer_part = match["integer"].lstrip("0") or "0"
        fractional_part = (match["fraction"] or "").rstrip("0")
        negative = match["sign"] == "-"
        if integer_part == "0" and not fractional_part:
            negative = False

        return cls(integer_part, fractional_part, negative)

    @classmethod
    def from_value(cls, value: NumericInput) -> Number:
        """
        Build a Number from int, str or finite Decimal.

        Decimal goes through its 'f' format, which never uses the locale
        and never produces an exponent.
        """
        if isinstance(value, bool) or isinstance(value, float):
            raise TypeError(
                f"{type(value).__name__} is not an exact amount. "
                f"Use int, a decimal string or Decimal."
            )
        if isinstance(value, int):
            return cls.from_string(str(value))
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise InvalidAmount(f"Invalid amount: {value}")
            return cls.from_string(format(value, "f"))
        raise TypeError(f"Cannot read a number from {type(value).__name__}")

    def is_integer(self) -> bool:
        return not self.fractional_part

    def to_int(self) -> int:
        """The whole value; InvalidAmount if there is a non-zero fraction."""
        if not self.is_integer():
            raise InvalidAmount(f"{self} is not a whole number of minor units")
        value = int(self.integer_part)
        return -value if self.negative else value

    def as_fraction(self) -> Fraction:
        scale = 10 ** len(self.fractional_part)
        numerator = int(self.integer_part + self.fractional_part)
        if self.negative:
            numerator = -numerator
        return Fraction(numerator, scale)

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        if self.fractional_part:
            return f"{sign}{self.integer_part}{DECIMAL_SEPARATOR}{self.fractional_part}"
        return f"{sign}{self.integer_part}"


def to_fraction(value: NumericInput) -> Fraction:
    """Exact rational value of a factor, divisor or ratio."""
    if isinstance(value, Fraction):
        return value
    return Number.from_value(value).as_fraction()


def to_int(value: Union[int, str, Decimal]) -> int:
    """Exact integer value of an amount; rejects non-zero fractions."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return Number.from_value(value).to_int()
