"""
core.py — Money domain primitive

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   An int of minor units (cents for EUR, satoshi for BTC, ...).
   Never floating point. Python ints do not overflow, so amounts far beyond
   64 bits behave exactly like small ones.

2. TYPE SAFETY
   Operations across currencies raise CurrencyMismatch.
   float is refused everywhere with TypeError: say "0.1", not 0.1.

3. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance.
   No side effects, safe to share between threads without locks.

4. PRECISION AGNOSTIC
   Money does not know how many decimals its currency has. The arithmetic
   works on minor units only; subunit digits matter only when formatting or
   parsing decimal strings (see formatter.py).

5. EXPLICIT ROUNDING
   Only multiplied_by, divided_by and round_to_unit round, always through
   rounding.divide_rounded, with HALF_UP unless the caller says otherwise.

6. VERIFIABLE INVARIANTS
   allocate(ratios) and allocate_to(n) guarantee sum(parts) == original.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from collections.abc import Mapping, Sequence
from typing import TypeVar, Union, overload

from . import allocation
from . import number
from .currency import Currency
from .errors import CurrencyMismatch, DivisionByZero, EmptyInput, InvalidArgument
from .number import NumericInput
from .rounding import DEFAULT_ROUNDING_MODE, RoundingMode, divide_rounded


AmountInput = Union[int, str, Decimal]
K = TypeVar("K")


# ==============================================================================
# MONEY CLASS
# ==============================================================================

@dataclass(frozen=True, slots=True, order=False)
class Money:
    """
    Domain primitive for monetary amounts.

    INVARIANTS:
    1. _amount is always an int of minor units (no floating point)
    2. _currency is always a Currency
    3. ordering and arithmetic across currencies raise CurrencyMismatch
    4. sum(allocate(...)) == self

    USAGE:
        bill = Money(10_000, "EUR")
        shares = bill.allocate([1, 1, 1])
        # [Money(3334, 'EUR'), Money(3333, 'EUR'), Money(3333, 'EUR')]

    SERIALIZATION:
        to_dict() / from_dict(), format {"amount": "350", "currency": "EUR"}.
        The amount is a digit string, never a float.
    """
    _amount: int
    _currency: Currency

    def __post_init__(self) -> None:
        object.__setattr__(self, "_amount", number.to_int(self._amount))
        if isinstance(self._currency, str):
            object.__setattr__(self, "_currency", Currency(self._currency))
        elif not isinstance(self._currency, Currency):
            raise TypeError(
                f"currency must be a Currency or a code, got {type(self._currency).__name__}"
            )

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, amount: AmountInput, currency: Currency | str) -> Money:
        """Money from minor units: an int or a whole decimal string ("350", "10.00")."""
        return cls(amount, Currency.of(currency))

    @classmethod
    def zero(cls, currency: Currency | str) -> Money:
        return cls(0, Currency.of(currency))

    @classmethod
    def euro(cls, amount: AmountInput) -> Money:
        return cls.of(amount, "EUR")

    @classmethod
    def usd(cls, amount: AmountInput) -> Money:
        return cls.of(amount, "USD")

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def amount(self) -> int:
        """Amount in minor units."""
        return self._amount

    @property
    def amount_string(self) -> str:
        """Sign and digits, no separator. What a decimal formatter starts from."""
        return number.to_digit_string(self._amount)

    @property
    def currency(self) -> Currency:
        return self._currency

    def is_zero(self) -> bool:
        return number.is_zero(self._amount)

    def is_positive(self) -> bool:
        return number.is_positive(self._amount)

    def is_negative(self) -> bool:
        return number.is_negative(self._amount)

    def is_same_currency(self, *others: Money) -> bool:
        return all(self._currency == other._currency for other in others)

    def _new(self, amount: int) -> Money:
        return Money(amount, self._currency)

    def _check_same_currency(self, other: Money) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, got {type(other).__name__}")
        if self._currency != other._currency:
            raise CurrencyMismatch(
                f"Currencies must be identical: {self._currency.code} vs {other._currency.code}"
            )

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus(self, *addends: Money) -> Money:
        amount = self._amount
        for addend in addends:
            self._check_same_currency(addend)
            amount = number.add(amount, addend._amount)
        return self._new(amount)

    def minus(self, *subtrahends: Money) -> Money:
        amount = self._amount
        for subtrahend in subtrahends:
            self._check_same_currency(subtrahend)
            amount = number.subtract(amount, subtrahend._amount)
        return self._new(amount)

    def multiplied_by(
        self,
        factor: NumericInput,
        rounding: RoundingMode = DEFAULT_ROUNDING_MODE,
    ) -> Money:
        """
        Multiply by an exact factor and round once, at the end.

        A decimal factor such as "0.1" is 1/10: the amount is multiplied by
        the numerator and divided by the denominator with the given mode.
        """
        factor = number.to_fraction(factor)
        return self._new(
            divide_rounded(
                number.multiply(self._amount, factor.numerator),
                factor.denominator,
                rounding,
            )
        )

    def divided_by(
        self,
        divisor: NumericInput,
        rounding: RoundingMode = DEFAULT_ROUNDING_MODE,
    ) -> Money:
        """
        Divide by an exact divisor and round the result.

        Raises:
            DivisionByZero: divisor is zero
        """
        divisor = number.to_fraction(divisor)
        if divisor == 0:
            raise DivisionByZero("Division by zero")
        return self._new(
            divide_rounded(
                number.multiply(self._amount, divisor.denominator),
                divisor.numerator,
                rounding,
            )
        )

    def mod(self, divisor: Money) -> Money:
        """
        Remainder of a truncated division: it keeps the sign of self.

        Raises:
            CurrencyMismatch: different currencies
            DivisionByZero: divisor amount is zero
        """
        self._check_same_currency(divisor)
        _, remainder = number.divide_with_remainder(self._amount, divisor._amount)
        return self._new(remainder)

    def ratio_of(self, other: Money) -> Fraction:
        """
        Exact ratio self / other, as a Fraction (not a Money).

        Raises:
            CurrencyMismatch: different currencies
            InvalidArgument: other is zero
        """
        self._check_same_currency(other)
        if other.is_zero():
            raise InvalidArgument("Cannot calculate a ratio of zero")
        return Fraction(self._amount, other._amount)

    def absolute(self) -> Money:
        return self._new(number.absolute(self._amount))

    def negated(self) -> Money:
        return self._new(number.negate(self._amount))

    def round_to_unit(self, unit: int) -> Money:
        """
        Round to the nearest multiple of 10**unit, exact ties away from zero.

            Money.euro(515).round_to_unit(1)    -> 520
            Money.euro(-4550).round_to_unit(2)  -> -4600
        """
        if isinstance(unit, bool) or not isinstance(unit, int):
            raise TypeError(f"unit must be int, got {type(unit).__name__}")
        if unit < 0:
            raise InvalidArgument(f"unit must be >= 0, got {unit}")
        if unit == 0:
            return self

        scale = 10 ** unit
        units = divide_rounded(self._amount, scale, RoundingMode.HALF_UP)
        return self._new(number.multiply(units, scale))

    # Operators: same semantics, Python spelling

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed: Money + {type(other).__name__}. "
                f"Build a Money first."
            )
        return self.plus(other)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(f"Operation not allowed: Money - {type(other).__name__}.")
        return self.minus(other)

    def __mul__(self, factor: int) -> Money:
        """
        Multiplication by an int quantity. Exact, no rounding.

        For decimal factors use multiplied_by().
        """
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(
                f"Money can only be multiplied by int with '*', "
                f"not {type(factor).__name__}. Use multiplied_by()."
            )
        return self._new(number.multiply(self._amount, factor))

    def __rmul__(self, factor: int) -> Money:
        return self.__mul__(factor)

    def __mod__(self, other: Money) -> Money:
        return self.mod(other)

    def __neg__(self) -> Money:
        return self.negated()

    def __abs__(self) -> Money:
        return self.absolute()

    # -------------------------------------------------------------------------
    # Allocation
    # -------------------------------------------------------------------------

    @overload
    def allocate(self, ratios: Mapping[K, NumericInput]) -> dict[K, Money]: ...

    @overload
    def allocate(self, ratios: Sequence[NumericInput]) -> list[Money]: ...

    def allocate(self, ratios):
        """
        Split by ratios with the largest remainder method.

        Ratios are int, Fraction, Decimal or decimal strings; a mapping of
        key -> ratio returns a dict with the same keys.

        INVARIANT: the parts add up to self exactly.

        Raises:
            InvalidArgument: negative ratio, or no ratio above zero
            TypeError: ratios is a str or bytes
        """
        if isinstance(ratios, (str, bytes)):
            raise TypeError(f"Ratios must be a sequence of numbers, got {type(ratios).__name__}")
        if isinstance(ratios, Mapping):
            keys = list(ratios)
            shares = allocation.allocate(self._amount, [ratios[key] for key in keys])
            return {key: self._new(share) for key, share in zip(keys, shares)}

        return [self._new(share) for share in allocation.allocate(self._amount, list(ratios))]

    def allocate_to(self, n: int) -> list[Money]:
        """
        Split into n parts differing by at most one minor unit.

            Money.euro(15).allocate_to(2)  -> [8, 7]

        Raises:
            InvalidArgument: n <= 0
        """
        return [self._new(share) for share in allocation.allocate_to(self._amount, n)]

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare_to(self, other: Money) -> int:
        """-1, 0 or 1. Raises CurrencyMismatch across currencies."""
        self._check_same_currency(other)
        return number.compare(self._amount, other._amount)

    def is_equal_to(self, other: Money) -> bool:
        """Same currency and same amount. Different currencies are simply unequal."""
        return self == other

    def is_less_than(self, other: Money) -> bool:
        return self.compare_to(other) < 0

    def is_less_than_or_equal_to(self, other: Money) -> bool:
        return self.compare_to(other) <= 0

    def is_greater_than(self, other: Money) -> bool:
        return self.compare_to(other) > 0

    def is_greater_than_or_equal_to(self, other: Money) -> bool:
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return self._amount == other._amount and self._currency == other._currency
        return NotImplemented

    def __lt__(self, other: Money) -> bool:
        return self.is_less_than(other)

    def __le__(self, other: Money) -> bool:
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other: Money) -> bool:
        return self.is_greater_than(other)

    def __ge__(self, other: Money) -> bool:
        return self.is_greater_than_or_equal_to(other)

    def __hash__(self) -> int:
        return hash((self._amount, self._currency))

    # -------------------------------------------------------------------------
    # Aggregates
    # -------------------------------------------------------------------------

    @staticmethod
    def _check_values(name: str, values: tuple) -> None:
        if not values:
            raise EmptyInput(f"{name}() needs at least one Money")
        for value in values:
            if not isinstance(value, Money):
                raise TypeError(f"{name}() expects Money, got {type(value).__name__}")

    @classmethod
    def sum(cls, *values: Money) -> Money:
        """Sum of one or more Money of the same currency."""
        cls._check_values("sum", values)
        first, *rest = values
        return first.plus(*rest)

    @classmethod
    def min(cls, *values: Money) -> Money:
        """Smallest of the values; the first one wins ties."""
        cls._check_values("min", values)
        smallest = values[0]
        for value in values[1:]:
            if value.is_less_than(smallest):
                smallest = value
        return smallest

    @classmethod
    def max(cls, *values: Money) -> Money:
        """Largest of the values; the first one wins ties."""
        cls._check_values("max", values)
        largest = values[0]
        for value in values[1:]:
            if value.is_greater_than(largest):
                largest = value
        return largest

    @classmethod
    def avg(cls, *values: Money) -> Money:
        """sum / count, rounded HALF_UP."""
        cls._check_values("avg", values)
        return cls.sum(*values).divided_by(len(values))

    # -------------------------------------------------------------------------
    # Output and serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """
        Serialize for persistence / APIs.

        Format: {"amount": "350", "currency": "EUR"}
        """
        return {"amount": self.amount_string, "currency": self._currency.code}

    @classmethod
    def from_dict(cls, data: Mapping) -> Money:
        """Inverse of to_dict(). The amount may be a digit string or an int."""
        try:
            amount, code = data["amount"], data["currency"]
        except KeyError as e:
            raise InvalidArgument(f"Missing key {e} in serialized Money") from e
        return cls(amount, Currency(code))

    def __repr__(self) -> str:
        return f"Money({self._amount}, {self._currency.code!r})"

    def __str__(self) -> str:
        return f"{self._amount} {self._currency.code}"


# ==============================================================================
# ALLOCATION BUILDER
# ==============================================================================

class Allocation:
    """
    Helper for allocations mixing fixed amounts and weighted shares.

        parts = (
            Allocation(Money.euro(100_000))
            .fixed(Money.euro(30_000))      # reserved first
            .share(2)                       # the rest, split 2:1
            .share(1)
            .finalize()
        )

    Parts come back in declaration order. What is left after the fixed
    parts goes to the shares by largest remainder; with no share declared
    it is added to the last fixed part.

    INVARIANT: sum(finalize()) == total (always)
    """

    def __init__(self, total: Money):
        self._total = total
        self._fixed_total = Money.zero(total.currency)
        self._parts: list[Money | Fraction] = []

    def fixed(self, amount: Money) -> Allocation:
        """Reserve a fixed amount."""
        self._total._check_same_currency(amount)
        self._parts.append(amount)
        self._fixed_total = self._fixed_total + amount
        return self

    def share(self, ratio: NumericInput) -> Allocation:
        """Declare a weighted share of the remainder."""
        self._parts.append(number.to_fraction(ratio))
        return self

    def remainder(self) -> Money:
        """What the fixed parts leave unallocated."""
        return self._total - self._fixed_total

    def finalize(self) -> list[Money]:
        remainder = self.remainder()
        ratios = [part for part in self._parts if isinstance(part, Fraction)]

        if not ratios:
            parts = list(self._parts)
            if not parts:
                return [remainder]
            if not remainder.is_zero():
                parts[-1] = parts[-1] + remainder
            return parts

        shares = iter(remainder.allocate(ratios))
        return [next(shares) if isinstance(part, Fraction) else part for part in self._parts]
