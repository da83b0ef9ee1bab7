"""
rounding.py — Rounding policy for exact integer division

================================================================================
MODEL
================================================================================

Every rounded operation in the package (multiplied_by, divided_by,
round_to_unit) is reduced to one exact division

    numerator / divisor  =  sign * (quotient + remainder / divisor)

where quotient, remainder and divisor are non-negative magnitudes and
quotient is truncated toward zero. The policy only decides one thing:
whether the magnitude of the quotient grows by one. The sign of the true
mathematical quotient is re-applied afterwards, so every mode is symmetric
around zero unless it is explicitly directional (CEILING, FLOOR and the
HALF_ variants of those).

No floating point is involved anywhere.

================================================================================
"""

from __future__ import annotations
from enum import Enum
from typing import Callable

from . import config
from .errors import DivisionByZero, InvalidArgument
from .number import absolute, compare, divide_with_remainder, sign as sign_of


class RoundingMode(Enum):
    """
    Rounding strategies.

    - UP: away from zero whenever something is left over
    - DOWN: toward zero (truncation)
    - HALF_UP: nearest, ties away from zero (commercial rounding, the default)
    - HALF_DOWN: nearest, ties toward zero
    - HALF_EVEN: nearest, ties to the even neighbour (banker's rounding)
    - HALF_ODD: nearest, ties to the odd neighbour
    - CEILING / FLOOR: toward +inf / -inf
    - HALF_CEILING / HALF_FLOOR: nearest, ties toward +inf / -inf
    """
    UP = "up"
    DOWN = "down"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"
    HALF_ODD = "half_odd"
    CEILING = "ceiling"
    FLOOR = "floor"
    HALF_CEILING = "half_ceiling"
    HALF_FLOOR = "half_floor"


DEFAULT_ROUNDING_MODE = RoundingMode(config.DEFAULT_ROUNDING_MODE)


# (sign, quotient magnitude, position of the remainder against one half) -> increment?
# The position is -1 below the half, 0 exactly on it, 1 above it.
_Strategy = Callable[[int, int, int], bool]


def _up(sign: int, quotient: int, half: int) -> bool:
    return True


def _down(sign: int, quotient: int, half: int) -> bool:
    return False


def _half_up(sign: int, quotient: int, half: int) -> bool:
    return half >= 0


def _half_down(sign: int, quotient: int, half: int) -> bool:
    return half > 0


def _half_even(sign: int, quotient: int, half: int) -> bool:
    return half > 0 or (half == 0 and quotient % 2 == 1)


def _half_odd(sign: int, quotient: int, half: int) -> bool:
    return half > 0 or (half == 0 and quotient % 2 == 0)


def _ceiling(sign: int, quotient: int, half: int) -> bool:
    return sign > 0


def _floor(sign: int, quotient: int, half: int) -> bool:
    return sign < 0


def _half_ceiling(sign: int, quotient: int, half: int) -> bool:
    return half > 0 or (half == 0 and sign > 0)


def _half_floor(sign: int, quotient: int, half: int) -> bool:
    return half > 0 or (half == 0 and sign < 0)


_STRATEGIES: dict[RoundingMode, _Strategy] = {
    RoundingMode.UP: _up,
    RoundingMode.DOWN: _down,
    RoundingMode.HALF_UP: _half_up,
    RoundingMode.HALF_DOWN: _half_down,
    RoundingMode.HALF_EVEN: _half_even,
    RoundingMode.HALF_ODD: _half_odd,
    RoundingMode.CEILING: _ceiling,
    RoundingMode.FLOOR: _floor,
    RoundingMode.HALF_CEILING: _half_ceiling,
    RoundingMode.HALF_FLOOR: _half_floor,
}


def round_quotient(
    sign: int,
    quotient: int,
    remainder: int,
    divisor: int,
    mode: RoundingMode = DEFAULT_ROUNDING_MODE,
) -> int:
    """
    Adjust a truncated quotient according to mode and return the signed result.

    Args:
        sign: sign of the true quotient (-1, 0 or 1)
        quotient: truncated quotient magnitude (>= 0)
        remainder: remainder magnitude (0 <= remainder < divisor)
        divisor: divisor magnitude (> 0)
        mode: rounding strategy

    Raises:
        DivisionByZero: divisor is zero
        InvalidArgument: negative magnitudes or remainder >= divisor
        ValueError: mode is not a RoundingMode
    """
    if divisor == 0:
        raise DivisionByZero("Cannot round against a zero divisor")
    if quotient < 0 or remainder < 0 or divisor < 0:
        raise InvalidArgument("quotient, remainder and divisor must be magnitudes (>= 0)")
    if remainder >= divisor:
        raise InvalidArgument(f"remainder {remainder} is not below divisor {divisor}")

    strategy = _STRATEGIES.get(mode)
    if strategy is None:
        raise ValueError(f"Unknown rounding mode: {mode}")

    if remainder != 0 and strategy(sign, quotient, compare(2 * remainder, divisor)):
        quotient += 1

    return -quotient if sign < 0 else quotient


def divide_rounded(
    numerator: int,
    denominator: int,
    mode: RoundingMode = DEFAULT_ROUNDING_MODE,
) -> int:
    """Exact numerator / denominator rounded to an integer with mode."""
    quotient, remainder = divide_with_remainder(numerator, denominator)
    return round_quotient(
        sign_of(numerator) * sign_of(denominator),
        absolute(quotient),
        absolute(remainder),
        absolute(denominator),
        mode,
    )
