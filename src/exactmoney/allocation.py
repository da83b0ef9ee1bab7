"""
allocation.py — Largest remainder allocation over integer minor units

================================================================================
ALGORITHM (Hamilton / Hare-Niemeyer)
================================================================================

    amount = 101, ratios = [3, 7]

    1. exact shares       101 * 3/10 = 30.3       101 * 7/10 = 70.7
    2. floor (-> -inf)    30 (+0.3)               70 (+0.7)
    3. leftover           101 - (30 + 70) = 1
    4. one unit each, by descending remainder, ties by ascending index
                          30                      71

Flooring makes every fractional remainder fall in [0, 1), so the leftover
is always a whole number with 0 <= leftover < len(ratios), for negative
amounts too. A slot with ratio 0 has remainder 0 and can never be reached
by step 4, because the leftover is strictly smaller than the number of
slots with a non-zero remainder.

INVARIANT: sum(allocate(amount, ratios)) == amount

================================================================================
"""

from __future__ import annotations
from fractions import Fraction
from typing import Sequence
import logging

from . import config
from .errors import InvalidArgument
from .number import NumericInput, divide_with_remainder, to_fraction

logger = logging.getLogger(__name__)


def read_ratios(ratios: Sequence[NumericInput]) -> list[Fraction]:
    """Validate ratios and return their exact values."""
    if isinstance(ratios, (str, bytes)):
        raise TypeError(f"Ratios must be a sequence of numbers, got {type(ratios).__name__}")
    if len(ratios) == 0:
        raise InvalidArgument("Cannot allocate to an empty list of ratios")
    if len(ratios) > config.MAX_ALLOCATION_TARGETS:
        raise InvalidArgument(
            f"Cannot allocate to more than {config.MAX_ALLOCATION_TARGETS} ratios"
        )

    weights = [to_fraction(ratio) for ratio in ratios]
    for ratio, weight in zip(ratios, weights):
        if weight < 0:
            raise InvalidArgument(f"Cannot allocate to negative ratio {ratio!r}")
    if sum(weights) == 0:
        raise InvalidArgument("Cannot allocate to none, sum of ratios must be greater than zero")
    return weights


def allocate(amount: int, ratios: Sequence[NumericInput]) -> list[int]:
    """
    Split amount across ratios, in input order, conserving it exactly.

    Raises:
        InvalidArgument: empty, negative or all-zero ratios
        TypeError: a ratio is a float or another inexact type
    """
    weights = read_ratios(ratios)
    total = sum(weights, Fraction(0))

    shares: list[int] = []
    remainders: list[Fraction] = []
    for weight in weights:
        # amount * weight / total as one integer division
        numerator = amount * weight.numerator * total.denominator
        denominator = weight.denominator * total.numerator
        share, remainder = divide_with_remainder(numerator, denominator, floor=True)
        shares.append(share)
        remainders.append(Fraction(remainder, denominator))

    leftover = amount - sum(shares)
    if leftover:
        order = sorted(range(len(shares)), key=lambda i: (-remainders[i], i))
        logger.debug(f"Allocating leftover {leftover} of {amount} to slots {order[:leftover]}")
        for index in order[:leftover]:
            shares[index] += 1

    return shares


def allocate_to(amount: int, n: int) -> list[int]:
    """
    Split amount into n parts that differ by at most one unit.

    Same result as allocate(amount, [1] * n): the first slots absorb the
    leftover units.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Number of targets must be int, got {type(n).__name__}")
    if n <= 0:
        raise InvalidArgument(f"Cannot allocate to {n} targets, must be greater than zero")
    if n > config.MAX_ALLOCATION_TARGETS:
        raise InvalidArgument(
            f"Cannot allocate to more than {config.MAX_ALLOCATION_TARGETS} targets"
        )

    base, leftover = divide_with_remainder(amount, n, floor=True)
    return [base + 1 if i < leftover else base for i in range(n)]
