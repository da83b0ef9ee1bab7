"""
test_rounding.py — Rounding policy

Every rounded operation reduces to divide_rounded(numerator, denominator,
mode), so the tables here pin down multiplied_by, divided_by and
round_to_unit at the same time.
"""

from fractions import Fraction
import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from exactmoney import DivisionByZero, InvalidArgument, RoundingMode
from exactmoney import config
from exactmoney.rounding import DEFAULT_ROUNDING_MODE, divide_rounded, round_quotient


R = RoundingMode

SYMMETRIC_MODES = [R.UP, R.DOWN, R.HALF_UP, R.HALF_DOWN, R.HALF_EVEN, R.HALF_ODD]


# ==============================================================================
# UNIT TESTS
# ==============================================================================

class TestTies:
    """Exact halves are where the modes disagree."""

    @pytest.mark.parametrize("mode, positive, negative", [
        (R.UP, 3, -3),
        (R.DOWN, 2, -2),
        (R.HALF_UP, 3, -3),
        (R.HALF_DOWN, 2, -2),
        (R.HALF_EVEN, 2, -2),
        (R.HALF_ODD, 3, -3),
        (R.CEILING, 3, -2),
        (R.FLOOR, 2, -3),
        (R.HALF_CEILING, 3, -2),
        (R.HALF_FLOOR, 2, -3),
    ])
    def test_two_and_a_half(self, mode, positive, negative):
        assert divide_rounded(5, 2, mode) == positive
        assert divide_rounded(-5, 2, mode) == negative

    @pytest.mark.parametrize("mode, expected", [
        (R.HALF_EVEN, 4),
        (R.HALF_ODD, 3),
    ])
    def test_three_and_a_half(self, mode, expected):
        assert divide_rounded(7, 2, mode) == expected

    def test_negative_divisor_carries_the_sign(self):
        assert divide_rounded(5, -2, R.HALF_UP) == -3
        assert divide_rounded(-5, -2, R.HALF_UP) == 3


class TestOffTies:

    @pytest.mark.parametrize("mode, expected", [
        (R.UP, 3),
        (R.DOWN, 2),
        (R.HALF_UP, 2),
        (R.HALF_DOWN, 2),
        (R.CEILING, 3),
        (R.FLOOR, 2),
    ])
    def test_below_half(self, mode, expected):
        # 7 / 3 = 2.333...
        assert divide_rounded(7, 3, mode) == expected

    @pytest.mark.parametrize("mode, expected", [
        (R.UP, -3),
        (R.DOWN, -2),
        (R.HALF_UP, -3),
        (R.HALF_DOWN, -3),
        (R.CEILING, -2),
        (R.FLOOR, -3),
    ])
    def test_above_half_negative(self, mode, expected):
        # -8 / 3 = -2.666...
        assert divide_rounded(-8, 3, mode) == expected

    @pytest.mark.parametrize("mode", list(RoundingMode))
    def test_exact_division_is_untouched(self, mode):
        assert divide_rounded(6, 3, mode) == 2
        assert divide_rounded(-6, 3, mode) == -2
        assert divide_rounded(0, 7, mode) == 0


class TestRoundQuotient:

    def test_default_mode_is_half_up(self):
        assert DEFAULT_ROUNDING_MODE is R.HALF_UP
        assert round_quotient(1, 2, 1, 2) == 3

    def test_default_mode_comes_from_config(self):
        assert RoundingMode(config.DEFAULT_ROUNDING_MODE) is DEFAULT_ROUNDING_MODE

    def test_applies_sign(self):
        assert round_quotient(-1, 2, 1, 2, R.HALF_UP) == -3
        assert round_quotient(-1, 2, 0, 2, R.UP) == -2

    def test_zero_divisor(self):
        with pytest.raises(DivisionByZero):
            round_quotient(1, 2, 0, 0)

    def test_remainder_must_be_below_divisor(self):
        with pytest.raises(InvalidArgument):
            round_quotient(1, 2, 5, 5)

    def test_magnitudes_only(self):
        with pytest.raises(InvalidArgument):
            round_quotient(1, -2, 1, 5)

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            round_quotient(1, 2, 1, 2, "half_up")

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZero):
            divide_rounded(10, 0)


# ==============================================================================
# PROPERTY-BASED TESTS (Hypothesis)
# ==============================================================================

class TestRoundingProperties:

    @given(
        numerator=st.integers(min_value=-10**30, max_value=10**30),
        denominator=st.integers(min_value=-10**6, max_value=10**6).filter(lambda d: d != 0),
        mode=st.sampled_from(list(RoundingMode)),
    )
    @settings(max_examples=1000)
    def test_result_is_a_neighbour_of_the_exact_quotient(self, numerator, denominator, mode):
        """
        PROPERTY: the rounded result is floor(q) or ceil(q) of the exact quotient q.
        """
        exact = Fraction(numerator, denominator)
        assert divide_rounded(numerator, denominator, mode) in (math.floor(exact), math.ceil(exact))

    @given(
        numerator=st.integers(min_value=0, max_value=10**30),
        denominator=st.integers(min_value=1, max_value=10**6),
        mode=st.sampled_from(SYMMETRIC_MODES),
    )
    @settings(max_examples=500)
    def test_symmetric_modes_mirror_around_zero(self, numerator, denominator, mode):
        assert divide_rounded(-numerator, denominator, mode) == -divide_rounded(numerator, denominator, mode)

    @given(
        numerator=st.integers(min_value=-10**30, max_value=10**30),
        denominator=st.integers(min_value=1, max_value=10**6),
    )
    @settings(max_examples=500)
    def test_half_modes_are_nearest(self, numerator, denominator):
        exact = Fraction(numerator, denominator)
        for mode in (R.HALF_UP, R.HALF_DOWN, R.HALF_EVEN, R.HALF_ODD, R.HALF_CEILING, R.HALF_FLOOR):
            assert abs(divide_rounded(numerator, denominator, mode) - exact) <= Fraction(1, 2)
