#!/usr/bin/env python3
"""
bill_split.py — Splitting a restaurant bill without losing a cent

================================================================================
THE BUG
================================================================================

    >>> round(100.00 / 3, 2) * 3
    99.99

One cent disappears. Rounding each share on its own cannot conserve the
total: somebody has to pay the extra cent, and the code has to decide who.

================================================================================
THE FIX
================================================================================

    from exactmoney import Money

    bill = Money.euro(10_000)           # 100.00 EUR, in cents
    bill.allocate_to(3)                 # [3334, 3333, 3333]

The largest remainder method hands out the leftover units one at a time,
to the largest fractional shares first, then to the earliest slots.

================================================================================
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from exactmoney import (
    CurrencyMismatch,
    DecimalMoneyFormatter,
    DecimalMoneyParser,
    ISOCurrencies,
    Money,
    RoundingMode,
)


FORMATTER = DecimalMoneyFormatter(ISOCurrencies())
PARSER = DecimalMoneyParser(ISOCurrencies())


def show(money: Money) -> str:
    return f"{FORMATTER.format(money)} {money.currency}"


def demonstrate_bug():
    """Show the floating-point bug."""
    print("=" * 60)
    print("THE BUG")
    print("=" * 60)
    print()
    share = round(100.00 / 3, 2)
    print(">>> round(100.00 / 3, 2) * 3")
    print(f"{share * 3}")
    print()


def demonstrate_equal_split():
    """Split a bill equally."""
    print("=" * 60)
    print("EQUAL SPLIT")
    print("=" * 60)
    print()

    bill = PARSER.parse("100.00", "EUR")
    shares = bill.allocate_to(3)
    for i, share in enumerate(shares, 1):
        print(f"  Guest {i}: {show(share)}")
    print(f"  Sum:     {show(Money.sum(*shares))}")
    print()


def demonstrate_weighted_split():
    """Split by what each guest ordered, tip included."""
    print("=" * 60)
    print("WEIGHTED SPLIT")
    print("=" * 60)
    print()

    food = PARSER.parse("87.50", "EUR")
    tip = food.multiplied_by("0.15")
    banker_tip = food.multiplied_by("0.15", RoundingMode.HALF_EVEN)
    print(f"  Food:              {show(food)}")
    print(f"  Tip 15% (HALF_UP):   {show(tip)}")
    print(f"  Tip 15% (HALF_EVEN): {show(banker_tip)}")
    print()

    total = food + tip
    shares = total.allocate({"alice": "32.00", "bob": "41.50", "carol": "14.00"})
    for name, share in shares.items():
        print(f"  {name:>5}: {show(share)}")
    print(f"  Sum:   {show(Money.sum(*shares.values()))} (total {show(total)})")
    print()


def demonstrate_type_safety():
    """Show currency and float safety."""
    print("=" * 60)
    print("TYPE SAFETY")
    print("=" * 60)
    print()

    print(">>> Money.euro(100) + Money.usd(100)")
    try:
        Money.euro(100) + Money.usd(100)
    except CurrencyMismatch as e:
        print(f"CurrencyMismatch: {e}")
    print()

    print(">>> Money.euro(100).multiplied_by(0.1)")
    try:
        Money.euro(100).multiplied_by(0.1)
    except TypeError as e:
        print(f"TypeError: {e}")
    print()


def main():
    demonstrate_bug()
    demonstrate_equal_split()
    demonstrate_weighted_split()
    demonstrate_type_safety()


if __name__ == "__main__":
    main()
