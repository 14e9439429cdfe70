"""
Currency conversion between major units (dollars) and cents.

Prices cross the data layer boundary in major units and are stored as
integer cents. Conversion happens here and nowhere else.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS_PER_UNIT = 100

Amount = Union[Decimal, int, float, str]


def to_cents(amount: Amount) -> int:
    """
    Convert a major-unit amount to integer cents.

    Floats go through ``str`` so ``120.1`` becomes 12010 rather than the
    binary approximation. Fractions of a cent round half-up.
    """
    if isinstance(amount, bool):
        raise TypeError("Boolean is not a currency amount")
    if isinstance(amount, float):
        amount = str(amount)
    cents = Decimal(amount) * CENTS_PER_UNIT
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert integer cents to a two-place major-unit Decimal."""
    return (Decimal(int(cents)) / CENTS_PER_UNIT).quantize(Decimal("0.01"))
