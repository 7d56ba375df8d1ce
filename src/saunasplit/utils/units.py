from __future__ import annotations

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Iterable, Union

from saunasplit.models import Assignment


Quantity = Union[Decimal, int, float, str]


def to_decimal(value: Quantity) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # float через str, иначе Decimal унаследует двоичный хвост
    return Decimal(str(value))


def to_half_units(value: Quantity) -> int:
    """Перевод количества в целые половинки (1.5 -> 3).

    Значение округляется до ближайшей половинки, поэтому шум вроде
    0.1 + 0.2 не превращается в дробный дрейф.
    """
    doubled = to_decimal(value) * 2
    return int(doubled.to_integral_value(rounding=ROUND_HALF_EVEN))


def from_half_units(halves: int) -> Decimal:
    return Decimal(halves) / 2


def total_half_units(assignments: Iterable[Assignment]) -> int:
    return sum(to_half_units(a.share) for a in assignments)


def is_half_granular(value: Quantity) -> bool:
    return (to_decimal(value) * 2) % 1 == 0


def format_units(value: Quantity) -> str:
    number = to_decimal(value)
    if number == number.to_integral_value():
        return str(int(number))
    return format(number.normalize(), "f")
