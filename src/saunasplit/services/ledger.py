"""Динамический пересчёт количества позиций расхода.

Количество ``item_count`` — это пул, из которого участники забирают доли.
Пул не опускается ниже суммы долей (кроме удаления половинной доли,
см. ``on_deletion``), а свободный остаток всегда вычисляется, а не
хранится. Вся арифметика идёт в целых половинках.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from saunasplit.logging import get_logger
from saunasplit.models import Assignment
from saunasplit.utils.units import Quantity, from_half_units, to_half_units, total_half_units


log = get_logger(__name__)

# одна целая позиция в половинках
WHOLE_UNIT = 2


def _unassigned_halves(item_halves: int, assignments: Sequence[Assignment]) -> int:
    return max(0, item_halves - total_half_units(assignments))


def unassigned(item_count: Quantity, assignments: Sequence[Assignment]) -> Decimal:
    return from_half_units(_unassigned_halves(to_half_units(item_count), assignments))


def on_share_change(
    item_count: Quantity,
    old_share: Quantity,
    new_share: Quantity,
    other_assignments: Sequence[Assignment],
) -> Decimal:
    """Новый размер пула, когда участник меняет свою долю.

    Рост доли всегда расширяет пул на разницу. При уменьшении на дробное
    количество освобождается только целая часть, а хвостовая половинка
    остаётся в пуле свободной. Пул не опускается ниже суммы долей.
    """
    item_halves = to_half_units(item_count)
    new_halves = to_half_units(new_share)
    delta = new_halves - to_half_units(old_share)

    if delta > 0:
        log.debug("ledger.grow", delta=str(from_half_units(delta)))
        return from_half_units(item_halves + delta)

    if delta < 0:
        reduction = -delta
        actual_reduction = reduction - reduction % WHOLE_UNIT
        other_total = total_half_units(other_assignments)
        result = max(other_total + new_halves, item_halves - actual_reduction)
        log.debug(
            "ledger.shrink",
            reduction=str(from_half_units(reduction)),
            applied=str(from_half_units(item_halves - result)),
        )
        return from_half_units(result)

    return from_half_units(item_halves)


def on_deletion(
    item_count: Quantity,
    removed_share: Quantity,
    other_assignments: Sequence[Assignment],
) -> Decimal:
    """Новый размер пула после удаления доли участника.

    Удаление половинной доли всегда освобождает целую позицию, даже если
    после этого пул окажется меньше суммы оставшихся долей.
    """
    item_halves = to_half_units(item_count)
    removed_halves = to_half_units(removed_share)
    other_total = total_half_units(other_assignments)

    if removed_halves == 1:
        result = max(0, item_halves - WHOLE_UNIT)
        log.debug("ledger.delete.half", item_count=str(from_half_units(result)))
        return from_half_units(result)

    return from_half_units(max(other_total, item_halves - removed_halves))


def on_addition(
    item_count: Quantity,
    new_share: Quantity,
    existing_assignments: Sequence[Assignment],
) -> Decimal:
    """Новый размер пула, когда к расходу присоединяется участник.

    Доля, помещающаяся в свободный остаток, пул не меняет; иначе пул
    растёт ровно на недостающую часть.
    """
    item_halves = to_half_units(item_count)
    new_halves = to_half_units(new_share)
    spare = _unassigned_halves(item_halves, existing_assignments)

    if new_halves <= spare:
        return from_half_units(item_halves)

    log.debug("ledger.grow", delta=str(from_half_units(new_halves - spare)))
    return from_half_units(item_halves + new_halves - spare)
