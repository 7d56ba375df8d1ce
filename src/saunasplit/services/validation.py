from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from saunasplit.config import get_settings
from saunasplit.models import Assignment, Participant
from saunasplit.utils.parse import parse_quantity
from saunasplit.utils.units import Quantity, is_half_granular, to_decimal


class ValidationError(ValueError):
    pass


def _as_number(value: object, message: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise ValidationError(message)
    try:
        number = parse_quantity(value) if isinstance(value, str) else to_decimal(value)
    except (ArithmeticError, ValueError) as exc:
        raise ValidationError(message) from exc
    if not number.is_finite():
        raise ValidationError(message)
    return number


def validate_share(value: Quantity) -> Decimal:
    share = _as_number(value, "Доля должна быть числом.")
    if share < 0:
        raise ValidationError("Доля не может быть отрицательной.")
    if not is_half_granular(share):
        raise ValidationError("Доля должна быть кратна 0.5.")
    return share


def validate_item_count(value: Quantity) -> Decimal:
    settings = get_settings()
    item_count = _as_number(value, "Количество должно быть числом.")
    if not settings.min_item_count <= item_count <= settings.max_item_count:
        raise ValidationError(
            f"Количество должно быть от {settings.min_item_count} до {settings.max_item_count}."
        )
    if not is_half_granular(item_count):
        raise ValidationError("Количество должно быть кратно 0.5.")
    return item_count


def validate_total_cost(value: Optional[Quantity]) -> Optional[Decimal]:
    if value is None:
        return None
    cost = _as_number(value, "Стоимость должна быть числом.")
    if cost < 0:
        raise ValidationError("Стоимость не может быть отрицательной.")
    return cost


def validate_assignments(
    assignments: Sequence[Assignment],
    participants: Sequence[Participant],
) -> list[Assignment]:
    known = {p.ref for p in participants}
    seen: set[object] = set()
    result: list[Assignment] = []
    for assignment in assignments:
        if assignment.participant_ref not in known:
            raise ValidationError(f"Участник {assignment.participant_ref} не найден в сессии.")
        if assignment.participant_ref in seen:
            raise ValidationError(f"Участник {assignment.participant_ref} указан дважды.")
        seen.add(assignment.participant_ref)
        result.append(Assignment(assignment.participant_ref, validate_share(assignment.share)))
    return result
