from __future__ import annotations

from typing import Iterable, Optional, Protocol

from saunasplit.config import get_settings
from saunasplit.models import Participant
from saunasplit.utils.units import Quantity, format_units


class CountedExpense(Protocol):
    name: str
    item_count: Quantity


def count_people(participants: Iterable[Participant]) -> int:
    return sum(p.person_count for p in participants)


def generate_request_text(
    total_people: int,
    expenses: Iterable[CountedExpense],
    default_expense_name: Optional[str] = None,
) -> str:
    settings = get_settings()
    default_name = settings.default_expense_name if default_expense_name is None else default_expense_name

    lines = [settings.request_header, f"{total_people} чел"]
    for expense in expenses:
        if expense.name == default_name:
            continue
        lines.append(f"{expense.name} - {format_units(expense.item_count)}")
    return "\n".join(lines)
