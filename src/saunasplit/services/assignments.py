"""Изменение снимка расхода, когда участники присоединяются, меняют долю или уходят.

Функции не трогают входные данные и возвращают новый снимок. Сохранять
его и сериализовать конкурентные изменения одного расхода должен вызывающий.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from saunasplit.config import get_settings
from saunasplit.logging import get_logger
from saunasplit.models import Assignment, Expense, ExpenseRef, Participant, ParticipantRef
from saunasplit.services.ledger import on_addition, on_deletion, on_share_change
from saunasplit.utils.units import Quantity, to_decimal, to_half_units


log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ExpenseUpdate:
    expense: Expense
    assignments: tuple[Assignment, ...]
    delete_expense: bool = False


def _find(assignments: Sequence[Assignment], participant_ref: ParticipantRef) -> Optional[Assignment]:
    for assignment in assignments:
        if assignment.participant_ref == participant_ref:
            return assignment
    return None


def _others(assignments: Sequence[Assignment], participant_ref: ParticipantRef) -> list[Assignment]:
    return [a for a in assignments if a.participant_ref != participant_ref]


def new_expense(expense_id: ExpenseRef, name: str, initial_share: Optional[Quantity] = None) -> Expense:
    item_count = get_settings().default_item_count if initial_share is None else to_decimal(initial_share)
    return Expense(id=expense_id, name=name, item_count=item_count, total_cost=None)


def default_assignments(participants: Iterable[Participant]) -> list[Assignment]:
    return [Assignment(participant_ref=p.ref, share=Decimal(p.person_count)) for p in participants]


def join_expense(
    expense: Expense,
    assignments: Sequence[Assignment],
    participant_ref: ParticipantRef,
    share: Quantity,
) -> ExpenseUpdate:
    if _find(assignments, participant_ref) is not None:
        return change_share(expense, assignments, participant_ref, share)
    if to_half_units(share) == 0:
        return ExpenseUpdate(expense=expense, assignments=tuple(assignments))

    item_count = on_addition(expense.item_count, share, assignments)
    log.info(
        "expense.join",
        expense_id=expense.id,
        participant_ref=participant_ref,
        share=str(share),
        item_count=str(item_count),
    )
    return ExpenseUpdate(
        expense=replace(expense, item_count=item_count),
        assignments=(*assignments, Assignment(participant_ref, to_decimal(share))),
    )


def change_share(
    expense: Expense,
    assignments: Sequence[Assignment],
    participant_ref: ParticipantRef,
    new_share: Quantity,
) -> ExpenseUpdate:
    current = _find(assignments, participant_ref)
    if current is None:
        return join_expense(expense, assignments, participant_ref, new_share)
    if to_half_units(new_share) == 0:
        return leave_expense(expense, assignments, participant_ref)

    others = _others(assignments, participant_ref)
    item_count = on_share_change(expense.item_count, current.share, new_share, others)
    log.info(
        "expense.share.change",
        expense_id=expense.id,
        participant_ref=participant_ref,
        old_share=str(current.share),
        new_share=str(new_share),
        item_count=str(item_count),
    )
    updated = tuple(
        Assignment(a.participant_ref, to_decimal(new_share)) if a.participant_ref == participant_ref else a
        for a in assignments
    )
    return ExpenseUpdate(expense=replace(expense, item_count=item_count), assignments=updated)


def leave_expense(
    expense: Expense,
    assignments: Sequence[Assignment],
    participant_ref: ParticipantRef,
) -> ExpenseUpdate:
    current = _find(assignments, participant_ref)
    if current is None:
        return ExpenseUpdate(expense=expense, assignments=tuple(assignments))

    others = _others(assignments, participant_ref)
    item_count = on_deletion(expense.item_count, current.share, others)
    log.info(
        "expense.leave",
        expense_id=expense.id,
        participant_ref=participant_ref,
        item_count=str(item_count),
        delete_expense=not others,
    )
    return ExpenseUpdate(
        expense=replace(expense, item_count=item_count),
        assignments=tuple(others),
        delete_expense=not others,
    )
