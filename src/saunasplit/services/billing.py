from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Sequence

from saunasplit.logging import get_logger
from saunasplit.models import (
    BillItem,
    Expense,
    ExpenseWithAssignments,
    ExtractedExpense,
    Participant,
    ParticipantBill,
)
from saunasplit.utils.parse import parse_cost
from saunasplit.utils.units import from_half_units, to_decimal, total_half_units


log = get_logger(__name__)

WHOLE = Decimal("1")
CENTS = Decimal("0.01")


@dataclass(slots=True)
class BillingReadiness:
    ready: bool
    issues: list[str] = field(default_factory=list)
    missing_cost_expenses: list[ExpenseWithAssignments] = field(default_factory=list)


@dataclass(slots=True)
class BillingSummary:
    ready: bool
    issues: list[str]
    bills: list[ParticipantBill]
    grand_total: Decimal
    expense_total: Decimal
    balance: Decimal
    missing_cost_expenses: list[ExpenseWithAssignments]


def calculate_bills(
    participants: Sequence[Participant],
    expenses: Sequence[ExpenseWithAssignments],
) -> list[ParticipantBill]:
    bills: list[ParticipantBill] = []
    by_ref: dict[object, ParticipantBill] = {}
    for participant in participants:
        bill = ParticipantBill(
            participant_ref=participant.ref,
            participant_name=participant.name,
            person_count=participant.person_count,
        )
        bills.append(bill)
        by_ref[participant.ref] = bill

    for expense in expenses:
        if expense.total_cost is None:
            log.debug("billing.expense.skipped", expense_id=expense.id, reason="no_cost")
            continue

        total_shares = from_half_units(total_half_units(expense.assignments))
        if total_shares == 0:
            log.debug("billing.expense.skipped", expense_id=expense.id, reason="no_shares")
            continue

        cost_per_share = to_decimal(expense.total_cost) / total_shares

        for assignment in expense.assignments:
            bill = by_ref.get(assignment.participant_ref)
            if bill is None:
                log.warning(
                    "billing.assignment.unknown_participant",
                    expense_id=expense.id,
                    participant_ref=assignment.participant_ref,
                )
                continue
            share = to_decimal(assignment.share)
            cost = share * cost_per_share
            bill.total += cost
            bill.breakdown.append(
                BillItem(
                    expense_ref=expense.id,
                    expense_name=expense.name,
                    share=share,
                    cost=cost,
                )
            )

    # округляем один раз, после всех расходов
    for bill in bills:
        bill.total = bill.total.quantize(WHOLE, rounding=ROUND_HALF_UP)
        for item in bill.breakdown:
            item.cost = item.cost.quantize(CENTS, rounding=ROUND_HALF_UP)

    return bills


def check_readiness(
    participants: Sequence[Participant],
    expenses: Sequence[ExpenseWithAssignments],
) -> BillingReadiness:
    issues: list[str] = []

    missing_cost = [e for e in expenses if e.total_cost is None]
    if missing_cost:
        issues.append(f"{len(missing_cost)} expense(s) missing cost")

    unassigned = [e for e in expenses if not e.assignments]
    if unassigned:
        issues.append(f"{len(unassigned)} expense(s) have no assignments")

    if not participants:
        issues.append("No participants in session")

    return BillingReadiness(ready=not issues, issues=issues, missing_cost_expenses=missing_cost)


def summarize_billing(
    participants: Sequence[Participant],
    expenses: Sequence[ExpenseWithAssignments],
) -> BillingSummary:
    """Счета участников и остаток округления («общак»).

    Счета считаются только когда проверка готовности пройдена; сумма
    расходов возвращается всегда, отсутствующая стоимость считается нулём.
    """
    readiness = check_readiness(participants, expenses)
    bills = calculate_bills(participants, expenses) if readiness.ready else []

    grand_total = sum((bill.total for bill in bills), Decimal("0"))
    expense_total = sum(
        (to_decimal(e.total_cost) for e in expenses if e.total_cost is not None),
        Decimal("0"),
    )
    balance = grand_total - expense_total

    log.info(
        "billing.summary",
        ready=readiness.ready,
        grand_total=str(grand_total),
        expense_total=str(expense_total),
        balance=str(balance),
    )
    return BillingSummary(
        ready=readiness.ready,
        issues=readiness.issues,
        bills=bills,
        grand_total=grand_total,
        expense_total=expense_total,
        balance=balance,
        missing_cost_expenses=readiness.missing_cost_expenses,
    )


def apply_extracted_costs(
    expenses: Sequence[Expense],
    extracted: Iterable[ExtractedExpense],
) -> list[Expense]:
    """Проставляет стоимость расходам, найденным в чеке по имени без учёта регистра.

    Строковая сумма разбирается ``parse_cost``; нераспознанная сумма
    поднимает ``ValueError``, как и в самом парсере.
    """
    updated = list(expenses)
    for line in extracted:
        key = line.name.casefold()
        cost = parse_cost(line.cost) if isinstance(line.cost, str) else to_decimal(line.cost)
        for index, expense in enumerate(updated):
            if expense.name.casefold() == key:
                updated[index] = replace(expense, total_cost=cost)
                break
        else:
            log.info("billing.extracted.unmatched", name=line.name)
    return updated
