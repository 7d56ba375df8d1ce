from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Hashable, Optional, Sequence


ParticipantRef = Hashable
ExpenseRef = Hashable


@dataclass(slots=True)
class Participant:
    ref: ParticipantRef
    name: str
    person_count: int = 1


@dataclass(slots=True)
class Assignment:
    participant_ref: ParticipantRef
    share: Decimal


@dataclass(slots=True)
class Expense:
    id: ExpenseRef
    name: str
    item_count: Decimal
    total_cost: Optional[Decimal] = None


@dataclass(slots=True)
class ExpenseWithAssignments:
    id: ExpenseRef
    name: str
    item_count: Decimal
    total_cost: Optional[Decimal]
    assignments: Sequence[Assignment] = ()


@dataclass(slots=True)
class BillItem:
    expense_ref: ExpenseRef
    expense_name: str
    share: Decimal
    cost: Decimal


@dataclass(slots=True)
class ParticipantBill:
    participant_ref: ParticipantRef
    participant_name: str
    person_count: int
    total: Decimal = Decimal("0")
    breakdown: list[BillItem] = field(default_factory=list)


@dataclass(slots=True)
class ExtractedExpense:
    name: str
    # строка из чека ("1 500 ₽") или уже разобранная сумма
    cost: Decimal | str
