from decimal import Decimal

from saunasplit.models import Assignment, Expense, Participant
from saunasplit.services.assignments import (
    change_share,
    default_assignments,
    join_expense,
    leave_expense,
    new_expense,
)


def make_expense(item_count):
    return Expense(id=7, name="Веники", item_count=Decimal(item_count))


def test_new_expense_uses_initial_share_or_default():
    assert new_expense(1, "Пиво", Decimal("2.5")).item_count == Decimal("2.5")
    created = new_expense(2, "Квас")
    assert created.item_count == Decimal("1")
    assert created.total_cost is None


def test_default_assignments_follow_person_count():
    participants = [Participant(ref=1, name="Артур", person_count=2), Participant(ref=2, name="Андрей")]

    assert default_assignments(participants) == [
        Assignment(participant_ref=1, share=Decimal("2")),
        Assignment(participant_ref=2, share=Decimal("1")),
    ]


def test_join_grows_pool_and_appends_assignment():
    assignments = [Assignment("a", Decimal("1")), Assignment("b", Decimal("1"))]

    update = join_expense(make_expense("2"), assignments, "c", Decimal("1"))

    assert update.expense.item_count == Decimal("3")
    assert update.assignments[-1] == Assignment("c", Decimal("1"))
    assert update.delete_expense is False
    assert len(assignments) == 2


def test_join_existing_participant_changes_share():
    assignments = [Assignment("a", Decimal("1")), Assignment("b", Decimal("1"))]

    update = join_expense(make_expense("2"), assignments, "a", Decimal("2"))

    assert update.expense.item_count == Decimal("3")
    assert update.assignments == (Assignment("a", Decimal("2")), Assignment("b", Decimal("1")))


def test_join_with_zero_share_is_noop():
    assignments = [Assignment("a", Decimal("1"))]
    expense = make_expense("1")

    update = join_expense(expense, assignments, "b", Decimal("0"))

    assert update.expense == expense
    assert update.assignments == (Assignment("a", Decimal("1")),)


def test_change_share_floors_fractional_shrink():
    assignments = [
        Assignment("a", Decimal("2")),
        Assignment("b", Decimal("1")),
        Assignment("c", Decimal("1")),
    ]

    update = change_share(make_expense("4"), assignments, "a", Decimal("0.5"))

    assert update.expense.item_count == Decimal("3")
    assert update.assignments[0] == Assignment("a", Decimal("0.5"))


def test_change_share_to_zero_leaves_expense():
    assignments = [Assignment("a", Decimal("2")), Assignment("b", Decimal("1"))]

    update = change_share(make_expense("3"), assignments, "a", Decimal("0"))

    assert update.expense.item_count == Decimal("1")
    assert update.assignments == (Assignment("b", Decimal("1")),)


def test_leave_last_assignment_marks_expense_for_deletion():
    update = leave_expense(make_expense("1"), [Assignment("a", Decimal("1"))], "a")

    assert update.assignments == ()
    assert update.delete_expense is True
    assert update.expense.item_count == Decimal("0")


def test_leave_unknown_participant_keeps_snapshot():
    assignments = [Assignment("a", Decimal("1"))]

    update = leave_expense(make_expense("2"), assignments, "z")

    assert update.expense.item_count == Decimal("2")
    assert update.assignments == (Assignment("a", Decimal("1")),)
    assert update.delete_expense is False


def test_half_share_join_then_leave_loses_a_unit():
    assignments = [Assignment("a", Decimal("1")), Assignment("b", Decimal("1"))]

    joined = join_expense(make_expense("3"), assignments, "c", Decimal("0.5"))
    left = leave_expense(joined.expense, joined.assignments, "c")

    assert joined.expense.item_count == Decimal("3")
    assert left.expense.item_count == Decimal("2")
