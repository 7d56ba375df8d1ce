from saunasplit.services.assignments import (
    ExpenseUpdate,
    change_share,
    default_assignments,
    join_expense,
    leave_expense,
    new_expense,
)
from saunasplit.services.billing import (
    BillingReadiness,
    BillingSummary,
    apply_extracted_costs,
    calculate_bills,
    check_readiness,
    summarize_billing,
)
from saunasplit.services.ledger import on_addition, on_deletion, on_share_change, unassigned
from saunasplit.services.request_text import count_people, generate_request_text
from saunasplit.services.validation import (
    ValidationError,
    validate_assignments,
    validate_item_count,
    validate_share,
    validate_total_cost,
)

__all__ = [
    "BillingReadiness",
    "BillingSummary",
    "ExpenseUpdate",
    "ValidationError",
    "apply_extracted_costs",
    "calculate_bills",
    "change_share",
    "check_readiness",
    "count_people",
    "default_assignments",
    "generate_request_text",
    "join_expense",
    "leave_expense",
    "new_expense",
    "on_addition",
    "on_deletion",
    "on_share_change",
    "summarize_billing",
    "unassigned",
    "validate_assignments",
    "validate_item_count",
    "validate_share",
    "validate_total_cost",
]
