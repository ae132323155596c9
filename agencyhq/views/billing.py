"""
Billing display status and financial totals.

Overdue is never stored by these functions. A pending charge whose due date
has passed is shown as overdue; only mark-as-paid writes a status back.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Optional

from .records import field, local_now, number, parse_date

PENDING = "pending"
PAID = "paid"
OVERDUE = "overdue"
CANCELLED = "cancelled"

BILLING_STATUSES = (PENDING, PAID, OVERDUE, CANCELLED)
RECURRENCES = ("once", "monthly", "quarterly", "yearly")


def derive_status(billing: Any, now: Optional[datetime] = None) -> str:
    """Display status of a billing record at ``now``."""
    stored = field(billing, "status", PENDING)
    if stored != PENDING:
        return stored
    due = parse_date(field(billing, "due_date"))
    if due is not None and due < local_now(now):
        return OVERDUE
    return stored


def in_month(value: Any, reference: datetime) -> bool:
    parsed = parse_date(value)
    return parsed is not None and parsed.year == reference.year and parsed.month == reference.month


@dataclass(frozen=True)
class BillingSummary:
    """Money totals for the financial screen, computed over display statuses."""
    expected_this_month: float
    paid_this_month: float
    pending: float
    overdue: float

    @classmethod
    def build(cls, billings: Iterable[Any], now: Optional[datetime] = None) -> "BillingSummary":
        reference = local_now(now)
        expected = paid = pending = overdue = 0
        for billing in billings:
            amount = number(billing, "amount")
            status = derive_status(billing, reference)
            if status == PENDING:
                pending += amount
            elif status == OVERDUE:
                overdue += amount
            if in_month(field(billing, "due_date"), reference):
                expected += amount
                if status == PAID:
                    paid += amount
        return cls(
            expected_this_month=expected,
            paid_this_month=paid,
            pending=pending,
            overdue=overdue,
        )
