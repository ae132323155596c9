from pydantic import BaseModel
from typing import Literal, Optional

BillingStatus = Literal["pending", "paid", "overdue", "cancelled"]
Recurrence = Literal["once", "monthly", "quarterly", "yearly"]


class BillingBase(BaseModel):
    description: Optional[str] = None
    amount: float
    due_date: str
    status: BillingStatus = "pending"
    recurrence: Recurrence = "monthly"
    payment_date: Optional[str] = None
    notes: Optional[str] = None


class BillingCreate(BillingBase):
    client_id: int


class BillingUpdate(BaseModel):
    client_id: Optional[int] = None
    description: Optional[str] = None
    amount: Optional[float] = None
    due_date: Optional[str] = None
    status: Optional[BillingStatus] = None
    recurrence: Optional[Recurrence] = None
    payment_date: Optional[str] = None
    notes: Optional[str] = None


class BillingResponse(BaseModel):
    id: int
    client_id: int
    client_name: str = ""
    description: Optional[str] = None
    amount: Optional[float] = None
    due_date: Optional[str] = None
    status: str  # display status
    stored_status: str
    recurrence: Optional[str] = None
    payment_date: Optional[str] = None
    notes: Optional[str] = None


class BillingSummaryResponse(BaseModel):
    expected_this_month: float
    paid_this_month: float
    pending: float
    overdue: float
    degraded: bool = False
