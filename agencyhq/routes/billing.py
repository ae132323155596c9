"""
Billing routes: client charges, display status and financial totals.
"""
from dataclasses import asdict
from datetime import date, datetime
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from ..auth import get_required_admin
from ..database import get_db
from ..logging_config import api_logger
from ..models import Billing, Client
from ..models.user import User
from ..responses import deleted, not_found
from ..schemas.billing import (
    BillingCreate,
    BillingResponse,
    BillingSummaryResponse,
    BillingUpdate,
)
from ..serializers import billing_to_dict
from ..store import EntityStore, load_collections
from ..views import BillingSummary, ClientIndex, filter_billings
from ..views.billing import PAID
from .clients import require_client

router = APIRouter(prefix="/api/billing", tags=["billing"])


def get_billing_or_404(store: EntityStore, billing_id: int) -> Billing:
    billing = store.get(billing_id)
    if not billing:
        not_found("Billing", billing_id)
    return billing


def load_billings(db: Session):
    return load_collections(
        db,
        "billing",
        billings=lambda: EntityStore(db, Billing).list("-due_date"),
        clients=lambda: EntityStore(db, Client).list(),
    )


@router.get("", response_model=List[BillingResponse])
def list_billings(
    client_id: Optional[str] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """Charges by due date (latest first). ``status`` filters on the display status."""
    now = datetime.now()
    snapshot = load_billings(db)
    clients = ClientIndex(snapshot["clients"])
    return [
        billing_to_dict(b, clients, now)
        for b in filter_billings(snapshot["billings"], client_id, status, now)
    ]


@router.get("/summary", response_model=BillingSummaryResponse)
def get_summary(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """Expected and received this month, plus open pending and overdue amounts."""
    snapshot = load_billings(db)
    summary = BillingSummary.build(snapshot["billings"], datetime.now())
    return {**asdict(summary), "degraded": snapshot.degraded}


@router.get("/{billing_id}", response_model=BillingResponse)
def get_billing(
    billing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    billing = get_billing_or_404(EntityStore(db, Billing), billing_id)
    return billing_to_dict(billing, ClientIndex([billing.client]))


@router.post("", response_model=BillingResponse)
def create_billing(
    billing_data: BillingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    client = require_client(db, billing_data.client_id)
    billing = EntityStore(db, Billing).create(billing_data.model_dump())
    return billing_to_dict(billing, ClientIndex([client]))


@router.patch("/{billing_id}", response_model=BillingResponse)
def update_billing(
    billing_id: int,
    update: BillingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    store = EntityStore(db, Billing)
    billing = get_billing_or_404(store, billing_id)
    update_data = update.model_dump(exclude_unset=True)
    if "client_id" in update_data:
        require_client(db, update_data["client_id"])
    billing = store.update(billing, update_data)
    return billing_to_dict(billing, ClientIndex([billing.client]))


@router.post("/{billing_id}/mark-paid", response_model=BillingResponse)
def mark_as_paid(
    billing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """The only path that writes a settled status back to the record."""
    store = EntityStore(db, Billing)
    billing = get_billing_or_404(store, billing_id)
    billing = store.update(billing, {"status": PAID, "payment_date": date.today().isoformat()})
    api_logger.info("Billing marked as paid", billing_id=billing.id, amount=billing.amount)
    return billing_to_dict(billing, ClientIndex([billing.client]))


@router.delete("/{billing_id}")
def delete_billing(
    billing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    store = EntityStore(db, Billing)
    store.delete(get_billing_or_404(store, billing_id))
    return deleted("Billing deleted")
