"""
Report routes: performance metrics per client, with totals and charts.
"""
from dataclasses import asdict
from datetime import date, timedelta
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from ..auth import get_required_admin
from ..config import get_settings
from ..database import get_db
from ..models import Client, Report
from ..models.user import User
from ..responses import deleted, not_found
from ..schemas.report import ReportCreate, ReportResponse, ReportSummary, ReportUpdate
from ..serializers import report_to_dict
from ..store import EntityStore, Snapshot, load_collections
from .clients import require_client
from ..views import ClientIndex, filter_reports, metrics_series, sum_metrics

settings = get_settings()

router = APIRouter(prefix="/api/reports", tags=["reports"])


def default_range(start: Optional[str], end: Optional[str]) -> tuple:
    today = date.today()
    start = start or (today - timedelta(days=settings.report_default_days)).isoformat()
    end = end or today.isoformat()
    return start, end


def build_summary(snapshot: Snapshot, client_id: Any, start: str, end: str) -> Dict[str, Any]:
    """Filtered reports plus their totals and an ascending chart series."""
    clients = ClientIndex(snapshot["clients"])
    reports = filter_reports(snapshot["reports"], client_id, start, end)
    return {
        "start": start,
        "end": end,
        "reports": [report_to_dict(r, clients) for r in reports],
        "totals": sum_metrics(reports).to_dict(),
        "chart": [asdict(point) for point in metrics_series(reports)],
        "degraded": snapshot.degraded,
    }


def get_report_or_404(store: EntityStore, report_id: int) -> Report:
    report = store.get(report_id)
    if not report:
        not_found("Report", report_id)
    return report


@router.get("", response_model=List[ReportResponse])
def list_reports(
    client_id: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """All reports, latest period first."""
    snapshot = load_collections(
        db,
        "reports",
        reports=lambda: EntityStore(db, Report).list("-period_end"),
        clients=lambda: EntityStore(db, Client).list(),
    )
    clients = ClientIndex(snapshot["clients"])
    return [report_to_dict(r, clients) for r in filter_reports(snapshot["reports"], client_id)]


@router.get("/summary", response_model=ReportSummary)
def get_summary(
    client_id: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """Reports inside [start, end] (default: the last 30 days) with totals and chart."""
    start, end = default_range(start, end)
    snapshot = load_collections(
        db,
        "reports",
        reports=lambda: EntityStore(db, Report).list("-period_end"),
        clients=lambda: EntityStore(db, Client).list(),
    )
    return build_summary(snapshot, client_id, start, end)


@router.get("/{report_id}", response_model=ReportResponse)
def get_report(
    report_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    report = get_report_or_404(EntityStore(db, Report), report_id)
    return report_to_dict(report, ClientIndex([report.client]))


@router.post("", response_model=ReportResponse)
def create_report(
    report_data: ReportCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    client = require_client(db, report_data.client_id)
    report = EntityStore(db, Report).create(report_data.model_dump())
    return report_to_dict(report, ClientIndex([client]))


@router.patch("/{report_id}", response_model=ReportResponse)
def update_report(
    report_id: int,
    update: ReportUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    store = EntityStore(db, Report)
    report = get_report_or_404(store, report_id)
    update_data = update.model_dump(exclude_unset=True)
    if "client_id" in update_data:
        require_client(db, update_data["client_id"])
    report = store.update(report, update_data)
    return report_to_dict(report, ClientIndex([report.client]))


@router.delete("/{report_id}")
def delete_report(
    report_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    store = EntityStore(db, Report)
    store.delete(get_report_or_404(store, report_id))
    return deleted("Report deleted")
