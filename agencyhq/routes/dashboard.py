"""
Dashboard routes for the agency home screen.
"""
from datetime import datetime
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth import get_required_admin
from ..config import get_settings
from ..database import get_db
from ..models import Client, Post
from ..models.user import User
from ..schemas.dashboard import DashboardStats
from ..serializers import calendar_item
from ..store import EntityStore, load_collections
from ..views import ClientIndex, DashboardSummary

settings = get_settings()

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
def get_dashboard_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """Active clients, today's posts, scheduled and posted-this-month counts."""
    snapshot = load_collections(
        db,
        "dashboard",
        clients=lambda: EntityStore(db, Client).list("-created_date"),
        posts=lambda: EntityStore(db, Post).list("-scheduled_date", settings.dashboard_posts_limit),
    )
    clients = ClientIndex(snapshot["clients"])
    summary = DashboardSummary.build(
        snapshot["clients"],
        snapshot["posts"],
        datetime.now(),
        recent_limit=settings.recent_clients_limit,
    )

    return DashboardStats(
        active_clients=summary.active_clients,
        posts_today_count=len(summary.posts_today),
        scheduled_posts=summary.scheduled_posts,
        posted_this_month=summary.posted_this_month,
        posts_today=[calendar_item(p, clients) for p in summary.posts_today],
        recent_clients=[
            {
                "id": c.id,
                "company_name": c.company_name,
                "status": c.status,
                "logo_url": c.logo_url,
            }
            for c in summary.recent_clients
        ],
        degraded=snapshot.degraded,
    )
