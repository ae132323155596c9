"""
Calendar routes: posts grouped by day for one month.
"""
from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from ..auth import get_required_admin
from ..database import get_db
from ..models import Client, Post
from ..models.user import User
from ..schemas.dashboard import CalendarMonthResponse
from ..serializers import calendar_to_dict
from ..store import EntityStore, load_collections
from ..views import CalendarMonth, ClientIndex, filter_posts

router = APIRouter(prefix="/api/calendar", tags=["calendar"])


@router.get("", response_model=CalendarMonthResponse)
def get_month(
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    client_id: Optional[str] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """Month grid of posts, filtered by client and status. Defaults to the current month."""
    now = datetime.now()
    snapshot = load_collections(
        db,
        "calendar",
        posts=lambda: EntityStore(db, Post).list("-scheduled_date"),
        clients=lambda: EntityStore(db, Client).list(),
    )
    posts = filter_posts(snapshot["posts"], client_id, status)
    view = CalendarMonth.build(posts, year or now.year, month or now.month, now)
    return calendar_to_dict(view, ClientIndex(snapshot["clients"]), snapshot.degraded)
