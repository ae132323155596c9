"""
Client portal routes. A client-role user sees the Client whose
``user_email`` matches their login email.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from ..auth import get_required_user
from ..database import get_db
from ..logging_config import api_logger
from ..models import Client, Post, Report
from ..models.user import User
from ..responses import conflict, not_found
from ..schemas.client import ClientProfile, ClientResponse
from ..schemas.dashboard import CalendarMonthResponse
from ..schemas.post import CommentCreate, PostResponse
from ..schemas.report import ReportSummary
from ..serializers import calendar_to_dict, client_to_dict, post_to_dict
from ..store import EntityStore, load_collections
from ..views import CalendarMonth, ClientIndex, filter_posts
from .reports import build_summary, default_range

router = APIRouter(prefix="/api/portal", tags=["portal"])

# Approval is not offered once a post is past review
NOT_APPROVABLE = ("approved", "scheduled", "posted")


def get_portal_client(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_user),
) -> Client:
    clients = EntityStore(db, Client).filter({"user_email": current_user.email})
    if not clients:
        not_found("Client profile")
    return clients[0]


def get_own_post(db: Session, client: Client, post_id: int) -> Post:
    post = EntityStore(db, Post).get(post_id)
    if not post or post.client_id != client.id:
        not_found("Post", post_id)
    return post


@router.get("/profile", response_model=ClientResponse)
def get_profile(client: Client = Depends(get_portal_client)):
    return client_to_dict(client)


@router.patch("/profile", response_model=ClientResponse)
def update_profile(
    update: ClientProfile,
    db: Session = Depends(get_db),
    client: Client = Depends(get_portal_client),
):
    """Update objective, products, audience, brand voice and logo."""
    client = EntityStore(db, Client).update(client, update.model_dump(exclude_unset=True))
    return client_to_dict(client)


@router.get("/calendar", response_model=CalendarMonthResponse)
def get_calendar(
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    client: Client = Depends(get_portal_client),
):
    now = datetime.now()
    snapshot = load_collections(
        db,
        "portal_calendar",
        posts=lambda: EntityStore(db, Post).filter({"client_id": client.id}, "-scheduled_date"),
    )
    posts = filter_posts(snapshot["posts"], status=status)
    view = CalendarMonth.build(posts, year or now.year, month or now.month, now)
    return calendar_to_dict(view, ClientIndex([client]), snapshot.degraded)


@router.get("/posts/{post_id}", response_model=PostResponse)
def get_post(
    post_id: int,
    db: Session = Depends(get_db),
    client: Client = Depends(get_portal_client),
):
    return post_to_dict(get_own_post(db, client, post_id), ClientIndex([client]))


@router.post("/posts/{post_id}/comments", response_model=PostResponse)
def add_comment(
    post_id: int,
    body: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_user),
    client: Client = Depends(get_portal_client),
):
    post = get_own_post(db, client, post_id)
    comment = {
        "author": current_user.display_name or current_user.email,
        "text": body.text,
        "date": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }
    # reassign so the JSON column registers the change
    post = EntityStore(db, Post).update(post, {"comments": [*(post.comments or []), comment]})
    return post_to_dict(post, ClientIndex([client]))


@router.post("/posts/{post_id}/approve", response_model=PostResponse)
def approve_post(
    post_id: int,
    db: Session = Depends(get_db),
    client: Client = Depends(get_portal_client),
):
    post = get_own_post(db, client, post_id)
    if post.status in NOT_APPROVABLE:
        conflict(f"Post is already {post.status}")
    post = EntityStore(db, Post).update(post, {"status": "approved"})
    api_logger.info("Post approved by client", post_id=post.id, client_id=client.id)
    return post_to_dict(post, ClientIndex([client]))


@router.get("/reports", response_model=ReportSummary)
def get_reports(
    start: Optional[str] = None,
    end: Optional[str] = None,
    db: Session = Depends(get_db),
    client: Client = Depends(get_portal_client),
):
    start, end = default_range(start, end)
    snapshot = load_collections(
        db,
        "portal_reports",
        reports=lambda: EntityStore(db, Report).filter({"client_id": client.id}, "-period_end"),
        clients=lambda: [client],
    )
    return build_summary(snapshot, client.id, start, end)
