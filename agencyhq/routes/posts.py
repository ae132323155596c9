"""
Posts routes for CRUD operations on client posts.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from ..auth import get_required_admin
from ..database import get_db
from ..logging_config import api_logger
from ..models import Client, Post
from ..models.user import User
from ..responses import deleted, not_found, validation_error
from ..schemas.post import (
    MAX_MEDIA_PER_POST,
    TOO_MANY_MEDIA,
    PostCreate,
    PostResponse,
    PostUpdate,
    StatusUpdate,
    media_count,
)
from ..serializers import post_to_dict
from ..store import EntityStore, load_collections
from .clients import require_client
from ..views import ClientIndex, filter_posts

router = APIRouter(prefix="/api/posts", tags=["posts"])


def get_post_or_404(store: EntityStore, post_id: int) -> Post:
    post = store.get(post_id)
    if not post:
        not_found("Post", post_id)
    return post


@router.get("", response_model=List[PostResponse])
def get_posts(
    client_id: Optional[str] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """All posts by scheduled date (latest first), optionally filtered."""
    snapshot = load_collections(
        db,
        "posts",
        posts=lambda: EntityStore(db, Post).list("-scheduled_date"),
        clients=lambda: EntityStore(db, Client).list(),
    )
    clients = ClientIndex(snapshot["clients"])
    return [post_to_dict(p, clients) for p in filter_posts(snapshot["posts"], client_id, status)]


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    post = get_post_or_404(EntityStore(db, Post), post_id)
    return post_to_dict(post, ClientIndex([post.client]))


@router.post("", response_model=PostResponse)
def create_post(
    post_data: PostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    client = require_client(db, post_data.client_id)
    post = EntityStore(db, Post).create({**post_data.model_dump(), "comments": []})
    return post_to_dict(post, ClientIndex([client]))


@router.patch("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: int,
    post_update: PostUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    store = EntityStore(db, Post)
    post = get_post_or_404(store, post_id)

    update_data = post_update.model_dump(exclude_unset=True)
    if "client_id" in update_data:
        require_client(db, update_data["client_id"])

    # limit applies to the stored media merged with the patch
    merged = media_count(
        update_data.get("media_url", post.media_url),
        update_data.get("media_urls", post.media_urls),
    )
    if merged > MAX_MEDIA_PER_POST:
        validation_error(TOO_MANY_MEDIA, {"field": "media_urls", "count": merged})

    post = store.update(post, update_data)
    return post_to_dict(post, ClientIndex([post.client]))


@router.patch("/{post_id}/status", response_model=PostResponse)
def change_status(
    post_id: int,
    body: StatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """Set any status. Transitions are deliberately not restricted."""
    store = EntityStore(db, Post)
    post = get_post_or_404(store, post_id)
    previous = post.status
    post = store.update(post, {"status": body.status})
    api_logger.info("Post status changed", post_id=post.id, previous=previous, status=post.status)
    return post_to_dict(post, ClientIndex([post.client]))


@router.delete("/{post_id}")
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    store = EntityStore(db, Post)
    store.delete(get_post_or_404(store, post_id))
    return deleted("Post deleted")
