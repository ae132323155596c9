"""
Client routes: agency-side management of client brands.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from ..auth import get_required_admin
from ..database import get_db
from ..models import Client, Post
from ..models.user import User
from ..responses import deleted, not_found, validation_error
from ..schemas.client import ClientCreate, ClientListItem, ClientResponse, ClientUpdate
from ..serializers import client_to_dict
from ..store import EntityStore, load_collections
from ..views import count_posts_by_client, filter_clients
from ..views.lookup import posts_count

router = APIRouter(prefix="/api/clients", tags=["clients"])


def get_client_or_404(store: EntityStore, client_id: int) -> Client:
    client = store.get(client_id)
    if not client:
        not_found("Client", client_id)
    return client


def require_client(db: Session, client_id: int) -> Client:
    """Referenced client for a post, report or billing; 422 when it does not exist."""
    client = EntityStore(db, Client).get(client_id)
    if not client:
        validation_error(f"Client {client_id} does not exist", {"field": "client_id"})
    return client


@router.get("", response_model=List[ClientListItem])
def list_clients(
    search: Optional[str] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """List clients newest first, with search, status filter and post counts."""
    snapshot = load_collections(
        db,
        "clients",
        clients=lambda: EntityStore(db, Client).list("-created_date"),
        posts=lambda: EntityStore(db, Post).list(),
    )
    counts = count_posts_by_client(snapshot["posts"])
    return [
        client_to_dict(client, posts_count(counts, client.id))
        for client in filter_clients(snapshot["clients"], search, status)
    ]


@router.get("/{client_id}", response_model=ClientResponse)
def get_client(
    client_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    return client_to_dict(get_client_or_404(EntityStore(db, Client), client_id))


@router.post("", response_model=ClientResponse)
def create_client(
    client_data: ClientCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    client = EntityStore(db, Client).create(client_data.model_dump())
    return client_to_dict(client)


@router.patch("/{client_id}", response_model=ClientResponse)
def update_client(
    client_id: int,
    update: ClientUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    store = EntityStore(db, Client)
    client = get_client_or_404(store, client_id)
    client = store.update(client, update.model_dump(exclude_unset=True))
    return client_to_dict(client)


@router.delete("/{client_id}")
def delete_client(
    client_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_admin),
):
    """Delete a client together with its posts, reports and billings."""
    store = EntityStore(db, Client)
    store.delete(get_client_or_404(store, client_id))
    return deleted("Client deleted")
