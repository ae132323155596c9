"""
Tests for the record store and degraded loading.
"""
import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from agencyhq.models import Client, Post
from agencyhq.store import EntityStore, load_collections


class TestEntityStore:

    def test_crud(self, db):
        store = EntityStore(db, Client)
        record = store.create({"company_name": "Acme"})
        assert record.id is not None
        assert record.status == "active"

        store.update(record, {"status": "inactive"})
        assert store.get(record.id).status == "inactive"

        store.delete(record)
        assert store.get(record.id) is None

    def test_sort_and_limit(self, db):
        store = EntityStore(db, Client)
        for name in ("b", "c", "a"):
            store.create({"company_name": name})
        assert [c.company_name for c in store.list("company_name")] == ["a", "b", "c"]
        assert [c.company_name for c in store.list("-company_name", limit=2)] == ["c", "b"]

    def test_filter(self, db):
        store = EntityStore(db, Client)
        store.create({"company_name": "a", "user_email": "x@y.z"})
        store.create({"company_name": "b"})
        assert [c.company_name for c in store.filter({"user_email": "x@y.z"})] == ["a"]

    def test_unknown_sort_field(self, db):
        with pytest.raises(ValueError):
            EntityStore(db, Client).list("-nope")

    def test_failed_write_rolls_back(self, db):
        store = EntityStore(db, Post)
        with pytest.raises(IntegrityError):
            store.create({"client_id": 1, "title": None})
        assert store.list() == []


class TestLoadCollections:

    def test_loads_every_collection(self, db):
        EntityStore(db, Client).create({"company_name": "Acme"})
        snapshot = load_collections(
            db,
            "test",
            clients=lambda: EntityStore(db, Client).list(),
            posts=lambda: EntityStore(db, Post).list(),
        )
        assert not snapshot.degraded
        assert len(snapshot["clients"]) == 1
        assert snapshot["posts"] == []

    def test_failure_degrades_to_empty(self, db):
        EntityStore(db, Client).create({"company_name": "Acme"})

        def broken():
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

        snapshot = load_collections(
            db,
            "test",
            clients=lambda: EntityStore(db, Client).list(),
            posts=broken,
        )
        assert snapshot.degraded
        assert snapshot["clients"] == []
        assert snapshot["posts"] == []

    def test_degraded_screen_still_renders(self, client, admin_headers, monkeypatch):
        def broken(self, *args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("gone"))

        monkeypatch.setattr(EntityStore, "list", broken)
        response = client.get("/api/calendar?year=2024&month=3", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["degraded"] is True
        assert data["total"] == 0
