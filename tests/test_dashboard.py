"""
Tests for the agency dashboard.
"""
from datetime import date

from agencyhq.models import Client, Post


class TestDashboardEndpoint:

    def test_empty_dashboard(self, client, admin_headers):
        response = client.get("/api/dashboard", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["active_clients"] == 0
        assert data["posts_today"] == []
        assert data["recent_clients"] == []
        assert data["degraded"] is False

    def test_counts(self, client, admin_headers, db, brand):
        today = date.today().isoformat()
        db.add(Client(company_name="Dormant", status="inactive"))
        db.add_all([
            Post(client_id=brand.id, title="today", status="scheduled", scheduled_date=today),
            Post(client_id=brand.id, title="done", status="posted", scheduled_date=today),
            Post(client_id=brand.id, title="old", status="posted", scheduled_date="2001-01-01"),
        ])
        db.commit()

        data = client.get("/api/dashboard", headers=admin_headers).json()
        assert data["active_clients"] == 1
        assert data["posts_today_count"] == 2
        assert data["scheduled_posts"] == 1
        assert data["posted_this_month"] == 1
        assert {c["company_name"] for c in data["recent_clients"]} == {"Acme Coffee", "Dormant"}
        assert data["posts_today"][0]["client_name"] == "Acme Coffee"

    def test_recent_clients_capped(self, client, admin_headers, db):
        db.add_all([Client(company_name=f"Client {i}") for i in range(8)])
        db.commit()
        data = client.get("/api/dashboard", headers=admin_headers).json()
        assert len(data["recent_clients"]) == 5

    def test_client_role_forbidden(self, client, client_headers):
        assert client.get("/api/dashboard", headers=client_headers).status_code == 403
