"""
Tests for client management endpoints.
"""
from agencyhq.models import Billing, Client, Post, Report


class TestClientsEndpoints:

    def test_create_client(self, client, admin_headers):
        response = client.post(
            "/api/clients",
            headers=admin_headers,
            json={
                "company_name": "Gamma Gym",
                "user_email": "hello@gamma.fit",
                "brand_voice": "inspirador",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["company_name"] == "Gamma Gym"
        assert data["status"] == "active"
        assert data["brand_voice"] == "inspirador"

    def test_create_client_requires_name(self, client, admin_headers):
        response = client.post("/api/clients", headers=admin_headers, json={"user_email": "x@y.z"})
        assert response.status_code == 422

    def test_list_with_posts_count(self, client, admin_headers, db, brand):
        db.add_all([
            Post(client_id=brand.id, title="one"),
            Post(client_id=brand.id, title="two"),
        ])
        db.add(Client(company_name="Quiet Co", status="inactive"))
        db.commit()

        response = client.get("/api/clients", headers=admin_headers)
        assert response.status_code == 200
        counts = {c["company_name"]: c["posts_count"] for c in response.json()}
        assert counts == {"Acme Coffee": 2, "Quiet Co": 0}

    def test_search_and_status_filter(self, client, admin_headers, db, brand):
        db.add(Client(company_name="Beta Bakery", user_email="team@acme-bakes.com", status="inactive"))
        db.add(Client(company_name="Gamma Gym", status="active"))
        db.commit()

        response = client.get("/api/clients?search=ACME", headers=admin_headers)
        assert sorted(c["company_name"] for c in response.json()) == ["Acme Coffee", "Beta Bakery"]

        response = client.get("/api/clients?search=acme&status=active", headers=admin_headers)
        assert [c["company_name"] for c in response.json()] == ["Acme Coffee"]

        response = client.get("/api/clients?status=all", headers=admin_headers)
        assert len(response.json()) == 3

    def test_update_client(self, client, admin_headers, brand):
        response = client.patch(
            f"/api/clients/{brand.id}",
            headers=admin_headers,
            json={"status": "inactive", "target_audience": "Students"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "inactive"
        assert data["target_audience"] == "Students"
        assert data["company_name"] == "Acme Coffee"

    def test_get_missing_client(self, client, admin_headers):
        response = client.get("/api/clients/42", headers=admin_headers)
        assert response.status_code == 404

    def test_delete_cascades(self, client, admin_headers, db, brand):
        db.add(Post(client_id=brand.id, title="p"))
        db.add(Report(client_id=brand.id, period_start="2024-01-01", period_end="2024-01-07"))
        db.add(Billing(client_id=brand.id, amount=100, due_date="2024-01-10"))
        db.commit()

        response = client.delete(f"/api/clients/{brand.id}", headers=admin_headers)
        assert response.status_code == 200
        assert db.query(Client).count() == 0
        assert db.query(Post).count() == 0
        assert db.query(Report).count() == 0
        assert db.query(Billing).count() == 0
