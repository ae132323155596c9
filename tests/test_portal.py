"""
Tests for the client portal.
"""
import pytest

from agencyhq.models import Client, Post, Report


@pytest.fixture
def own_post(db, brand):
    post = Post(client_id=brand.id, title="Spring drop", status="production", scheduled_date="2024-03-10")
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


class TestPortalEndpoints:

    def test_profile(self, client, client_headers, brand):
        response = client.get("/api/portal/profile", headers=client_headers)
        assert response.status_code == 200
        assert response.json()["company_name"] == "Acme Coffee"

    def test_profile_without_linked_client(self, client, client_headers):
        response = client.get("/api/portal/profile", headers=client_headers)
        assert response.status_code == 404

    def test_update_profile(self, client, client_headers, brand):
        response = client.patch(
            "/api/portal/profile",
            headers=client_headers,
            json={"company_objective": "Sell more beans", "brand_voice": "informal"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["company_objective"] == "Sell more beans"
        assert data["brand_voice"] == "informal"

    def test_profile_cannot_change_status(self, client, client_headers, brand, db):
        client.patch("/api/portal/profile", headers=client_headers, json={"status": "inactive"})
        db.refresh(brand)
        assert brand.status == "active"

    def test_calendar_only_own_posts(self, client, client_headers, db, brand, own_post):
        other = Client(company_name="Beta Bakery")
        db.add(other)
        db.commit()
        db.add(Post(client_id=other.id, title="Not yours", scheduled_date="2024-03-10"))
        db.commit()

        data = client.get("/api/portal/calendar?year=2024&month=3", headers=client_headers).json()
        assert data["total"] == 1
        titles = [p["title"] for d in data["days"] for p in d["posts"]]
        assert titles == ["Spring drop"]

    def test_cannot_read_other_clients_post(self, client, client_headers, db, brand):
        other = Client(company_name="Beta Bakery")
        db.add(other)
        db.commit()
        post = Post(client_id=other.id, title="Hidden")
        db.add(post)
        db.commit()

        response = client.get(f"/api/portal/posts/{post.id}", headers=client_headers)
        assert response.status_code == 404

    def test_add_comment(self, client, client_headers, own_post):
        response = client.post(
            f"/api/portal/posts/{own_post.id}/comments",
            headers=client_headers,
            json={"text": "Love the colours"},
        )
        assert response.status_code == 200
        comments = response.json()["comments"]
        assert len(comments) == 1
        assert comments[0]["author"] == "Brand Owner"
        assert comments[0]["text"] == "Love the colours"
        assert comments[0]["date"].endswith("Z")

        response = client.post(
            f"/api/portal/posts/{own_post.id}/comments",
            headers=client_headers,
            json={"text": "One more thing"},
        )
        assert len(response.json()["comments"]) == 2

    def test_empty_comment_rejected(self, client, client_headers, own_post):
        response = client.post(
            f"/api/portal/posts/{own_post.id}/comments",
            headers=client_headers,
            json={"text": ""},
        )
        assert response.status_code == 422

    def test_approve_post(self, client, client_headers, own_post):
        response = client.post(f"/api/portal/posts/{own_post.id}/approve", headers=client_headers)
        assert response.status_code == 200
        assert response.json()["status"] == "approved"

        again = client.post(f"/api/portal/posts/{own_post.id}/approve", headers=client_headers)
        assert again.status_code == 409

    @pytest.mark.parametrize("status", ["scheduled", "posted"])
    def test_approve_past_review_leaves_status(self, client, client_headers, db, own_post, status):
        own_post.status = status
        db.commit()

        response = client.post(f"/api/portal/posts/{own_post.id}/approve", headers=client_headers)
        assert response.status_code == 409

        db.refresh(own_post)
        assert own_post.status == status

    def test_no_free_status_change_for_clients(self, client, client_headers, db, own_post):
        own_post.status = "posted"
        db.commit()

        for status in ("approved", "idea"):
            response = client.patch(
                f"/api/portal/posts/{own_post.id}/status",
                headers=client_headers,
                json={"status": status},
            )
            assert response.status_code == 404

        db.refresh(own_post)
        assert own_post.status == "posted"

    def test_reports_scoped_to_client(self, client, client_headers, db, brand):
        other = Client(company_name="Beta Bakery")
        db.add(other)
        db.commit()
        db.add_all([
            Report(client_id=brand.id, period_start="2024-03-01", period_end="2024-03-07", total_reach=10),
            Report(client_id=other.id, period_start="2024-03-01", period_end="2024-03-07", total_reach=999),
        ])
        db.commit()

        data = client.get(
            "/api/portal/reports?start=2024-03-01&end=2024-03-31",
            headers=client_headers,
        ).json()
        assert data["totals"]["reach"] == 10
        assert len(data["reports"]) == 1

    def test_requires_login(self, client, brand):
        assert client.get("/api/portal/profile").status_code == 401
