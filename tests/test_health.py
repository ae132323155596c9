"""
Tests for health check and platform endpoints.
"""


class TestHealthEndpoints:

    def test_live(self, client):
        response = client.get("/api/health/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_ready_checks_database(self, client):
        data = client.get("/api/health/ready").json()
        assert data["checks"]["database"] == "healthy"

    def test_full_reports_components(self, client):
        data = client.get("/api/health/full").json()
        assert set(data["checks"]) == {"database", "storage", "system"}

    def test_security_headers(self, client):
        response = client.get("/")
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/api/does-not-exist")
        assert response.status_code == 404
        body = response.json()
        assert body["ok"] is False
        assert body["error_code"] == "HTTP_404"
