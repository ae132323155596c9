"""
Tests for authentication endpoints.
"""
from datetime import timedelta

from agencyhq.auth import create_access_token, create_refresh_token


class TestAuthEndpoints:
    """Test auth endpoints."""

    def test_register_creates_client_account(self, client):
        """Self-registration always yields a client-role account."""
        response = client.post(
            "/api/auth/register",
            json={
                "email": "newuser@example.com",
                "password": "securepassword123",
                "display_name": "New User",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "newuser@example.com"
        assert data["display_name"] == "New User"
        assert data["role"] == "client"

    def test_register_duplicate_email(self, client, admin_user):
        """Test registration with existing email fails."""
        response = client.post(
            "/api/auth/register",
            json={
                "email": "admin@agency.com",
                "password": "anotherpassword",
            },
        )
        assert response.status_code == 400
        assert "already registered" in response.json()["detail"]

    def test_admin_creates_staff_account(self, client, admin_headers):
        response = client.post(
            "/api/auth/users",
            headers=admin_headers,
            json={"email": "staff@agency.com", "password": "pw123456", "role": "admin"},
        )
        assert response.status_code == 200
        assert response.json()["role"] == "admin"

    def test_client_cannot_create_accounts(self, client, client_headers):
        response = client.post(
            "/api/auth/users",
            headers=client_headers,
            json={"email": "x@agency.com", "password": "pw123456", "role": "admin"},
        )
        assert response.status_code == 403

    def test_login_success(self, client, admin_user):
        response = client.post(
            "/api/auth/login/json",
            json={"email": "admin@agency.com", "password": "testpassword123"},
        )
        assert response.status_code == 200
        data = response.json()
        assert "access_token" in data
        assert "refresh_token" in data
        assert data["token_type"] == "bearer"

    def test_login_form(self, client, admin_user):
        response = client.post(
            "/api/auth/login",
            data={"username": "admin@agency.com", "password": "testpassword123"},
        )
        assert response.status_code == 200
        assert "access_token" in response.json()

    def test_login_wrong_password(self, client, admin_user):
        response = client.post(
            "/api/auth/login/json",
            json={"email": "admin@agency.com", "password": "wrongpassword"},
        )
        assert response.status_code == 401

    def test_login_inactive_user(self, client, admin_user, db):
        admin_user.is_active = False
        db.commit()
        response = client.post(
            "/api/auth/login/json",
            json={"email": "admin@agency.com", "password": "testpassword123"},
        )
        assert response.status_code == 401

    def test_get_current_user(self, client, admin_user, admin_headers):
        """The identity provider reports email, name and role."""
        response = client.get("/api/auth/me", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["email"] == admin_user.email
        assert data["display_name"] == "Agency Admin"
        assert data["role"] == "admin"

    def test_get_current_user_unauthenticated(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 401

    def test_expired_token_rejected(self, client, admin_user):
        token = create_access_token(admin_user.id, expires_delta=timedelta(seconds=-1))
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_refresh_token_not_accepted_as_access(self, client, admin_user):
        token = create_refresh_token(admin_user.id)
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_refresh_token(self, client, admin_user):
        refresh_token = create_refresh_token(admin_user.id)
        response = client.post("/api/auth/refresh", json={"refresh_token": refresh_token})
        assert response.status_code == 200
        data = response.json()
        assert "access_token" in data
        assert "refresh_token" in data

    def test_refresh_with_garbage(self, client):
        response = client.post("/api/auth/refresh", json={"refresh_token": "not-a-jwt"})
        assert response.status_code == 401
