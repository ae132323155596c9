"""
Tests for billing endpoints, derived overdue status and totals.
"""
from datetime import date

from agencyhq.models import Billing


def this_month(day):
    today = date.today()
    return date(today.year, today.month, day).isoformat()


class TestBillingEndpoints:

    def test_create_billing(self, client, admin_headers, brand):
        response = client.post(
            "/api/billing",
            headers=admin_headers,
            json={"client_id": brand.id, "amount": 1500, "due_date": "2999-12-31", "description": "Retainer"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "pending"
        assert data["recurrence"] == "monthly"
        assert data["client_name"] == "Acme Coffee"

    def test_past_due_shown_overdue_but_not_stored(self, client, admin_headers, db, brand):
        billing = Billing(client_id=brand.id, amount=200, due_date="2000-01-01", status="pending")
        db.add(billing)
        db.commit()

        data = client.get(f"/api/billing/{billing.id}", headers=admin_headers).json()
        assert data["status"] == "overdue"
        assert data["stored_status"] == "pending"

        db.refresh(billing)
        assert billing.status == "pending"

    def test_filter_on_display_status(self, client, admin_headers, db, brand):
        db.add_all([
            Billing(client_id=brand.id, amount=10, due_date="2000-01-01"),
            Billing(client_id=brand.id, amount=20, due_date="2999-12-31"),
            Billing(client_id=brand.id, amount=30, due_date="2000-01-01", status="paid"),
        ])
        db.commit()

        overdue = client.get("/api/billing?status=overdue", headers=admin_headers).json()
        assert [b["amount"] for b in overdue] == [10]

        pending = client.get("/api/billing?status=pending", headers=admin_headers).json()
        assert [b["amount"] for b in pending] == [20]

        everything = client.get("/api/billing?status=all", headers=admin_headers).json()
        assert len(everything) == 3

    def test_mark_as_paid(self, client, admin_headers, db, brand):
        billing = Billing(client_id=brand.id, amount=99, due_date="2000-01-01")
        db.add(billing)
        db.commit()

        response = client.post(f"/api/billing/{billing.id}/mark-paid", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "paid"
        assert data["stored_status"] == "paid"
        assert data["payment_date"] == date.today().isoformat()

    def test_summary(self, client, admin_headers, db, brand):
        db.add_all([
            Billing(client_id=brand.id, amount=100, due_date=this_month(1), status="paid"),
            Billing(client_id=brand.id, amount=50, due_date="2999-12-31"),
            Billing(client_id=brand.id, amount=25, due_date="2000-01-01"),
        ])
        db.commit()

        data = client.get("/api/billing/summary", headers=admin_headers).json()
        assert data["paid_this_month"] == 100
        assert data["expected_this_month"] == 100
        assert data["pending"] == 50
        assert data["overdue"] == 25

    def test_invalid_status_rejected(self, client, admin_headers, brand):
        response = client.post(
            "/api/billing",
            headers=admin_headers,
            json={"client_id": brand.id, "amount": 1, "due_date": "2024-01-01", "status": "late"},
        )
        assert response.status_code == 422

    def test_delete_billing(self, client, admin_headers, db, brand):
        billing = Billing(client_id=brand.id, amount=5, due_date="2024-01-01")
        db.add(billing)
        db.commit()
        assert client.delete(f"/api/billing/{billing.id}", headers=admin_headers).status_code == 200
        assert db.query(Billing).count() == 0
