import re

from connectagrapher.crud import crud_booking
from connectagrapher.models import Booking, BookingStatus, Gallery


def test_create_booking_prices_server_side(client, Session, booking_payload, sent_emails):
    res = client.post("/api/v1/bookings", json=booking_payload(total_price=1))
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["total_price"] == 335
    assert body["deposit_amount"] == 168
    assert body["balance_due"] == 167
    assert body["status"] == "pending"
    assert body["parish"] == "manchester-stelizabeth"
    assert body["email"] == "jane@example.com"
    assert re.fullmatch(r"[A-Z0-9]{8}", body["access_code"])

    db = Session()
    gallery = db.query(Gallery).filter(Gallery.booking_id == body["id"]).one()
    assert gallery.access_code == body["access_code"]
    assert gallery.client_email == "jane@example.com"

    assert len(sent_emails) == 1
    email = sent_emails[0]
    assert email["to"] == "jane@example.com"
    assert email["from"].startswith("ConnectAGrapher Bookings <bookings@")
    assert body["access_code"] in email["html"]
    assert f"/payment?booking={body['id']}" in email["html"]


def test_invalid_tier_returns_field_errors_and_stores_nothing(client, Session, booking_payload, sent_emails):
    res = client.post("/api/v1/bookings", json=booking_payload(package_type="diamond", parish="Atlantis"))
    assert res.status_code == 422
    detail = res.json()["detail"]
    assert set(detail["field_errors"]) == {"package_type", "parish"}
    db = Session()
    assert db.query(Booking).count() == 0
    assert db.query(Gallery).count() == 0
    assert sent_emails == []


def test_contract_must_be_accepted(client, booking_payload):
    res = client.post("/api/v1/bookings", json=booking_payload(contract_accepted=False))
    assert res.status_code == 422
    assert "contract_accepted" in res.json()["detail"]["field_errors"]


def test_store_failure_rolls_back_booking(client, Session, booking_payload, sent_emails, monkeypatch):
    # A NULL access code violates the gallery's NOT NULL constraint mid-transaction
    monkeypatch.setattr(crud_booking, "generate_access_code", lambda *a, **k: None)
    res = client.post("/api/v1/bookings", json=booking_payload())
    assert res.status_code == 503
    assert res.json()["detail"]["message"] == "Booking could not be saved"
    db = Session()
    assert db.query(Booking).count() == 0
    assert db.query(Gallery).count() == 0
    assert sent_emails == []


def test_payment_summary_requires_confirmed_booking(client, admin_headers, booking_payload):
    booking_id = client.post("/api/v1/bookings", json=booking_payload()).json()["id"]

    res = client.get(f"/api/v1/bookings/{booking_id}/payment")
    assert res.status_code == 409

    res = client.patch(
        f"/api/v1/admin/bookings/{booking_id}/status",
        json={"status": "confirmed"},
        headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.json()["status"] == "confirmed"

    res = client.get(f"/api/v1/bookings/{booking_id}/payment")
    assert res.status_code == 200
    summary = res.json()
    assert summary["next_payment"] == "deposit"
    assert summary["amount_due"] == 168
    assert summary["deposit_amount"] + summary["balance_due"] == summary["total_price"]


def test_payment_summary_unknown_booking(client):
    assert client.get("/api/v1/bookings/999/payment").status_code == 404


def test_status_cannot_move_backwards(client, Session, admin_headers, booking_payload):
    booking_id = client.post("/api/v1/bookings", json=booking_payload()).json()["id"]
    db = Session()
    db.query(Booking).filter(Booking.id == booking_id).update({"status": BookingStatus.COMPLETED})
    db.commit()

    res = client.patch(
        f"/api/v1/admin/bookings/{booking_id}/status",
        json={"status": "pending"},
        headers=admin_headers,
    )
    assert res.status_code == 409


def test_admin_lists_bookings(client, admin_headers, booking_payload):
    client.post("/api/v1/bookings", json=booking_payload())
    client.post("/api/v1/bookings", json=booking_payload(service_type="wedding", client_name="Ann"))
    res = client.get("/api/v1/admin/bookings", headers=admin_headers)
    assert res.status_code == 200
    assert len(res.json()) == 2
    res = client.get("/api/v1/admin/bookings", params={"status": "confirmed"}, headers=admin_headers)
    assert res.json() == []


def test_admin_routes_require_token(client):
    assert client.get("/api/v1/admin/bookings").status_code == 403
    assert client.get("/api/v1/admin/bookings", headers={"X-Admin-Token": "nope"}).status_code == 403
