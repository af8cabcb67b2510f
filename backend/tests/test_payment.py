import json

import httpx
import pytest

from connectagrapher.crud import crud_booking
from connectagrapher.main import app
from connectagrapher.models import Booking, BookingStatus
from connectagrapher.services.payment_gateway import CheckoutSession, LemonSqueezyGateway, get_payment_gateway
from connectagrapher.utils.errors import PaymentGatewayError


class FakeGateway:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def create_checkout(self, **kwargs):
        self.calls.append(kwargs)
        if self.fail:
            raise PaymentGatewayError("Payment initialization failed")
        return CheckoutSession(checkout_id=f"chk_{len(self.calls)}", url="https://pay.example/checkout")


@pytest.fixture
def gateway():
    fake = FakeGateway()
    app.dependency_overrides[get_payment_gateway] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_payment_gateway, None)


def _confirmed_booking(client, Session, booking_payload):
    booking_id = client.post("/api/v1/bookings", json=booking_payload()).json()["id"]
    db = Session()
    db.query(Booking).filter(Booking.id == booking_id).update({"status": BookingStatus.CONFIRMED})
    db.commit()
    db.close()
    return booking_id


def test_deposit_checkout_for_confirmed_booking(client, Session, booking_payload, gateway):
    booking_id = _confirmed_booking(client, Session, booking_payload)
    res = client.post("/api/v1/payments/checkout", json={"booking_id": booking_id, "payment_type": "deposit"})
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["amount"] == 168
    assert body["checkout_id"] == "chk_1"
    assert gateway.calls[0]["amount"] == 168
    assert gateway.calls[0]["email"] == "jane@example.com"

    db = Session()
    assert db.get(Booking, booking_id).deposit_checkout_id == "chk_1"


def test_checkout_rejected_for_pending_booking(client, booking_payload, gateway):
    booking_id = client.post("/api/v1/bookings", json=booking_payload()).json()["id"]
    res = client.post("/api/v1/payments/checkout", json={"booking_id": booking_id})
    assert res.status_code == 400
    assert gateway.calls == []


def test_balance_requires_paid_deposit(client, Session, booking_payload, gateway):
    booking_id = _confirmed_booking(client, Session, booking_payload)
    res = client.post("/api/v1/payments/checkout", json={"booking_id": booking_id, "payment_type": "balance"})
    assert res.status_code == 400
    assert "Deposit must be paid" in res.json()["detail"]["message"]

    db = Session()
    crud_booking.booking.record_payment(db, booking_id, "deposit", "order_1")
    res = client.post("/api/v1/payments/checkout", json={"booking_id": booking_id, "payment_type": "balance"})
    assert res.status_code == 201
    assert res.json()["amount"] == 167


def test_deposit_cannot_be_paid_twice(client, Session, booking_payload, gateway):
    booking_id = _confirmed_booking(client, Session, booking_payload)
    db = Session()
    crud_booking.booking.record_payment(db, booking_id, "deposit", "order_1")
    res = client.post("/api/v1/payments/checkout", json={"booking_id": booking_id, "payment_type": "deposit"})
    assert res.status_code == 400
    assert "already been paid" in res.json()["detail"]["message"]


def test_gateway_failure_maps_to_bad_gateway(client, Session, booking_payload):
    booking_id = _confirmed_booking(client, Session, booking_payload)
    app.dependency_overrides[get_payment_gateway] = lambda: FakeGateway(fail=True)
    try:
        res = client.post("/api/v1/payments/checkout", json={"booking_id": booking_id})
    finally:
        app.dependency_overrides.pop(get_payment_gateway, None)
    assert res.status_code == 502


def test_record_payment_is_idempotent(client, Session, booking_payload, sent_emails):
    booking_id = _confirmed_booking(client, Session, booking_payload)
    sent_emails.clear()
    db = Session()

    booking, applied = crud_booking.booking.record_payment(db, booking_id, "deposit", "order_1")
    assert applied is True
    assert booking.deposit_paid is True
    assert booking.deposit_order_id == "order_1"

    booking, applied = crud_booking.booking.record_payment(db, booking_id, "deposit", "order_2")
    assert applied is False
    assert booking.deposit_order_id == "order_1"

    assert len(sent_emails) == 1
    assert sent_emails[0]["subject"].startswith("Payment Received: Deposit")
    assert "$168.00" in sent_emails[0]["html"]


def test_lemonsqueezy_gateway_posts_checkout_in_cents():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            201,
            json={"data": {"id": "ls_123", "attributes": {"url": "https://store.lemonsqueezy.com/checkout/x"}}},
        )

    gw = LemonSqueezyGateway(
        api_key="key",
        store_id="11",
        variant_id="22",
        transport=httpx.MockTransport(handler),
    )
    session = gw.create_checkout(
        booking_id=7,
        payment_type="deposit",
        amount=168,
        currency="USD",
        email="jane@example.com",
        name="Jane",
        redirect_url="https://connectagrapher.com/payment-success",
    )
    assert session.checkout_id == "ls_123"
    assert seen["url"] == "https://api.lemonsqueezy.com/v1/checkouts"
    assert seen["auth"] == "Bearer key"
    attrs = seen["body"]["data"]["attributes"]
    assert attrs["custom_price"] == 16800
    assert attrs["checkout_data"]["custom"]["booking_id"] == "7"
    assert seen["body"]["data"]["relationships"]["variant"]["data"]["id"] == "22"


def test_lemonsqueezy_gateway_errors():
    unconfigured = LemonSqueezyGateway(api_key="", store_id="", variant_id="")
    with pytest.raises(PaymentGatewayError):
        unconfigured.create_checkout(
            booking_id=1, payment_type="deposit", amount=1, currency="USD", email="a@b.co", name="A", redirect_url="x"
        )

    failing = LemonSqueezyGateway(
        api_key="key",
        store_id="1",
        variant_id="2",
        transport=httpx.MockTransport(lambda request: httpx.Response(500, json={"errors": []})),
    )
    with pytest.raises(PaymentGatewayError):
        failing.create_checkout(
            booking_id=1, payment_type="deposit", amount=1, currency="USD", email="a@b.co", name="A", redirect_url="x"
        )


@pytest.mark.parametrize(
    "body",
    [
        [{"id": "ls_1"}],
        {"data": ["ls_1"]},
        {"data": {"id": "ls_1", "attributes": "https://pay.example/ls_1"}},
        "ok",
    ],
)
def test_lemonsqueezy_unexpected_body_is_gateway_error(body):
    gw = LemonSqueezyGateway(
        api_key="key",
        store_id="1",
        variant_id="2",
        transport=httpx.MockTransport(lambda request: httpx.Response(201, json=body)),
    )
    with pytest.raises(PaymentGatewayError):
        gw.create_checkout(
            booking_id=1, payment_type="deposit", amount=1, currency="USD", email="a@b.co", name="A", redirect_url="x"
        )
