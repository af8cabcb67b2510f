import asyncio
import logging
from types import SimpleNamespace

import pytest

from connectagrapher.notifications import dispatcher, templates
from connectagrapher.notifications.templates import Sender
from connectagrapher.utils import background_worker
from connectagrapher.utils.errors import DeliveryError


def _booking(**overrides):
    fields = dict(
        id=12,
        client_name="Jane <b>Brown</b>",
        email="jane@example.com",
        service_type="photoshoot",
        package_type="gold",
        shoot_date="2026-12-05",
        shoot_time="10:00",
        location="Treasure Beach",
        total_price=335,
        deposit_amount=168,
        balance_due=167,
        currency="USD",
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_booking_confirmation_content():
    rendered = templates.booking_confirmation(_booking(), "AB12CD34")
    assert rendered.sender is Sender.BOOKINGS
    assert rendered.subject == "Your Photography Session is Confirmed!"
    assert "AB12CD34" in rendered.html
    assert "$335.00" in rendered.html
    assert "Jane &lt;b&gt;Brown&lt;/b&gt;" in rendered.html
    assert "<b>Brown</b>" not in rendered.html


def test_senders_by_event():
    assert templates.payment_received(_booking(), "balance").sender is Sender.BOOKINGS
    assert templates.password_reset("a@b.co", "tok").sender is Sender.SUPPORT
    assert templates.photographer_approved("a@b.co", "Ann").sender is Sender.TEAM
    assert templates.photographer_rejected("a@b.co", "Ann").sender is Sender.TEAM
    assert templates.admin_message("a@b.co", "Ann", "Hi", "x").sender is Sender.SUPPORT
    assert Sender.SUPPORT.address == "ConnectAGrapher Support <support@connectagrapher.com>"


def test_balance_payment_wording():
    rendered = templates.payment_received(_booking(), "balance")
    assert "$167.00" in rendered.html
    assert "fully paid" in rendered.html


def test_password_reset_link():
    rendered = templates.password_reset("a@b.co", "tok123")
    assert "/auth?reset=tok123" in rendered.html
    assert "expires in 1 hour" in rendered.html


def test_admin_message_is_escaped():
    rendered = templates.admin_message("a@b.co", "Ann", "Update", "<script>alert(1)</script>\nSee you")
    assert "<script>" not in rendered.html
    assert "&lt;script&gt;" in rendered.html
    assert "<br>See you" in rendered.html


def test_delivery_failure_is_logged_not_raised(monkeypatch, caplog):
    def boom(*args, **kwargs):
        raise DeliveryError("smtp down")

    monkeypatch.setattr(dispatcher, "send_email", boom)
    caplog.set_level(logging.ERROR, logger="connectagrapher.notifications.dispatcher")
    assert dispatcher.notify_password_reset("a@b.co", "tok") == "inline-task"
    assert any("smtp down" in r.getMessage() for r in caplog.records)


def test_dispatch_goes_through_background_worker(monkeypatch, sent_emails):
    queued = []
    monkeypatch.setattr(
        dispatcher.background_worker,
        "enqueue",
        lambda func, *args, **kwargs: queued.append((func, args)) or "task-1",
    )
    assert dispatcher.notify_photographer_approved("a@b.co", "Ann") == "task-1"
    assert queued[0][0] is dispatcher.deliver
    # Nothing is sent until the worker runs the job
    assert sent_emails == []


def test_transient_delivery_failure_is_retried(monkeypatch, sent_emails):
    attempts = []

    def flaky(recipient, subject, html, sender, text=None):
        attempts.append(recipient)
        if len(attempts) == 1:
            raise DeliveryError("421 try again later")
        sent_emails.append({"to": recipient, "subject": subject})
        return True

    monkeypatch.setattr(dispatcher, "send_email", flaky)
    dispatcher.notify_photographer_approved("ann@example.com", "Ann")
    assert attempts == ["ann@example.com", "ann@example.com"]
    assert [m["to"] for m in sent_emails] == ["ann@example.com"]


def test_exhausted_delivery_lands_in_dead_letter_queue(monkeypatch):
    def down(*args, **kwargs):
        raise DeliveryError("smtp down")

    monkeypatch.setattr(dispatcher, "send_email", down)
    message = templates.password_reset("a@b.co", "tok")
    task_id = background_worker.enqueue(dispatcher.deliver, message, retries=2, backoff=0)
    with pytest.raises(DeliveryError):
        asyncio.run(background_worker.result(task_id))
    name, args, _kwargs, exc = background_worker.dead_letter_queue[-1]
    assert name == "deliver"
    assert args == (message,)
    assert isinstance(exc, DeliveryError)
