import logging
from unittest.mock import AsyncMock

import httpx
import pytest

from connectagrapher.core.config import settings
from connectagrapher.utils import email as email_utils
from connectagrapher.utils.errors import DeliveryError

SENDER = "ConnectAGrapher Bookings <bookings@connectagrapher.com>"


def _mock_httpx(monkeypatch, handler):
    real_client = httpx.Client

    def factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(email_utils.httpx, "Client", factory)


def test_unconfigured_transport_logs_and_returns_false(monkeypatch, caplog):
    monkeypatch.setattr(settings, "EMAIL_TRANSPORT", "")
    caplog.set_level(logging.WARNING, logger="connectagrapher.utils.email")
    assert email_utils.send_email("a@b.co", "Hi", "<p>Hi</p>", SENDER) is False
    assert any("[Email not configured]" in r.getMessage() for r in caplog.records)


def test_resend_transport(monkeypatch):
    seen = {}

    def handler(request):
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = request.content
        return httpx.Response(200, json={"id": "em_1"})

    monkeypatch.setattr(settings, "EMAIL_TRANSPORT", "resend")
    monkeypatch.setattr(settings, "RESEND_API_KEY", "re_test")
    _mock_httpx(monkeypatch, handler)
    assert email_utils.send_email("a@b.co", "Hi", "<p>Hi</p>", SENDER) is True
    assert seen["auth"] == "Bearer re_test"
    assert b"bookings@connectagrapher.com" in seen["body"]


def test_resend_rejection_raises_delivery_error(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_TRANSPORT", "resend")
    monkeypatch.setattr(settings, "RESEND_API_KEY", "re_test")
    _mock_httpx(monkeypatch, lambda request: httpx.Response(422, json={"message": "bad from"}))
    with pytest.raises(DeliveryError):
        email_utils.send_email("a@b.co", "Hi", "<p>Hi</p>", SENDER)


def test_smtp_transport_sends_html(monkeypatch):
    send = AsyncMock()
    monkeypatch.setattr(settings, "EMAIL_TRANSPORT", "smtp")
    monkeypatch.setattr(email_utils.aiosmtplib, "send", send)
    assert email_utils.send_email("a@b.co", "Hi", "<p>Hello</p>", SENDER) is True
    msg = send.call_args.args[0]
    assert msg["From"] == SENDER
    assert msg["To"] == "a@b.co"
    assert msg.get_body(preferencelist=("html",)).get_content().strip() == "<p>Hello</p>"


def test_smtp_failure_raises_delivery_error(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_TRANSPORT", "smtp")
    monkeypatch.setattr(email_utils.aiosmtplib, "send", AsyncMock(side_effect=OSError("refused")))
    with pytest.raises(DeliveryError):
        email_utils.send_email("a@b.co", "Hi", "<p>Hi</p>", SENDER)
