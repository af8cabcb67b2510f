import asyncio
import logging
from email.message import EmailMessage
from typing import Optional

import aiosmtplib
import httpx

from ..core.config import settings
from .errors import DeliveryError

logger = logging.getLogger(__name__)


async def _send_async(msg: EmailMessage) -> None:
    await aiosmtplib.send(
        msg,
        hostname=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USERNAME or None,
        password=settings.SMTP_PASSWORD or None,
        start_tls=bool(settings.SMTP_USERNAME),
    )


def _send_smtp(sender: str, recipient: str, subject: str, html: str, text: Optional[str]) -> None:
    msg = EmailMessage()
    msg["From"] = sender
    msg["To"] = recipient
    msg["Subject"] = subject
    msg.set_content(text or "This message requires an HTML-capable email client.")
    msg.add_alternative(html, subtype="html")
    try:
        asyncio.run(_send_async(msg))
    except (aiosmtplib.SMTPException, OSError) as exc:
        raise DeliveryError(f"SMTP delivery to {recipient} failed: {exc}") from exc


def _send_resend(sender: str, recipient: str, subject: str, html: str, text: Optional[str]) -> None:
    payload = {"from": sender, "to": [recipient], "subject": subject, "html": html}
    if text:
        payload["text"] = text
    headers = {"Authorization": f"Bearer {settings.RESEND_API_KEY}"}
    try:
        with httpx.Client(timeout=8.0) as client:
            res = client.post(settings.RESEND_API_URL, json=payload, headers=headers)
    except httpx.HTTPError as exc:
        raise DeliveryError(f"Resend request for {recipient} failed: {exc}") from exc
    if res.status_code >= 400:
        raise DeliveryError(
            f"Resend rejected message to {recipient}: status={res.status_code} body={res.text[:500]}"
        )


def send_email(
    recipient: str,
    subject: str,
    html: str,
    sender: str,
    text: Optional[str] = None,
) -> bool:
    """Hand one message to the configured transport.

    Returns ``False`` without sending when no transport is configured.
    Transport failures raise :class:`DeliveryError`.
    """
    transport = settings.EMAIL_TRANSPORT
    if settings.EMAIL_DEV_MODE:
        logger.info("Email dev body to=%s subject=%s html=%s", recipient, subject, html)

    if transport == "resend" and settings.RESEND_API_KEY:
        _send_resend(sender, recipient, subject, html, text)
    elif transport == "smtp":
        _send_smtp(sender, recipient, subject, html, text)
    else:
        logger.warning("[Email not configured] to=%s from=%s subject=%s", recipient, sender, subject)
        return False

    logger.info("Sent email via %s to %s", transport, recipient)
    return True
