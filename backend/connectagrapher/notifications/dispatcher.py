"""Fire-and-forget delivery of lifecycle emails.

Each ``notify_*`` function renders in the caller's thread (so ORM objects are
read while their session is still open) and hands the rendered message to the
background worker. Transport failures are retried and dead-lettered there;
nothing here raises into the request path.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..utils import background_worker
from ..utils.email import send_email
from ..utils.errors import DeliveryError
from . import templates
from .templates import RenderedEmail

logger = logging.getLogger(__name__)

DELIVERY_ATTEMPTS = 3


def deliver(message: RenderedEmail) -> bool:
    """Send ``message`` now.

    A :class:`DeliveryError` is logged and re-raised so the worker retries it.
    """
    try:
        sent = send_email(
            message.recipient,
            message.subject,
            message.html,
            sender=message.sender.address,
        )
    except DeliveryError as exc:
        logger.error(
            "Email delivery failed to=%s subject=%s sender=%s: %s",
            message.recipient,
            message.subject,
            message.sender.value,
            exc,
        )
        raise
    if not sent:
        logger.info("Email not sent (no transport) to=%s subject=%s", message.recipient, message.subject)
    return sent


def dispatch(message: RenderedEmail) -> Optional[str]:
    """Queue ``message`` on the background worker and return the task id."""
    try:
        return background_worker.enqueue(
            deliver, message, retries=DELIVERY_ATTEMPTS, keep_result=False
        )
    except RuntimeError as exc:
        # Executor already shut down (interpreter exit)
        logger.error("Could not queue email to %s: %s", message.recipient, exc)
        return None


def notify_booking_confirmed(booking, access_code: Optional[str]) -> Optional[str]:
    return dispatch(templates.booking_confirmation(booking, access_code))


def notify_payment_received(booking, payment_type: str) -> Optional[str]:
    return dispatch(templates.payment_received(booking, payment_type))


def notify_password_reset(email: str, reset_token: str) -> Optional[str]:
    return dispatch(templates.password_reset(email, reset_token))


def notify_photographer_approved(email: str, first_name: Optional[str]) -> Optional[str]:
    return dispatch(templates.photographer_approved(email, first_name))


def notify_photographer_rejected(email: str, first_name: Optional[str]) -> Optional[str]:
    return dispatch(templates.photographer_rejected(email, first_name))


def notify_admin_message(email: str, client_name: str, subject: str, message: str) -> Optional[str]:
    return dispatch(templates.admin_message(email, client_name, subject, message))
