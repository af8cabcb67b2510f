"""HTML bodies and sender identities for transactional email.

Every interpolated value is HTML-escaped; renderers are pure so they can be
tested without a transport.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from html import escape
from typing import Optional

from ..core.config import settings


class Sender(str, enum.Enum):
    BOOKINGS = "bookings"
    SUPPORT = "support"
    TEAM = "team"

    @property
    def address(self) -> str:
        brand = settings.BRAND_NAME
        return f"{brand} {self.value.title()} <{self.value}@{settings.EMAIL_DOMAIN}>"


@dataclass(frozen=True)
class RenderedEmail:
    recipient: str
    subject: str
    html: str
    sender: Sender


_WRAPPER = (
    '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; '
    'padding: 20px; color: #1a1a1a;">{body}</div>'
)
_H1 = '<h1 style="border-bottom: 2px solid #e5e5e5; padding-bottom: 12px;">{}</h1>'
_BOX = '<div style="background: #f9f9f9; padding: 16px; border-radius: 8px; margin: 20px 0;">{}</div>'
_BUTTON = (
    '<p style="text-align: center; margin: 30px 0;"><a href="{href}" style="background: #1a1a1a; '
    'color: #fff; padding: 12px 24px; border-radius: 6px; text-decoration: none;">{label}</a></p>'
)


def format_money(amount: int, currency: str = "USD") -> str:
    if currency.upper() == "USD":
        return f"${amount:,.2f}"
    return f"{currency.upper()} {amount:,.2f}"


def _footer() -> str:
    url = escape(settings.APP_URL)
    return (
        '<p style="color: #666; font-size: 13px; margin-top: 30px;">If you have any questions, '
        f'reply to this email or visit <a href="{url}">{url}</a>.</p>'
    )


def _field(label: str, value) -> str:
    return f"<p><strong>{escape(label)}:</strong> {escape(str(value))}</p>"


def _page(body: str) -> str:
    return _WRAPPER.format(body=body)


def booking_confirmation(booking, access_code: Optional[str]) -> RenderedEmail:
    currency = booking.currency or settings.DEFAULT_CURRENCY
    details = "".join(
        [
            _field("Service", str(booking.service_type).title()),
            _field("Package", str(booking.package_type).title()),
            _field("Date", booking.shoot_date),
            _field("Time", booking.shoot_time) if booking.shoot_time else "",
            _field("Location", booking.location) if booking.location else "",
            _field("Total Price", format_money(booking.total_price, currency)),
            _field("Deposit (50%)", format_money(booking.deposit_amount, currency)),
            _field("Balance Due", format_money(booking.balance_due, currency)),
        ]
    )
    parts = [
        _H1.format("Booking Confirmed!"),
        f"<p>Hi {escape(booking.client_name)},</p>",
        "<p>Your photography session has been booked successfully. Here are your details:</p>",
        _BOX.format(details),
    ]
    if access_code:
        parts.append(
            _BOX.format(
                "<p><strong>Your Gallery Access Code:</strong> "
                f'<code style="font-size: 18px; letter-spacing: 2px;">{escape(access_code)}</code></p>'
                '<p style="font-size: 13px; color: #666;">Save this code. You will need it to view '
                "your photos after the shoot.</p>"
            )
        )
    pay_url = f"{settings.APP_URL}/payment?booking={booking.id}"
    parts.append(_BUTTON.format(href=escape(pay_url), label="Pay Deposit Now"))
    parts.append(_footer())
    return RenderedEmail(
        recipient=booking.email,
        subject="Your Photography Session is Confirmed!",
        html=_page("".join(parts)),
        sender=Sender.BOOKINGS,
    )


def payment_received(booking, payment_type: str) -> RenderedEmail:
    is_deposit = payment_type == "deposit"
    amount = booking.deposit_amount if is_deposit else booking.balance_due
    currency = booking.currency or settings.DEFAULT_CURRENCY
    details = "".join(
        [
            _field("Amount Paid", format_money(amount, currency)),
            _field("Payment Type", "Deposit (50%)" if is_deposit else "Balance Payment"),
            _field("Service", str(booking.service_type).title()),
            _field("Booking ID", booking.id),
        ]
    )
    closing = (
        "<p>Your remaining balance will be due before or on the day of your shoot.</p>"
        if is_deposit
        else "<p>Your booking is now fully paid. We look forward to your session!</p>"
    )
    html = _page(
        _H1.format("Payment Received!")
        + f"<p>Hi {escape(booking.client_name)},</p>"
        + f"<p>We've received your {'deposit' if is_deposit else 'final balance'} payment.</p>"
        + _BOX.format(details)
        + closing
        + _footer()
    )
    return RenderedEmail(
        recipient=booking.email,
        subject=f"Payment Received: {'Deposit' if is_deposit else 'Balance'} for Your Session",
        html=html,
        sender=Sender.BOOKINGS,
    )


def password_reset(email: str, reset_token: str) -> RenderedEmail:
    link = escape(f"{settings.APP_URL}/auth?reset={reset_token}")
    html = _page(
        _H1.format("Reset Your Password")
        + "<p>We received a request to reset your password. Click the button below to choose a new one:</p>"
        + _BUTTON.format(href=link, label="Reset Password")
        + '<p style="color: #666; font-size: 13px;">This link expires in 1 hour. If you didn\'t '
        "request this, you can safely ignore this email.</p>"
        + f'<p style="color: #999; font-size: 12px;">Link: {link}</p>'
    )
    return RenderedEmail(
        recipient=email,
        subject=f"Reset Your Password: {settings.BRAND_NAME}",
        html=html,
        sender=Sender.SUPPORT,
    )


def photographer_approved(email: str, first_name: Optional[str]) -> RenderedEmail:
    html = _page(
        _H1.format("You're Approved!")
        + f"<p>Hi {escape(first_name or 'there')},</p>"
        + "<p>Great news: your photographer application has been approved! You can now receive "
        f"bookings on {escape(settings.BRAND_NAME)}.</p>"
        + _BUTTON.format(href=escape(f"{settings.APP_URL}/photographer-dashboard"), label="Go to Dashboard")
        + "<p>Make sure your profile and pricing are up to date so clients can find you.</p>"
        + '<p style="color: #666; font-size: 13px; margin-top: 30px;">Welcome to the team!</p>'
    )
    return RenderedEmail(
        recipient=email,
        subject="Your Photographer Application is Approved!",
        html=html,
        sender=Sender.TEAM,
    )


def photographer_rejected(email: str, first_name: Optional[str]) -> RenderedEmail:
    brand = escape(settings.BRAND_NAME)
    html = _page(
        _H1.format("Application Update")
        + f"<p>Hi {escape(first_name or 'there')},</p>"
        + f"<p>Thank you for your interest in joining {brand}. After reviewing your application, "
        "we're unable to approve it at this time.</p>"
        + "<p>You're welcome to reapply in the future with an updated portfolio. If you have "
        "questions, feel free to reach out.</p>"
        + f'<p style="color: #666; font-size: 13px; margin-top: 30px;">The {brand} Team</p>'
    )
    return RenderedEmail(
        recipient=email,
        subject=f"Photographer Application Update: {settings.BRAND_NAME}",
        html=html,
        sender=Sender.TEAM,
    )


def admin_message(email: str, client_name: str, subject: str, message: str) -> RenderedEmail:
    body = escape(message).replace("\n", "<br>")
    html = _page(
        f"<p>Hi {escape(client_name)},</p>"
        + f'<div style="line-height: 1.6;">{body}</div>'
        + '<p style="color: #666; font-size: 13px; margin-top: 30px; border-top: 1px solid #e5e5e5; '
        f'padding-top: 12px;">{escape(settings.BRAND_NAME)}</p>'
    )
    return RenderedEmail(recipient=email, subject=subject, html=html, sender=Sender.SUPPORT)
