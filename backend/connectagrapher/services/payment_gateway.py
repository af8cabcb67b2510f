"""Lemon Squeezy checkout creation.

The gateway only creates hosted checkouts; completion is reported back by the
provider and applied through ``crud_booking.record_payment``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ..core.config import settings
from ..utils.errors import PaymentGatewayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutSession:
    checkout_id: str
    url: str


class LemonSqueezyGateway:
    def __init__(
        self,
        api_key: str,
        store_id: str,
        variant_id: str,
        api_url: str = "https://api.lemonsqueezy.com/v1",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.store_id = store_id
        self.variant_id = variant_id
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.store_id and self.variant_id)

    def create_checkout(
        self,
        *,
        booking_id: int,
        payment_type: str,
        amount: int,
        currency: str,
        email: str,
        name: str,
        redirect_url: str,
    ) -> CheckoutSession:
        """Create a hosted checkout for ``amount`` whole currency units."""
        if not self.configured:
            raise PaymentGatewayError("Payment provider not configured")

        payload = {
            "data": {
                "type": "checkouts",
                "attributes": {
                    # Lemon Squeezy prices are in cents
                    "custom_price": int(amount) * 100,
                    "checkout_data": {
                        "email": email,
                        "name": name,
                        "custom": {
                            "booking_id": str(booking_id),
                            "payment_type": payment_type,
                            "currency": currency,
                        },
                    },
                    "product_options": {"redirect_url": redirect_url},
                },
                "relationships": {
                    "store": {"data": {"type": "stores", "id": str(self.store_id)}},
                    "variant": {"data": {"type": "variants", "id": str(self.variant_id)}},
                },
            }
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/vnd.api+json",
            "Content-Type": "application/vnd.api+json",
        }
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                r = client.post(f"{self.api_url}/checkouts", json=payload, headers=headers)
                r.raise_for_status()
                body = r.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Lemon Squeezy checkout error booking=%s: %s", booking_id, exc, exc_info=True)
            raise PaymentGatewayError("Payment initialization failed") from exc

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            data = {}
        attributes = data.get("attributes")
        checkout_id = data.get("id")
        url = attributes.get("url") if isinstance(attributes, dict) else None
        if not checkout_id or not url:
            logger.error("Invalid Lemon Squeezy response for booking %s: %s", booking_id, body)
            raise PaymentGatewayError("Invalid payment provider response")
        logger.info(
            "Created %s checkout %s for booking %s amount=%s %s",
            payment_type,
            checkout_id,
            booking_id,
            amount,
            currency,
        )
        return CheckoutSession(checkout_id=str(checkout_id), url=url)


def get_payment_gateway() -> LemonSqueezyGateway:
    return LemonSqueezyGateway(
        api_key=settings.LEMONSQUEEZY_API_KEY,
        store_id=settings.LEMONSQUEEZY_STORE_ID,
        variant_id=settings.LEMONSQUEEZY_VARIANT_ID,
        api_url=settings.LEMONSQUEEZY_API_URL,
    )
