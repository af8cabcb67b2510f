from pydantic import BaseModel
from typing import Literal

PaymentType = Literal["deposit", "balance"]


class CheckoutCreate(BaseModel):
    booking_id: int
    payment_type: PaymentType = "deposit"


class CheckoutResponse(BaseModel):
    booking_id: int
    payment_type: PaymentType
    checkout_id: str
    checkout_url: str
    amount: int
    currency: str
