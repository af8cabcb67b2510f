from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Literal, Optional, Annotated
from datetime import datetime

from ..models.booking_status import BookingStatus
from .pricing import QuoteInputs


class BookingCreate(QuoteInputs):
    client_name: Annotated[str, Field(min_length=1, max_length=200)]
    email: EmailStr
    contact_number: Annotated[str, Field(min_length=3, max_length=40)]
    shoot_date: Annotated[str, Field(min_length=1)]
    shoot_time: Annotated[str, Field(min_length=1)]
    location: Annotated[str, Field(min_length=1)]
    referral_source: List[str] = Field(default_factory=list)
    client_initials: Annotated[str, Field(min_length=1, max_length=5)]
    contract_accepted: bool
    # Client-side totals are accepted for compatibility and ignored
    total_price: Optional[int] = None

    @field_validator("client_name", "contact_number", "location", "client_initials", mode="before")
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("contract_accepted")
    @classmethod
    def must_accept_contract(cls, v: bool) -> bool:
        if not v:
            raise ValueError("The booking contract must be accepted")
        return v


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingResponse(BaseModel):
    id: int
    client_name: str
    email: str
    contact_number: str
    service_type: str
    package_type: str
    has_photo_package: bool
    has_video_package: bool
    video_package_type: Optional[str] = None
    number_of_people: int
    event_hours: Optional[int] = None
    addons: List[str]
    shoot_date: str
    shoot_time: str
    location: str
    parish: str
    base_price: int
    video_price: int
    extra_person_fee: int
    addons_total: int
    transportation_fee: int
    total_price: int
    deposit_amount: int
    balance_due: int
    currency: str
    deposit_paid: bool
    balance_paid: bool
    status: BookingStatus
    photographer_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BookingCreated(BookingResponse):
    """Returned once, at creation, so the client can keep its gallery code."""

    access_code: str


class PaymentSummary(BaseModel):
    booking_id: int
    status: BookingStatus
    currency: str
    total_price: int
    deposit_amount: int
    balance_due: int
    deposit_paid: bool
    balance_paid: bool
    next_payment: Optional[Literal["deposit", "balance"]] = None
    amount_due: int
