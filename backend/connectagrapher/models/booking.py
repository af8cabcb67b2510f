from sqlalchemy import Boolean, Column, ForeignKey, Integer, JSON, String
from sqlalchemy.orm import relationship

from .base import BaseModel
from .booking_status import BookingStatus
from .types import StatusEnum


class Booking(BaseModel):
    __tablename__ = "bookings"

    id              = Column(Integer, primary_key=True, index=True)
    photographer_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    # Client contact
    client_name     = Column(String, nullable=False)
    email           = Column(String, nullable=False, index=True)
    contact_number  = Column(String, nullable=False)

    # Selection
    service_type       = Column(String, nullable=False)
    package_type       = Column(String, nullable=False)
    has_photo_package  = Column(Boolean, nullable=False, default=True)
    has_video_package  = Column(Boolean, nullable=False, default=False)
    video_package_type = Column(String, nullable=True)
    number_of_people   = Column(Integer, nullable=False, default=1)
    event_hours        = Column(Integer, nullable=True)
    addons             = Column(JSON, nullable=False, default=list)

    # Shoot details
    shoot_date = Column(String, nullable=False)
    shoot_time = Column(String, nullable=False)
    location   = Column(String, nullable=False)
    parish     = Column(String, nullable=False)

    # Quote snapshot (whole currency units)
    base_price         = Column(Integer, nullable=False, default=0)
    video_price        = Column(Integer, nullable=False, default=0)
    extra_person_fee   = Column(Integer, nullable=False, default=0)
    addons_total       = Column(Integer, nullable=False, default=0)
    transportation_fee = Column(Integer, nullable=False, default=0)
    total_price        = Column(Integer, nullable=False)
    deposit_amount     = Column(Integer, nullable=False, default=0)
    balance_due        = Column(Integer, nullable=False, default=0)
    currency           = Column(String(3), nullable=False, default="USD")

    # Payment state; only the payment collaborator flips these
    deposit_paid = Column(Boolean, nullable=False, default=False)
    balance_paid = Column(Boolean, nullable=False, default=False)
    deposit_checkout_id = Column(String, nullable=True)
    balance_checkout_id = Column(String, nullable=True)
    deposit_order_id    = Column(String, nullable=True)
    balance_order_id    = Column(String, nullable=True)

    referral_source   = Column(JSON, nullable=False, default=list)
    client_initials   = Column(String(5), nullable=False)
    contract_accepted = Column(Boolean, nullable=False, default=False)

    status = Column(StatusEnum(BookingStatus), nullable=False, default=BookingStatus.PENDING)

    photographer = relationship("User", back_populates="assigned_bookings")
    gallery = relationship("Gallery", back_populates="booking", uselist=False)
