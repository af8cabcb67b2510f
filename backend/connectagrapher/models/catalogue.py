from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class Catalogue(BaseModel):
    """A published portfolio entry, optionally tied to the booking it came from."""

    __tablename__ = "catalogues"

    id           = Column(Integer, primary_key=True, index=True)
    booking_id   = Column(Integer, ForeignKey("bookings.id", ondelete="SET NULL"), nullable=True)
    title        = Column(String, nullable=False)
    description  = Column(Text, nullable=True)
    service_type = Column(String, nullable=False, index=True)
    cover_image  = Column(String, nullable=False)
    images       = Column(JSON, nullable=False, default=list)
    is_published = Column(Boolean, nullable=False, default=False)
    sort_order   = Column(Integer, nullable=False, default=0)
    published_at = Column(DateTime, nullable=True)

    booking = relationship("Booking")
    reviews = relationship("Review", back_populates="catalogue")
