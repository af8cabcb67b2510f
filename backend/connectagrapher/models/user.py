from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import relationship
from .base import BaseModel
from .types import StatusEnum
import enum


class UserRole(str, enum.Enum):
    CLIENT = "client"
    PHOTOGRAPHER = "photographer"


class PhotographerStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class User(BaseModel):
    __tablename__ = "users"

    id          = Column(Integer, primary_key=True, index=True)
    email       = Column(String, unique=True, index=True, nullable=False)
    first_name  = Column(String, nullable=True)
    last_name   = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)
    is_admin    = Column(Boolean, nullable=False, default=False)
    is_blocked  = Column(Boolean, nullable=False, default=False)
    role        = Column(StatusEnum(UserRole), nullable=False, default=UserRole.CLIENT)
    photographer_status = Column(
        StatusEnum(PhotographerStatus),
        nullable=True,
        default=PhotographerStatus.PENDING,
    )

    # Bookings assigned to this user when acting as photographer
    assigned_bookings = relationship("Booking", back_populates="photographer")
