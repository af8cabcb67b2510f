from sqlalchemy import Boolean, Column, ForeignKey, Integer, JSON, String
from sqlalchemy.orm import relationship
import enum

from .base import BaseModel
from .types import StatusEnum


class GalleryStatus(str, enum.Enum):
    PENDING = "pending"
    SELECTION = "selection"
    EDITING = "editing"
    COMPLETED = "completed"


class GalleryImageSet(str, enum.Enum):
    """The three image lists a gallery keeps, in workflow order."""
    GALLERY = "gallery"
    SELECTED = "selected"
    FINAL = "final"


class Gallery(BaseModel):
    __tablename__ = "galleries"

    id           = Column(Integer, primary_key=True, index=True)
    booking_id   = Column(Integer, ForeignKey("bookings.id", ondelete="SET NULL"), nullable=True, unique=True)
    client_email = Column(String, nullable=False, index=True)
    access_code  = Column(String(16), nullable=False, index=True)

    gallery_images  = Column(JSON, nullable=False, default=list)
    selected_images = Column(JSON, nullable=False, default=list)
    final_images    = Column(JSON, nullable=False, default=list)

    status = Column(StatusEnum(GalleryStatus), nullable=False, default=GalleryStatus.PENDING)

    gallery_download_enabled  = Column(Boolean, nullable=False, default=False)
    selected_download_enabled = Column(Boolean, nullable=False, default=False)
    final_download_enabled    = Column(Boolean, nullable=False, default=True)

    booking = relationship("Booking", back_populates="gallery")

    def images_for(self, image_set: GalleryImageSet) -> list[str]:
        return list(getattr(self, f"{GalleryImageSet(image_set).value}_images") or [])

    def set_images(self, image_set: GalleryImageSet, images: list[str]) -> None:
        # Assign a fresh list so the JSON column is flagged dirty
        setattr(self, f"{GalleryImageSet(image_set).value}_images", list(images))
