from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
import enum

from .base import BaseModel
from .types import StatusEnum


class ReviewType(str, enum.Enum):
    GENERAL = "general"
    CATALOGUE = "catalogue"


class Review(BaseModel):
    __tablename__ = "reviews"

    id           = Column(Integer, primary_key=True, index=True)
    # null for general reviews
    catalogue_id = Column(Integer, ForeignKey("catalogues.id", ondelete="CASCADE"), nullable=True, index=True)
    client_name  = Column(String, nullable=False)
    client_email = Column(String, nullable=False, index=True)
    rating       = Column(Integer, nullable=False)
    review_text  = Column(Text, nullable=False)
    review_type  = Column(StatusEnum(ReviewType), nullable=False, default=ReviewType.GENERAL)
    is_approved  = Column(Boolean, nullable=False, default=False)

    catalogue = relationship("Catalogue", back_populates="reviews")
