from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Annotated
from datetime import datetime

from ..models.review import ReviewType


class ReviewCreate(BaseModel):
    client_name: Annotated[str, Field(min_length=1, max_length=200)]
    client_email: EmailStr
    rating: Annotated[int, Field(ge=1, le=5)]
    review_text: Annotated[str, Field(min_length=1, max_length=5000)]
    # Set for a review of a specific catalogue entry
    catalogue_id: Optional[int] = None


class ReviewSafe(BaseModel):
    id: int
    catalogue_id: Optional[int] = None
    client_name: str
    rating: int
    review_text: str
    review_type: ReviewType
    created_at: datetime

    model_config = {"from_attributes": True}


class ReviewAdmin(ReviewSafe):
    client_email: str
    is_approved: bool
