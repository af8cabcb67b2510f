from pydantic import BaseModel, EmailStr, Field
from typing import Literal, Optional, Annotated

from ..models.user import PhotographerStatus, UserRole


class UserCreate(BaseModel):
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole = UserRole.CLIENT


class UserResponse(BaseModel):
    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_admin: bool
    is_blocked: bool
    role: UserRole
    photographer_status: Optional[PhotographerStatus] = None

    model_config = {"from_attributes": True}


class PhotographerDecision(BaseModel):
    status: Literal["approved", "rejected"]


class AdminEmailCreate(BaseModel):
    subject: Annotated[str, Field(min_length=1, max_length=200)]
    message: Annotated[str, Field(min_length=1, max_length=10000)]
