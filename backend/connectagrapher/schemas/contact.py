from pydantic import BaseModel, EmailStr, Field
from typing import Annotated
from datetime import datetime

from ..models.contact_message import ContactStatus


class ContactCreate(BaseModel):
    name: Annotated[str, Field(min_length=1, max_length=200)]
    email: EmailStr
    message: Annotated[str, Field(min_length=1, max_length=5000)]


class ContactResponse(BaseModel):
    id: int
    name: str
    email: str
    message: str
    status: ContactStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class ContactStatusUpdate(BaseModel):
    status: ContactStatus
