from sqlalchemy import Column, Integer, String, Text
import enum

from .base import BaseModel
from .types import StatusEnum


class ContactStatus(str, enum.Enum):
    UNREAD = "unread"
    READ = "read"
    RESPONDED = "responded"


class ContactMessage(BaseModel):
    __tablename__ = "contact_messages"

    id      = Column(Integer, primary_key=True, index=True)
    name    = Column(String, nullable=False)
    email   = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    status  = Column(StatusEnum(ContactStatus), nullable=False, default=ContactStatus.UNREAD)
