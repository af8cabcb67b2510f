from sqlalchemy.orm import Session
from typing import List, Optional

from .. import models, schemas
from ..models.contact_message import ContactStatus
from ..utils.auth import normalize_email


def create_message(db: Session, message_in: schemas.ContactCreate) -> models.ContactMessage:
    db_message = models.ContactMessage(
        name=message_in.name.strip(),
        email=normalize_email(message_in.email),
        message=message_in.message.strip(),
        status=ContactStatus.UNREAD,
    )
    db.add(db_message)
    db.commit()
    db.refresh(db_message)
    return db_message


def list_messages(db: Session, status: Optional[ContactStatus] = None) -> List[models.ContactMessage]:
    query = db.query(models.ContactMessage)
    if status is not None:
        query = query.filter(models.ContactMessage.status == status)
    return query.order_by(models.ContactMessage.created_at.desc(), models.ContactMessage.id.desc()).all()


def update_status(db: Session, message_id: int, status: ContactStatus) -> Optional[models.ContactMessage]:
    db_message = db.query(models.ContactMessage).filter(models.ContactMessage.id == message_id).first()
    if not db_message:
        return None
    db_message.status = status
    db.commit()
    db.refresh(db_message)
    return db_message
