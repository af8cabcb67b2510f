import logging
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import Any, List, Optional

from .. import schemas
from ..crud import crud_contact
from ..database import get_db
from ..models.contact_message import ContactStatus
from ..utils import error_response
from .dependencies import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Contact"])


@router.post("/contact", response_model=schemas.ContactResponse, status_code=status.HTTP_201_CREATED)
def submit_contact(message_in: schemas.ContactCreate, db: Session = Depends(get_db)) -> Any:
    db_message = crud_contact.create_message(db, message_in)
    logger.info("Contact message %s received from %s", db_message.id, db_message.email)
    return db_message


@router.get(
    "/admin/contacts",
    response_model=List[schemas.ContactResponse],
    dependencies=[Depends(require_admin)],
)
def list_contacts(
    status_filter: Optional[ContactStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
) -> Any:
    return crud_contact.list_messages(db, status_filter)


@router.patch(
    "/admin/contacts/{message_id}",
    response_model=schemas.ContactResponse,
    dependencies=[Depends(require_admin)],
)
def update_contact_status(
    update: schemas.ContactStatusUpdate,
    message_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> Any:
    db_message = crud_contact.update_status(db, message_id, update.status)
    if not db_message:
        raise error_response("Message not found.", {"message_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    return db_message
