import logging
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import Any, List, Optional

from .. import crud, schemas
from ..database import get_db
from ..models.user import PhotographerStatus, UserRole
from ..notifications import dispatcher
from ..utils import error_response
from .dependencies import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


def _get_user_or_404(db: Session, user_id: int):
    db_user = crud.user.get_user(db, user_id)
    if not db_user:
        raise error_response("User not found.", {"user_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    return db_user


@router.get("/users", response_model=List[schemas.UserResponse])
def list_users(role: Optional[UserRole] = Query(None), db: Session = Depends(get_db)) -> Any:
    return crud.user.list_users(db, role)


@router.post("/users", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_in: schemas.UserCreate, db: Session = Depends(get_db)) -> Any:
    try:
        return crud.user.create_user(db, user_in)
    except ValueError as exc:
        raise error_response(str(exc), {"email": "taken"}, status.HTTP_409_CONFLICT)


@router.post("/users/{user_id}/make-admin", response_model=schemas.UserResponse)
def make_admin(user_id: int = Path(..., ge=1), db: Session = Depends(get_db)) -> Any:
    db_user = _get_user_or_404(db, user_id)
    logger.info("Granting admin to user %s", user_id)
    return crud.user.make_admin(db, db_user)


@router.post("/photographers/{user_id}/decision", response_model=schemas.UserResponse)
def decide_photographer(
    decision: schemas.PhotographerDecision,
    user_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> Any:
    """Approve or reject a photographer application and email the outcome."""
    db_user = _get_user_or_404(db, user_id)
    new_status = PhotographerStatus(decision.status)
    try:
        db_user = crud.user.set_photographer_status(db, db_user, new_status)
    except ValueError as exc:
        raise error_response(str(exc), {"user_id": "not_photographer"}, status.HTTP_400_BAD_REQUEST)
    if new_status == PhotographerStatus.APPROVED:
        dispatcher.notify_photographer_approved(db_user.email, db_user.first_name)
    else:
        dispatcher.notify_photographer_rejected(db_user.email, db_user.first_name)
    return db_user


@router.post("/bookings/{booking_id}/email", status_code=status.HTTP_202_ACCEPTED)
def email_booking_client(
    email_in: schemas.AdminEmailCreate,
    booking_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> Any:
    """Send an admin-composed message to a booking's client."""
    db_booking = crud.booking.get_booking(db, booking_id)
    if not db_booking:
        raise error_response("Booking not found.", {"booking_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    task_id = dispatcher.notify_admin_message(
        db_booking.email, db_booking.client_name, email_in.subject, email_in.message
    )
    return {"queued": task_id is not None}
