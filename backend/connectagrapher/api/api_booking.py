import logging
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import Any, List, Optional

from .. import crud, schemas
from ..database import get_db
from ..models.booking_status import BookingStatus
from ..notifications import dispatcher
from ..services.pricing_catalog import PricingConfig
from ..utils import error_response
from ..utils.errors import PersistenceError, PricingValidationError, pricing_error_response
from .dependencies import get_pricing, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Bookings"])


@router.post("/bookings", response_model=schemas.BookingCreated, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking_in: schemas.BookingCreate,
    db: Session = Depends(get_db),
    pricing: PricingConfig = Depends(get_pricing),
) -> Any:
    """Create a booking and its client gallery.

    Prices are always recomputed here; the response carries the gallery
    access code, which is also emailed to the client.
    """
    try:
        db_booking, db_gallery, _quote = crud.booking.create_booking_with_gallery(db, booking_in, pricing)
    except PricingValidationError as exc:
        raise pricing_error_response(exc)
    except PersistenceError as exc:
        raise error_response(str(exc), {}, status.HTTP_503_SERVICE_UNAVAILABLE)

    dispatcher.notify_booking_confirmed(db_booking, db_gallery.access_code)

    payload = schemas.BookingResponse.model_validate(db_booking).model_dump()
    return schemas.BookingCreated(**payload, access_code=db_gallery.access_code)


@router.get("/bookings/{booking_id}/payment", response_model=schemas.PaymentSummary)
def read_payment_summary(
    booking_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> Any:
    """Amounts and paid flags for the payment page."""
    db_booking = crud.booking.get_booking(db, booking_id)
    if not db_booking:
        raise error_response("Booking not found.", {"booking_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    if BookingStatus(db_booking.status) != BookingStatus.CONFIRMED:
        raise error_response(
            "Booking is not ready for payment.",
            {"status": BookingStatus(db_booking.status).value},
            status.HTTP_409_CONFLICT,
        )
    return crud.booking.payment_summary(db_booking)


@router.get(
    "/admin/bookings",
    response_model=List[schemas.BookingResponse],
    dependencies=[Depends(require_admin)],
)
def list_bookings(
    status_filter: Optional[BookingStatus] = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
) -> Any:
    return crud.booking.list_bookings(db, status=status_filter, skip=skip, limit=limit)


@router.patch(
    "/admin/bookings/{booking_id}/status",
    response_model=schemas.BookingResponse,
    dependencies=[Depends(require_admin)],
)
def update_booking_status(
    update: schemas.BookingStatusUpdate,
    booking_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> Any:
    try:
        db_booking = crud.booking.update_status(db, booking_id, update.status)
    except ValueError as exc:
        raise error_response(str(exc), {"status": "invalid_transition"}, status.HTTP_409_CONFLICT)
    if not db_booking:
        raise error_response("Booking not found.", {"booking_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    return db_booking
