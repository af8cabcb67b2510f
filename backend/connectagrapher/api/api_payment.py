import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Any

from .. import crud, schemas
from ..core.config import settings
from ..database import get_db
from ..services.payment_gateway import LemonSqueezyGateway, get_payment_gateway
from ..utils import error_response
from ..utils.errors import PaymentGatewayError, PaymentStateError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Payments"])


@router.post("/payments/checkout", response_model=schemas.CheckoutResponse, status_code=status.HTTP_201_CREATED)
def create_checkout(
    checkout_in: schemas.CheckoutCreate,
    db: Session = Depends(get_db),
    gateway: LemonSqueezyGateway = Depends(get_payment_gateway),
) -> Any:
    """Open a hosted checkout for a booking's deposit or balance."""
    db_booking = crud.booking.get_booking(db, checkout_in.booking_id)
    if not db_booking:
        raise error_response("Booking not found.", {"booking_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    try:
        amount = crud.booking.payment_amount(db_booking, checkout_in.payment_type)
    except PaymentStateError as exc:
        raise error_response(exc.message, {exc.field: "invalid"}, status.HTTP_400_BAD_REQUEST)

    redirect_url = f"{settings.APP_URL}/payment-success?booking={db_booking.id}&type={checkout_in.payment_type}"
    try:
        session = gateway.create_checkout(
            booking_id=db_booking.id,
            payment_type=checkout_in.payment_type,
            amount=amount,
            currency=db_booking.currency,
            email=db_booking.email,
            name=db_booking.client_name,
            redirect_url=redirect_url,
        )
    except PaymentGatewayError as exc:
        raise error_response(str(exc), {}, status.HTTP_502_BAD_GATEWAY)

    crud.booking.set_checkout_id(db, db_booking, checkout_in.payment_type, session.checkout_id)
    return schemas.CheckoutResponse(
        booking_id=db_booking.id,
        payment_type=checkout_in.payment_type,
        checkout_id=session.checkout_id,
        checkout_url=session.url,
        amount=amount,
        currency=db_booking.currency,
    )
