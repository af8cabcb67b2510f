import logging
import secrets
import string
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models, schemas
from ..models.booking_status import BookingStatus
from ..notifications import dispatcher
from ..services.pricing_catalog import PricingConfig
from ..services.quote_calculator import Quote, QuoteRequest, calculate_quote
from ..utils.auth import normalize_email
from ..utils.errors import PaymentStateError, PersistenceError

logger = logging.getLogger(__name__)

ACCESS_CODE_ALPHABET = string.ascii_uppercase + string.digits
ACCESS_CODE_LENGTH = 8

# Admin may only move a booking forward through its lifecycle
_STATUS_ORDER = [BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.COMPLETED]


def generate_access_code(length: int = ACCESS_CODE_LENGTH) -> str:
    return "".join(secrets.choice(ACCESS_CODE_ALPHABET) for _ in range(length))


def quote_request_from(booking_in: schemas.QuoteInputs) -> QuoteRequest:
    return QuoteRequest(
        service_type=booking_in.service_type,
        package_type=booking_in.package_type,
        parish=booking_in.parish,
        has_photo_package=booking_in.has_photo_package,
        has_video_package=booking_in.has_video_package,
        video_package_type=booking_in.video_package_type,
        number_of_people=booking_in.number_of_people,
        event_hours=booking_in.event_hours,
        addons=tuple(booking_in.addons),
    )


class CRUDBooking:
    def get_booking(self, db: Session, booking_id: int) -> Optional[models.Booking]:
        return db.query(models.Booking).filter(models.Booking.id == booking_id).first()

    def list_bookings(
        self,
        db: Session,
        status: Optional[BookingStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[models.Booking]:
        query = db.query(models.Booking)
        if status is not None:
            query = query.filter(models.Booking.status == status)
        return (
            query.order_by(models.Booking.created_at.desc(), models.Booking.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create_booking_with_gallery(
        self,
        db: Session,
        booking_in: schemas.BookingCreate,
        pricing: PricingConfig,
    ) -> Tuple[models.Booking, models.Gallery, Quote]:
        """Price ``booking_in`` and insert the booking and its gallery together.

        The quote is computed before touching the session, so a
        ``PricingValidationError`` leaves no trace. Store failures roll the
        whole unit back and surface as ``PersistenceError``.
        """
        quote = calculate_quote(quote_request_from(booking_in), pricing)
        if booking_in.total_price is not None and booking_in.total_price != quote.total_price:
            logger.info(
                "Ignoring client total %s for %s; server quote is %s",
                booking_in.total_price,
                booking_in.email,
                quote.total_price,
            )

        email = normalize_email(booking_in.email)
        db_booking = models.Booking(
            client_name=booking_in.client_name,
            email=email,
            contact_number=booking_in.contact_number,
            service_type=quote.service_type.value,
            package_type=quote.package_type.value,
            has_photo_package=booking_in.has_photo_package,
            has_video_package=booking_in.has_video_package,
            video_package_type=quote.video_package_type.value if quote.video_package_type else None,
            number_of_people=booking_in.number_of_people,
            event_hours=quote.event_hours,
            addons=quote.addon_names,
            shoot_date=booking_in.shoot_date,
            shoot_time=booking_in.shoot_time,
            location=booking_in.location,
            parish=quote.parish_group.value,
            base_price=quote.base_price,
            video_price=quote.video_price,
            extra_person_fee=quote.extra_person_fee,
            addons_total=quote.addons_total,
            transportation_fee=quote.transportation_fee,
            total_price=quote.total_price,
            deposit_amount=quote.deposit_amount,
            balance_due=quote.balance_due,
            currency=quote.currency,
            referral_source=list(booking_in.referral_source),
            client_initials=booking_in.client_initials,
            contract_accepted=booking_in.contract_accepted,
            status=BookingStatus.PENDING,
        )
        try:
            db.add(db_booking)
            db.flush()
            db_gallery = models.Gallery(
                booking_id=db_booking.id,
                client_email=email,
                access_code=generate_access_code(),
            )
            db.add(db_gallery)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Booking insert failed for %s: %s", email, exc, exc_info=True)
            raise PersistenceError("Booking could not be saved") from exc
        db.refresh(db_booking)
        db.refresh(db_gallery)
        logger.info(
            "Created booking %s (%s/%s) total=%s deposit=%s",
            db_booking.id,
            db_booking.service_type,
            db_booking.package_type,
            db_booking.total_price,
            db_booking.deposit_amount,
        )
        return db_booking, db_gallery, quote

    def update_status(self, db: Session, booking_id: int, status: BookingStatus) -> Optional[models.Booking]:
        db_booking = self.get_booking(db, booking_id)
        if not db_booking:
            return None
        current = BookingStatus(db_booking.status)
        target = BookingStatus(status)
        if target == current:
            return db_booking
        if _STATUS_ORDER.index(target) < _STATUS_ORDER.index(current):
            raise ValueError(f"Cannot move booking from {current.value} back to {target.value}.")
        db_booking.status = target
        db.commit()
        db.refresh(db_booking)
        logger.info("Booking %s status %s -> %s", booking_id, current.value, target.value)
        return db_booking

    def payment_amount(self, booking: models.Booking, payment_type: str) -> int:
        """Return the amount owed for ``payment_type`` or raise ``PaymentStateError``."""
        if BookingStatus(booking.status) != BookingStatus.CONFIRMED:
            raise PaymentStateError("Booking must be confirmed before payment", field="booking_id")
        if payment_type == "deposit":
            if booking.deposit_paid:
                raise PaymentStateError("Deposit has already been paid")
            return booking.deposit_amount
        if payment_type == "balance":
            if not booking.deposit_paid:
                raise PaymentStateError("Deposit must be paid before the balance")
            if booking.balance_paid:
                raise PaymentStateError("Balance has already been paid")
            return booking.balance_due
        raise PaymentStateError(f"Unknown payment type: {payment_type}")

    def set_checkout_id(self, db: Session, booking: models.Booking, payment_type: str, checkout_id: str) -> models.Booking:
        if payment_type == "deposit":
            booking.deposit_checkout_id = checkout_id
        else:
            booking.balance_checkout_id = checkout_id
        db.commit()
        db.refresh(booking)
        return booking

    def record_payment(
        self,
        db: Session,
        booking_id: int,
        payment_type: str,
        order_id: str,
    ) -> Tuple[Optional[models.Booking], bool]:
        """Apply a completed payment reported by the payment provider.

        Returns ``(booking, applied)``; repeat reports of a payment that is
        already recorded change nothing and send no email.
        """
        db_booking = self.get_booking(db, booking_id)
        if not db_booking:
            return None, False
        if payment_type not in ("deposit", "balance"):
            raise PaymentStateError(f"Unknown payment type: {payment_type}")

        paid_attr = f"{payment_type}_paid"
        order_attr = f"{payment_type}_order_id"
        if getattr(db_booking, paid_attr):
            if getattr(db_booking, order_attr) != order_id:
                logger.warning(
                    "Booking %s %s already paid by order %s; ignoring order %s",
                    booking_id,
                    payment_type,
                    getattr(db_booking, order_attr),
                    order_id,
                )
            return db_booking, False

        setattr(db_booking, paid_attr, True)
        setattr(db_booking, order_attr, order_id)
        db.commit()
        db.refresh(db_booking)
        logger.info("Recorded %s payment for booking %s order=%s", payment_type, booking_id, order_id)
        dispatcher.notify_payment_received(db_booking, payment_type)
        return db_booking, True

    def payment_summary(self, booking: models.Booking) -> schemas.PaymentSummary:
        next_payment = None
        amount_due = 0
        if not booking.deposit_paid:
            next_payment, amount_due = "deposit", booking.deposit_amount
        elif not booking.balance_paid:
            next_payment, amount_due = "balance", booking.balance_due
        return schemas.PaymentSummary(
            booking_id=booking.id,
            status=booking.status,
            currency=booking.currency,
            total_price=booking.total_price,
            deposit_amount=booking.deposit_amount,
            balance_due=booking.balance_due,
            deposit_paid=booking.deposit_paid,
            balance_paid=booking.balance_paid,
            next_payment=next_payment,
            amount_due=amount_due,
        )


booking = CRUDBooking()
