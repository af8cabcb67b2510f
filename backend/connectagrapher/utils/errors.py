from typing import Dict, Optional
from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)


class StudioError(Exception):
    """Base class for domain errors raised below the API layer."""


class PricingValidationError(StudioError, ValueError):
    """A quote input was outside the enumerated sets; nothing was computed."""

    def __init__(self, field_errors: Dict[str, str], message: str = "Invalid booking selection."):
        super().__init__(message)
        self.message = message
        self.field_errors = dict(field_errors)


class PaymentStateError(StudioError):
    """The booking is not in a state that allows the requested payment."""

    def __init__(self, message: str, field: str = "payment_type"):
        super().__init__(message)
        self.message = message
        self.field = field


class PersistenceError(StudioError):
    """The store rejected a write; the transaction was rolled back."""


class PaymentGatewayError(StudioError):
    """The payment provider could not create a checkout."""


class DeliveryError(StudioError):
    """An email transport failed to hand off a message."""


def error_response(
    message: str,
    field_errors: Dict[str, str],
    code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> HTTPException:
    """Return an HTTPException with a consistent structure and log details."""
    logger.error("%s %s", message, field_errors)
    detail = {"message": message, "field_errors": field_errors}
    return HTTPException(status_code=code, detail=detail)


def pricing_error_response(exc: PricingValidationError, code: Optional[int] = None) -> HTTPException:
    return error_response(
        exc.message,
        exc.field_errors,
        code or status.HTTP_422_UNPROCESSABLE_ENTITY,
    )
