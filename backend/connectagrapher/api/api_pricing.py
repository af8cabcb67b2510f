from fastapi import APIRouter, Body, Depends, status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import Any, Dict

from ..crud import crud_config
from ..database import get_db
from ..schemas import PricingConfigUpdate, QuoteInputs, QuoteOut
from ..services.pricing_catalog import PricingConfig
from ..services.quote_calculator import calculate_quote
from ..crud.crud_booking import quote_request_from
from ..utils import error_response
from ..utils.errors import PricingValidationError, pricing_error_response
from .dependencies import get_pricing, require_admin

router = APIRouter(tags=["Pricing"])


def validation_field_errors(exc: ValidationError) -> Dict[str, str]:
    return {".".join(str(part) for part in err["loc"]) or "body": err["msg"] for err in exc.errors()}


@router.get("/pricing", response_model=PricingConfig)
def read_pricing(pricing: PricingConfig = Depends(get_pricing)) -> Any:
    """Return the active pricing table."""
    return pricing


@router.post("/pricing/quote", response_model=QuoteOut)
def preview_quote(quote_in: QuoteInputs, pricing: PricingConfig = Depends(get_pricing)) -> Any:
    """Price a selection without creating a booking."""
    try:
        quote = calculate_quote(quote_request_from(quote_in), pricing)
    except PricingValidationError as exc:
        raise pricing_error_response(exc)
    return QuoteOut.from_quote(quote)


@router.put(
    "/admin/pricing",
    response_model=PricingConfig,
    dependencies=[Depends(require_admin)],
)
def replace_pricing(
    update: PricingConfigUpdate = Body(...),
    db: Session = Depends(get_db),
) -> Any:
    try:
        return crud_config.save_pricing_config(db, update.overrides())
    except ValidationError as exc:
        raise error_response(
            "Invalid pricing configuration.",
            validation_field_errors(exc),
            status.HTTP_422_UNPROCESSABLE_ENTITY,
        )
