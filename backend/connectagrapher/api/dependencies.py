import logging
from typing import Optional

from fastapi import Depends, Header, status
from sqlalchemy.orm import Session

from ..crud import crud_config
from ..database import get_db
from ..services.pricing_catalog import PricingConfig
from ..utils import error_response
from ..utils.auth import verify_admin_token

logger = logging.getLogger(__name__)


def require_admin(x_admin_token: Optional[str] = Header(default=None)) -> None:
    """Reject requests that do not carry the configured admin token."""
    if not verify_admin_token(x_admin_token):
        logger.warning("Rejected admin request (token %s)", "present" if x_admin_token else "missing")
        raise error_response("Admin access required.", {}, status.HTTP_403_FORBIDDEN)


def get_pricing(db: Session = Depends(get_db)) -> PricingConfig:
    """Snapshot of the pricing table for the duration of one request."""
    return crud_config.get_pricing_config(db)
