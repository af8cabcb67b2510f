from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import Response
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import Any, Dict

from ..crud import crud_config
from ..database import get_db
from ..services.site_config import theme_css
from ..utils import error_response
from .api_pricing import validation_field_errors
from .dependencies import require_admin

router = APIRouter(tags=["Site"])


@router.get("/site-config")
def read_site_config(db: Session = Depends(get_db)) -> Dict[str, Any]:
    return crud_config.get_site_config(db)


@router.get("/site-config/theme.css", response_class=Response)
def read_theme_css(db: Session = Depends(get_db)) -> Response:
    css = theme_css(crud_config.get_site_config(db))
    return Response(content=css, media_type="text/css", headers={"Cache-Control": "public, max-age=300"})


@router.put("/admin/site-config", dependencies=[Depends(require_admin)])
def replace_site_config(
    config: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """Store ``config`` as the site configuration; omitted keys fall back to defaults."""
    try:
        return crud_config.save_site_config(db, config)
    except ValidationError as exc:
        raise error_response(
            "Invalid site configuration.",
            validation_field_errors(exc),
            status.HTTP_422_UNPROCESSABLE_ENTITY,
        )
