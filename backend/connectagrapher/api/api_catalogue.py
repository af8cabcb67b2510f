from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import Any, List, Optional

from .. import crud, schemas
from ..database import get_db
from ..services.pricing_catalog import ServiceType
from ..utils import error_response
from .dependencies import require_admin

router = APIRouter(tags=["Catalogues"])


@router.get("/catalogues", response_model=List[schemas.CatalogueSafe])
def list_catalogues(
    service_type: Optional[ServiceType] = Query(None),
    db: Session = Depends(get_db),
) -> Any:
    """Published portfolio entries, optionally for one service type."""
    return crud.catalogue.list_published(db, service_type.value if service_type else None)


@router.get("/catalogues/{catalogue_id}", response_model=schemas.CatalogueSafe)
def read_catalogue(catalogue_id: int = Path(..., ge=1), db: Session = Depends(get_db)) -> Any:
    db_catalogue = crud.catalogue.get_published(db, catalogue_id)
    if not db_catalogue:
        raise error_response("Catalogue not found.", {"catalogue_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    return db_catalogue


@router.get(
    "/admin/catalogues",
    response_model=List[schemas.CatalogueAdmin],
    dependencies=[Depends(require_admin)],
)
def admin_list_catalogues(db: Session = Depends(get_db)) -> Any:
    return crud.catalogue.list_all(db)


@router.post(
    "/admin/catalogues",
    response_model=schemas.CatalogueAdmin,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_catalogue(catalogue_in: schemas.CatalogueCreate, db: Session = Depends(get_db)) -> Any:
    try:
        return crud.catalogue.create_catalogue(db, catalogue_in)
    except LookupError as exc:
        raise error_response(str(exc), {"booking_id": "not_found"}, status.HTTP_404_NOT_FOUND)


def _set_published(db: Session, catalogue_id: int, published: bool):
    db_catalogue = crud.catalogue.get_catalogue(db, catalogue_id)
    if not db_catalogue:
        raise error_response("Catalogue not found.", {"catalogue_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    return crud.catalogue.set_published(db, db_catalogue, published)


@router.post(
    "/admin/catalogues/{catalogue_id}/publish",
    response_model=schemas.CatalogueAdmin,
    dependencies=[Depends(require_admin)],
)
def publish_catalogue(catalogue_id: int = Path(..., ge=1), db: Session = Depends(get_db)) -> Any:
    return _set_published(db, catalogue_id, True)


@router.post(
    "/admin/catalogues/{catalogue_id}/unpublish",
    response_model=schemas.CatalogueAdmin,
    dependencies=[Depends(require_admin)],
)
def unpublish_catalogue(catalogue_id: int = Path(..., ge=1), db: Session = Depends(get_db)) -> Any:
    return _set_published(db, catalogue_id, False)
