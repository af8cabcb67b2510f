from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import Any, List

from .. import crud, schemas
from ..database import get_db
from ..utils import error_response
from .dependencies import require_admin

router = APIRouter(tags=["Galleries"])


def _get_gallery_or_404(db: Session, gallery_id: int):
    db_gallery = crud.gallery.get_gallery(db, gallery_id)
    if not db_gallery:
        raise error_response("Gallery not found.", {"gallery_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    return db_gallery


@router.post("/galleries/access", response_model=schemas.GalleryResponse)
def access_gallery(access: schemas.GalleryAccess, db: Session = Depends(get_db)) -> Any:
    """Open a client gallery with the email and code from the booking email."""
    db_gallery = crud.gallery.get_by_access(db, access.email, access.access_code)
    if not db_gallery:
        # Same response whether the email or the code is wrong
        raise error_response(
            "Invalid email or access code.",
            {"access_code": "invalid"},
            status.HTTP_404_NOT_FOUND,
        )
    return db_gallery


@router.get(
    "/admin/galleries",
    response_model=List[schemas.GalleryAdminResponse],
    dependencies=[Depends(require_admin)],
)
def list_galleries(db: Session = Depends(get_db)) -> Any:
    return crud.gallery.list_galleries(db)


@router.post(
    "/admin/galleries/{gallery_id}/images",
    response_model=schemas.GalleryAdminResponse,
    dependencies=[Depends(require_admin)],
)
def add_gallery_image(
    image_in: schemas.GalleryImageAdd,
    gallery_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> Any:
    db_gallery = _get_gallery_or_404(db, gallery_id)
    return crud.gallery.add_image(db, db_gallery, image_in.image_set, image_in.url)


@router.put(
    "/admin/galleries/{gallery_id}/images",
    response_model=schemas.GalleryAdminResponse,
    dependencies=[Depends(require_admin)],
)
def replace_gallery_images(
    images_in: schemas.GalleryImagesReplace,
    gallery_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> Any:
    db_gallery = _get_gallery_or_404(db, gallery_id)
    return crud.gallery.replace_images(db, db_gallery, images_in.image_set, images_in.images)


@router.patch(
    "/admin/galleries/{gallery_id}",
    response_model=schemas.GalleryAdminResponse,
    dependencies=[Depends(require_admin)],
)
def update_gallery(
    update: schemas.GalleryUpdate,
    gallery_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> Any:
    db_gallery = _get_gallery_or_404(db, gallery_id)
    return crud.gallery.update_gallery(db, db_gallery, update)
