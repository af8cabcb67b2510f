from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import Any, List

from .. import crud, schemas
from ..database import get_db
from ..utils import error_response
from .dependencies import require_admin

router = APIRouter(tags=["Reviews"])


@router.get("/reviews", response_model=List[schemas.ReviewSafe])
def list_general_reviews(db: Session = Depends(get_db)) -> Any:
    return crud.review.list_approved_general(db)


@router.get("/catalogues/{catalogue_id}/reviews", response_model=List[schemas.ReviewSafe])
def list_catalogue_reviews(catalogue_id: int = Path(..., ge=1), db: Session = Depends(get_db)) -> Any:
    if not crud.catalogue.get_published(db, catalogue_id):
        raise error_response("Catalogue not found.", {"catalogue_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    return crud.review.list_approved_for_catalogue(db, catalogue_id)


@router.post("/reviews", response_model=schemas.ReviewSafe, status_code=status.HTTP_201_CREATED)
def submit_review(review_in: schemas.ReviewCreate, db: Session = Depends(get_db)) -> Any:
    """Submit a review; it stays hidden until an admin approves it."""
    try:
        return crud.review.create_review(db, review_in)
    except LookupError as exc:
        raise error_response(str(exc), {"catalogue_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    except PermissionError as exc:
        raise error_response(str(exc), {"client_email": "mismatch"}, status.HTTP_403_FORBIDDEN)
    except ValueError as exc:
        raise error_response(str(exc), {"catalogue_id": "invalid"}, status.HTTP_400_BAD_REQUEST)


@router.get(
    "/admin/reviews",
    response_model=List[schemas.ReviewAdmin],
    dependencies=[Depends(require_admin)],
)
def admin_list_reviews(db: Session = Depends(get_db)) -> Any:
    return crud.review.list_all(db)


@router.post(
    "/admin/reviews/{review_id}/approve",
    response_model=schemas.ReviewAdmin,
    dependencies=[Depends(require_admin)],
)
def approve_review(review_id: int = Path(..., ge=1), db: Session = Depends(get_db)) -> Any:
    db_review = crud.review.get_review(db, review_id)
    if not db_review:
        raise error_response("Review not found.", {"review_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    return crud.review.set_approved(db, db_review, True)
