from sqlalchemy.orm import Session
from typing import List

from .. import models, schemas
from ..models.review import ReviewType
from ..utils.auth import normalize_email


class CRUDReview:
    def list_approved_general(self, db: Session, limit: int = 50) -> List[models.Review]:
        return (
            db.query(models.Review)
            .filter(
                models.Review.review_type == ReviewType.GENERAL,
                models.Review.is_approved.is_(True),
            )
            .order_by(models.Review.created_at.desc())
            .limit(limit)
            .all()
        )

    def list_approved_for_catalogue(self, db: Session, catalogue_id: int) -> List[models.Review]:
        return (
            db.query(models.Review)
            .join(models.Catalogue, models.Review.catalogue_id == models.Catalogue.id)
            .filter(
                models.Review.catalogue_id == catalogue_id,
                models.Review.is_approved.is_(True),
                models.Catalogue.is_published.is_(True),
            )
            .order_by(models.Review.created_at.desc())
            .all()
        )

    def list_all(self, db: Session) -> List[models.Review]:
        return db.query(models.Review).order_by(models.Review.created_at.desc(), models.Review.id.desc()).all()

    def get_review(self, db: Session, review_id: int):
        return db.query(models.Review).filter(models.Review.id == review_id).first()

    def create_review(self, db: Session, review_in: schemas.ReviewCreate) -> models.Review:
        """Store a review pending approval.

        Catalogue reviews are only accepted from the client whose booking the
        catalogue came from, once per email.
        """
        email = normalize_email(review_in.client_email)
        review_type = ReviewType.GENERAL
        if review_in.catalogue_id is not None:
            db_catalogue = (
                db.query(models.Catalogue).filter(models.Catalogue.id == review_in.catalogue_id).first()
            )
            if not db_catalogue:
                raise LookupError("Catalogue not found.")
            if db_catalogue.booking is None:
                raise ValueError("This catalogue is not open for reviews.")
            if normalize_email(db_catalogue.booking.email) != email:
                raise PermissionError("Only the client of this shoot can review it.")
            existing = (
                db.query(models.Review.id)
                .filter(
                    models.Review.catalogue_id == db_catalogue.id,
                    models.Review.client_email == email,
                )
                .first()
            )
            if existing:
                raise ValueError("You have already reviewed this catalogue.")
            review_type = ReviewType.CATALOGUE

        db_review = models.Review(
            catalogue_id=review_in.catalogue_id,
            client_name=review_in.client_name.strip(),
            client_email=email,
            rating=review_in.rating,
            review_text=review_in.review_text.strip(),
            review_type=review_type,
            is_approved=False,
        )
        db.add(db_review)
        db.commit()
        db.refresh(db_review)
        return db_review

    def set_approved(self, db: Session, review: models.Review, approved: bool = True) -> models.Review:
        review.is_approved = approved
        db.commit()
        db.refresh(review)
        return review


review = CRUDReview()
