from datetime import datetime
from sqlalchemy.orm import Session
from typing import List, Optional

from .. import models, schemas


class CRUDCatalogue:
    def get_catalogue(self, db: Session, catalogue_id: int) -> Optional[models.Catalogue]:
        return db.query(models.Catalogue).filter(models.Catalogue.id == catalogue_id).first()

    def get_published(self, db: Session, catalogue_id: int) -> Optional[models.Catalogue]:
        return (
            db.query(models.Catalogue)
            .filter(models.Catalogue.id == catalogue_id, models.Catalogue.is_published.is_(True))
            .first()
        )

    def list_published(self, db: Session, service_type: Optional[str] = None) -> List[models.Catalogue]:
        query = db.query(models.Catalogue).filter(models.Catalogue.is_published.is_(True))
        if service_type:
            query = query.filter(models.Catalogue.service_type == service_type)
        return query.order_by(models.Catalogue.sort_order.asc(), models.Catalogue.published_at.desc()).all()

    def list_all(self, db: Session) -> List[models.Catalogue]:
        return db.query(models.Catalogue).order_by(models.Catalogue.created_at.desc(), models.Catalogue.id.desc()).all()

    def create_catalogue(self, db: Session, catalogue_in: schemas.CatalogueCreate) -> models.Catalogue:
        if catalogue_in.booking_id is not None:
            exists = db.query(models.Booking.id).filter(models.Booking.id == catalogue_in.booking_id).first()
            if not exists:
                raise LookupError(f"Booking {catalogue_in.booking_id} not found.")
        data = catalogue_in.model_dump()
        data["service_type"] = catalogue_in.service_type.value
        db_catalogue = models.Catalogue(**data)
        db.add(db_catalogue)
        db.commit()
        db.refresh(db_catalogue)
        return db_catalogue

    def set_published(self, db: Session, catalogue: models.Catalogue, published: bool) -> models.Catalogue:
        catalogue.is_published = published
        catalogue.published_at = datetime.utcnow() if published else None
        db.commit()
        db.refresh(catalogue)
        return catalogue


catalogue = CRUDCatalogue()
