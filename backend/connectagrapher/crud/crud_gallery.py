from sqlalchemy.orm import Session
from typing import List, Optional

from .. import models, schemas
from ..models.gallery import GalleryImageSet
from ..utils.auth import normalize_email


class CRUDGallery:
    def get_gallery(self, db: Session, gallery_id: int) -> Optional[models.Gallery]:
        return db.query(models.Gallery).filter(models.Gallery.id == gallery_id).first()

    def get_by_access(self, db: Session, email: str, access_code: str) -> Optional[models.Gallery]:
        """Look up a gallery by client email and access code (code is case-insensitive)."""
        return (
            db.query(models.Gallery)
            .filter(
                models.Gallery.client_email == normalize_email(email),
                models.Gallery.access_code == (access_code or "").strip().upper(),
            )
            .first()
        )

    def list_galleries(self, db: Session, skip: int = 0, limit: int = 100) -> List[models.Gallery]:
        return (
            db.query(models.Gallery)
            .order_by(models.Gallery.created_at.desc(), models.Gallery.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def add_image(self, db: Session, gallery: models.Gallery, image_set: GalleryImageSet, url: str) -> models.Gallery:
        images = gallery.images_for(image_set)
        if url not in images:
            images.append(url)
        gallery.set_images(image_set, images)
        db.commit()
        db.refresh(gallery)
        return gallery

    def replace_images(
        self, db: Session, gallery: models.Gallery, image_set: GalleryImageSet, images: List[str]
    ) -> models.Gallery:
        # Keep first occurrence order, drop repeats
        gallery.set_images(image_set, list(dict.fromkeys(images)))
        db.commit()
        db.refresh(gallery)
        return gallery

    def update_gallery(self, db: Session, gallery: models.Gallery, update: schemas.GalleryUpdate) -> models.Gallery:
        for field, value in update.model_dump(exclude_none=True).items():
            setattr(gallery, field, value)
        db.commit()
        db.refresh(gallery)
        return gallery


gallery = CRUDGallery()
