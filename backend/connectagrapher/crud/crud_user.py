from sqlalchemy.orm import Session
from typing import List, Optional

from .. import models, schemas
from ..models.user import PhotographerStatus, UserRole
from ..utils.auth import normalize_email


class CRUDUser:
    def get_user(self, db: Session, user_id: int) -> Optional[models.User]:
        return db.query(models.User).filter(models.User.id == user_id).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[models.User]:
        return db.query(models.User).filter(models.User.email == normalize_email(email)).first()

    def list_users(self, db: Session, role: Optional[UserRole] = None) -> List[models.User]:
        query = db.query(models.User)
        if role is not None:
            query = query.filter(models.User.role == role)
        return query.order_by(models.User.id.asc()).all()

    def create_user(self, db: Session, user: schemas.UserCreate) -> models.User:
        if self.get_user_by_email(db, user.email):
            raise ValueError("A user with this email already exists.")
        db_user = models.User(
            email=normalize_email(user.email),
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            photographer_status=PhotographerStatus.PENDING if user.role == UserRole.PHOTOGRAPHER else None,
        )
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
        return db_user

    def set_photographer_status(
        self, db: Session, user: models.User, status: PhotographerStatus
    ) -> models.User:
        if UserRole(user.role) != UserRole.PHOTOGRAPHER:
            raise ValueError("User is not a photographer.")
        user.photographer_status = status
        db.commit()
        db.refresh(user)
        return user

    def make_admin(self, db: Session, user: models.User) -> models.User:
        user.is_admin = True
        db.commit()
        db.refresh(user)
        return user


user = CRUDUser()
