import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from booklending.core.exceptions import DuplicateRecordError, InvalidInputError, NotFoundError
from booklending.models import models
from booklending.schemas import schemas

logger = logging.getLogger(__name__)


class UserDirectory:
    """Lookup and creation of library users."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[models.User]:
        return self.db.query(models.User).order_by(models.User.id).all()

    def get(self, user_id: int) -> models.User:
        user = self.db.query(models.User).filter(models.User.id == user_id).first()
        if not user:
            raise NotFoundError(f"User not found with id: {user_id}")
        return user

    def exists(self, user_id: int) -> bool:
        return self.db.query(models.User.id).filter(models.User.id == user_id).first() is not None

    def create(self, user_in: Optional[schemas.UserCreate]) -> models.User:
        if user_in is None or not user_in.user_name:
            raise InvalidInputError("Invalid user: user or username cannot be null or empty")
        # id 0 is treated like an absent id and left to the store
        user_id = user_in.id or None
        if user_id is not None and self.exists(user_id):
            raise DuplicateRecordError(f"User with ID {user_id} already exists")
        user = models.User(id=user_id, user_name=user_in.user_name)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Created user id={user.id} userName={user.user_name}")
        return user
