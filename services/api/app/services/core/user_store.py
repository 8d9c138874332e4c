"""Persistence for the users table."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import Conflict
from app.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Single-row lookups and inserts over `users`."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        return self.db.execute(select(User).where(User.email == email)).scalar_one_or_none()

    def find_by_id(self, user_id: str) -> User | None:
        return self.db.get(User, user_id)

    def insert(self, user: User) -> User:
        """
        Persist a new user and return it with `id` and `created_at` populated.

        Raises:
            Conflict: if the email is already taken (unique constraint)
        """
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Duplicate signup rejected by unique constraint: %s", user.email)
            raise Conflict() from e
        self.db.refresh(user)
        return user
