# File: onboard/services/user_store.py

"""
Credential store.

All reads and writes of the users table go through UserStore. Records it
returns still carry password_hash; callers convert them to UserPublic
before anything leaves the API.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from onboard.core.errors import ConflictError
from onboard.core.security import hash_password, verify_password
from onboard.models.base import utcnow
from onboard.models.user import User
from onboard.schemas.user import UserPublic, normalize_email

logger = logging.getLogger(__name__)

# Columns exposed by list_all(); password_hash is never selected.
_LIST_COLUMNS = (
    User.id,
    User.email,
    User.role,
    User.team_size,
    User.goal,
    User.assigned_path,
    User.created_at,
    User.updated_at,
)


class UserStore:
    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, password: str) -> User:
        """
        Hash the password and insert a new user.

        Raises:
            ConflictError: the email is already registered. This also
            covers a concurrent signup that slipped past the caller's
            existence check and was stopped by the unique constraint.
        """
        user = User(email=normalize_email(email), password_hash=hash_password(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError("Email already registered") from exc
        self.db.refresh(user)
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == normalize_email(email))
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.db.get(User, user_id)

    @staticmethod
    def verify_password(password: str, password_hash: str) -> bool:
        return verify_password(password, password_hash)

    def update_profile(
        self,
        user_id: str,
        *,
        role: Optional[str] = None,
        team_size: Optional[str] = None,
        goal: Optional[str] = None,
        assigned_path: Optional[str] = None,
    ) -> Optional[User]:
        """
        Write only the fields that were passed.

        Returns None without touching the row when no field is given, or
        when the user does not exist.
        """
        changes = {
            key: value
            for key, value in (
                ("role", role),
                ("team_size", team_size),
                ("goal", goal),
                ("assigned_path", assigned_path),
            )
            if value is not None
        }
        if not changes:
            return None

        user = self.find_by_id(user_id)
        if user is None:
            return None

        for key, value in changes.items():
            setattr(user, key, value)
        user.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(user)
        return user

    def list_all(self) -> list[UserPublic]:
        stmt = select(*_LIST_COLUMNS).order_by(User.created_at.desc())
        rows = self.db.execute(stmt).mappings().all()
        return [UserPublic.model_validate(dict(row)) for row in rows]
