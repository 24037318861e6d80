# File: onboard/services/auth_service.py

"""
Authentication service.

  - Signup: uniqueness check, then insert (the unique index catches races)
  - Login: user lookup + password verification with one generic error
"""

import logging

from onboard.core.errors import ConflictError, UnauthorizedError
from onboard.models.user import User
from onboard.services.user_store import UserStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def register_user(store: UserStore, *, email: str, password: str) -> User:
    if store.find_by_email(email) is not None:
        raise ConflictError("Email already registered")
    user = store.create(email, password)
    logger.info("Registered user %s", user.id)
    return user


def authenticate_user(store: UserStore, *, email: str, password: str) -> User:
    """
    Look up the user and check the password.

    Raises:
        UnauthorizedError: same message whether the email is unknown or
        the password is wrong.
    """
    user = store.find_by_email(email)
    if user is None:
        raise UnauthorizedError(INVALID_CREDENTIALS)
    if not store.verify_password(password, user.password_hash):
        raise UnauthorizedError(INVALID_CREDENTIALS)
    logger.info("User %s logged in", user.id)
    return user
