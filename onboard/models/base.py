# File: onboard/models/base.py

import secrets
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


def generate_id() -> str:
    """Random 128-bit identifier rendered as 32 hex characters."""
    return secrets.token_hex(16)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.
    """
    pass
