"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before create_all runs.
"""

import logging

from sqlalchemy import Engine
from sqlalchemy.orm import Session

from onboard.models.base import Base
from onboard.models import onboarding_path, user, user_checklist  # noqa: F401
from onboard.services.path_catalog import PathCatalog

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)


def seed_initial_data(db: Session) -> int:
    """
    Seed the default onboarding paths. Safe to run on every start.
    """
    created = PathCatalog(db).seed_defaults()
    logger.info("Seeded %d onboarding path(s)", created)
    return created
