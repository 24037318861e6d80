# File: onboard/models/onboarding_path.py

"""
OnboardingPath model.

One row per user type. The checklist is stored as a JSON array of
{"title", "description"} objects; order matters.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from onboard.models.base import Base, generate_id


class OnboardingPath(Base):
    __tablename__ = "onboarding_paths"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    user_type: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    checklist_items: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
