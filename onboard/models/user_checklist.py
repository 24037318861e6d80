# File: onboard/models/user_checklist.py

"""
Per-user completion state for one checklist item of one path.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from onboard.models.base import Base, generate_id


class UserChecklist(Base):
    __tablename__ = "user_checklists"
    __table_args__ = (
        UniqueConstraint("user_id", "path_id", "item_index", name="uq_user_checklist_item"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    path_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("onboarding_paths.id"),
        nullable=False,
    )
    item_index: Mapped[int] = mapped_column(Integer, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
