# File: onboard/services/checklist_progress.py

"""
Per-user checklist progress, stored in user_checklists.

Items live inside the path's JSON checklist; a progress row exists only
once an item has been toggled at least once.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from onboard.core.errors import NotFoundError
from onboard.models.base import utcnow
from onboard.models.onboarding_path import OnboardingPath
from onboard.models.user import User
from onboard.models.user_checklist import UserChecklist
from onboard.schemas.path import ChecklistItemProgress
from onboard.services.path_catalog import PathCatalog


class ChecklistProgress:
    def __init__(self, db: Session):
        self.db = db

    def _rows_by_index(self, user: User, path: OnboardingPath) -> dict[int, UserChecklist]:
        stmt = select(UserChecklist).where(
            UserChecklist.user_id == user.id,
            UserChecklist.path_id == path.id,
        )
        return {row.item_index: row for row in self.db.execute(stmt).scalars()}

    def items_for(self, user: User, path: OnboardingPath) -> list[ChecklistItemProgress]:
        rows = self._rows_by_index(user, path)
        items = []
        for index, item in enumerate(PathCatalog.parse_checklist(path)):
            row = rows.get(index)
            items.append(
                ChecklistItemProgress(
                    index=index,
                    title=item.title,
                    description=item.description,
                    completed=bool(row and row.completed),
                    completed_at=row.completed_at if row else None,
                )
            )
        return items

    def set_completed(
        self,
        user: User,
        path: OnboardingPath,
        item_index: int,
        completed: bool = True,
    ) -> ChecklistItemProgress:
        checklist = PathCatalog.parse_checklist(path)
        if not 0 <= item_index < len(checklist):
            raise NotFoundError("Checklist item")

        row = self._rows_by_index(user, path).get(item_index)
        if row is None:
            row = UserChecklist(user_id=user.id, path_id=path.id, item_index=item_index)
            self.db.add(row)
            try:
                self.db.flush()
            except IntegrityError:
                # Another request created this row between our read and insert.
                self.db.rollback()
                row = self._rows_by_index(user, path)[item_index]
        row.completed = completed
        row.completed_at = utcnow() if completed else None
        self.db.commit()
        self.db.refresh(row)

        item = checklist[item_index]
        return ChecklistItemProgress(
            index=item_index,
            title=item.title,
            description=item.description,
            completed=row.completed,
            completed_at=row.completed_at,
        )
