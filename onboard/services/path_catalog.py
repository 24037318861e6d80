# File: onboard/services/path_catalog.py

"""
Onboarding path catalog.

Five default paths, one per user type, seeded on startup. The order of
DEFAULT_PATHS is the catalog order the classifier scans in, and its
first entry is the classifier's default.
"""

import json
import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from onboard.models.onboarding_path import OnboardingPath
from onboard.schemas.path import ChecklistItem, PathRead

logger = logging.getLogger(__name__)


DEFAULT_PATHS: list[dict[str, Any]] = [
    {
        "user_type": "Operations Manager",
        "name": "Operations Manager Onboarding",
        "description": "Streamline workflows, automate processes, and manage team efficiency",
        "checklist": [
            {"title": "Set up team members", "description": "Invite and manage your team"},
            {"title": "Create approval workflows", "description": "Define custom workflows for your process"},
            {"title": "Configure automated reports", "description": "Set up weekly/monthly reports"},
            {"title": "Integrate with your tools", "description": "Connect Slack, Jira, or other tools"},
        ],
    },
    {
        "user_type": "Sales Lead",
        "name": "Sales Lead Onboarding",
        "description": "Boost productivity, manage pipeline, and track team performance",
        "checklist": [
            {"title": "Import your contacts", "description": "Build your initial contact database"},
            {"title": "Create sales stages", "description": "Customize your pipeline stages"},
            {"title": "Set team goals", "description": "Define quarterly targets"},
            {"title": "Enable forecasting", "description": "Track pipeline health and predictions"},
        ],
    },
    {
        "user_type": "Founder",
        "name": "Founder Onboarding",
        "description": "Get complete control with advanced analytics and team management",
        "checklist": [
            {"title": "Complete company profile", "description": "Set org name, industry, and details"},
            {"title": "Create teams and roles", "description": "Organize users by department"},
            {"title": "Set up integrations", "description": "Connect all your existing tools"},
            {"title": "Configure permissions", "description": "Manage who can do what"},
            {"title": "Enable analytics dashboard", "description": "Track all key metrics in one place"},
        ],
    },
    {
        "user_type": "Support Manager",
        "name": "Support Manager Onboarding",
        "description": "Deliver better support, faster response, and higher satisfaction",
        "checklist": [
            {"title": "Set up help desk", "description": "Configure support channels"},
            {"title": "Create ticket templates", "description": "Standardize issue handling"},
            {"title": "Configure SLAs", "description": "Set response and resolution times"},
            {"title": "Create knowledge base", "description": "Build self-service articles"},
        ],
    },
    {
        "user_type": "Marketing Manager",
        "name": "Marketing Manager Onboarding",
        "description": "Plan campaigns, track results, and optimize marketing spend",
        "checklist": [
            {"title": "Create marketing calendar", "description": "Plan campaigns and content"},
            {"title": "Set up email templates", "description": "Design automated email flows"},
            {"title": "Create assets library", "description": "Organize brand assets"},
            {"title": "Connect analytics", "description": "Track campaign performance"},
        ],
    },
]

USER_TYPES: list[str] = [p["user_type"] for p in DEFAULT_PATHS]


class PathCatalog:
    def __init__(self, db: Session):
        self.db = db

    def seed_defaults(self) -> int:
        """
        Create each default path whose user_type is not stored yet.

        Returns the number of paths created.
        """
        created = 0
        for entry in DEFAULT_PATHS:
            if self.find_by_label(entry["user_type"]) is not None:
                continue
            try:
                self.create(
                    entry["user_type"],
                    entry["name"],
                    entry["description"],
                    [ChecklistItem(**item) for item in entry["checklist"]],
                )
            except IntegrityError:
                # Another process seeded this label between our check and insert.
                self.db.rollback()
                continue
            created += 1
        return created

    def create(
        self,
        user_type: str,
        name: str,
        description: Optional[str],
        checklist_items: list[ChecklistItem],
    ) -> OnboardingPath:
        path = OnboardingPath(
            user_type=user_type,
            name=name,
            description=description,
            checklist_items=json.dumps([item.model_dump() for item in checklist_items]),
        )
        self.db.add(path)
        self.db.commit()
        self.db.refresh(path)
        logger.debug("Created onboarding path %s (%s)", path.id, user_type)
        return path

    def find_by_id(self, path_id: str) -> Optional[OnboardingPath]:
        return self.db.get(OnboardingPath, path_id)

    def find_by_label(self, user_type: str) -> Optional[OnboardingPath]:
        stmt = select(OnboardingPath).where(OnboardingPath.user_type == user_type)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_all(self) -> list[OnboardingPath]:
        stmt = select(OnboardingPath).order_by(OnboardingPath.user_type)
        return list(self.db.execute(stmt).scalars().all())

    @staticmethod
    def parse_checklist(path: OnboardingPath) -> list[ChecklistItem]:
        """
        Decode the stored checklist. Anything unreadable yields [].
        """
        try:
            raw = json.loads(path.checklist_items or "")
        except (TypeError, ValueError):
            return []
        if not isinstance(raw, list):
            return []
        try:
            return [ChecklistItem.model_validate(item) for item in raw]
        except ValueError:
            return []

    @classmethod
    def to_read(cls, path: OnboardingPath) -> PathRead:
        return PathRead(
            id=path.id,
            name=path.name,
            description=path.description,
            checklist=cls.parse_checklist(path),
        )
