# File: onboard/api/routes_users.py

"""
User routes (all require a bearer token).

PUT /api/users/profile              - save profile, classify, assign path
GET /api/users/profile              - profile + assigned path
GET /api/users                      - every user, for the admin table
GET /api/users/checklist            - assigned checklist with progress
PUT /api/users/checklist/{index}    - mark an item done / not done
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from onboard.api.deps import (
    get_current_identity,
    get_current_user,
    get_db,
    get_path_classifier,
    get_user_store,
)
from onboard.core.errors import APIError, InternalError, NotFoundError
from onboard.models.onboarding_path import OnboardingPath
from onboard.models.user import User
from onboard.schemas.path import ChecklistProgressUpdate
from onboard.schemas.responses import (
    ChecklistData,
    ChecklistItemData,
    Envelope,
    OnboardingResult,
    ProfileData,
    UserListData,
)
from onboard.schemas.user import AdminUserRead, ProfileUpdate, UserPublic
from onboard.services.checklist_progress import ChecklistProgress
from onboard.services.path_catalog import PathCatalog
from onboard.services.path_classifier import PathClassifier
from onboard.services.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_identity)])


def _assigned_path(db: Session, user: User) -> OnboardingPath:
    path = PathCatalog(db).find_by_id(user.assigned_path) if user.assigned_path else None
    if path is None:
        raise NotFoundError("Assigned path")
    return path


@router.put("/profile", response_model=Envelope[OnboardingResult], summary="Complete onboarding profile")
def update_profile(
    payload: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    store: UserStore = Depends(get_user_store),
    classifier: PathClassifier = Depends(get_path_classifier),
):
    try:
        label = classifier.classify(payload.role, payload.team_size, payload.goal)

        path = PathCatalog(db).find_by_label(label)
        if path is None:
            raise InternalError("Could not find assigned path")

        updated = store.update_profile(
            user.id,
            role=payload.role,
            team_size=payload.team_size,
            goal=payload.goal,
            assigned_path=path.id,
        )
        if updated is None:
            raise InternalError("Could not update user profile")

        welcome = classifier.compose_welcome(updated.email.split("@")[0], label)
    except APIError:
        raise
    except Exception as exc:
        logger.exception("Onboarding failed for user %s", user.id)
        raise InternalError("Failed to process onboarding") from exc

    logger.info("User %s assigned to path %r", user.id, label)
    return Envelope(
        data=OnboardingResult(
            user=UserPublic.model_validate(updated),
            assigned_path=label,
            welcome_message=welcome,
            path=PathCatalog.to_read(path),
        )
    )


@router.get("/profile", response_model=Envelope[ProfileData], summary="Profile and assigned path")
def get_profile(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    path = PathCatalog(db).find_by_id(user.assigned_path) if user.assigned_path else None
    return Envelope(
        data=ProfileData(
            user=UserPublic.model_validate(user),
            path=PathCatalog.to_read(path) if path else None,
        )
    )


@router.get("", response_model=Envelope[UserListData], summary="All users (admin)")
def list_users(
    db: Session = Depends(get_db),
    store: UserStore = Depends(get_user_store),
):
    names = {path.id: path.name for path in PathCatalog(db).list_all()}
    users = [
        AdminUserRead(
            **user.model_dump(),
            assigned_path_name=names.get(user.assigned_path, "Unknown") if user.assigned_path else None,
        )
        for user in store.list_all()
    ]
    return Envelope(data=UserListData(users=users, total=len(users)))


@router.get("/checklist", response_model=Envelope[ChecklistData], summary="Checklist progress")
def get_checklist(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    path = _assigned_path(db, user)
    items = ChecklistProgress(db).items_for(user, path)
    return Envelope(data=ChecklistData(path=PathCatalog.to_read(path), items=items))


@router.put(
    "/checklist/{item_index}",
    response_model=Envelope[ChecklistItemData],
    summary="Update checklist item",
)
def update_checklist_item(
    item_index: int,
    payload: ChecklistProgressUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    path = _assigned_path(db, user)
    item = ChecklistProgress(db).set_completed(user, path, item_index, payload.completed)
    return Envelope(data=ChecklistItemData(item=item))
