# File: onboard/schemas/responses.py

"""
Response envelopes.

Success: {"success": true, "data": {...}}
Failure: {"success": false, "error": {"message": "..."}}
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from onboard.schemas.path import ChecklistItemProgress, PathRead
from onboard.schemas.user import AdminUserRead, UserPublic

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    data: T


class ErrorDetail(BaseModel):
    message: str


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: ErrorDetail


# ---------- auth ----------

class AuthData(BaseModel):
    user: UserPublic
    token: str


class CurrentUserData(BaseModel):
    user: UserPublic


# ---------- users ----------

class OnboardingResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user: UserPublic
    assigned_path: str = Field(alias="assignedPath")
    welcome_message: str = Field(alias="welcomeMessage")
    path: PathRead


class ProfileData(BaseModel):
    user: UserPublic
    path: Optional[PathRead] = None


class UserListData(BaseModel):
    users: list[AdminUserRead]
    total: int


class ChecklistData(BaseModel):
    path: PathRead
    items: list[ChecklistItemProgress]


class ChecklistItemData(BaseModel):
    item: ChecklistItemProgress


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
