# File: onboard/schemas/user.py

from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

from onboard.core.security import BCRYPT_MAX_BYTES

MIN_PASSWORD_LENGTH = 6


def normalize_email(value: str) -> str:
    return value.strip().lower()


class UserBase(BaseModel):
    email: str

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v):
        if not isinstance(v, str):
            raise ValueError("Invalid email")
        try:
            validate_email(v.strip(), check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Invalid email") from None
        return normalize_email(v)


class UserCreate(UserBase):
    password: str

    @field_validator("password")
    @classmethod
    def check_password_length(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return v


class UserLogin(UserBase):
    password: str

    @field_validator("password")
    @classmethod
    def check_password_present(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class ProfileUpdate(BaseModel):
    role: str
    team_size: str
    goal: str

    @field_validator("role", "team_size", "goal")
    @classmethod
    def check_not_blank(cls, v: str, info) -> str:
        if not v.strip():
            label = info.field_name.replace("_", " ").capitalize()
            raise ValueError(f"{label} is required")
        return v.strip()


class UserPublic(BaseModel):
    """
    Everything about a user that may be sent to a client.

    There is deliberately no password_hash field here; every response
    goes through this model.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    role: Optional[str] = None
    team_size: Optional[str] = None
    goal: Optional[str] = None
    assigned_path: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AdminUserRead(UserPublic):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    assigned_path_name: Optional[str] = Field(default=None, alias="assignedPathName")
