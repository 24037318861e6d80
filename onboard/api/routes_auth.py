# File: onboard/api/routes_auth.py

"""
Auth API routes.

POST /api/auth/signup - create account
POST /api/auth/login  - exchange credentials for a token
GET  /api/auth/me     - current user
"""

from fastapi import APIRouter, Depends, status

from onboard.api.deps import get_current_user, get_settings, get_user_store
from onboard.core.config import Settings
from onboard.core.security import create_access_token
from onboard.models.user import User
from onboard.schemas.responses import AuthData, CurrentUserData, Envelope
from onboard.schemas.user import UserCreate, UserLogin, UserPublic
from onboard.services.auth_service import authenticate_user, register_user
from onboard.services.user_store import UserStore

router = APIRouter()


def _auth_payload(settings: Settings, user: User) -> Envelope[AuthData]:
    token = create_access_token(settings, user_id=user.id, email=user.email)
    return Envelope(data=AuthData(user=UserPublic.model_validate(user), token=token))


@router.post(
    "/signup",
    response_model=Envelope[AuthData],
    status_code=status.HTTP_201_CREATED,
    summary="Create account",
)
def signup(
    payload: UserCreate,
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
):
    user = register_user(store, email=payload.email, password=payload.password)
    return _auth_payload(settings, user)


@router.post("/login", response_model=Envelope[AuthData], summary="User login")
def login(
    payload: UserLogin,
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
):
    user = authenticate_user(store, email=payload.email, password=payload.password)
    return _auth_payload(settings, user)


@router.get("/me", response_model=Envelope[CurrentUserData], summary="Current user")
def me(user: User = Depends(get_current_user)):
    return Envelope(data=CurrentUserData(user=UserPublic.model_validate(user)))
