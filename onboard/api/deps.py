# File: onboard/api/deps.py

from collections.abc import Generator
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from onboard.core.config import Settings
from onboard.core.errors import NotFoundError, UnauthorizedError
from onboard.core.security import TokenIdentity, decode_access_token
from onboard.models.user import User
from onboard.services.llm import CompletionClient
from onboard.services.path_classifier import PathClassifier
from onboard.services.user_store import UserStore

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session from the
    application's own session factory.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion_client


def get_path_classifier(
    client: CompletionClient = Depends(get_completion_client),
) -> PathClassifier:
    return PathClassifier(client)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> TokenIdentity:
    """
    Guard for protected routes: requires "Authorization: Bearer <token>".
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Missing authentication token")
    return decode_access_token(settings, credentials.credentials)


def get_current_user(
    identity: TokenIdentity = Depends(get_current_identity),
    store: UserStore = Depends(get_user_store),
) -> User:
    user = store.find_by_id(identity.user_id)
    if user is None:
        raise NotFoundError("User")
    return user
