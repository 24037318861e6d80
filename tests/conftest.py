# File: tests/conftest.py

from typing import Iterator, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from onboard.core.config import Settings
from onboard.db.init_db import init_db
from onboard.db.session import build_engine, build_session_factory
from onboard.main import create_application
from onboard.services.llm import ServiceUnavailableError

TEST_JWT_SECRET = "test-secret-key-that-is-at-least-32-characters-long"


class FakeCompletionClient:
    """
    Scripted stand-in for the completion service.

    replies: strings returned in order; an Exception instance is raised
    instead. When replies run out, every call fails as unreachable.
    """

    def __init__(self, replies: Optional[list] = None):
        self.replies = list(replies or [])
        self.prompts: list[tuple[str, int]] = []

    def complete(self, prompt: str, max_tokens: int) -> str:
        self.prompts.append((prompt, max_tokens))
        if not self.replies:
            raise ServiceUnavailableError("service unreachable")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        environment="test",
        database_url=f"sqlite:///{tmp_path / 'onboard.db'}",
        jwt_secret=TEST_JWT_SECRET,
        jwt_expires_minutes=60,
        openai_api_key=None,
        cors_origins="http://localhost:3000",
    )


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def client(settings, completion_client) -> Iterator[TestClient]:
    app = create_application(settings, completion_client=completion_client)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(settings) -> Iterator[Session]:
    engine = build_engine(settings.database_url)
    init_db(engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def signup(client: TestClient, email: str = "a@x.com", password: str = "secret1") -> dict:
    resp = client.post("/api/auth/signup", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
