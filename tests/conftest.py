"""
Shared fixtures: in-memory SQLite store, a fake text provider and a test client.
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.schemas.career import CareerProfile

CAREER_MARKUP = (
    "<h3>Machine Learning Engineer</h3><p>Builds AI products with Python.</p>"
    "<h3>Game Developer</h3><p>Combines programming with a love of gaming.</p>"
)

PROFILE = {
    "education": "Bachelor's Degree",
    "major": "Computer Science",
    "skills": "Python",
    "interests": "Gaming",
    "goals": "Build AI products",
}


class FakeCompletions:
    """Stands in for ``client.chat.completions`` of the OpenAI SDK."""

    def __init__(self, content: str = CAREER_MARKUP):
        self.content = content
        self.error = None
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=self.content))]
        )


class FakeProviderClient:
    def __init__(self, content: str = CAREER_MARKUP):
        self.chat = SimpleNamespace(completions=FakeCompletions(content))

    @property
    def completions(self) -> FakeCompletions:
        return self.chat.completions


class FrozenClock:
    """Callable clock that tests move by hand."""

    def __init__(self, now: datetime = None):
        self.now = now or datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET_KEY="test-secret-key",
        AI_API_KEY="test-key",
        AI_MODEL="test-model",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def provider() -> FakeProviderClient:
    return FakeProviderClient()


@pytest.fixture
def profile() -> CareerProfile:
    return CareerProfile(**PROFILE)


@pytest.fixture
def app(settings, provider):
    return create_app(settings, generation_client=provider)


@pytest.fixture
def client(app):
    # Entering the context runs the lifespan, which creates the tables
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Register and log in alice, returning her Authorization header."""
    client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "alice@x.com", "password": "pw123"},
    )
    response = client.post("/api/auth/login", json={"email": "alice@x.com", "password": "pw123"})
    return {"Authorization": f"Bearer {response.json()['token']}"}
