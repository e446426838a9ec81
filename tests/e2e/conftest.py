"""Fixtures for end-to-end API tests.

The app runs on the mocked component set. Users are seeded straight into
the in-memory user repository through the client's event loop, then
authenticate with session tokens like a signed-in browser would.
"""

from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient

from stackit.config import Settings
from stackit.domain.repository import UserRepository
from stackit.interface.api.app import create_app
from stackit.util.di.container import setup_di
from stackit.util.jwt import create_token
from tests.conftest import make_user
from tests.di import build_test_container


@dataclass
class SeededUser:
    user_id: str
    username: str
    token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def seed_user(client, container):
    """Factory creating a user and a session token for it."""
    settings = Settings()

    def _seed(username: str, **overrides) -> SeededUser:
        async def _save():
            user_repo = await container.get(UserRepository)
            return await user_repo.save(make_user(username, **overrides))

        user = client.portal.call(_save)
        return SeededUser(
            user_id=str(user.id),
            username=username,
            token=create_token(str(user.id), username, settings.auth),
        )

    return _seed


@pytest.fixture
def ask(client):
    """Factory posting a question and returning its id."""

    def _ask(user: SeededUser) -> str:
        response = client.post(
            "/questions",
            json={
                "title": "What does functools.wraps actually copy?",
                "description": "I see __name__ preserved but not the signature.",
                "tags": ["python"],
            },
            headers=user.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["question_id"]

    return _ask


@pytest.fixture
def answer(client):
    """Factory posting an answer and returning its id."""

    def _answer(user: SeededUser, question_id: str) -> str:
        response = client.post(
            "/answers",
            json={
                "questionId": question_id,
                "content": "It copies __module__, __name__, __doc__ and __wrapped__.",
            },
            headers=user.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["answer_id"]

    return _answer
