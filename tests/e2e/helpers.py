"""Shared helpers for end-to-end API tests."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from stackit.config import Settings
from stackit.domain.service import JWTService
from stackit.domain.value import Role, UserId
from stackit.interface.api.app import create_app
from stackit.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def auth_cookies(role: Role = Role.USER) -> dict[str, str]:
    """Cookies for a fresh user with the given role."""
    jwt_service = JWTService(auth_settings=Settings().auth)
    return {"auth_token": jwt_service.issue_token(UserId(uuid4()), role)}


def ask(client: TestClient, cookies: dict[str, str], title: str = "How do I X?") -> str:
    """Create a question and return its ID."""
    response = client.post(
        "/questions",
        json={"title": title, "description": "Details here.", "tags": ["python"]},
        cookies=cookies,
    )
    assert response.status_code == 201
    return response.json()["question_id"]


def answer(client: TestClient, cookies: dict[str, str], question_id: str) -> str:
    """Answer a question and return the answer ID."""
    response = client.post(
        f"/questions/{question_id}/answers",
        json={"content": "Do Y."},
        cookies=cookies,
    )
    assert response.status_code == 201
    return response.json()["answer_id"]
