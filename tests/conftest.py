"""
Global pytest fixtures for the Demo Services test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide an isolated Directory seeded with two known users
    - Provide an isolated in-memory UserStorage

Why an app factory?
    Using `create_app()` ensures each test gets fresh in-memory state,
    eliminating cross-test flakiness (users added in one test never leak).
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from demo_services.auth.codec import Credential
from demo_services.auth.directory import Directory
from demo_services.users.storage import UserStorage
from demo_services.users.schemas import User


@pytest.fixture
def directory() -> Directory:
    """Directory with Peter/1234 and Anna/p@bl0, in that order."""
    return Directory([Credential("Peter", "1234"), Credential("Anna", "p@bl0")])


@pytest.fixture
def user_storage() -> UserStorage:
    """Fresh user list seeded with 1/John and 2/Anna."""
    return UserStorage([User(id=1, username="John"), User(id=2, username="Anna")])


@pytest.fixture
def client() -> TestClient:
    """
    Provide a fresh TestClient with a new app instance using the default seeds.

    Notes:
        - Trimming is pinned off so tests do not depend on DEMO_AUTH_TRIM_CREDENTIALS.
    """
    app = create_app(trim_credentials=False)
    return TestClient(app)
