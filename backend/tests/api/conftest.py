"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db overridden to use the test DB through Database.session, so
      failed requests roll back exactly as in production
    - active_db patched for the readiness check
    - Every test gets a fresh VisitCounter on app.state
    - Password hashing uses the minimum bcrypt cost to keep tests fast
"""

import pytest
from httpx import ASGITransport, AsyncClient

from chirpy.api.dependencies import get_password_hasher
from chirpy.config import Settings, get_settings
from chirpy.core.visit_counter import VisitCounter
from chirpy.infrastructure.database import Database, get_db
from chirpy.infrastructure.password_hasher import BcryptPasswordHasher
from chirpy.main import app
import chirpy.infrastructure.database as db_module


@pytest.fixture
def settings():
    """Settings used by the app under test. Mutate fields to change behaviour."""
    return Settings(platform="test")


@pytest.fixture
async def client(test_engine, test_session_factory, settings):
    """FastAPI test client with DB, settings and hasher overridden."""
    test_database = Database(test_engine, test_session_factory)

    async def override_get_db():
        async with test_database.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_password_hasher] = (
        lambda: BcryptPasswordHasher(rounds=4)
    )

    original_db = db_module.active_db
    db_module.active_db = test_database
    app.state.visit_counter = VisitCounter()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.active_db = original_db


@pytest.fixture
async def registered_user(client):
    """Register a user with a password through the API."""
    res = await client.post(
        "/api/users", json={"email": "walt@example.com", "password": "04234"},
    )
    assert res.status_code == 201
    return res.json()
