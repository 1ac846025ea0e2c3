"""Route test fixtures - FastAPI test client over an in-memory animals collection.

Invariants:
    - Every test gets a fresh FakeCollection
    - get_animal_repository overridden to wrap the fake (lifespan never runs)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from animal_api.api.dependencies import get_animal_repository
from animal_api.infrastructure.animal_repository import AnimalRepository
from animal_api.main import app
from tests.api.fake_collection import FakeCollection


@pytest.fixture
def request_timeout():
    return 5.0


@pytest.fixture
def fake_collection(request_timeout):
    return FakeCollection(timeout_seconds=request_timeout)


@pytest.fixture
async def client(fake_collection, request_timeout):
    """FastAPI test client with the repository dependency overridden."""
    app.dependency_overrides[get_animal_repository] = lambda: AnimalRepository(
        fake_collection, timeout_seconds=request_timeout,
    )

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
