"""
Shared fixtures for functional tests.
Uses httpx.AsyncClient against the real FastAPI app with a fresh seeded store.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.api.dependencies import get_store
from app.db.store import BookStore
from app.main import app


@pytest.fixture
def store() -> BookStore:
    return BookStore.seeded()


@pytest_asyncio.fixture
async def client(store):
    """Provide an httpx.AsyncClient with the store overridden per test."""
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def book_payload(**overrides) -> dict:
    """Return a complete create payload."""
    data = {"author": "A", "title": "T", "description": "D", "genre": "G"}
    data.update(overrides)
    return data
