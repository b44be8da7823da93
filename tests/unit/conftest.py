"""
Shared fixtures for unit tests.
Each test gets its own freshly seeded in-memory store.
"""
import pytest

from app.db.store import BookStore


@pytest.fixture
def store() -> BookStore:
    """A store holding the three sample books (ids 1..3)."""
    return BookStore.seeded()


@pytest.fixture
def empty_store() -> BookStore:
    return BookStore()


# ─── Helper factories ───────────────────────────────────────────


@pytest.fixture
def make_book_data():
    """Factory fixture returning a complete create payload."""
    def _make(
        author: str = "Test Author",
        title: str = "Test Book",
        description: str = "A test book",
        genre: str = "Fiction",
    ) -> dict:
        return {
            "author": author,
            "title": title,
            "description": description,
            "genre": genre,
        }
    return _make
