from typing import List, Optional

from app.core.errors import (
    BookNotFoundError,
    MissingFieldsError,
    NO_BOOKS_FOR_AUTHOR,
)
from app.core.logging import get_logger
from app.db.models import Book, BOOK_FIELDS
from app.db.store import BookStore

logger = get_logger("services.book")


def parse_book_id(raw) -> Optional[int]:
    """Parse a path id; anything that is not an integer matches no book."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def get_books(store: BookStore, author: Optional[str] = None) -> List[Book]:
    """List every book, or only those whose author contains ``author``."""
    if author is None:
        return store.all()

    books = store.search_author(author)
    if not books:
        raise BookNotFoundError(NO_BOOKS_FOR_AUTHOR)
    return books


def get_book_by_id(store: BookStore, book_id) -> Book:
    """Get a single book by ID."""
    parsed = parse_book_id(book_id)
    book = store.find(parsed) if parsed is not None else None
    if book is None:
        raise BookNotFoundError(key="error")
    return book


def create_book(store: BookStore, data: dict) -> Book:
    """Create a new book. All four fields must be present and non-empty."""
    missing = [field for field in BOOK_FIELDS if not data.get(field)]
    if missing:
        error = MissingFieldsError(missing)
        logger.warning(
            "Book rejected: missing required fields",
            extra={"extra_data": {"missing_fields": error.missing}},
        )
        raise error

    book = store.add(data)
    logger.info(
        f"Book created: id={book.id} title='{book.title}'",
        extra={"extra_data": {"book_id": book.id}},
    )
    return book


def update_book(store: BookStore, book_id, data: dict) -> Book:
    """Update a book. Empty or absent fields keep their current value."""
    parsed = parse_book_id(book_id)
    changes = {key: value for key, value in data.items() if key in BOOK_FIELDS and value}

    book = store.update(parsed, changes) if parsed is not None else None
    if book is None:
        raise BookNotFoundError()

    logger.info(
        f"Book updated: id={book.id}",
        extra={"extra_data": {"book_id": book.id, "fields": sorted(changes)}},
    )
    return book


def delete_book(store: BookStore, book_id) -> None:
    """Delete a book."""
    parsed = parse_book_id(book_id)
    if parsed is None or not store.remove(parsed):
        raise BookNotFoundError()

    logger.info(f"Book deleted: id={parsed}", extra={"extra_data": {"book_id": parsed}})
