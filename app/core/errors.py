"""Domain errors raised by the book services.

Each error knows the HTTP status it maps to and the key its message is
reported under; ``app.main`` renders them as ``{key: message}``.
"""

from fastapi import status

BOOK_NOT_FOUND = "book not found"
NO_BOOKS_FOR_AUTHOR = "no books found for the specified author"
MISSING_FIELDS = "missing required fields: author, title, description, genre"


class BookStoreError(Exception):
    http_status: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, key: str = "message"):
        super().__init__(message)
        self.message = message
        self.key = key

    def to_response(self) -> dict:
        return {self.key: self.message}


class BookNotFoundError(BookStoreError):
    """No book matched the requested id or author filter."""

    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = BOOK_NOT_FOUND, key: str = "message"):
        super().__init__(message, key)


class MissingFieldsError(BookStoreError):
    """A create payload left out one of the required fields."""

    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, missing: list[str] | None = None):
        super().__init__(MISSING_FIELDS)
        self.missing = missing or []
