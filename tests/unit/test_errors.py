"""
Unit tests for app.core.errors – status codes and payload shapes.
"""
from app.core.errors import (
    BookStoreError,
    BookNotFoundError,
    MissingFieldsError,
    MISSING_FIELDS,
)


class TestBookNotFoundError:
    def test_status(self):
        assert BookNotFoundError().http_status == 404

    def test_default_payload(self):
        assert BookNotFoundError().to_response() == {"message": "book not found"}

    def test_error_key(self):
        assert BookNotFoundError(key="error").to_response() == {"error": "book not found"}

    def test_is_book_store_error(self):
        assert isinstance(BookNotFoundError(), BookStoreError)


class TestMissingFieldsError:
    def test_status(self):
        assert MissingFieldsError().http_status == 400

    def test_payload(self):
        assert MissingFieldsError(["genre"]).to_response() == {"message": MISSING_FIELDS}

    def test_missing_list(self):
        assert MissingFieldsError(["genre"]).missing == ["genre"]

    def test_str(self):
        assert str(MissingFieldsError()) == MISSING_FIELDS
