"""
In-memory book store.

A ``BookStore`` owns the ordered sequence of books for the lifetime of the
process. One instance is created at startup and handed to request handlers
through ``app.api.dependencies.get_store``.
"""
import threading
from typing import Iterable, List, Optional

from app.db.models import Book, BOOK_FIELDS, SEED_BOOKS


class BookStore:
    def __init__(self, books: Iterable[dict] = ()):
        self._books: List[Book] = []
        self._last_id = 0
        # Guards every read and mutation, including id assignment
        self._lock = threading.Lock()
        for fields in books:
            self.add(fields)

    @classmethod
    def seeded(cls) -> "BookStore":
        """Build a store holding the fixed sample books."""
        return cls(SEED_BOOKS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def all(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    def find(self, book_id: int) -> Optional[Book]:
        with self._lock:
            return self._find(book_id)

    def search_author(self, fragment: str) -> List[Book]:
        """Books whose author contains ``fragment``, ignoring case, in store order."""
        needle = fragment.casefold()
        with self._lock:
            return [b for b in self._books if needle in b.author.casefold()]

    def add(self, fields: dict) -> Book:
        with self._lock:
            book = Book(id=self._next_id(), **{f: fields[f] for f in BOOK_FIELDS})
            self._books.append(book)
            self._last_id = book.id
            return book

    def update(self, book_id: int, fields: dict) -> Optional[Book]:
        """Overwrite the given fields in place. ``id`` is never touched."""
        with self._lock:
            book = self._find(book_id)
            if book is None:
                return None
            for key in BOOK_FIELDS:
                if key in fields:
                    setattr(book, key, fields[key])
            return book

    def remove(self, book_id: int) -> bool:
        with self._lock:
            book = self._find(book_id)
            if book is None:
                return False
            self._books.remove(book)
            return True

    def _find(self, book_id: int) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def _next_id(self) -> int:
        # Never hand out an id that is in use or was used before
        current_max = max((b.id for b in self._books), default=0)
        return max(current_max, self._last_id) + 1
