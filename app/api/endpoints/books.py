from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_store
from app.db.store import BookStore
from app.schemas.book import (
    BookCreate,
    BookUpdate,
    BookResponse,
    ErrorResponse,
    MessageResponse,
)
from app.services.book import (
    create_book,
    get_books,
    get_book_by_id,
    update_book,
    delete_book,
)

router = APIRouter(prefix="/books", tags=["Books"])

Store = Annotated[BookStore, Depends(get_store)]


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List books",
    description="Retrieve every book, or only those whose author contains the `author` query value (case-insensitive).",
    responses={
        200: {"description": "List of books"},
        404: {"model": MessageResponse, "description": "No books found for the specified author"},
    },
)
async def list_books(store: Store, author: str | None = None):
    return get_books(store, author=author)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a book",
    description="Add a new book. `author`, `title`, `description` and `genre` are all required.",
    responses={
        201: {"description": "Book created successfully"},
        400: {"model": MessageResponse, "description": "Missing required fields"},
    },
)
async def create_book_endpoint(store: Store, data: BookCreate | None = None):
    # A request without a body counts as an empty payload
    if data is None:
        data = BookCreate()
    return create_book(store, data.model_dump())


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get book details",
    description="Retrieve a single book by its ID.",
    responses={
        200: {"description": "Book details"},
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)
async def get_book(book_id: str, store: Store):
    return get_book_by_id(store, book_id)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Partially update a book. Fields that are absent or empty keep their current value.",
    responses={
        200: {"description": "Book updated successfully"},
        404: {"model": MessageResponse, "description": "Book not found"},
    },
)
async def update_book_endpoint(book_id: str, store: Store, data: BookUpdate | None = None):
    if data is None:
        data = BookUpdate()
    return update_book(store, book_id, data.model_dump(exclude_unset=True))


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Delete a book",
    description="Remove a book from the store.",
    responses={
        200: {"description": "Book deleted successfully"},
        404: {"model": MessageResponse, "description": "Book not found"},
    },
)
async def delete_book_endpoint(book_id: str, store: Store):
    delete_book(store, book_id)
    return MessageResponse(message="book deleted successfully")
