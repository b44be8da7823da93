from fastapi import Request

from app.db.store import BookStore


def get_store(request: Request) -> BookStore:
    """FastAPI dependency returning the store created at application startup."""
    return request.app.state.store
