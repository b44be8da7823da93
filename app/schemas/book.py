from typing import Optional
from pydantic import BaseModel


class BookCreate(BaseModel):
    # Presence is checked by the service so a missing field yields the
    # store's own 400 payload instead of a framework 422.
    author: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None

    model_config = {"coerce_numbers_to_str": True}


class BookUpdate(BaseModel):
    author: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None

    model_config = {"coerce_numbers_to_str": True}


class BookResponse(BaseModel):
    id: int
    author: str
    title: str
    description: str
    genre: str

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
