from dataclasses import dataclass

BOOK_FIELDS = ("author", "title", "description", "genre")


@dataclass
class Book:
    id: int
    author: str
    title: str
    description: str
    genre: str


# Records loaded into a fresh store at startup, in this order (ids 1..3)
SEED_BOOKS = [
    {
        "author": "Gabriel García Márquez",
        "title": "One Hundred Years of Solitude",
        "description": "Seven generations of the Buendía family in the town of Macondo.",
        "genre": "Magical Realism",
    },
    {
        "author": "George Orwell",
        "title": "Nineteen Eighty-Four",
        "description": "Winston Smith rebels against the surveillance state of Oceania.",
        "genre": "Dystopian Fiction",
    },
    {
        "author": "Jane Austen",
        "title": "Pride and Prejudice",
        "description": "Elizabeth Bennet and Mr. Darcy overcome first impressions.",
        "genre": "Romance",
    },
]
