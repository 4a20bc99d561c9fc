# bookstore/sa/__init__.py
from .database import Database, connect
from .models import (
    Base, Book, Author, BookAuthor,
    AuthorWithBooks, BookWithAuthors
)

__all__ = [
    'Database',
    'connect',
    'Base',
    'Book',
    'Author',
    'BookAuthor',
    'AuthorWithBooks',
    'BookWithAuthors'
]
