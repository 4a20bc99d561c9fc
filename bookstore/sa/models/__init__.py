# bookstore/sa/models/__init__.py
from .base import Base
from .author import Author, AuthorId
from .book import Book, BookAuthor, BookId
from .aggregates import AuthorWithBooks, BookWithAuthors, Authors, Books

__all__ = [
    'Base',
    'Author',
    'AuthorId',
    'Book',
    'BookAuthor',
    'BookId',
    'AuthorWithBooks',
    'BookWithAuthors',
    'Authors',
    'Books'
]
