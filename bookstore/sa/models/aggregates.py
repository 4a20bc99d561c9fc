# bookstore/sa/models/aggregates.py
from dataclasses import dataclass, field
from typing import Dict, List

from .author import Author, AuthorId
from .book import Book, BookId


@dataclass
class AuthorWithBooks:
    """An author together with every book linked to them"""
    author_id: AuthorId
    name: str
    books: List[Book] = field(default_factory=list)


@dataclass
class BookWithAuthors:
    """A book together with every author linked to it"""
    book_id: BookId
    name: str
    authors: List[Author] = field(default_factory=list)


Authors = Dict[AuthorId, AuthorWithBooks]
Books = Dict[BookId, BookWithAuthors]
