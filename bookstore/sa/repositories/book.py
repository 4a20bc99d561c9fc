# bookstore/sa/repositories/book.py
from typing import Tuple

from ..associations import books_with_authors, create_and_associate
from ..models import AuthorId, Book, BookId, Books
from .base import BaseRepository

class BookRepository(BaseRepository[Book]):
    model = Book

    def create_with_author(self, book_name: str, author_name: str) -> Tuple[BookId, AuthorId]:
        """Create a book and its author together and link them.

        Either all three rows are written or none are.

        Returns:
            Tuple of (book_id, author_id)
        """
        return create_and_associate(self.session, book_name, author_name)

    def get_all_with_authors(self) -> Books:
        """Get every book that has authors, keyed by book_id, using a single query"""
        return books_with_authors(self.session)
