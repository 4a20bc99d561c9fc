# bookstore/sa/repositories/author.py
from typing import Tuple

from ..associations import authors_with_books, create_and_associate
from ..models import Author, AuthorId, Authors, BookId
from .base import BaseRepository

class AuthorRepository(BaseRepository[Author]):
    model = Author

    def create_with_book(self, author_name: str, book_name: str) -> Tuple[AuthorId, BookId]:
        """Create an author and a book together and link them"""
        book_id, author_id = create_and_associate(self.session, book_name, author_name)
        return author_id, book_id

    def get_all_with_books(self) -> Authors:
        """Get every author that has books, keyed by author_id"""
        return authors_with_books(self.session)
