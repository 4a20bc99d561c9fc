# bookstore/sa/models/book.py
from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

BookId = int

class BookAuthor(Base):
    """Link between one book and one of its authors"""
    __tablename__ = 'book_authors'

    book_id: Mapped[int] = mapped_column(ForeignKey('books.book_id', ondelete='CASCADE'), primary_key=True)
    author_id: Mapped[int] = mapped_column(ForeignKey('authors.author_id', ondelete='CASCADE'), primary_key=True)

    # Relationships
    book = relationship('Book', back_populates='book_authors')
    author = relationship('Author', back_populates='book_authors')

class Book(Base):
    __tablename__ = 'books'

    book_id: Mapped[BookId] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    # Relationships
    book_authors = relationship('BookAuthor', back_populates='book', passive_deletes=True)

    # Convenience relationship
    authors = relationship('Author', secondary='book_authors', viewonly=True)

    def __repr__(self) -> str:
        return f"Book(book_id={self.book_id!r}, name={self.name!r})"
