# bookstore/sa/models/author.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

AuthorId = int

class Author(Base):
    __tablename__ = 'authors'

    author_id: Mapped[AuthorId] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    # Relationships
    book_authors = relationship('BookAuthor', back_populates='author', passive_deletes=True)

    # Convenience relationship
    books = relationship('Book', secondary='book_authors', viewonly=True)

    def __repr__(self) -> str:
        return f"Author(author_id={self.author_id!r}, name={self.name!r})"
