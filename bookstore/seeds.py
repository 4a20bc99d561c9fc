# bookstore/seeds.py
"""Fixture dataset loader.

Loads a known set of books, authors and links so that ids are
deterministic on an empty database: books and authors are inserted in
the order listed below, one at a time.
"""
import logging
from typing import Dict, List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookstore.errors import StorageError
from bookstore.sa.session import rollback
from bookstore.sa.models import Author, Book, BookAuthor

logger = logging.getLogger(__name__)

FIXTURE_AUTHORS: List[str] = [
    "Aldous Huxley",
    "Herman Melville",
    "Washington Irving",
    "Edgar Allan Poe",
    "Alistair Thompson",
    "Emily Sinclair",
]

# (book name, names of its authors)
FIXTURE_BOOKS: List[Tuple[str, List[str]]] = [
    ("Brave New World", ["Aldous Huxley"]),
    ("Moby Dick", ["Herman Melville"]),
    ("Omoo", ["Herman Melville"]),
    ("Rip Van Winkle", ["Washington Irving"]),
    ("The Raven and Other Poems", ["Edgar Allan Poe"]),
    (
        "Mastering the Art of Programming: A Comprehensive Guide for Beginners",
        ["Alistair Thompson", "Emily Sinclair"],
    ),
]


def run(session: Session) -> None:
    """Seed the fixture dataset in a single transaction.

    Raises:
        StorageError: If any insert fails; nothing is written in that case
    """
    try:
        authors: Dict[str, Author] = {}
        for name in FIXTURE_AUTHORS:
            author = Author(name=name)
            session.add(author)
            session.flush()
            authors[name] = author

        links = 0
        for book_name, author_names in FIXTURE_BOOKS:
            book = Book(name=book_name)
            session.add(book)
            session.flush()
            for author_name in author_names:
                session.add(BookAuthor(book_id=book.book_id, author_id=authors[author_name].author_id))
                links += 1
        session.flush()
        session.commit()
    except SQLAlchemyError as e:
        logger.error("Error seeding fixture data: %s", e)
        rollback(session)
        raise StorageError(f"Failed to seed fixture data: {e}") from e

    logger.info(
        "Seeded %d books, %d authors and %d links",
        len(FIXTURE_BOOKS), len(FIXTURE_AUTHORS), links
    )
