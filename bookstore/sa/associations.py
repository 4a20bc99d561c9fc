# bookstore/sa/associations.py
"""Operations that span books, authors and the links between them.

Provides:
- create_and_associate: insert a book, an author and their link in one transaction
- authors_with_books / books_with_authors: rebuild aggregates from a single join query
"""
import logging
from typing import Callable, Dict, Iterable, List, Tuple, TypeVar

from sqlalchemy import Row, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookstore.errors import StorageError, TransactionError, TransactionStep
from .models import (
    Author, AuthorId, AuthorWithBooks, Authors,
    Book, BookAuthor, BookId, BookWithAuthors, Books
)
from .session import released, rollback

logger = logging.getLogger(__name__)

A = TypeVar('A')


def create_and_associate(session: Session, book_name: str, author_name: str) -> Tuple[BookId, AuthorId]:
    """Create a book and its author and link them together.

    The three inserts run in a transaction begun here and are committed
    together; if any of them fails the transaction is rolled back and
    nothing is persisted. The session must not already hold a
    transaction or unflushed changes, so uncommitted caller work is never
    rolled back or committed along with these rows.

    Args:
        session: SQLAlchemy session with no uncommitted work
        book_name: Name of the new book
        author_name: Name of the new author

    Returns:
        Tuple of (book_id, author_id)

    Raises:
        TransactionError: If a step failed; `step` names which one. A
            BEGIN failure means the session was refused and nothing ran.
        StorageError: If rolling back after a failure also failed
    """
    if session.in_transaction() or session.new or session.dirty or session.deleted:
        raise TransactionError(
            TransactionStep.BEGIN,
            "Cannot begin a transaction: the session has uncommitted work in progress"
        )

    step = TransactionStep.BEGIN
    try:
        session.begin()

        step = TransactionStep.BOOK_INSERT
        book = Book(name=book_name)
        session.add(book)
        session.flush()
        book_id = book.book_id

        step = TransactionStep.AUTHOR_INSERT
        author = Author(name=author_name)
        session.add(author)
        session.flush()
        author_id = author.author_id

        step = TransactionStep.ASSOCIATION_INSERT
        session.add(BookAuthor(book_id=book_id, author_id=author_id))
        session.flush()

        step = TransactionStep.COMMIT
        session.commit()
    except SQLAlchemyError as e:
        logger.error("Error during %s: %s", step.value, e)
        rollback(session)
        raise TransactionError(step) from e

    logger.debug("Created book %s and author %s", book_id, author_id)
    return book_id, author_id


def group_rows(
    rows: Iterable[Row],
    key: Callable[[Row], int],
    new_aggregate: Callable[[Row], A],
    related: Callable[[A], List],
    entry: Callable[[Row], object],
) -> Dict[int, A]:
    """Collapse flat join rows into one aggregate per primary key.

    Rows sharing a key land in the same aggregate; each row appends one
    entry to that aggregate's related collection. Duplicates are kept.
    """
    grouped: Dict[int, A] = {}
    for row in rows:
        row_key = key(row)
        aggregate = grouped.get(row_key)
        if aggregate is None:
            aggregate = grouped[row_key] = new_aggregate(row)
        related(aggregate).append(entry(row))
    return grouped


def _linked_rows(session: Session) -> List[Row]:
    stmt = (
        select(
            Author.author_id,
            Author.name.label('author_name'),
            Book.book_id,
            Book.name.label('book_name'),
        )
        .select_from(BookAuthor)
        .join(Author, Author.author_id == BookAuthor.author_id)
        .join(Book, Book.book_id == BookAuthor.book_id)
    )
    try:
        with released(session):
            return session.execute(stmt).all()
    except SQLAlchemyError as e:
        rollback(session)
        raise StorageError(f"Failed to load book/author links: {e}") from e


def authors_with_books(session: Session) -> Authors:
    """Every linked author keyed by author_id, each with its books"""
    return group_rows(
        _linked_rows(session),
        key=lambda row: row.author_id,
        new_aggregate=lambda row: AuthorWithBooks(author_id=row.author_id, name=row.author_name),
        related=lambda aggregate: aggregate.books,
        entry=lambda row: Book(book_id=row.book_id, name=row.book_name),
    )


def books_with_authors(session: Session) -> Books:
    """Every linked book keyed by book_id, each with its authors"""
    return group_rows(
        _linked_rows(session),
        key=lambda row: row.book_id,
        new_aggregate=lambda row: BookWithAuthors(book_id=row.book_id, name=row.book_name),
        related=lambda aggregate: aggregate.authors,
        entry=lambda row: Author(author_id=row.author_id, name=row.author_name),
    )
