# bookstore/sa/session.py
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookstore.errors import StorageError

logger = logging.getLogger(__name__)


def rollback(session: Session) -> None:
    """Roll the session back, surfacing a failed rollback as a StorageError"""
    try:
        session.rollback()
    except SQLAlchemyError as e:
        logger.error("Rollback failed: %s", e)
        raise StorageError(f"Rollback failed, database state is unknown: {e}") from e


@contextmanager
def released(session: Session) -> Iterator[Session]:
    """Run a read, then end the transaction it opened.

    A transaction the caller already had open is left alone, so pending
    caller work is never committed by a read.
    """
    started = not session.in_transaction()
    yield session
    if started:
        session.commit()
