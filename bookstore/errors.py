# bookstore/errors.py
from enum import Enum
from typing import Optional


class BookstoreError(Exception):
    """Base class for all bookstore errors"""
    pass


class ConfigurationError(BookstoreError):
    """Raised when the database cannot be located from the environment"""
    pass


class StorageError(BookstoreError):
    """Wraps a driver, connectivity or constraint failure from the database"""
    pass


class TransactionStep(str, Enum):
    BEGIN = "transaction start"
    BOOK_INSERT = "book insertion"
    AUTHOR_INSERT = "author insertion"
    ASSOCIATION_INSERT = "association insertion"
    COMMIT = "commit"


class TransactionError(StorageError):
    """A multi-statement operation failed and its transaction was rolled back,
    or it was refused before any statement ran (step BEGIN).

    Attributes:
        step: The step that failed
    """

    def __init__(self, step: TransactionStep, message: Optional[str] = None):
        self.step = step
        super().__init__(message or f"Transaction rolled back after failed {step.value}")
