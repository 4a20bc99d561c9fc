"""Data-access layer for books, authors and the links between them."""
from .errors import BookstoreError, ConfigurationError, StorageError, TransactionError, TransactionStep

__all__ = [
    'BookstoreError',
    'ConfigurationError',
    'StorageError',
    'TransactionError',
    'TransactionStep',
]
