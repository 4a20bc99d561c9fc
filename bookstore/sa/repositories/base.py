# bookstore/sa/repositories/base.py
import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookstore.errors import StorageError
from ..session import released, rollback
from ..models import Base

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Base)

class BaseRepository(Generic[T]):
    """CRUD over a table with a generated integer id and a name column.

    Each mutation commits on its own and each read ends the transaction it
    opened. Any database failure rolls the session back and is raised as a
    StorageError.
    """

    model: Type[T]

    def __init__(self, session: Session):
        self.session = session

    @property
    def _id_column(self):
        return self.model.__mapper__.primary_key[0]

    @property
    def _entity_name(self) -> str:
        return self.model.__name__.lower()

    def _fail(self, action: str, error: SQLAlchemyError) -> StorageError:
        rollback(self.session)
        return StorageError(f"Failed to {action} {self._entity_name}: {error}")

    def create(self, name: str) -> int:
        """Insert a row with the given name and return its generated id"""
        entity = self.model(name=name)
        self.session.add(entity)
        try:
            self.session.flush()
            entity_id = getattr(entity, self._id_column.key)
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("create", e) from e

        logger.debug("Created %s %s", self._entity_name, entity_id)
        return entity_id

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """Get a row by id, or None if no row has that id"""
        stmt = select(self.model).where(self._id_column == entity_id)
        try:
            with released(self.session):
                return self.session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._fail("get", e) from e

    def get_all(self) -> List[T]:
        """Get every row in id order"""
        stmt = select(self.model).order_by(self._id_column)
        try:
            with released(self.session):
                return list(self.session.execute(stmt).scalars())
        except SQLAlchemyError as e:
            raise self._fail("list", e) from e

    def update(self, entity_id: int, name: str) -> None:
        """Rename a row. Missing ids are ignored."""
        stmt = update(self.model).where(self._id_column == entity_id).values(name=name)
        try:
            self.session.execute(stmt)
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("update", e) from e

        logger.debug("Renamed %s %s", self._entity_name, entity_id)

    def delete(self, entity_id: int) -> None:
        """Permanently delete a row. Missing ids are ignored."""
        stmt = delete(self.model).where(self._id_column == entity_id)
        try:
            self.session.execute(stmt)
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e

        logger.debug("Deleted %s %s", self._entity_name, entity_id)
