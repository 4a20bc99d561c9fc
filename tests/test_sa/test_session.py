# tests/test_sa/test_session.py
import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from bookstore.errors import StorageError
from bookstore.sa.models import Author
from bookstore.sa.session import released, rollback

def test_released_ends_transaction_it_opened(db_session):
    with released(db_session):
        db_session.execute(select(func.count()).select_from(Author)).scalar()
        assert db_session.in_transaction()

    assert not db_session.in_transaction()

def test_released_keeps_caller_transaction(db_session, database):
    """Test a read inside a caller's transaction does not commit caller work"""
    db_session.add(Author(name="Pending author"))
    db_session.flush()

    with released(db_session):
        db_session.execute(select(Author)).all()

    assert db_session.in_transaction()
    with database.get_db() as other_session:
        assert other_session.execute(select(func.count()).select_from(Author)).scalar() == 0
    db_session.rollback()

def test_rollback_failure_raises_storage_error(db_session, monkeypatch):
    def failing_rollback():
        raise OperationalError("ROLLBACK", {}, Exception("connection lost"))

    monkeypatch.setattr(db_session, "rollback", failing_rollback)

    with pytest.raises(StorageError) as excinfo:
        rollback(db_session)

    assert "database state is unknown" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OperationalError)
