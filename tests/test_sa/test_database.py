# tests/test_sa/test_database.py
import pytest
from sqlalchemy import text
from sqlalchemy.pool import NullPool

from bookstore.errors import ConfigurationError
from bookstore.sa.database import Database, connect
from bookstore.sa.models import Author

def test_connection_string_from_environment(monkeypatch, database_url):
    monkeypatch.setenv("DATABASE_URL", database_url)
    db = Database()
    assert db.connection_string == database_url
    assert db.is_sqlite
    assert isinstance(db.engine.pool, NullPool)

def test_foreign_keys_enabled(database):
    with database.get_db() as session:
        assert session.execute(text("PRAGMA foreign_keys")).scalar() == 1

def test_get_db_commits(database):
    with database.get_db() as session:
        session.add(Author(name="Virginia Woolf"))

    with database.get_db() as session:
        assert session.query(Author).count() == 1

def test_get_db_rolls_back_on_error(database):
    with pytest.raises(RuntimeError):
        with database.get_db() as session:
            session.add(Author(name="Virginia Woolf"))
            session.flush()
            raise RuntimeError("boom")

    with database.get_db() as session:
        assert session.query(Author).count() == 0

def test_connect(monkeypatch, database_url):
    monkeypatch.setenv("DATABASE_URL", database_url)
    db = connect(echo=False)
    db.init_db()
    with db.get_db() as session:
        assert session.execute(text("SELECT 'hello'")).scalar() == "hello"
    db.dispose()

def test_connect_without_url(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ConfigurationError):
        connect()

def test_connect_reads_dotenv(monkeypatch, tmp_path, database_url):
    """Test DATABASE_URL is picked up from a .env file in the working directory"""
    # set first so monkeypatch restores the variable load_dotenv writes
    monkeypatch.setenv("DATABASE_URL", "unused")
    monkeypatch.delenv("DATABASE_URL")
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text(f"DATABASE_URL={database_url}\n")

    db = connect()
    try:
        assert db.connection_string == database_url
        db.init_db()
        with db.get_db() as session:
            assert session.execute(text("SELECT 1")).scalar() == 1
    finally:
        db.dispose()

def test_environment_wins_over_dotenv(monkeypatch, tmp_path, database_url):
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("DATABASE_URL=sqlite:///from_dotenv.db\n")

    db = connect()
    assert db.connection_string == database_url
    db.dispose()
