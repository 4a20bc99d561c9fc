# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from bookstore import seeds
from bookstore.sa.database import Database

@pytest.fixture
def database_url(tmp_path):
    """Connection string for a fresh SQLite database file"""
    return f"sqlite:///{tmp_path / 'test_bookstore.db'}"

@pytest.fixture
def database(database_url):
    """Create a test database instance with an empty schema"""
    db = Database(database_url)
    db.init_db()
    yield db
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def seeded_session(db_session):
    """A session on a database holding the fixture dataset"""
    seeds.run(db_session)
    return db_session
