# cli/utils.py
from contextlib import contextmanager
from typing import Iterable, Iterator

import click
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookstore.errors import StorageError, TransactionError
from bookstore.sa.database import Database

def echo_error(message: str) -> None:
    click.echo(click.style(message, fg='red'), err=True)

@contextmanager
def storage_errors() -> Iterator[None]:
    """Print storage failures in red on stderr and exit with status 1"""
    try:
        yield
    except TransactionError as e:
        echo_error(f"{e} ({e.__cause__})" if e.__cause__ else str(e))
        click.get_current_context().exit(1)
    except StorageError as e:
        echo_error(str(e))
        click.get_current_context().exit(1)
    except SQLAlchemyError as e:
        echo_error(f"Database error: {e}")
        click.get_current_context().exit(1)

@contextmanager
def session_scope(database: Database) -> Iterator[Session]:
    """Open a session and report storage failures as CLI errors"""
    with storage_errors():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

def echo_entity(entity_id: int, name: str) -> None:
    """Print an id and name on one line"""
    click.echo(click.style(f"{entity_id:>4}", fg='cyan') + f"  {name}")

def echo_not_found(item_type: str, entity_id: int) -> None:
    click.echo(click.style(f"No {item_type} with ID: {entity_id}", fg='yellow'))

def echo_aggregate(entity_id: int, name: str, related: Iterable, related_id: str) -> None:
    """Print an aggregate followed by its indented related entries"""
    echo_entity(entity_id, name)
    for entry in related:
        click.echo("      - " + click.style(str(getattr(entry, related_id)), fg='cyan') + f" {entry.name}")
