# cli/commands/db.py
import click

from bookstore import seeds
from ..utils import session_scope, storage_errors

@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
@click.option('--drop/--no-drop', default=False, help='Drop existing tables first')
@click.pass_obj
def init(database, drop: bool):
    """Create the books, authors and book_authors tables"""
    with storage_errors():
        if drop:
            database.drop_db()
        database.init_db()
    click.echo(click.style("Database initialized", fg='green'))

@db.command()
@click.pass_obj
def seed(database):
    """Load the fixture dataset into an empty database"""
    with session_scope(database) as session:
        seeds.run(session)
    click.echo(click.style(
        f"Seeded {len(seeds.FIXTURE_BOOKS)} books and {len(seeds.FIXTURE_AUTHORS)} authors", fg='green'
    ))
