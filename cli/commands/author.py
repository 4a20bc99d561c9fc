# cli/commands/author.py
import click

from bookstore.sa.repositories.author import AuthorRepository
from ..utils import session_scope, echo_entity, echo_not_found, echo_aggregate

@click.group()
def author():
    """Author management commands"""
    pass

@author.command()
@click.argument('name')
@click.pass_obj
def add(database, name: str):
    """Create an author"""
    with session_scope(database) as session:
        author_id = AuthorRepository(session).create(name)
    click.echo(click.style("Created author ", fg='green') + click.style(str(author_id), fg='cyan'))

@author.command()
@click.argument('author_id', type=int)
@click.pass_obj
def show(database, author_id: int):
    """Show a single author"""
    with session_scope(database) as session:
        found = AuthorRepository(session).get_by_id(author_id)
        if found is None:
            echo_not_found('author', author_id)
            return
        echo_entity(found.author_id, found.name)

@author.command(name='list')
@click.pass_obj
def list_authors(database):
    """List every author"""
    with session_scope(database) as session:
        for found in AuthorRepository(session).get_all():
            echo_entity(found.author_id, found.name)

@author.command()
@click.argument('author_id', type=int)
@click.argument('name')
@click.pass_obj
def rename(database, author_id: int, name: str):
    """Rename an author"""
    with session_scope(database) as session:
        AuthorRepository(session).update(author_id, name)
    click.echo(click.style(f"Renamed author {author_id}", fg='green'))

@author.command()
@click.argument('author_id', type=int)
@click.pass_obj
def delete(database, author_id: int):
    """Delete an author and their book links"""
    with session_scope(database) as session:
        AuthorRepository(session).delete(author_id)
    click.echo(click.style(f"Deleted author {author_id}", fg='green'))

@author.command()
@click.argument('author_name')
@click.argument('book_name')
@click.pass_obj
def add_with_book(database, author_name: str, book_name: str):
    """Create an author and a book together"""
    with session_scope(database) as session:
        author_id, book_id = AuthorRepository(session).create_with_book(author_name, book_name)
    click.echo(click.style("Created author ", fg='green') + click.style(str(author_id), fg='cyan') +
               click.style(" with book ", fg='green') + click.style(str(book_id), fg='cyan'))

@author.command()
@click.pass_obj
def with_books(database):
    """List every author that has books, with their books"""
    with session_scope(database) as session:
        authors = AuthorRepository(session).get_all_with_books()
        for author_id in sorted(authors):
            aggregate = authors[author_id]
            echo_aggregate(aggregate.author_id, aggregate.name, aggregate.books, 'book_id')
