# cli/commands/book.py
import click

from bookstore.sa.repositories.book import BookRepository
from ..utils import session_scope, echo_entity, echo_not_found, echo_aggregate

@click.group()
def book():
    """Book related commands"""
    pass

@book.command()
@click.argument('name')
@click.pass_obj
def add(database, name: str):
    """Create a book

    Example:
        bookstore book add "Moby Dick"
    """
    with session_scope(database) as session:
        book_id = BookRepository(session).create(name)
    click.echo(click.style("Created book ", fg='green') + click.style(str(book_id), fg='cyan'))

@book.command()
@click.argument('book_id', type=int)
@click.pass_obj
def show(database, book_id: int):
    """Show a single book"""
    with session_scope(database) as session:
        found = BookRepository(session).get_by_id(book_id)
        if found is None:
            echo_not_found('book', book_id)
            return
        echo_entity(found.book_id, found.name)

@book.command(name='list')
@click.pass_obj
def list_books(database):
    """List every book"""
    with session_scope(database) as session:
        for found in BookRepository(session).get_all():
            echo_entity(found.book_id, found.name)

@book.command()
@click.argument('book_id', type=int)
@click.argument('name')
@click.pass_obj
def rename(database, book_id: int, name: str):
    """Rename a book"""
    with session_scope(database) as session:
        BookRepository(session).update(book_id, name)
    click.echo(click.style(f"Renamed book {book_id}", fg='green'))

@book.command()
@click.argument('book_id', type=int)
@click.pass_obj
def delete(database, book_id: int):
    """Delete a book and its author links"""
    with session_scope(database) as session:
        BookRepository(session).delete(book_id)
    click.echo(click.style(f"Deleted book {book_id}", fg='green'))

@book.command()
@click.argument('book_name')
@click.argument('author_name')
@click.pass_obj
def add_with_author(database, book_name: str, author_name: str):
    """Create a book and its author together

    Example:
        bookstore book add-with-author "Omoo" "Herman Melville"
    """
    with session_scope(database) as session:
        book_id, author_id = BookRepository(session).create_with_author(book_name, author_name)
    click.echo(click.style("Created book ", fg='green') + click.style(str(book_id), fg='cyan') +
               click.style(" with author ", fg='green') + click.style(str(author_id), fg='cyan'))

@book.command()
@click.pass_obj
def with_authors(database):
    """List every book that has authors, with its authors"""
    with session_scope(database) as session:
        books = BookRepository(session).get_all_with_authors()
        for book_id in sorted(books):
            aggregate = books[book_id]
            echo_aggregate(aggregate.book_id, aggregate.name, aggregate.authors, 'author_id')
